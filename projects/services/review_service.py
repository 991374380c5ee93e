"""
Review workflow: a supervisor moves a project to a decision status and a Review
row records it. Both writes commit together or not at all.
"""
import logging
from functools import partial

from django.db import transaction

from accounts.models import Profile
from projects.models import Project, Review
from projects.services.email_service import notify_review_decision

logger = logging.getLogger(__name__)

# A project never goes back to pending through a review
DECISION_STATUSES = (
    Project.Status.APPROVED,
    Project.Status.REJECTED,
    Project.Status.REVISION,
)


class ReviewError(Exception):
    pass


@transaction.atomic()
def review_project(project, reviewer: Profile, status: str, comment=None) -> Review:
    if reviewer is None or reviewer.role != Profile.Role.SUPERVISOR:
        raise ReviewError("Only supervisors can review projects.")
    if status not in DECISION_STATUSES:
        raise ReviewError(f"Invalid review status '{status}'.")

    locked = Project.objects.select_for_update().get(pk=project.pk)
    previous = locked.status
    locked.status = status
    locked.save(update_fields=["status", "updated_at"])

    review = Review.objects.create(
        project=locked,
        reviewer=reviewer,
        status=status,
        comment=(comment or "").strip() or None,
    )
    project.status = status

    logger.info(
        "review: project=%s reviewer=%s %s -> %s",
        locked.pk, reviewer.pk, previous, status,
    )
    transaction.on_commit(partial(notify_review_decision, review))
    return review
