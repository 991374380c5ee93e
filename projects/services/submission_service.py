"""
Project submission: one Project row plus one join row per selected technology.
"""
import logging

from django.db import transaction

from accounts.models import Profile
from projects.models import Project, ProjectTechnology

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """Raised when a submission is not allowed (e.g. the submitter is not a student)."""
    pass


@transaction.atomic()
def submit_project(
    student: Profile,
    title: str,
    description: str,
    category,
    technologies=(),
    github_link: str = "",
    demo_link: str = "",
) -> Project:
    if student is None or student.role != Profile.Role.STUDENT:
        raise SubmissionError("Only students can submit projects.")
    if not (title or "").strip() or not (description or "").strip() or category is None:
        raise SubmissionError("Title, description and category are required.")

    project = Project.objects.create(
        title=title.strip(),
        description=description.strip(),
        category=category,
        student=student,
        faculty_id=student.faculty_id,
        github_link=github_link or "",
        demo_link=demo_link or "",
        status=Project.Status.PENDING,
    )

    technology_ids = []
    for technology in technologies:
        tech_id = getattr(technology, "pk", technology)
        if tech_id not in technology_ids:
            technology_ids.append(tech_id)
    if technology_ids:
        ProjectTechnology.objects.bulk_create([
            ProjectTechnology(project=project, technology_id=tech_id) for tech_id in technology_ids
        ])

    logger.info(
        "submission: project=%s student=%s technologies=%s",
        project.pk, student.pk, len(technology_ids),
    )
    return project
