"""
Public gallery of approved projects.

Category and faculty filters go to the database as equality predicates; the
free-text search runs over the fetched list.
"""
from projects.models import Project

ALL = "all"

# Primary keys are BigAutoField
MAX_ID = 2 ** 63 - 1


def _selected(value):
    if value in (None, "", ALL):
        return None
    try:
        selected = int(value)
    except (TypeError, ValueError):
        return None
    if not 0 < selected <= MAX_ID:
        return None
    return selected


def fetch_approved_projects(category=None, faculty=None):
    queryset = (
        Project.objects.filter(status=Project.Status.APPROVED)
        .select_related("category", "faculty", "student")
        .prefetch_related("technologies")
        .order_by("-created_at")
    )
    category = _selected(category)
    faculty = _selected(faculty)
    if category is not None:
        queryset = queryset.filter(category_id=category)
    if faculty is not None:
        queryset = queryset.filter(faculty_id=faculty)
    return list(queryset)


def search_projects(projects, query):
    """Case-insensitive substring match on title or description."""
    needle = (query or "").lower()
    if not needle:
        return list(projects)
    return [
        p for p in projects
        if needle in (p.title or "").lower() or needle in (p.description or "").lower()
    ]
