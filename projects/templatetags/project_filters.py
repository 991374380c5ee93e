from django import template

register = template.Library()

STATUS_BADGE_CLASSES = {
    'approved': 'bg-success',
    'rejected': 'bg-danger',
    'revision': 'bg-warning text-dark',
}


@register.filter
def status_badge(status):
    """Badge colour class for a project status"""
    return STATUS_BADGE_CLASSES.get(status, 'bg-secondary')


@register.filter
def latest_review(project):
    """Most recent review of a project, using the prefetched reviews when present"""
    reviews = list(project.reviews.all())
    if not reviews:
        return None
    return max(reviews, key=lambda r: (r.created_at, r.id))
