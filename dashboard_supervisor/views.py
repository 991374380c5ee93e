import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect, get_object_or_404
from django.views.decorators.http import require_http_methods

from accounts.access import role_required
from projects.forms import ReviewForm
from projects.models import Project
from projects.services.review_service import ReviewError, review_project

logger = logging.getLogger(__name__)


def _projects_queryset():
    return (
        Project.objects.select_related('category', 'faculty', 'student')
        .prefetch_related('technologies')
        .order_by('-created_at')
    )


@role_required('supervisor')
def dashboard(request):
    """Review queue: every submission, newest first"""
    projects = []
    try:
        projects = list(_projects_queryset())
    except DatabaseError:
        logger.exception("supervisor_dashboard: failed to load projects")
        messages.error(request, 'Failed to load projects')

    return render(request, 'dashboard_supervisor/dashboard.html', {
        'projects': projects,
    })


@role_required('supervisor')
@require_http_methods(["GET", "POST"])
def review(request, project_id):
    project = get_object_or_404(_projects_queryset().prefetch_related('reviews__reviewer'), id=project_id)
    form = ReviewForm(request.POST or None)

    if request.method == 'POST':
        if not form.is_valid():
            messages.error(request, 'Failed to submit review')
        else:
            status = form.cleaned_data['status']
            try:
                review_project(
                    project,
                    reviewer=request.user.profile,
                    status=status,
                    comment=form.cleaned_data.get('comment'),
                )
            except (ReviewError, DatabaseError):
                logger.exception("review: failed project=%s status=%s", project.pk, status)
                messages.error(request, 'Failed to submit review')
            else:
                messages.success(request, f'Project {status}')
                return redirect('dashboard_supervisor:dashboard')

    return render(request, 'dashboard_supervisor/review.html', {
        'project': project,
        'form': form,
        'reviews': project.reviews.all(),
    })
