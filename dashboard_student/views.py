import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect

from accounts.access import role_required
from projects.forms import ProjectSubmissionForm
from projects.models import Project
from projects.services.submission_service import SubmissionError, submit_project

logger = logging.getLogger(__name__)


@role_required('student')
def dashboard(request):
    """Student's own submissions, newest first"""
    profile = request.user.profile
    projects = []
    try:
        projects = list(
            Project.objects.filter(student=profile)
            .select_related('category', 'faculty')
            .prefetch_related('technologies', 'reviews')
            .order_by('-created_at')
        )
    except DatabaseError:
        logger.exception("student_dashboard: failed to load projects student=%s", profile.pk)
        messages.error(request, 'Failed to load projects')

    return render(request, 'dashboard_student/dashboard.html', {
        'projects': projects,
    })


@role_required('student')
def submit_project_view(request):
    profile = request.user.profile
    form = ProjectSubmissionForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        data = form.cleaned_data
        try:
            submit_project(
                student=profile,
                title=data['title'],
                description=data['description'],
                category=data['category'],
                technologies=data.get('technologies') or [],
                github_link=data.get('github_link', ''),
                demo_link=data.get('demo_link', ''),
            )
        except SubmissionError as e:
            messages.error(request, str(e))
        except DatabaseError:
            logger.exception("submit_project: failed student=%s", profile.pk)
            messages.error(request, 'Failed to submit project')
        else:
            messages.success(request, 'Project submitted successfully!')
            return redirect('dashboard_student:dashboard')

    return render(request, 'dashboard_student/submit.html', {
        'form': form,
    })
