import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, get_object_or_404

from accounts.models import Faculty
from projects.models import Category, Project
from projects.services.gallery_service import ALL, fetch_approved_projects, search_projects

logger = logging.getLogger(__name__)


def landing(request):
    return render(request, "web/landing.html")


def gallery(request):
    search_query = request.GET.get('q', '').strip()
    category_id = request.GET.get('category', ALL).strip() or ALL
    faculty_id = request.GET.get('faculty', ALL).strip() or ALL

    projects, categories, faculties = [], [], []
    try:
        projects = fetch_approved_projects(category=category_id, faculty=faculty_id)
        categories = list(Category.objects.order_by('name'))
        faculties = list(Faculty.objects.order_by('name'))
    except DatabaseError:
        logger.exception("gallery: failed to load projects category=%s faculty=%s", category_id, faculty_id)
        messages.error(request, "Failed to load projects")

    filtered_projects = search_projects(projects, search_query)

    return render(request, "web/gallery.html", {
        'projects': filtered_projects,
        'categories': categories,
        'faculties': faculties,
        'current_filters': {
            'q': search_query,
            'category': category_id,
            'faculty': faculty_id,
        },
    })


def gallery_project_detail(request, project_id):
    project = get_object_or_404(
        Project.objects.select_related('category', 'faculty', 'student').prefetch_related('technologies'),
        id=project_id,
        status=Project.Status.APPROVED,
    )
    return render(request, "web/project_detail.html", {"project": project})


def not_found(request, exception=None):
    return render(request, "404.html", {"path": request.path}, status=404)
