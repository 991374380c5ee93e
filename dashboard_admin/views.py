import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render

from accounts.access import role_required
from projects.services.analytics_service import build_dashboard

logger = logging.getLogger(__name__)

EMPTY_ANALYTICS = {
    'stats': {'total': 0, 'approved': 0, 'pending': 0, 'rejected': 0, 'revision': 0, 'approval_rate': 0},
    'faculty_data': [],
    'tech_data': [],
}


@role_required('admin')
def dashboard(request):
    """Analytics: status totals, approval rate, projects per faculty and trending technologies"""
    try:
        context = build_dashboard()
    except DatabaseError:
        logger.exception("admin_dashboard: failed to load analytics")
        messages.error(request, 'Failed to load analytics')
        context = EMPTY_ANALYTICS
    return render(request, 'dashboard_admin/dashboard.html', context)
