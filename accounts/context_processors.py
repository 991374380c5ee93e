from .access import dashboard_path_for, get_profile


def session_profile(request):
    """Expose the signed-in profile and its dashboard link to every template (navbar)."""
    profile = get_profile(getattr(request, "user", None))
    return {
        'current_profile': profile,
        'dashboard_url': dashboard_path_for(profile) if profile else None,
    }
