"""
Role gate for protected pages.

``decide_access`` is the pure decision; ``role_required`` applies it to a view.
The decision is taken again on every request, so a change of session or role
takes effect on the next page load.
"""
import enum
import logging
from functools import wraps
from urllib.parse import urlencode

from django.contrib import messages
from django.core.exceptions import ObjectDoesNotExist
from django.shortcuts import redirect, render

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth"
HOME_PATH = "/"


class AccessDecision(enum.Enum):
    ALLOW = "allow"
    LOGIN = "login"
    HOME = "home"
    PENDING = "pending"


def get_profile(user):
    """Return the user's profile, or None while it does not exist yet."""
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    try:
        return user.profile
    except ObjectDoesNotExist:
        return None


def decide_access(user, profile, allowed_roles=None) -> AccessDecision:
    if user is None or not getattr(user, "is_authenticated", False):
        return AccessDecision.LOGIN
    if profile is None:
        return AccessDecision.PENDING
    if not allowed_roles:
        return AccessDecision.ALLOW
    if profile.role in allowed_roles:
        return AccessDecision.ALLOW
    return AccessDecision.HOME


def role_required(*roles: str):
    """
    Usage: @role_required('student') or @role_required('supervisor', 'admin')
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            user = getattr(request, "user", None)
            profile = get_profile(user)
            decision = decide_access(user, profile, roles)

            if decision is AccessDecision.ALLOW:
                return view_func(request, *args, **kwargs)
            if decision is AccessDecision.LOGIN:
                return redirect(f"{LOGIN_PATH}?{urlencode({'next': request.get_full_path()})}")
            if decision is AccessDecision.PENDING:
                logger.info("role_gate: profile pending user=%s path=%s", user.pk, request.path)
                return render(request, "accounts/pending.html", status=200)

            logger.info(
                "role_gate: denied user=%s role=%s path=%s allowed=%s",
                user.pk, profile.role, request.path, ",".join(roles),
            )
            messages.warning(request, "You do not have permission to access this page.")
            return redirect(HOME_PATH)
        return _wrapped
    return decorator


def dashboard_path_for(profile):
    """Landing page of each role after sign-in."""
    if profile is None:
        return HOME_PATH
    return {
        "student": "/student/dashboard",
        "supervisor": "/supervisor/dashboard",
        "admin": "/admin/dashboard",
    }.get(profile.role, HOME_PATH)
