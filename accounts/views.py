import logging

from django.contrib import messages
from django.contrib.auth import login, logout
from django.db import DatabaseError, transaction
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.decorators.http import require_POST

from .access import dashboard_path_for, get_profile
from .forms import SignInForm, SignUpForm
from .models import CustomUser, Profile

logger = logging.getLogger(__name__)

SIGNIN = "signin"
SIGNUP = "signup"


def _success_url(request, profile):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return dashboard_path_for(profile)


class AuthView(View):
    """Sign-in and sign-up on one page; ``mode`` switches between the two forms."""

    template_name = "accounts/auth.html"

    def _render(self, request, mode, form, status=200):
        return render(request, self.template_name, {
            "mode": mode,
            "form": form,
            "next": request.POST.get("next") or request.GET.get("next", ""),
        }, status=status)

    def get(self, request):
        # Signed-in users go straight to their dashboard
        profile = get_profile(request.user)
        if request.user.is_authenticated and profile:
            return redirect(dashboard_path_for(profile))

        mode = SIGNUP if request.GET.get("mode") == SIGNUP else SIGNIN
        form = SignUpForm() if mode == SIGNUP else SignInForm(request)
        return self._render(request, mode, form)

    def post(self, request):
        if request.POST.get("mode") == SIGNUP:
            return self._sign_up(request)
        return self._sign_in(request)

    def _sign_in(self, request):
        form = SignInForm(request, data=request.POST)
        if not form.is_valid():
            messages.error(request, "Authentication failed")
            return self._render(request, SIGNIN, form)

        user = form.get_user()
        login(request, user)
        logger.info("auth: signed in user=%s", user.pk)
        messages.success(request, "Welcome back!")
        return redirect(_success_url(request, get_profile(user)))

    def _sign_up(self, request):
        form = SignUpForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Please fill all required fields")
            return self._render(request, SIGNUP, form)

        data = form.cleaned_data
        try:
            with transaction.atomic():
                user = CustomUser.objects.create_user(email=data["email"], password=data["password"])
                profile = Profile.objects.create(
                    user=user,
                    full_name=data["full_name"],
                    role=data["role"],
                    faculty=data.get("faculty"),
                    student_id=data.get("student_id") or None,
                )
        except DatabaseError:
            logger.exception("auth: sign-up failed email=%s", data["email"])
            form.add_error(None, "Registration failed. Please try again.")
            messages.error(request, "Authentication failed")
            return self._render(request, SIGNUP, form)

        login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("auth: signed up user=%s role=%s", user.pk, profile.role)
        messages.success(request, "Account created successfully!")
        return redirect(_success_url(request, profile))


auth_view = AuthView.as_view()


@require_POST
def logout_view(request):
    logout(request)
    return redirect("/")
