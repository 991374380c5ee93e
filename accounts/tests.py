from types import SimpleNamespace
from unittest import TestCase as SimpleTestCase
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from accounts.access import AccessDecision, decide_access, dashboard_path_for
from accounts.models import CustomUser, Faculty, Profile


def _user(authenticated=True):
    return SimpleNamespace(is_authenticated=authenticated, pk=1)


class DecideAccessTests(SimpleTestCase):
    def test_missing_user_goes_to_login(self):
        self.assertIs(decide_access(None, None, ("student",)), AccessDecision.LOGIN)

    def test_anonymous_user_goes_to_login(self):
        self.assertIs(decide_access(_user(authenticated=False), None, ("student",)), AccessDecision.LOGIN)

    def test_profile_not_loaded_suspends_decision(self):
        self.assertIs(decide_access(_user(), None, ("student",)), AccessDecision.PENDING)

    def test_wrong_role_goes_home(self):
        profile = SimpleNamespace(role="student")
        self.assertIs(decide_access(_user(), profile, ("supervisor",)), AccessDecision.HOME)

    def test_matching_role_is_allowed(self):
        profile = SimpleNamespace(role="admin")
        self.assertIs(decide_access(_user(), profile, ("supervisor", "admin")), AccessDecision.ALLOW)

    def test_no_roles_means_any_signed_in_profile(self):
        profile = SimpleNamespace(role="student")
        self.assertIs(decide_access(_user(), profile, ()), AccessDecision.ALLOW)

    def test_dashboard_path_per_role(self):
        self.assertEqual(dashboard_path_for(SimpleNamespace(role="student")), "/student/dashboard")
        self.assertEqual(dashboard_path_for(SimpleNamespace(role="supervisor")), "/supervisor/dashboard")
        self.assertEqual(dashboard_path_for(SimpleNamespace(role="admin")), "/admin/dashboard")
        self.assertEqual(dashboard_path_for(None), "/")


class RoleGateViewTests(TestCase):
    def _make_user(self, email, role=None):
        user = CustomUser.objects.create_user(email=email, password="secret123")
        if role:
            Profile.objects.create(user=user, full_name=email.split("@")[0], role=role)
        return user

    def test_unauthenticated_request_redirects_to_auth(self):
        response = self.client.get("/student/dashboard")
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith("/auth?next="))

    def test_wrong_role_redirects_home(self):
        self.client.force_login(self._make_user("sup@ucu.ac.ug", role="supervisor"))
        response = self.client.get("/student/dashboard")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/")

    def test_admin_dashboard_denied_to_student(self):
        self.client.force_login(self._make_user("stu@ucu.ac.ug", role="student"))
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response["Location"], "/")

    def test_user_without_profile_sees_pending_page(self):
        self.client.force_login(self._make_user("new@ucu.ac.ug"))
        response = self.client.get("/supervisor/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "accounts/pending.html")

    def test_pending_page_offers_sign_out(self):
        self.client.force_login(self._make_user("new@ucu.ac.ug"))
        response = self.client.get("/student/dashboard")
        self.assertContains(response, "Sign Out")
        self.assertNotContains(response, "Dashboard</a>")

    def test_matching_role_gets_page(self):
        self.client.force_login(self._make_user("stu@ucu.ac.ug", role="student"))
        response = self.client.get("/student/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "dashboard_student/dashboard.html")


class AuthViewTests(TestCase):
    def setUp(self):
        self.faculty = Faculty.objects.create(name="Faculty of Engineering, Design and Technology")

    def test_sign_up_creates_user_and_profile(self):
        response = self.client.post("/auth", {
            "mode": "signup",
            "full_name": "Jane Doe",
            "role": "student",
            "faculty": self.faculty.id,
            "student_id": "2024/ABC/001",
            "email": "Jane@UCU.ac.ug",
            "password": "secret123",
        })
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/student/dashboard")
        user = CustomUser.objects.get(email="jane@ucu.ac.ug")
        self.assertEqual(user.profile.role, "student")
        self.assertEqual(user.profile.faculty, self.faculty)
        self.assertEqual(user.profile.student_id, "2024/ABC/001")

    def test_sign_up_database_error_shows_fixed_message(self):
        with patch.object(Profile.objects, "create", side_effect=DatabaseError("profiles_user_id_key violated")):
            response = self.client.post("/auth", {
                "mode": "signup",
                "full_name": "Jane Doe",
                "role": "supervisor",
                "email": "jane@ucu.ac.ug",
                "password": "secret123",
            })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Registration failed. Please try again.")
        self.assertNotContains(response, "profiles_user_id_key")
        self.assertFalse(CustomUser.objects.filter(email="jane@ucu.ac.ug").exists())

    def test_sign_up_drops_student_id_for_supervisors(self):
        self.client.post("/auth", {
            "mode": "signup",
            "full_name": "Dr. Okello",
            "role": "supervisor",
            "student_id": "ignored",
            "email": "okello@ucu.ac.ug",
            "password": "secret123",
        })
        profile = Profile.objects.get(user__email="okello@ucu.ac.ug")
        self.assertEqual(profile.role, "supervisor")
        self.assertIsNone(profile.student_id)

    def test_sign_up_rejects_duplicate_email(self):
        CustomUser.objects.create_user(email="taken@ucu.ac.ug", password="secret123")
        response = self.client.post("/auth", {
            "mode": "signup",
            "full_name": "Someone",
            "role": "student",
            "email": "taken@ucu.ac.ug",
            "password": "secret123",
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(CustomUser.objects.filter(email="taken@ucu.ac.ug").count(), 1)

    def test_sign_in_redirects_to_role_dashboard(self):
        user = CustomUser.objects.create_user(email="admin@ucu.ac.ug", password="secret123")
        Profile.objects.create(user=user, full_name="Admin", role="admin")
        response = self.client.post("/auth", {"username": "ADMIN@ucu.ac.ug", "password": "secret123"})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/admin/dashboard")

    def test_sign_in_honours_next(self):
        user = CustomUser.objects.create_user(email="stu@ucu.ac.ug", password="secret123")
        Profile.objects.create(user=user, full_name="Stu", role="student")
        response = self.client.post("/auth", {
            "username": "stu@ucu.ac.ug",
            "password": "secret123",
            "next": "/student/submit",
        })
        self.assertEqual(response["Location"], "/student/submit")

    def test_bad_credentials_stay_on_page(self):
        response = self.client.post("/auth", {"username": "nobody@ucu.ac.ug", "password": "wrongpass"})
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "accounts/auth.html")

    def test_signed_in_user_is_sent_to_dashboard(self):
        user = CustomUser.objects.create_user(email="sup@ucu.ac.ug", password="secret123")
        Profile.objects.create(user=user, full_name="Sup", role="supervisor")
        self.client.force_login(user)
        response = self.client.get("/auth")
        self.assertEqual(response["Location"], "/supervisor/dashboard")

    def test_logout_requires_post(self):
        self.assertEqual(self.client.get("/auth/logout").status_code, 405)
        self.assertEqual(self.client.post("/auth/logout")["Location"], "/")
