from django.test import TestCase

from accounts.models import CustomUser, Faculty, Profile
from projects.models import Category, Project


class AdminDashboardViewTests(TestCase):
    def setUp(self):
        user = CustomUser.objects.create_user(email="admin@ucu.ac.ug", password="secret123")
        Profile.objects.create(user=user, full_name="Admin", role="admin")
        self.client.force_login(user)

    def test_empty_analytics(self):
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["stats"]["approval_rate"], 0)

    def test_approval_rate_rendered_as_integer_percentage(self):
        faculty = Faculty.objects.create(name="Faculty of Law")
        category = Category.objects.create(name="Research")
        student_user = CustomUser.objects.create_user(email="s@ucu.ac.ug", password="secret123")
        student = Profile.objects.create(user=student_user, full_name="S", role="student", faculty=faculty)
        for status in ("approved", "pending", "rejected"):
            Project.objects.create(
                title=status, description="d", category=category,
                student=student, faculty=faculty, status=status,
            )
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.context["stats"]["total"], 3)
        self.assertContains(response, "33%")
        self.assertEqual(response.context["faculty_data"][0]["name"], "Faculty")
