from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from accounts.models import CustomUser, Profile
from projects.models import Category, Project, Review


class SupervisorReviewViewTests(TestCase):
    def setUp(self):
        category = Category.objects.create(name="Research")
        student_user = CustomUser.objects.create_user(email="student@ucu.ac.ug", password="secret123")
        student = Profile.objects.create(user=student_user, full_name="Jane", role="student", student_id="2024/ABC/001")
        self.project = Project.objects.create(title="Hub", description="d", category=category, student=student)
        user = CustomUser.objects.create_user(email="sup@ucu.ac.ug", password="secret123")
        self.supervisor = Profile.objects.create(user=user, full_name="Dr. Sup", role="supervisor")
        self.client.force_login(user)

    def test_queue_lists_all_projects(self):
        response = self.client.get("/supervisor/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p.title for p in response.context["projects"]], ["Hub"])

    def test_review_page_shows_student_details(self):
        response = self.client.get(f"/supervisor/projects/{self.project.id}/review")
        self.assertContains(response, "2024/ABC/001")

    def test_decision_updates_status_and_records_review(self):
        response = self.client.post(
            f"/supervisor/projects/{self.project.id}/review",
            {"status": "revision", "comment": "Please add tests"},
        )
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/supervisor/dashboard")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "revision")
        review = Review.objects.get(project=self.project)
        self.assertEqual(review.status, "revision")
        self.assertEqual(review.comment, "Please add tests")
        self.assertEqual(review.reviewer, self.supervisor)

    def test_invalid_status_is_rejected(self):
        response = self.client.post(f"/supervisor/projects/{self.project.id}/review", {"status": "pending"})
        self.assertEqual(response.status_code, 200)
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "pending")
        self.assertEqual(Review.objects.count(), 0)

    def test_backend_failure_surfaces_message(self):
        with patch("dashboard_supervisor.views.review_project", side_effect=DatabaseError("down")):
            response = self.client.post(f"/supervisor/projects/{self.project.id}/review", {"status": "approved"})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Failed to submit review")

    def test_unknown_project_is_404(self):
        response = self.client.get("/supervisor/projects/9999/review")
        self.assertEqual(response.status_code, 404)
