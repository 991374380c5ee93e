from io import StringIO
from types import SimpleNamespace
from unittest import TestCase as SimpleTestCase
from unittest.mock import patch

from django.core import mail
from django.core.management import call_command
from django.db import DatabaseError
from django.test import TestCase

from accounts.models import CustomUser, Faculty, Profile
from projects.models import Category, Project, ProjectTechnology, Review, Technology
from projects.services.analytics_service import (
    approval_rate,
    build_dashboard,
    faculty_breakdown,
    status_counts,
    top_technologies,
)
from projects.services.gallery_service import fetch_approved_projects, search_projects
from projects.services.review_service import ReviewError, review_project
from projects.services.submission_service import SubmissionError, submit_project


def make_profile(email, role, faculty=None, full_name="Test User"):
    user = CustomUser.objects.create_user(email=email, password="secret123")
    return Profile.objects.create(user=user, full_name=full_name, role=role, faculty=faculty)


class ApprovalRateTests(SimpleTestCase):
    def test_zero_total_is_zero(self):
        self.assertEqual(approval_rate(0, 0), 0)

    def test_integer_percentage(self):
        self.assertEqual(approval_rate(1, 4), 25)
        self.assertEqual(approval_rate(3, 3), 100)

    def test_rounds_half_up(self):
        self.assertEqual(approval_rate(1, 8), 13)
        self.assertEqual(approval_rate(1, 3), 33)
        self.assertEqual(approval_rate(2, 3), 67)

    def test_status_counts(self):
        rows = [{"status": s} for s in ("approved", "approved", "pending", "rejected", "revision")]
        stats = status_counts(rows)
        self.assertEqual(stats["total"], 5)
        self.assertEqual(stats["approved"], 2)
        self.assertEqual(stats["pending"], 1)
        self.assertEqual(stats["rejected"], 1)
        self.assertEqual(stats["approval_rate"], 40)

    def test_faculty_breakdown_uses_first_word(self):
        faculties = [SimpleNamespace(id=1, name="Engineering Design Technology"), SimpleNamespace(id=2, name="Law")]
        rows = [
            {"status": "approved", "faculty_id": 1},
            {"status": "pending", "faculty_id": 1},
            {"status": "approved", "faculty_id": None},
        ]
        data = faculty_breakdown(rows, faculties)
        self.assertEqual(data[0]["name"], "Engineering")
        self.assertEqual((data[0]["count"], data[0]["approved"]), (2, 1))
        self.assertEqual((data[1]["count"], data[1]["approved"]), (0, 0))

    def test_top_technologies_limit_and_order(self):
        names = ["Python"] * 3 + ["React"] * 2 + ["Django"] * 2 + [f"T{i}" for i in range(10)]
        top = top_technologies(names)
        self.assertEqual(len(top), 8)
        self.assertEqual(top[0], {"name": "Python", "value": 3})
        self.assertEqual([t["name"] for t in top[1:3]], ["Django", "React"])


class SearchProjectsTests(SimpleTestCase):
    def setUp(self):
        self.projects = [
            SimpleNamespace(title="Smart Irrigation", description="IoT sensors for farms"),
            SimpleNamespace(title="Campus Map", description="Navigate the SMART campus"),
            SimpleNamespace(title="Budget App", description="Personal finance"),
        ]

    def test_case_insensitive_title_or_description(self):
        result = search_projects(self.projects, "smart")
        self.assertEqual([p.title for p in result], ["Smart Irrigation", "Campus Map"])

    def test_empty_query_returns_everything(self):
        self.assertEqual(len(search_projects(self.projects, "")), 3)
        self.assertEqual(len(search_projects(self.projects, None)), 3)

    def test_no_match(self):
        self.assertEqual(search_projects(self.projects, "blockchain"), [])


class CatalogMixin:
    def setUp(self):
        self.faculty = Faculty.objects.create(name="Faculty of Engineering")
        self.category = Category.objects.create(name="Web Application")
        self.python = Technology.objects.create(name="Python")
        self.django = Technology.objects.create(name="Django")
        self.student = make_profile("student@ucu.ac.ug", "student", faculty=self.faculty, full_name="Jane Student")
        self.supervisor = make_profile("supervisor@ucu.ac.ug", "supervisor", full_name="Dr. Supervisor")


class SubmitProjectTests(CatalogMixin, TestCase):
    def test_creates_one_project_and_one_join_row_per_technology(self):
        project = submit_project(
            student=self.student,
            title="Hub",
            description="Showcase platform",
            category=self.category,
            technologies=[self.python, self.django],
        )
        self.assertEqual(Project.objects.count(), 1)
        self.assertEqual(ProjectTechnology.objects.filter(project=project).count(), 2)
        self.assertEqual(project.status, Project.Status.PENDING)
        self.assertEqual(project.faculty, self.faculty)
        self.assertEqual(project.student, self.student)

    def test_no_technologies_creates_no_join_rows(self):
        submit_project(student=self.student, title="Hub", description="d", category=self.category)
        self.assertEqual(Project.objects.count(), 1)
        self.assertEqual(ProjectTechnology.objects.count(), 0)

    def test_duplicate_technologies_are_collapsed(self):
        project = submit_project(
            student=self.student,
            title="Hub",
            description="d",
            category=self.category,
            technologies=[self.python, self.python.pk],
        )
        self.assertEqual(project.project_technologies.count(), 1)

    def test_failed_join_insert_rolls_back_project(self):
        with patch.object(ProjectTechnology.objects, "bulk_create", side_effect=DatabaseError("insert failed")):
            with self.assertRaises(DatabaseError):
                submit_project(
                    student=self.student,
                    title="Hub",
                    description="d",
                    category=self.category,
                    technologies=[self.python],
                )
        self.assertEqual(Project.objects.count(), 0)
        self.assertEqual(ProjectTechnology.objects.count(), 0)

    def test_only_students_submit(self):
        with self.assertRaises(SubmissionError):
            submit_project(student=self.supervisor, title="Hub", description="d", category=self.category)
        self.assertEqual(Project.objects.count(), 0)

    def test_required_fields(self):
        with self.assertRaises(SubmissionError):
            submit_project(student=self.student, title="  ", description="d", category=self.category)


class ReviewProjectTests(CatalogMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.project = submit_project(
            student=self.student, title="Hub", description="d", category=self.category,
        )

    def test_sets_status_and_appends_one_review(self):
        review = review_project(self.project, self.supervisor, "approved", comment="Great work")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "approved")
        self.assertEqual(Review.objects.filter(project=self.project).count(), 1)
        self.assertEqual(review.status, "approved")
        self.assertEqual(review.comment, "Great work")
        self.assertEqual(review.reviewer, self.supervisor)

    def test_blank_comment_is_stored_as_null(self):
        review = review_project(self.project, self.supervisor, "revision", comment="   ")
        self.assertIsNone(review.comment)

    def test_re_review_appends_another_row(self):
        review_project(self.project, self.supervisor, "revision")
        review_project(self.project, self.supervisor, "approved")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "approved")
        self.assertEqual(self.project.reviews.count(), 2)

    def test_pending_is_not_a_decision(self):
        with self.assertRaises(ReviewError):
            review_project(self.project, self.supervisor, "pending")
        self.assertEqual(Review.objects.count(), 0)

    def test_unknown_status_rejected(self):
        with self.assertRaises(ReviewError):
            review_project(self.project, self.supervisor, "archived")

    def test_only_supervisors_review(self):
        with self.assertRaises(ReviewError):
            review_project(self.project, self.student, "approved")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "pending")

    def test_failed_review_insert_rolls_back_status(self):
        with patch.object(Review.objects, "create", side_effect=DatabaseError("insert failed")):
            with self.assertRaises(DatabaseError):
                review_project(self.project, self.supervisor, "approved")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "pending")
        self.assertEqual(Review.objects.count(), 0)

    def test_student_is_emailed_after_commit(self):
        with self.captureOnCommitCallbacks(execute=True):
            review_project(self.project, self.supervisor, "rejected", comment="Out of scope")
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["student@ucu.ac.ug"])
        self.assertIn("Hub", mail.outbox[0].subject)

    def test_email_failure_does_not_undo_review(self):
        with patch("projects.services.email_service.EmailService.send_review_decision_email", side_effect=OSError("smtp down")):
            with self.captureOnCommitCallbacks(execute=True):
                review_project(self.project, self.supervisor, "approved")
        self.project.refresh_from_db()
        self.assertEqual(self.project.status, "approved")


class GalleryQueryTests(CatalogMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.other_category = Category.objects.create(name="Research")
        self.approved = submit_project(student=self.student, title="A", description="d", category=self.category)
        self.other = submit_project(student=self.student, title="B", description="d", category=self.other_category)
        self.pending = submit_project(student=self.student, title="C", description="d", category=self.category)
        Project.objects.filter(pk__in=[self.approved.pk, self.other.pk]).update(status="approved")

    def test_only_approved_projects(self):
        titles = sorted(p.title for p in fetch_approved_projects())
        self.assertEqual(titles, ["A", "B"])

    def test_category_equality_filter(self):
        titles = [p.title for p in fetch_approved_projects(category=str(self.other_category.pk))]
        self.assertEqual(titles, ["B"])

    def test_all_and_invalid_values_mean_no_filter(self):
        self.assertEqual(len(fetch_approved_projects(category="all", faculty="")), 2)
        self.assertEqual(len(fetch_approved_projects(category="not-a-number")), 2)

    def test_out_of_range_ids_mean_no_filter(self):
        self.assertEqual(len(fetch_approved_projects(category="99999999999999999999999")), 2)
        self.assertEqual(len(fetch_approved_projects(faculty="-1")), 2)

    def test_faculty_equality_filter(self):
        self.assertEqual(len(fetch_approved_projects(faculty=self.faculty.pk)), 2)
        other = Faculty.objects.create(name="Faculty of Law")
        self.assertEqual(fetch_approved_projects(faculty=other.pk), [])


class AnalyticsDashboardTests(CatalogMixin, TestCase):
    def test_build_dashboard_counts(self):
        for title, status in (("A", "approved"), ("B", "approved"), ("C", "pending")):
            project = submit_project(
                student=self.student, title=title, description="d", category=self.category,
                technologies=[self.python],
            )
            Project.objects.filter(pk=project.pk).update(status=status)

        data = build_dashboard()
        self.assertEqual(data["stats"]["total"], 3)
        self.assertEqual(data["stats"]["approved"], 2)
        self.assertEqual(data["stats"]["approval_rate"], 67)
        self.assertEqual(data["faculty_data"][0]["count"], 3)
        self.assertEqual(data["faculty_data"][0]["approved"], 2)
        self.assertEqual(data["tech_data"], [{"name": "Python", "value": 3, "share_percent": 100}])

    def test_empty_dashboard(self):
        data = build_dashboard()
        self.assertEqual(data["stats"]["total"], 0)
        self.assertEqual(data["stats"]["approval_rate"], 0)
        self.assertEqual(data["tech_data"], [])


class SeedCatalogCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        counts = (Faculty.objects.count(), Category.objects.count(), Technology.objects.count())
        call_command("seed_catalog", stdout=StringIO())
        self.assertEqual(counts, (Faculty.objects.count(), Category.objects.count(), Technology.objects.count()))
        self.assertGreater(counts[2], 0)
