from django.test import TestCase

from accounts.models import CustomUser, Faculty, Profile
from projects.models import Category, Project, ProjectTechnology, Review, Technology


class StudentDashboardTests(TestCase):
    def setUp(self):
        self.faculty = Faculty.objects.create(name="Faculty of Engineering")
        self.category = Category.objects.create(name="Web Application")
        self.python = Technology.objects.create(name="Python")
        self.react = Technology.objects.create(name="React")
        user = CustomUser.objects.create_user(email="student@ucu.ac.ug", password="secret123")
        self.student = Profile.objects.create(user=user, full_name="Jane", role="student", faculty=self.faculty)
        self.client.force_login(user)

    def test_submit_creates_project_and_technology_rows(self):
        response = self.client.post("/student/submit", {
            "title": "Innovators Hub",
            "description": "A showcase",
            "category": self.category.id,
            "technologies": [self.python.id, self.react.id],
            "github_link": "https://github.com/ucu/hub",
            "demo_link": "",
        })
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/student/dashboard")
        project = Project.objects.get()
        self.assertEqual(project.student, self.student)
        self.assertEqual(project.faculty, self.faculty)
        self.assertEqual(project.status, "pending")
        self.assertEqual(ProjectTechnology.objects.filter(project=project).count(), 2)

    def test_missing_required_fields_create_nothing(self):
        response = self.client.post("/student/submit", {"title": "", "description": "", "category": ""})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Project.objects.count(), 0)
        self.assertTrue(response.context["form"].errors)

    def test_dashboard_lists_only_own_projects_with_feedback(self):
        mine = Project.objects.create(
            title="Mine", description="d", category=self.category, student=self.student, status="revision",
        )
        other_user = CustomUser.objects.create_user(email="other@ucu.ac.ug", password="secret123")
        other = Profile.objects.create(user=other_user, full_name="Other", role="student")
        Project.objects.create(title="Theirs", description="d", category=self.category, student=other)
        supervisor_user = CustomUser.objects.create_user(email="sup@ucu.ac.ug", password="secret123")
        supervisor = Profile.objects.create(user=supervisor_user, full_name="Sup", role="supervisor")
        Review.objects.create(project=mine, reviewer=supervisor, status="revision", comment="Add screenshots")

        response = self.client.get("/student/dashboard")
        self.assertEqual([p.title for p in response.context["projects"]], ["Mine"])
        self.assertContains(response, "Add screenshots")
