from django.test import TestCase

from accounts.models import CustomUser, Faculty, Profile
from projects.models import Category, Project


class GalleryViewTests(TestCase):
    def setUp(self):
        self.faculty = Faculty.objects.create(name="Faculty of Engineering")
        self.web = Category.objects.create(name="Web Application")
        self.research = Category.objects.create(name="Research")
        user = CustomUser.objects.create_user(email="student@ucu.ac.ug", password="secret123")
        student = Profile.objects.create(user=user, full_name="Jane", role="student", faculty=self.faculty)

        def project(title, description, category, status):
            return Project.objects.create(
                title=title, description=description, category=category,
                student=student, faculty=self.faculty, status=status,
            )

        self.irrigation = project("Smart Irrigation", "IoT for farms", self.web, "approved")
        self.thesis = project("Thesis Tracker", "Keeps SMART notes", self.research, "approved")
        self.hidden = project("Secret Smart Thing", "Not reviewed yet", self.web, "pending")

    def test_lists_only_approved_projects(self):
        response = self.client.get("/gallery")
        self.assertEqual(response.status_code, 200)
        titles = [p.title for p in response.context["projects"]]
        self.assertCountEqual(titles, ["Smart Irrigation", "Thesis Tracker"])

    def test_search_is_case_insensitive_over_title_and_description(self):
        response = self.client.get("/gallery", {"q": "smart"})
        titles = [p.title for p in response.context["projects"]]
        self.assertCountEqual(titles, ["Smart Irrigation", "Thesis Tracker"])

    def test_category_filter(self):
        response = self.client.get("/gallery", {"category": self.research.id, "faculty": "all"})
        self.assertEqual([p.title for p in response.context["projects"]], ["Thesis Tracker"])

    def test_oversized_filter_id_is_ignored(self):
        response = self.client.get("/gallery", {"category": "99999999999999999999999"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context["projects"]), 2)

    def test_empty_result_message(self):
        response = self.client.get("/gallery", {"q": "blockchain"})
        self.assertContains(response, "No projects found matching your criteria.")

    def test_detail_of_approved_project(self):
        response = self.client.get(f"/gallery/{self.irrigation.id}")
        self.assertContains(response, "Smart Irrigation")
        self.assertContains(response, f"<strong>Year:</strong> {self.irrigation.created_at.year}")

    def test_detail_of_pending_project_is_404(self):
        response = self.client.get(f"/gallery/{self.hidden.id}")
        self.assertEqual(response.status_code, 404)


class PublicPagesTests(TestCase):
    def test_landing(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Showcase Student Innovation")

    def test_unknown_route_renders_404_page(self):
        response = self.client.get("/no/such/page")
        self.assertEqual(response.status_code, 404)
        self.assertTemplateUsed(response, "404.html")
