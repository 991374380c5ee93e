from django.db import models
from django.utils import timezone


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "categories"
        verbose_name = "Category"
        verbose_name_plural = "Categories"
        ordering = ['name']

    def __str__(self):
        return self.name


class Technology(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "technologies"
        verbose_name = "Technology"
        verbose_name_plural = "Technologies"
        ordering = ['name']

    def __str__(self):
        return self.name


class Project(models.Model):
    """A student submission under review"""
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        APPROVED = 'approved', 'Approved'
        REJECTED = 'rejected', 'Rejected'
        REVISION = 'revision', 'Needs Revision'

    title = models.CharField(max_length=200)
    description = models.TextField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)
    student = models.ForeignKey("accounts.Profile", on_delete=models.CASCADE, related_name="projects")
    faculty = models.ForeignKey("accounts.Faculty", on_delete=models.SET_NULL, null=True, blank=True, related_name="projects")
    category = models.ForeignKey("projects.Category", on_delete=models.PROTECT, related_name="projects")
    technologies = models.ManyToManyField(
        "projects.Technology",
        through="projects.ProjectTechnology",
        related_name="projects",
        blank=True,
    )
    github_link = models.URLField(blank=True)
    demo_link = models.URLField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "projects"
        verbose_name = "Project"
        verbose_name_plural = "Projects"
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=['pending', 'approved', 'rejected', 'revision']),
                name='projects_status_valid',
            ),
        ]

    def __str__(self):
        return self.title


class ProjectTechnology(models.Model):
    project = models.ForeignKey("projects.Project", on_delete=models.CASCADE, related_name="project_technologies")
    technology = models.ForeignKey("projects.Technology", on_delete=models.CASCADE, related_name="project_technologies")

    class Meta:
        db_table = "project_technologies"
        verbose_name = "Project Technology"
        verbose_name_plural = "Project Technologies"
        constraints = [
            models.UniqueConstraint(fields=['project', 'technology'], name='unique_project_technology'),
        ]

    def __str__(self):
        return f"{self.project_id} -> {self.technology_id}"


class Review(models.Model):
    """Append-only record of a supervisor's decision on a project"""
    project = models.ForeignKey("projects.Project", on_delete=models.CASCADE, related_name="reviews")
    reviewer = models.ForeignKey("accounts.Profile", on_delete=models.CASCADE, related_name="reviews")
    status = models.CharField(max_length=16, choices=Project.Status.choices)
    comment = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "reviews"
        verbose_name = "Review"
        verbose_name_plural = "Reviews"
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Review({self.project_id}: {self.status})"
