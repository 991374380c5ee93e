from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone
from .managers import CustomUserManager

class CustomUser(AbstractBaseUser, PermissionsMixin):
    email = models.EmailField("email address", unique=True)
    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(default=timezone.now)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def save(self, *args, **kwargs):
        """Override save to ensure email is always stored in lowercase"""
        if self.email:
            self.email = self.email.lower().strip()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.email


class Faculty(models.Model):
    name = models.CharField(max_length=200, unique=True)

    class Meta:
        db_table = "faculties"
        verbose_name = "Faculty"
        verbose_name_plural = "Faculties"
        ordering = ['name']

    def __str__(self):
        return self.name


class Profile(models.Model):
    """Identity record carrying the role and faculty of a user"""
    class Role(models.TextChoices):
        STUDENT = 'student', 'Student'
        SUPERVISOR = 'supervisor', 'Supervisor'
        ADMIN = 'admin', 'Admin'

    user = models.OneToOneField("accounts.CustomUser", on_delete=models.CASCADE, related_name="profile")
    full_name = models.CharField(max_length=200)
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.STUDENT)
    faculty = models.ForeignKey("accounts.Faculty", on_delete=models.SET_NULL, null=True, blank=True, related_name="profiles")
    student_id = models.CharField(max_length=50, blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "profiles"
        verbose_name = "Profile"
        verbose_name_plural = "Profiles"

    def __str__(self):
        return f"{self.full_name} ({self.role})"

