from django.apps import AppConfig


class DashboardStudentConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dashboard_student'
