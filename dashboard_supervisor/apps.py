from django.apps import AppConfig


class DashboardSupervisorConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dashboard_supervisor'
