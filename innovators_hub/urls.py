from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("", include("accounts.urls", namespace="accounts")),
    path("student/", include("dashboard_student.urls", namespace="dashboard_student")),
    path("supervisor/", include("dashboard_supervisor.urls", namespace="dashboard_supervisor")),
    path("admin/", include("dashboard_admin.urls", namespace="dashboard_admin")),
    path("", include("web.urls", namespace="web")),
]

handler404 = "web.views.not_found"
