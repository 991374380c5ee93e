from django.urls import path
from . import views

app_name = "dashboard_student"

urlpatterns = [
    path('dashboard', views.dashboard, name='dashboard'),
    path('submit', views.submit_project_view, name='submit'),
]
