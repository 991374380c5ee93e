from django.urls import path
from . import views

app_name = "dashboard_supervisor"

urlpatterns = [
    path('dashboard', views.dashboard, name='dashboard'),
    path('projects/<int:project_id>/review', views.review, name='review'),
]
