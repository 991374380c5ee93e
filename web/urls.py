from django.urls import path
from . import views
app_name = "web"
urlpatterns = [
    path("", views.landing, name="landing"),
    path("gallery", views.gallery, name="gallery"),
    path("gallery/<int:project_id>", views.gallery_project_detail, name="gallery_project_detail"),
]
