"""
facility-ability Root URL Configuration
Thin adapter routes only.
"""

from django.urls import include, path


urlpatterns = [
    path("secure_rooms_api/", include("adapters.django_api.urls")),
]
