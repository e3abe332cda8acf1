"""
Secure rooms Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("scan", views.scan_view),
]
