"""
MEL Root URL Configuration
Thin adapter routes only.
"""

from django.urls import include, path


urlpatterns = [
    path("", include("adapters.django_api.urls")),
]
