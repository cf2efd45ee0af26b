"""
MEL Django adapter URL routing.
Every path goes to the single resource view; the core resolver owns routing.
"""

from django.urls import re_path

from adapters.django_api import views


urlpatterns = [
    re_path(r"^.*$", views.resource_view),
]
