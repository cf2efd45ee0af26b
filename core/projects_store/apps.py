"""
MEL Projects Store - App Configuration
======================================
Persistent projects, deliverables, and ownership/viewing relations.
"""

from django.apps import AppConfig


class CoreProjectsStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.projects_store"
    label = "core_projects_store"
    verbose_name = "MEL Projects Store"
