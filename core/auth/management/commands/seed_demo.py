"""
Seed the demo account and its sample projects.

The demo account has an empty stored hash, so any password logs it in.
Rows that already exist are left untouched; running twice is harmless.
"""

import logging
from datetime import date

from django.core.management.base import BaseCommand

from core.store.db_provider import DbStore
from core.store.models import DeliverableRecord, ProjectRecord, UserRecord

logger = logging.getLogger("mel.admin")

DEMO_USER = "test"
DEMO_UPDATED = date(2017, 1, 17)

DEMO_PROJECTS = (
    ProjectRecord(
        id=0,
        name="Test Project 0",
        percentage=30,
        description="First test project",
        updated=DEMO_UPDATED,
        flag_value=True,
    ),
    ProjectRecord(
        id=1,
        name="Test Project 1",
        percentage=80,
        description="Second test project",
        updated=DEMO_UPDATED,
    ),
)

DEMO_DELIVERABLES = (
    DeliverableRecord(
        id=0,
        project_id=0,
        name="Deliverable 0",
        due="11/25/2016",
        percentage=20,
        description="Finish backend",
    ),
    DeliverableRecord(
        id=1,
        project_id=0,
        name="Deliverable 1",
        due="12/9/2016",
        percentage=70,
        description="Finish prototype",
    ),
)


class Command(BaseCommand):
    help = "Create the public demo account with two sample projects."

    def handle(self, *args, **options):
        store = DbStore()
        created = 0

        if store.find_user(DEMO_USER) is None:
            store.insert_user(
                UserRecord(name=DEMO_USER, salt=b"", password_hash=b"", is_manager=True)
            )
            created += 1

        for project in DEMO_PROJECTS:
            if not store.project_id_in_use(project.id):
                store.insert_project(project)
                created += 1

        for deliverable in DEMO_DELIVERABLES:
            if not store.deliverable_id_in_use(deliverable.project_id, deliverable.id):
                store.insert_deliverable(deliverable)
                created += 1

        if not store.find_ownership(DEMO_USER, 0):
            store.insert_owns(DEMO_USER, 0)
            created += 1
        if not store.find_viewing(DEMO_USER, 1):
            store.insert_views(DEMO_USER, 1)
            created += 1

        logger.info("Demo seed wrote %d rows.", created)
        self.stdout.write(self.style.SUCCESS(f"Demo data seeded ({created} new rows)."))
