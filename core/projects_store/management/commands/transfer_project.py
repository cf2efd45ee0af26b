"""
Hand a project to a single new owner.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from core.store.db_provider import DbStore

logger = logging.getLogger("mel.admin")


class Command(BaseCommand):
    help = "Replace every owner of a project with one user."

    def add_arguments(self, parser):
        parser.add_argument("pid", type=int)
        parser.add_argument("user")

    def handle(self, *args, **options):
        pid = options["pid"]
        name = options["user"]
        store = DbStore()

        if store.get_project(pid) is None:
            raise CommandError(f"Project {pid} does not exist.")
        if store.find_user(name) is None:
            raise CommandError(f"User '{name}' does not exist.")

        # New owner first so the project never has zero owners.
        if not store.find_ownership(name, pid):
            store.insert_owns(name, pid)
        if store.find_viewing(name, pid):
            store.delete_views(name, pid)
        for previous in store.owner_names(pid):
            if previous != name:
                store.delete_owns(previous, pid)

        logger.info("Project %d transferred to %s.", pid, name)
        self.stdout.write(self.style.SUCCESS(f"Project {pid} now owned by '{name}'."))
