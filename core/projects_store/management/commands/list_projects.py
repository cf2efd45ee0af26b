"""
Print the projects a user owns.
"""

from django.core.management.base import BaseCommand, CommandError

from core.store.db_provider import DbStore


class Command(BaseCommand):
    help = "List ids and names of the projects a user owns."

    def add_arguments(self, parser):
        parser.add_argument("user")

    def handle(self, *args, **options):
        name = options["user"]
        store = DbStore()
        if store.find_user(name) is None:
            raise CommandError(f"User '{name}' does not exist.")

        for pid in store.owned_project_ids(name):
            project = store.get_project(pid)
            label = project.name if project is not None else "<missing>"
            self.stdout.write(f"{pid}\t{label}")
