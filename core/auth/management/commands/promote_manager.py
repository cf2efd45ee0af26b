"""
Grant or revoke the manager flag on an account.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from core.auth.service import CredentialService
from core.store.db_provider import DbStore

logger = logging.getLogger("mel.admin")


class Command(BaseCommand):
    help = "Set (or with --revoke, clear) the manager flag for a user."

    def add_arguments(self, parser):
        parser.add_argument("user")
        parser.add_argument(
            "--revoke",
            action="store_true",
            help="Clear the manager flag instead of setting it.",
        )

    def handle(self, *args, **options):
        name = options["user"]
        is_manager = not options["revoke"]
        if not CredentialService.set_manager(DbStore(), name=name, is_manager=is_manager):
            raise CommandError(f"User '{name}' does not exist.")

        logger.info("Manager flag for %s set to %s.", name, is_manager)
        state = "granted" if is_manager else "revoked"
        self.stdout.write(self.style.SUCCESS(f"Manager {state} for '{name}'."))
