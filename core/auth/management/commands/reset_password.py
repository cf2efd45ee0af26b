"""
Re-salt and re-hash an account password.
"""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.auth.service import DEFAULT_WORK_FACTOR, CredentialService, ScryptPasswordHasher
from core.store.db_provider import DbStore

logger = logging.getLogger("mel.admin")


class Command(BaseCommand):
    help = "Replace a user's password."

    def add_arguments(self, parser):
        parser.add_argument("user")
        parser.add_argument("password")

    def handle(self, *args, **options):
        name = options["user"]
        password = options["password"]
        if not password:
            raise CommandError("Password must not be empty.")

        hasher = ScryptPasswordHasher(
            getattr(settings, "MEL_PASSWORD_WORK_FACTOR", DEFAULT_WORK_FACTOR)
        )
        updated = CredentialService.reset_password(
            DbStore(),
            name=name,
            password=password,
            hasher=hasher,
        )
        if not updated:
            raise CommandError(f"User '{name}' does not exist.")

        logger.info("Password reset for %s.", name)
        self.stdout.write(self.style.SUCCESS(f"Password reset for '{name}'."))
