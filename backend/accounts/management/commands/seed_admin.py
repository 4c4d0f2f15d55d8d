"""
Management command: seed_admin
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Creates the built-in ``admin`` account used to bootstrap a fresh
database.  The password is taken from ``--password`` or the
``SEED_ADMIN_PASSWORD`` environment variable and stored hashed; there is
no built-in default.

The command is **idempotent**: when an ``admin`` user already exists it
is left untouched.

Usage::

    python manage.py migrate
    SEED_ADMIN_PASSWORD=... python manage.py seed_admin
"""

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import UserRole

User = get_user_model()

ADMIN_USERNAME = "admin"
ADMIN_PROFILE = {
    "email": "admin@police.gov",
    "first_name": "System",
    "last_name": "Administrator",
    "badge_number": "ADMIN001",
    "department": "IT",
    "position": "System Administrator",
    "phone": "+1-555-0000",
}


class Command(BaseCommand):
    help = (
        "Creates the 'admin' account with the admin role.  Safe to run "
        "multiple times (idempotent)."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default=None,
            help="Password for the admin account (defaults to $SEED_ADMIN_PASSWORD).",
        )

    def handle(self, *args, **options):
        if User.objects.filter(username=ADMIN_USERNAME).exists():
            self.stdout.write(self.style.WARNING(
                f"  User '{ADMIN_USERNAME}' already exists, skipping."
            ))
            return

        password = options["password"] or os.environ.get("SEED_ADMIN_PASSWORD")
        if not password:
            raise CommandError(
                "No password given.  Pass --password or set SEED_ADMIN_PASSWORD."
            )

        with transaction.atomic():
            user = User.objects.create_user(
                username=ADMIN_USERNAME,
                password=password,
                role=UserRole.ADMIN,
                is_staff=True,
                is_superuser=True,
                **ADMIN_PROFILE,
            )

        self.stdout.write(self.style.SUCCESS(
            f"  Created '{user.username}' (id {user.pk})."
        ))
