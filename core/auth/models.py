"""
MEL Auth - Persistent User Credentials
======================================
Stores salted scrypt password hashes and the manager flag per user.
An empty password hash marks a passwordless public demonstration account.
"""

from __future__ import annotations

from django.db import models


class UserAccount(models.Model):
    # 320 is the maximum email length.
    name = models.CharField(primary_key=True, max_length=320)
    salt = models.BinaryField()
    password = models.BinaryField(blank=True, default=b"")
    is_manager = models.BooleanField(default=False)

    class Meta:
        db_table = "mel_users"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} (manager)" if self.is_manager else self.name
