"""
MEL Projects Store - Relational Project State
=============================================
Projects carry their flag and its version inline. Ownership and viewing are
plain join tables; no permission is stored anywhere.
"""

from __future__ import annotations

from django.db import models

from core.store.models import (
    DESCRIPTION_MAX_LENGTH,
    DUE_MAX_LENGTH,
    MAX_PERCENTAGE,
    NAME_MAX_LENGTH,
)


class Project(models.Model):
    id = models.BigIntegerField(primary_key=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    percentage = models.PositiveSmallIntegerField(default=0)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH)
    updated = models.DateField()
    version = models.IntegerField(default=0)
    flag = models.BooleanField(default=False)
    flag_version = models.IntegerField(default=0)

    class Meta:
        db_table = "mel_projects"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(percentage__lte=MAX_PERCENTAGE),
                name="ck_project_percentage",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} ({self.name})"


class Deliverable(models.Model):
    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name="deliverables",
        db_column="pid",
    )
    deliverable_id = models.BigIntegerField()
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    due = models.CharField(max_length=DUE_MAX_LENGTH, blank=True, default="")
    percentage = models.PositiveSmallIntegerField(default=0)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH)

    class Meta:
        db_table = "mel_deliverables"
        ordering = ["project_id", "deliverable_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["project", "deliverable_id"],
                name="uq_deliverable_project",
            ),
            models.CheckConstraint(
                condition=models.Q(percentage__lte=MAX_PERCENTAGE),
                name="ck_deliverable_percentage",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.project_id}/{self.deliverable_id} ({self.name})"


class Ownership(models.Model):
    user = models.ForeignKey(
        "core_auth.UserAccount",
        on_delete=models.PROTECT,
        related_name="owned_projects",
        db_column="name",
    )
    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name="owners",
        db_column="pid",
    )

    class Meta:
        db_table = "mel_owns"
        ordering = ["project_id", "user_id"]
        constraints = [
            models.UniqueConstraint(fields=["user", "project"], name="uq_owns"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} owns {self.project_id}"


class Viewing(models.Model):
    user = models.ForeignKey(
        "core_auth.UserAccount",
        on_delete=models.PROTECT,
        related_name="viewed_projects",
        db_column="name",
    )
    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name="viewers",
        db_column="pid",
    )

    class Meta:
        db_table = "mel_views"
        ordering = ["project_id", "user_id"]
        constraints = [
            models.UniqueConstraint(fields=["user", "project"], name="uq_views"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} views {self.project_id}"
