import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("core_auth", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigIntegerField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=127)),
                ("percentage", models.PositiveSmallIntegerField(default=0)),
                ("description", models.CharField(max_length=511)),
                ("updated", models.DateField()),
                ("version", models.IntegerField(default=0)),
                ("flag", models.BooleanField(default=False)),
                ("flag_version", models.IntegerField(default=0)),
            ],
            options={
                "db_table": "mel_projects",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(percentage__lte=100),
                        name="ck_project_percentage",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Deliverable",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("deliverable_id", models.BigIntegerField()),
                ("name", models.CharField(max_length=127)),
                ("due", models.CharField(blank=True, default="", max_length=64)),
                ("percentage", models.PositiveSmallIntegerField(default=0)),
                ("description", models.CharField(max_length=511)),
                (
                    "project",
                    models.ForeignKey(
                        db_column="pid",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="deliverables",
                        to="core_projects_store.project",
                    ),
                ),
            ],
            options={
                "db_table": "mel_deliverables",
                "ordering": ["project_id", "deliverable_id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("project", "deliverable_id"),
                        name="uq_deliverable_project",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(percentage__lte=100),
                        name="ck_deliverable_percentage",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Ownership",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        db_column="pid",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="owners",
                        to="core_projects_store.project",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="name",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="owned_projects",
                        to="core_auth.useraccount",
                    ),
                ),
            ],
            options={
                "db_table": "mel_owns",
                "ordering": ["project_id", "user_id"],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "project"), name="uq_owns")
                ],
            },
        ),
        migrations.CreateModel(
            name="Viewing",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        db_column="pid",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="viewers",
                        to="core_projects_store.project",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="name",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="viewed_projects",
                        to="core_auth.useraccount",
                    ),
                ),
            ],
            options={
                "db_table": "mel_views",
                "ordering": ["project_id", "user_id"],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "project"), name="uq_views")
                ],
            },
        ),
    ]
