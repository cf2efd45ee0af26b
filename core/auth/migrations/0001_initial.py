from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserAccount",
            fields=[
                (
                    "name",
                    models.CharField(
                        max_length=320,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("salt", models.BinaryField()),
                ("password", models.BinaryField(blank=True, default=b"")),
                ("is_manager", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "mel_users",
                "ordering": ["name"],
            },
        ),
    ]
