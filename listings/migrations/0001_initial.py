from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Property",
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
                    "external_id",
                    models.CharField(
                        blank=True,
                        max_length=100,
                        unique=True,
                        verbose_name="External ID",
                    ),
                ),
                ("title", models.CharField(blank=True, max_length=120, verbose_name="Title")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "property_type",
                    models.CharField(
                        choices=[
                            ("residential", "Residential"),
                            ("commercial", "Commercial"),
                            ("plot", "Plot/Land"),
                            ("agricultural", "Agricultural"),
                            ("pg", "PG/Hostel"),
                        ],
                        max_length=20,
                        verbose_name="Property type",
                    ),
                ),
                ("subcategory", models.CharField(blank=True, max_length=40, verbose_name="Subcategory")),
                (
                    "price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=14,
                        null=True,
                        verbose_name="Price",
                    ),
                ),
                ("address", models.CharField(blank=True, max_length=255, verbose_name="Address")),
                ("is_archived", models.BooleanField(default=False, verbose_name="Archived")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-updated_at", "-id"],
            },
        ),
    ]
