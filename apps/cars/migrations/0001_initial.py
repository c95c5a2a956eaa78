from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Car",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("brand", models.CharField(max_length=100)),
                ("model", models.CharField(max_length=100)),
                ("year", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("category", models.CharField(blank=True, max_length=50)),
                ("seating_capacity", models.PositiveSmallIntegerField(default=4)),
                ("fuel_type", models.CharField(blank=True, max_length=30)),
                (
                    "transmission",
                    models.CharField(
                        choices=[
                            ("manual", "Manual"),
                            ("automatic", "Automatic"),
                            ("semi_automatic", "Semi-automatic"),
                        ],
                        default="automatic",
                        max_length=20,
                    ),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Rental price copied onto each booking.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("location", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True)),
                (
                    "is_available",
                    models.BooleanField(
                        default=True,
                        help_text="Listed for rent at all. Date availability is checked against bookings.",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cars",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Car",
                "verbose_name_plural": "Cars",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["location", "is_available"], name="car_location_available_idx"),
                    models.Index(fields=["owner"], name="car_owner_idx"),
                ],
            },
        ),
    ]
