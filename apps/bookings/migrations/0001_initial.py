from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("cars", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("book_date", models.DateField(help_text="First day of the rental.")),
                ("purchase_date", models.DateField(help_text="Last day of the rental.")),
                ("status", models.CharField(default="pending", max_length=32)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Car price at booking time.",
                        max_digits=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "car",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="cars.car",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        help_text="Owner of the car at booking time.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="owned_bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="Renter who made the booking.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["car", "book_date", "purchase_date"], name="booking_car_dates_idx"),
                    models.Index(fields=["user", "created_at"], name="booking_user_created_idx"),
                    models.Index(fields=["owner", "created_at"], name="booking_owner_created_idx"),
                ],
            },
        ),
    ]
