"""Car domain models for CarRental."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Car(models.Model):
    """A car listed for rent by its owner."""

    class Transmission(models.TextChoices):
        MANUAL = "manual", _("Manual")
        AUTOMATIC = "automatic", _("Automatic")
        SEMI_AUTOMATIC = "semi_automatic", _("Semi-automatic")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cars",
    )
    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveSmallIntegerField(null=True, blank=True)
    category = models.CharField(max_length=50, blank=True)
    seating_capacity = models.PositiveSmallIntegerField(default=4)
    fuel_type = models.CharField(max_length=30, blank=True)
    transmission = models.CharField(
        max_length=20,
        choices=Transmission.choices,
        default=Transmission.AUTOMATIC,
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Rental price copied onto each booking."),
    )
    location = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    is_available = models.BooleanField(
        default=True,
        help_text=_("Listed for rent at all. Date availability is checked against bookings."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Car")
        verbose_name_plural = _("Cars")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["location", "is_available"], name="car_location_available_idx"),
            models.Index(fields=["owner"], name="car_owner_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.brand} {self.model} ({self.location})"
