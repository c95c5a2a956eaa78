"""Booking domain models for CarRental."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A reservation of a car for a date range by a renter."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")

    car = models.ForeignKey(
        "cars.Car",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
        help_text=_("Renter who made the booking."),
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owned_bookings",
        help_text=_("Owner of the car at booking time."),
    )
    book_date = models.DateField(help_text=_("First day of the rental."))
    purchase_date = models.DateField(help_text=_("Last day of the rental."))
    # Owners may set any status string; Status lists the values the UI knows.
    status = models.CharField(max_length=32, default=Status.PENDING)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Car price at booking time."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["car", "book_date", "purchase_date"], name="booking_car_dates_idx"),
            models.Index(fields=["user", "created_at"], name="booking_user_created_idx"),
            models.Index(fields=["owner", "created_at"], name="booking_owner_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for car {self.car_id}"
