"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "car",
        "user",
        "owner",
        "status",
        "book_date",
        "purchase_date",
        "price",
        "created_at",
    )
    list_filter = ("status", "book_date", "purchase_date")
    search_fields = ("car__brand", "car__model", "user__email", "owner__email")
    list_select_related = ("car", "user", "owner")
    readonly_fields = (
        "created_at",
        "updated_at",
        "price",
    )
