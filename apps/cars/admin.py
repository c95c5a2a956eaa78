"""Admin registration for cars."""

from __future__ import annotations

from django.contrib import admin

from .models import Car


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = (
        "brand",
        "model",
        "year",
        "owner",
        "location",
        "price",
        "is_available",
        "created_at",
    )
    list_filter = ("is_available", "location", "transmission", "category")
    search_fields = ("brand", "model", "location", "owner__email")
    list_select_related = ("owner",)
    readonly_fields = ("created_at", "updated_at")
