"""Serializers for car data embedded in booking responses."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Car


class CarSerializer(serializers.ModelSerializer):
    owner = serializers.ReadOnlyField(source="owner_id")
    seatingCapacity = serializers.ReadOnlyField(source="seating_capacity")
    fuelType = serializers.ReadOnlyField(source="fuel_type")
    isAvailable = serializers.ReadOnlyField(source="is_available")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Car
        fields = [
            "id",
            "owner",
            "brand",
            "model",
            "year",
            "category",
            "seatingCapacity",
            "fuelType",
            "transmission",
            "price",
            "location",
            "description",
            "isAvailable",
            "createdAt",
        ]
        read_only_fields = fields
