"""Serializers for the booking domain.

Input serializers read the camelCase request bodies used by the web
client and hand the services plain values plus a ``DateRange``.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.cars.serializers import CarSerializer
from apps.users.serializers import UserSerializer
from shared.domain.value_objects import DateRange

from .formatting import booking_dates
from .models import Booking


class DateRangeInputSerializer(serializers.Serializer):
    bookDate = serializers.DateField(source="book_date")
    purchaseDate = serializers.DateField(source="purchase_date")

    def validate(self, attrs):  # type: ignore
        try:
            attrs["date_range"] = DateRange(attrs["book_date"], attrs["purchase_date"])
        except ValueError:
            raise serializers.ValidationError("purchaseDate must not be before bookDate.")
        return attrs


class AvailabilitySearchSerializer(DateRangeInputSerializer):
    location = serializers.CharField(max_length=100)


class BookingCreateSerializer(DateRangeInputSerializer):
    car = serializers.IntegerField(min_value=1)


class BookingStatusSerializer(serializers.Serializer):
    bookingId = serializers.IntegerField(source="booking_id", min_value=1)
    status = serializers.CharField(max_length=32)


class AvailableCarSerializer(CarSerializer):
    """Car found free for the searched dates."""

    requestedDates = serializers.SerializerMethodField()

    class Meta(CarSerializer.Meta):
        fields = CarSerializer.Meta.fields + ["requestedDates"]
        read_only_fields = fields

    def get_requestedDates(self, obj):  # type: ignore
        date_range: DateRange = self.context["date_range"]
        return booking_dates(date_range.start_date, date_range.end_date)


class BookingSerializer(serializers.ModelSerializer):
    """Booking with related records as ids."""

    car = serializers.ReadOnlyField(source="car_id")
    user = serializers.ReadOnlyField(source="user_id")
    owner = serializers.ReadOnlyField(source="owner_id")
    bookDate = serializers.DateField(source="book_date", read_only=True)
    purchaseDate = serializers.DateField(source="purchase_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    bookingDates = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "car",
            "user",
            "owner",
            "bookDate",
            "purchaseDate",
            "status",
            "price",
            "createdAt",
            "updatedAt",
            "bookingDates",
        ]
        read_only_fields = fields

    def get_bookingDates(self, obj: Booking):  # type: ignore
        return booking_dates(obj.book_date, obj.purchase_date)


class UserBookingSerializer(BookingSerializer):
    """Renter's view: the booked car is embedded."""

    car = CarSerializer(read_only=True)


class OwnerBookingSerializer(BookingSerializer):
    """Owner's view: the car and the renter are embedded."""

    car = CarSerializer(read_only=True)
    user = UserSerializer(read_only=True)


class BookingDetailSerializer(OwnerBookingSerializer):
    owner = UserSerializer(read_only=True)
