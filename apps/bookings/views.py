"""API views for the booking domain.

Every view answers with HTTP 200. Success payloads carry
``"success": True``; any failure, whatever its cause, becomes
``{"success": False, "message": ...}`` in ``BookingAPIView.handle_exception``.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError  # type: ignore
from rest_framework import exceptions, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services
from .exceptions import (
    BookingError,
    BookingValidationError,
    StorageError,
    UnauthorizedError,
)
from .formatting import booking_dates, format_date_range
from .serializers import (
    AvailabilitySearchSerializer,
    AvailableCarSerializer,
    BookingCreateSerializer,
    BookingDetailSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    OwnerBookingSerializer,
    UserBookingSerializer,
)

logger = logging.getLogger(__name__)


def _flatten_errors(detail) -> str:
    """Turn DRF error details into one line, e.g. ``"bookDate: This field is required."``."""

    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten_errors(detail["detail"])
        parts = []
        for field, errors in detail.items():
            text = _flatten_errors(errors)
            parts.append(text if field == "non_field_errors" else f"{field}: {text}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return " ".join(_flatten_errors(item) for item in detail)
    return str(detail)


def as_booking_error(exc: Exception) -> BookingError | None:
    """Map known failures onto the booking error types, None if unexpected."""

    if isinstance(exc, BookingError):
        return exc
    if isinstance(exc, exceptions.ValidationError):
        return BookingValidationError(_flatten_errors(exc.detail))
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed, exceptions.PermissionDenied)):
        return UnauthorizedError(_flatten_errors(exc.detail))
    if isinstance(exc, exceptions.APIException):
        return BookingError(_flatten_errors(exc.detail))
    if isinstance(exc, DatabaseError):
        return StorageError(str(exc) or None)
    return None


class BookingAPIView(APIView):
    """Base view reporting failures in the payload instead of the status code."""

    def handle_exception(self, exc):  # type: ignore
        error = as_booking_error(exc)
        if error is None:
            logger.error("Unexpected error in %s: %s", type(self).__name__, exc, exc_info=True)
            message = str(exc) or type(exc).__name__
        else:
            if isinstance(error, StorageError):
                logger.error("Storage failure in %s: %s", type(self).__name__, exc, exc_info=True)
            else:
                logger.info("%s rejected request: %s", type(self).__name__, error.message)
            message = error.message
        return Response({"success": False, "message": message}, status=status.HTTP_200_OK)


class CheckAvailabilityView(BookingAPIView):
    """Cars at a location that are free for the requested dates."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = AvailabilitySearchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        date_range = data["date_range"]

        logger.info(
            "Checking availability for dates: %s",
            format_date_range(date_range.start_date, date_range.end_date),
        )
        cars = services.search_available_cars(data["location"], date_range)

        return Response(
            {
                "success": True,
                "availableCars": AvailableCarSerializer(
                    cars, many=True, context={"date_range": date_range}
                ).data,
                "searchDates": booking_dates(date_range.start_date, date_range.end_date),
            }
        )


class CreateBookingView(BookingAPIView):
    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        date_range = data["date_range"]

        logger.info(
            "Creating booking for dates: %s",
            format_date_range(date_range.start_date, date_range.end_date),
        )
        booking = services.create_booking(request.user, data["car"], date_range)

        return Response(
            {
                "success": True,
                "message": "Booking Created Successfully",
                "booking": BookingSerializer(booking).data,
            }
        )


class UserBookingsView(BookingAPIView):
    def get(self, request):  # type: ignore
        bookings = services.list_user_bookings(request.user)
        return Response({"success": True, "bookings": UserBookingSerializer(bookings, many=True).data})


class OwnerBookingsView(BookingAPIView):
    def get(self, request):  # type: ignore
        bookings = services.list_owner_bookings(request.user)
        return Response({"success": True, "bookings": OwnerBookingSerializer(bookings, many=True).data})


class ChangeBookingStatusView(BookingAPIView):
    def post(self, request):  # type: ignore
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking = services.change_booking_status(request.user, data["booking_id"], data["status"])

        return Response(
            {
                "success": True,
                "message": "Status Updated",
                "booking": BookingSerializer(booking).data,
            }
        )


class BookingDetailView(BookingAPIView):
    def get(self, request, booking_id: int):  # type: ignore
        booking = services.get_booking_details(request.user, booking_id)
        return Response({"success": True, "booking": BookingDetailSerializer(booking).data})
