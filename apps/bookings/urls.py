"""URL routing for the booking domain (namespace: bookings)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    BookingDetailView,
    ChangeBookingStatusView,
    CheckAvailabilityView,
    CreateBookingView,
    OwnerBookingsView,
    UserBookingsView,
)

app_name = "bookings"

urlpatterns = [
    path("check-availability/", CheckAvailabilityView.as_view(), name="check-availability"),
    path("create/", CreateBookingView.as_view(), name="create"),
    path("user/", UserBookingsView.as_view(), name="user-bookings"),
    path("owner/", OwnerBookingsView.as_view(), name="owner-bookings"),
    path("change-status/", ChangeBookingStatusView.as_view(), name="change-status"),
    path("<int:booking_id>/", BookingDetailView.as_view(), name="detail"),
]
