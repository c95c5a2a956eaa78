"""Domain services for booking workflows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Exists, OuterRef, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.cars.models import Car
from shared.domain.value_objects import DateRange

from .exceptions import BookingConflictError, NotFoundError, UnauthorizedError
from .formatting import format_date_range
from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.users.models import CustomUser

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def overlapping_bookings(car, date_range: DateRange) -> QuerySet:
    """Bookings of ``car`` that share at least one day with ``date_range``.

    ``car`` may be a Car, a primary key or an ``OuterRef``. Both ends of
    both ranges are inclusive. Statuses listed in
    ``settings.BOOKING_NON_BLOCKING_STATUSES`` are ignored; by default
    none are, so even cancelled bookings keep their dates taken.
    """

    bookings_qs = Booking.objects.filter(
        car=car,
        book_date__lte=date_range.end_date,
        purchase_date__gte=date_range.start_date,
    )

    non_blocking_statuses = getattr(settings, "BOOKING_NON_BLOCKING_STATUSES", ())
    if non_blocking_statuses:
        bookings_qs = bookings_qs.exclude(status__in=non_blocking_statuses)
    return bookings_qs


def is_car_available(car, date_range: DateRange) -> bool:
    return not overlapping_bookings(car, date_range).exists()


def search_available_cars(location: str, date_range: DateRange) -> list[Car]:
    """Listed cars at ``location`` that are free for the whole range.

    The availability of every car is evaluated in the same query, and the
    result keeps the fetch order (car id ascending).
    """

    cars = (
        Car.objects.filter(location=location, is_available=True)
        .annotate(is_booked=Exists(overlapping_bookings(OuterRef("pk"), date_range)))
        .filter(is_booked=False)
        .order_by("pk")
    )
    return list(cars)


@transaction.atomic
def create_booking(user: "CustomUser", car_id: int, date_range: DateRange) -> Booking:
    """Book ``car_id`` for ``user``.

    The car row is locked for the rest of the transaction, so two
    concurrent requests for the same car run their check and insert one
    after the other on databases that support row locks.
    """

    try:
        car = _lock_queryset_if_possible(Car.objects.filter(pk=car_id)).get()
    except Car.DoesNotExist:
        raise NotFoundError("Car not found")

    if not is_car_available(car, date_range):
        raise BookingConflictError()

    booking = Booking.objects.create(
        car=car,
        user=user,
        owner_id=car.owner_id,
        book_date=date_range.start_date,
        purchase_date=date_range.end_date,
        price=car.price,
    )
    logger.info(
        "Booking %s created for car %s by user %s (%s)",
        booking.pk,
        car.pk,
        user.pk,
        format_date_range(booking.book_date, booking.purchase_date),
    )
    return booking


def list_user_bookings(user: "CustomUser") -> QuerySet:
    """Bookings made by ``user``, newest first."""

    return Booking.objects.filter(user=user).select_related("car").order_by("-created_at", "-id")


def list_owner_bookings(user: "CustomUser") -> QuerySet:
    """Bookings on cars owned by ``user``, newest first.

    Only users with the owner role may list them; the role is checked
    before any query runs.
    """

    if not user.is_owner():
        raise UnauthorizedError()

    return (
        Booking.objects.filter(owner=user)
        .select_related("car", "user")
        .order_by("-created_at", "-id")
    )


def change_booking_status(user: "CustomUser", booking_id: int, status: str) -> Booking:
    """Set ``status`` on a booking owned by ``user``.

    Any status string is accepted.
    """

    try:
        booking = Booking.objects.get(pk=booking_id)
    except Booking.DoesNotExist:
        raise NotFoundError("Booking not found")

    if booking.owner_id != user.pk:
        raise UnauthorizedError()

    booking.status = status
    booking.save(update_fields=["status", "updated_at"])
    logger.info(
        "Booking %s status set to %r for dates: %s",
        booking.pk,
        status,
        format_date_range(booking.book_date, booking.purchase_date),
    )
    return booking


def get_booking_details(user: "CustomUser", booking_id: int) -> Booking:
    """Booking visible to its renter and to the car owner only."""

    try:
        booking = Booking.objects.select_related("car", "user", "owner").get(pk=booking_id)
    except Booking.DoesNotExist:
        raise NotFoundError("Booking not found")

    if user.pk not in (booking.user_id, booking.owner_id):
        raise UnauthorizedError()
    return booking
