"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.cars.models import Car
from apps.users.models import User


class BookingAPITestCase(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            role=User.RoleChoices.OWNER,
        )
        self.renter = User.objects.create_user(
            email="renter@example.com",
            password="RenterPass123",
        )
        self.car = Car.objects.create(
            owner=self.owner,
            brand="Toyota",
            model="Corolla",
            year=2022,
            price=Decimal("120.00"),
            location="NYC",
        )
        self.client.force_authenticate(self.renter)

    def _book(self, book_date: date, purchase_date: date, car: Car | None = None, **extra) -> Booking:
        car = car or self.car
        return Booking.objects.create(
            car=car,
            user=extra.pop("user", self.renter),
            owner=car.owner,
            book_date=book_date,
            purchase_date=purchase_date,
            price=car.price,
            **extra,
        )


class CheckAvailabilityTests(BookingAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.url = reverse("bookings:check-availability")

    def _search(self, location: str, book_date: str, purchase_date: str):
        return self.client.post(
            self.url,
            {"location": location, "bookDate": book_date, "purchaseDate": purchase_date},
            format="json",
        )

    def test_overlapping_booking_hides_car(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 5))

        response = self._search("NYC", "2024-06-03", "2024-06-04")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["availableCars"], [])

    def test_free_car_is_listed_with_requested_dates(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 5))

        response = self._search("NYC", "2024-06-06", "2024-06-10")

        self.assertTrue(response.data["success"], response.data)
        cars = response.data["availableCars"]
        self.assertEqual(len(cars), 1)
        self.assertEqual(cars[0]["id"], self.car.id)
        self.assertTrue(cars[0]["isAvailable"])
        self.assertEqual(cars[0]["requestedDates"]["dateRange"], "June 6, 2024 to June 10, 2024")
        self.assertEqual(
            response.data["searchDates"],
            {
                "bookDate": "June 6, 2024",
                "purchaseDate": "June 10, 2024",
                "dateRange": "June 6, 2024 to June 10, 2024",
            },
        )

    def test_search_keeps_fetch_order_and_skips_unlisted_cars(self) -> None:
        second = Car.objects.create(owner=self.owner, brand="Honda", model="Civic", price=Decimal("90.00"), location="NYC")
        Car.objects.create(owner=self.owner, brand="Ford", model="Focus", price=Decimal("80.00"), location="Boston")
        Car.objects.create(
            owner=self.owner,
            brand="Kia",
            model="Rio",
            price=Decimal("70.00"),
            location="NYC",
            is_available=False,
        )
        third = Car.objects.create(owner=self.owner, brand="Mazda", model="3", price=Decimal("95.00"), location="NYC")
        self._book(date(2024, 6, 1), date(2024, 6, 5), car=second)

        response = self._search("NYC", "2024-06-02", "2024-06-03")

        self.assertEqual([car["id"] for car in response.data["availableCars"]], [self.car.id, third.id])

    def test_search_does_not_require_authentication(self) -> None:
        self.client.force_authenticate(None)

        response = self._search("NYC", "2024-06-06", "2024-06-10")

        self.assertTrue(response.data["success"], response.data)
        self.assertEqual(len(response.data["availableCars"]), 1)

    def test_missing_field_is_reported_in_payload(self) -> None:
        response = self.client.post(self.url, {"location": "NYC", "purchaseDate": "2024-06-10"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["success"])
        self.assertIn("bookDate", response.data["message"])

    def test_inverted_range_is_rejected(self) -> None:
        response = self._search("NYC", "2024-06-10", "2024-06-01")

        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["message"], "purchaseDate must not be before bookDate.")

    def test_storage_failure_is_reported_in_payload(self) -> None:
        with mock.patch(
            "apps.bookings.services.search_available_cars",
            side_effect=DatabaseError("connection refused"),
        ):
            with self.assertLogs("apps.bookings.views", level="ERROR"):
                response = self._search("NYC", "2024-06-06", "2024-06-10")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": False, "message": "connection refused"})


class CreateBookingTests(BookingAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.url = reverse("bookings:create")

    def _payload(self, book_date: str, purchase_date: str, car_id: int | None = None) -> dict:
        return {"car": car_id or self.car.id, "bookDate": book_date, "purchaseDate": purchase_date}

    def test_renter_can_create_booking(self) -> None:
        response = self.client.post(self.url, self._payload("2024-06-01", "2024-06-05"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"], response.data)
        self.assertEqual(response.data["message"], "Booking Created Successfully")
        booking = response.data["booking"]
        self.assertEqual(booking["car"], self.car.id)
        self.assertEqual(booking["user"], self.renter.id)
        self.assertEqual(booking["owner"], self.owner.id)
        self.assertEqual(booking["price"], "120.00")
        self.assertEqual(booking["status"], Booking.Status.PENDING)
        self.assertEqual(booking["bookingDates"]["dateRange"], "June 1, 2024 to June 5, 2024")
        self.assertEqual(Booking.objects.count(), 1)

    def test_overlapping_booking_is_rejected(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 5))

        response = self.client.post(self.url, self._payload("2024-06-03", "2024-06-08"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"success": False, "message": "Car is not available for the selected dates"},
        )
        self.assertEqual(Booking.objects.count(), 1)

    def test_shared_boundary_day_counts_as_overlap(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 5))

        response = self.client.post(self.url, self._payload("2024-06-05", "2024-06-07"), format="json")

        self.assertFalse(response.data["success"])

    def test_non_overlapping_bookings_both_succeed(self) -> None:
        first = self.client.post(self.url, self._payload("2024-06-01", "2024-06-05"), format="json")
        second = self.client.post(self.url, self._payload("2024-06-06", "2024-06-10"), format="json")

        self.assertTrue(first.data["success"], first.data)
        self.assertTrue(second.data["success"], second.data)
        self.assertEqual(Booking.objects.filter(car=self.car).count(), 2)

    def test_cancelled_booking_still_blocks_dates(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 5), status=Booking.Status.CANCELLED)

        response = self.client.post(self.url, self._payload("2024-06-02", "2024-06-03"), format="json")

        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["message"], "Car is not available for the selected dates")

    def test_unknown_car_is_reported(self) -> None:
        response = self.client.post(self.url, self._payload("2024-06-01", "2024-06-05", car_id=9999), format="json")

        self.assertEqual(response.data, {"success": False, "message": "Car not found"})

    def test_anonymous_request_is_reported_in_payload(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.post(self.url, self._payload("2024-06-01", "2024-06-05"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["success"])
        self.assertEqual(Booking.objects.count(), 0)


class ListBookingsTests(BookingAPITestCase):
    def test_user_bookings_newest_first_with_car(self) -> None:
        older = self._book(date(2024, 6, 1), date(2024, 6, 2))
        newer = self._book(date(2024, 7, 1), date(2024, 7, 2))
        other_renter = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self._book(date(2024, 8, 1), date(2024, 8, 2), user=other_renter)

        response = self.client.get(reverse("bookings:user-bookings"))

        self.assertTrue(response.data["success"], response.data)
        bookings = response.data["bookings"]
        self.assertEqual([b["id"] for b in bookings], [newer.id, older.id])
        self.assertEqual(bookings[0]["car"]["brand"], "Toyota")
        self.assertEqual(bookings[0]["bookingDates"]["bookDate"], "July 1, 2024")

    def test_owner_bookings_require_owner_role(self) -> None:
        self._book(date(2024, 6, 1), date(2024, 6, 2))

        response = self.client.get(reverse("bookings:owner-bookings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": False, "message": "Unauthorized"})

    def test_owner_sees_bookings_with_renter(self) -> None:
        booking = self._book(date(2024, 6, 1), date(2024, 6, 2))
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("bookings:owner-bookings"))

        self.assertTrue(response.data["success"], response.data)
        self.assertEqual(len(response.data["bookings"]), 1)
        listed = response.data["bookings"][0]
        self.assertEqual(listed["id"], booking.id)
        self.assertEqual(listed["user"]["email"], self.renter.email)
        self.assertNotIn("password", listed["user"])
        self.assertEqual(listed["car"]["id"], self.car.id)


class ChangeBookingStatusTests(BookingAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.url = reverse("bookings:change-status")
        self.booking = self._book(date(2024, 6, 1), date(2024, 6, 5))

    def test_owner_can_confirm_booking(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.url, {"bookingId": self.booking.id, "status": Booking.Status.CONFIRMED}, format="json"
        )

        self.assertTrue(response.data["success"], response.data)
        self.assertEqual(response.data["message"], "Status Updated")
        self.assertEqual(response.data["booking"]["status"], Booking.Status.CONFIRMED)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.Status.CONFIRMED)

    def test_any_status_value_is_accepted(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.url, {"bookingId": self.booking.id, "status": "on-hold"}, format="json")

        self.assertTrue(response.data["success"], response.data)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, "on-hold")

    def test_renter_cannot_change_status(self) -> None:
        response = self.client.post(
            self.url, {"bookingId": self.booking.id, "status": Booking.Status.CONFIRMED}, format="json"
        )

        self.assertEqual(response.data, {"success": False, "message": "Unauthorized"})
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.Status.PENDING)

    def test_missing_booking_is_reported(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.url, {"bookingId": 9999, "status": "confirmed"}, format="json")

        self.assertEqual(response.data, {"success": False, "message": "Booking not found"})


class BookingDetailTests(BookingAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.booking = self._book(date(2024, 6, 1), date(2024, 6, 5))
        self.url = reverse("bookings:detail", args=[self.booking.id])

    def test_renter_and_owner_can_read_booking(self) -> None:
        for user in (self.renter, self.owner):
            with self.subTest(user=user.email):
                self.client.force_authenticate(user)

                response = self.client.get(self.url)

                self.assertTrue(response.data["success"], response.data)
                self.assertEqual(response.data["booking"]["owner"]["email"], self.owner.email)
                self.assertEqual(response.data["booking"]["user"]["email"], self.renter.email)

    def test_stranger_cannot_read_booking(self) -> None:
        stranger = User.objects.create_user(email="stranger@example.com", password="StrangerPass123")
        self.client.force_authenticate(stranger)

        response = self.client.get(self.url)

        self.assertEqual(response.data, {"success": False, "message": "Unauthorized"})
