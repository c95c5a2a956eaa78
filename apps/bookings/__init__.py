"""Bookings app package.

This app encapsulates the car booking domain: the booking model, the
availability check over booked date ranges, booking creation and status
changes, and the JSON endpoints that expose them. Every endpoint answers
with HTTP 200 and a ``success`` flag; failures carry a ``message``.
"""
