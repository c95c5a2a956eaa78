"""Users app package.

Defines the custom user model used as AUTH_USER_MODEL. A user is either a
renter (``user``) or a car owner (``owner``); owners see and manage the
bookings made on their cars.
"""
