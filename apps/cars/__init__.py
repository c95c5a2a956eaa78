"""Cars app package.

This app holds the rentable car listing. Cars are created and edited
through the admin; the booking domain only reads them.
"""
