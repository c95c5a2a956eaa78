"""Domain apps of the CarRental project."""
