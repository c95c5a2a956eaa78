"""
Common Value Objects

- DateRange: Represents a requested rental period (book date to purchase date)
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a rental period from start_date to end_date, both inclusive.
    A one-day rental has start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # Validation
        if self.start_date > self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must not be after end date ({self.end_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Both ends are inclusive, so ranges that share a boundary day overlap.

        Examples:
            - DateRange(1, 5) overlaps with DateRange(3, 4) -> True
            - DateRange(1, 5) overlaps with DateRange(5, 8) -> True (shared day)
            - DateRange(1, 5) overlaps with DateRange(6, 10) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        # Overlap formula: start1 <= end2 AND end1 >= start2
        return (self.start_date <= other.end_date and
                self.end_date >= other.start_date)

    def contains(self, check_date: date) -> bool:
        """Check if a date is within this range (inclusive on both ends)."""
        return self.start_date <= check_date <= self.end_date

    def __len__(self) -> int:
        """Return the number of rental days, counting both ends."""
        return (self.end_date - self.start_date).days + 1

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
