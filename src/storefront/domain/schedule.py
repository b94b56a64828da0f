"""Calendar rules: opening hours and the holiday discount.

Both rules take the instant to evaluate as an argument. Reading the clock
is the caller's job (see ``storefront.infrastructure.collaborators.Clock``).
"""

from __future__ import annotations

from datetime import datetime

OPEN_HOUR = 8
CLOSE_HOUR = 20

HOLIDAY_MONTH = 12
HOLIDAY_DAY = 25
HOLIDAY_DISCOUNT = 0.2


def is_within_hours(
    moment: datetime,
    *,
    open_hour: int = OPEN_HOUR,
    close_hour: int = CLOSE_HOUR,
) -> bool:
    """Whole-hour window: ``open_hour`` inclusive, ``close_hour`` exclusive.

    Examples:
        >>> is_within_hours(datetime(2024, 4, 1, 8, 0))
        True
        >>> is_within_hours(datetime(2024, 4, 1, 20, 1))
        False
    """
    return open_hour <= moment.hour < close_hour


def holiday_discount(
    moment: datetime,
    *,
    month: int = HOLIDAY_MONTH,
    day: int = HOLIDAY_DAY,
    rate: float = HOLIDAY_DISCOUNT,
) -> float:
    """Return *rate* for any time on the holiday, ``0`` on every other date."""
    if moment.month == month and moment.day == day:
        return rate
    return 0
