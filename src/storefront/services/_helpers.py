"""Shared service-layer helper functions."""

from __future__ import annotations

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """Await *value* if it is awaitable, else return it unchanged.

    Collaborators may be coroutines or plain callables; a gateway that
    answers synchronously is not an error.
    """
    if inspect.isawaitable(value):
        return await value
    return value


def format_money(amount: float, symbol: str = "$") -> str:
    """Format *amount* with a currency symbol; whole amounts drop the cents.

    Examples:
        >>> format_money(15)
        '$15'
        >>> format_money(15.5)
        '$15.50'
        >>> format_money(3, "€")
        '€3'
    """
    if float(amount).is_integer():
        return f"{symbol}{int(amount)}"
    return f"{symbol}{amount:.2f}"


def format_days(days: int) -> str:
    """``"N Days"``, whatever N is."""
    return f"{days} Days"
