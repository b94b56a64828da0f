"""Pure validators for user, pricing, and account input.

Boolean predicates answer yes/no questions. Validators that can fail for
more than one reason return a :class:`ValidationResult` whose ``errors``
name each failed rule, so callers never have to parse a string to tell
success from failure.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from storefront.domain.coupons import find_coupon

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

PROFILE_NAME_MIN_LENGTH = 3
PROFILE_NAME_MAX_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 100

PASSWORD_MIN_LENGTH = 8

LEGAL_DRIVING_AGE: dict[str, int] = {
    "US": 16,
    "UK": 17,
}

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation check.

    ``value`` carries the computed output of validators that also transform
    their input (for example the discounted price).
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    value: Any = None

    @property
    def message(self) -> str:
        if self.valid:
            return "Validation successful"
        return ", ".join(self.errors)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_valid_username(username: Any) -> bool:
    """Usernames are strings of 5 to 15 characters inclusive."""
    if not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def is_price_in_range(price: float, minimum: float, maximum: float) -> bool:
    return minimum <= price <= maximum


def is_strong_password(password: str) -> bool:
    """At least 8 characters with an uppercase letter, a lowercase letter and a digit."""
    if len(password) < PASSWORD_MIN_LENGTH:
        return False
    if not re.search(r"[A-Z]", password):
        return False
    if not re.search(r"[a-z]", password):
        return False
    return re.search(r"\d", password) is not None


def is_valid_email(email: Any) -> bool:
    """Check *email* has the ``local@domain.tld`` shape with no whitespace.

    Examples:
        >>> is_valid_email("ahmed.eid3@outlook.com")
        True
        >>> is_valid_email("as")
        False
    """
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


# ---------------------------------------------------------------------------
# Result-returning validators
# ---------------------------------------------------------------------------


def calculate_discount(price: Any, discount_code: Any) -> ValidationResult:
    """Apply a coupon to *price*.

    Unknown codes are not an error: the price is returned unchanged.
    """
    if not _is_number(price) or price <= 0:
        return ValidationResult(valid=False, errors=["Invalid price"])
    if not isinstance(discount_code, str):
        return ValidationResult(valid=False, errors=["Invalid discount code"])

    coupon = find_coupon(discount_code)
    if coupon is None:
        return ValidationResult(
            valid=True,
            warnings=[f"Unknown discount code: {discount_code}"],
            value=price,
        )
    return ValidationResult(valid=True, value=round(price - price * coupon.discount, 2))


def validate_user_input(username: Any, age: Any) -> ValidationResult:
    """Validate a profile name and age together, reporting every failure."""
    errors: list[str] = []

    if (
        not isinstance(username, str)
        or not PROFILE_NAME_MIN_LENGTH <= len(username) <= PROFILE_NAME_MAX_LENGTH
    ):
        errors.append("Invalid username")

    if not _is_number(age) or not MIN_AGE <= age <= MAX_AGE:
        errors.append("Invalid age")

    return ValidationResult(valid=not errors, errors=errors)


def can_drive(age: int, country_code: str) -> ValidationResult:
    """Check *age* against the legal driving age of *country_code*."""
    minimum = LEGAL_DRIVING_AGE.get(country_code)
    if minimum is None:
        return ValidationResult(valid=False, errors=[f"Invalid country code: {country_code}"])
    if age < minimum:
        return ValidationResult(
            valid=False,
            errors=[f"Under the legal driving age of {minimum} in {country_code}"],
        )
    return ValidationResult(valid=True)
