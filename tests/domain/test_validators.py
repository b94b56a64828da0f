"""Tests for the pure validators."""

import pytest

from storefront.domain.validators import (
    LEGAL_DRIVING_AGE,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    ValidationResult,
    calculate_discount,
    can_drive,
    is_price_in_range,
    is_strong_password,
    is_valid_email,
    is_valid_username,
    validate_user_input,
)


class TestCalculateDiscount:
    def test_known_codes(self) -> None:
        assert calculate_discount(10, "SAVE10").value == 9
        assert calculate_discount(10, "SAVE20").value == 8

    def test_non_numeric_price(self) -> None:
        vr = calculate_discount("10", "SAVE10")
        assert vr.valid is False
        assert "invalid" in vr.message.lower()

    @pytest.mark.parametrize("price", [0, -10])
    def test_non_positive_price(self, price: int) -> None:
        vr = calculate_discount(price, "SAVE10")
        assert vr.valid is False
        assert vr.errors == ["Invalid price"]

    def test_bool_is_not_a_price(self) -> None:
        assert calculate_discount(True, "SAVE10").valid is False

    def test_non_string_code(self) -> None:
        vr = calculate_discount(10, 41)
        assert vr.valid is False
        assert vr.errors == ["Invalid discount code"]

    def test_unknown_code_keeps_price(self) -> None:
        vr = calculate_discount(10, "INVALID")
        assert vr.valid is True
        assert vr.value == 10
        assert vr.warnings


class TestValidateUserInput:
    def test_valid_input(self) -> None:
        vr = validate_user_input("Ahmed", 31)
        assert vr.valid is True
        assert "success" in vr.message.lower()

    @pytest.mark.parametrize("username", [15, "ah", "a" * 256])
    def test_invalid_username(self, username: object) -> None:
        vr = validate_user_input(username, 31)
        assert vr.errors == ["Invalid username"]

    @pytest.mark.parametrize("age", ["31", 17, 101])
    def test_invalid_age(self, age: object) -> None:
        vr = validate_user_input("Ahmed", age)
        assert vr.errors == ["Invalid age"]

    def test_both_invalid(self) -> None:
        vr = validate_user_input("", 3)
        assert "invalid username" in vr.message.lower()
        assert "invalid age" in vr.message.lower()


class TestIsValidUsername:
    def test_too_short(self) -> None:
        assert is_valid_username("a" * (USERNAME_MIN_LENGTH - 1)) is False

    def test_too_long(self) -> None:
        assert is_valid_username("a" * (USERNAME_MAX_LENGTH + 1)) is False

    def test_at_bounds(self) -> None:
        assert is_valid_username("a" * USERNAME_MIN_LENGTH) is True
        assert is_valid_username("a" * USERNAME_MAX_LENGTH) is True

    def test_within_range(self) -> None:
        assert is_valid_username("a" * (USERNAME_MIN_LENGTH + 1)) is True
        assert is_valid_username("a" * (USERNAME_MAX_LENGTH - 1)) is True

    @pytest.mark.parametrize("value", [None, 1, ["abcdef"]])
    def test_non_string(self, value: object) -> None:
        assert is_valid_username(value) is False


class TestCanDrive:
    def test_invalid_country(self) -> None:
        vr = can_drive(18, "EG")
        assert vr.valid is False
        assert "invalid" in vr.message.lower()

    @pytest.mark.parametrize(("country", "minimum"), LEGAL_DRIVING_AGE.items())
    def test_under_age(self, country: str, minimum: int) -> None:
        assert can_drive(minimum - 1, country).valid is False

    @pytest.mark.parametrize(("country", "minimum"), LEGAL_DRIVING_AGE.items())
    def test_at_min_age(self, country: str, minimum: int) -> None:
        assert can_drive(minimum, country).valid is True

    @pytest.mark.parametrize("country", LEGAL_DRIVING_AGE)
    def test_adult(self, country: str) -> None:
        assert can_drive(18, country) == ValidationResult(valid=True)


class TestIsPriceInRange:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [(-10, False), (0, True), (50, True), (100, True), (200, False)],
        ids=["below-min", "at-min", "between", "at-max", "above-max"],
    )
    def test_range(self, price: float, expected: bool) -> None:
        assert is_price_in_range(price, 0, 100) is expected


class TestIsStrongPassword:
    @pytest.mark.parametrize(
        "password",
        ["aaaa", "adssdcsd", "AAAAAAAAA", "aSasasdxdsds"],
        ids=["short", "no-upper", "no-lower", "no-digit"],
    )
    def test_weak(self, password: str) -> None:
        assert is_strong_password(password) is False

    def test_strong(self) -> None:
        assert is_strong_password("Aa1fjsldkffdsf2j") is True


class TestIsValidEmail:
    @pytest.mark.parametrize("email", ["ahmed.eid3@outlook.com", "a@b.co"])
    def test_valid(self, email: str) -> None:
        assert is_valid_email(email) is True

    @pytest.mark.parametrize("email", ["as", "a@b", "a b@c.com", "@c.com", "a@b.co\n", "", None])
    def test_invalid(self, email: object) -> None:
        assert is_valid_email(email) is False
