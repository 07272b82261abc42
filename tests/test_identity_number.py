"""
Tests for `domain/identity_number.py`.

Covers rules:
- Fullwidth digits are folded; anything but ASCII 0-9 is stripped before validation.
- Exactly 11 digits are required.
- All-identical digits are rejected as a checksum failure.
- Both check digits are verified.
- Equality is on the normalized digits; formatting is derived.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from domain.errors import (
    InvalidIdentityNumber,
    InvalidIdentityNumberChecksum,
    InvalidIdentityNumberFormat,
)
from domain.identity_number import IdentityNumber


def test_known_valid_number_is_accepted_and_formatted() -> None:
    cpf = IdentityNumber.parse("12345678909")

    assert cpf.value == "12345678909"
    assert cpf.formatted == "123.456.789-09"
    assert str(cpf) == "12345678909"


@pytest.mark.parametrize("digit", list("0123456789"))
def test_all_identical_digits_fail_checksum(digit: str) -> None:
    with pytest.raises(InvalidIdentityNumberChecksum):
        IdentityNumber.parse(digit * 11)


@pytest.mark.parametrize(
    "raw",
    ["123.456.789-09", " 123 456 789 09 ", "123-456-789.09", "123456789-09"],
)
def test_punctuated_and_plain_forms_are_equal(raw: str) -> None:
    assert IdentityNumber.parse(raw) == IdentityNumber.parse("12345678909")


@pytest.mark.parametrize("raw", ["", "1234567890", "123456789091", "abc.def.ghi-jk"])
def test_wrong_length_fails_format(raw: str) -> None:
    with pytest.raises(InvalidIdentityNumberFormat):
        IdentityNumber.parse(raw)


def test_wrong_first_check_digit_fails_checksum() -> None:
    with pytest.raises(InvalidIdentityNumberChecksum):
        IdentityNumber.parse("12345678919")


def test_wrong_second_check_digit_fails_checksum() -> None:
    with pytest.raises(InvalidIdentityNumberChecksum):
        IdentityNumber.parse("12345678900")


def test_another_valid_number() -> None:
    cpf = IdentityNumber.parse("529.982.247-25")

    assert cpf.value == "52998224725"
    assert cpf != IdentityNumber.parse("12345678909")


def test_validation_errors_share_a_base_class() -> None:
    """Callers can catch every identity failure with one except clause."""

    for raw in ("123", "11111111111", "12345678900"):
        with pytest.raises(InvalidIdentityNumber):
            IdentityNumber.parse(raw)
        with pytest.raises(ValueError):
            IdentityNumber.parse(raw)


def test_constructor_rejects_unnormalized_value() -> None:
    with pytest.raises(InvalidIdentityNumberFormat):
        IdentityNumber("123.456.789-09")


def test_identity_number_is_immutable() -> None:
    cpf = IdentityNumber.parse("12345678909")

    with pytest.raises(FrozenInstanceError):
        cpf.value = "52998224725"  # type: ignore[misc]


def test_fullwidth_digits_are_folded_to_ascii() -> None:
    cpf = IdentityNumber.parse("１２３.４５６.７８９-０９")

    assert cpf.value == "12345678909"
    assert cpf == IdentityNumber.parse("12345678909")


def test_non_ascii_digits_are_not_kept() -> None:
    """Arabic-Indic digits are not 0-9, so nothing is left to validate."""

    with pytest.raises(InvalidIdentityNumberFormat):
        IdentityNumber.parse("١٢٣٤٥٦٧٨٩٠٩")


def test_constructor_requires_ascii_digits() -> None:
    with pytest.raises(InvalidIdentityNumberFormat):
        IdentityNumber("１２３４５６７８９０９")
