"""Pincode format validation."""

from __future__ import annotations

from typing import Union

from ..models.domain import ValidationFailure
from ..schemas.responses import ValidationResult
from .lookup_tables import REGION_BY_DIGIT

PincodeInput = Union[str, int]

PINCODE_LENGTH = 6
_ASCII_DIGITS = frozenset("0123456789")


def normalize_pincode(pincode: PincodeInput) -> str:
    """Convert raw input to a trimmed string.

    Integers go through ``str()``, so any leading zero is lost. That is harmless
    for validity because a pincode starting with 0 is rejected anyway.
    """
    return str(pincode).strip()


def _failure(failure: ValidationFailure, message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message, failure=failure)


def validate_format(pincode: PincodeInput) -> ValidationResult:
    """Check a pincode against Indian pincode syntax. The first failing rule wins."""

    value = normalize_pincode(pincode)

    if not value:
        return _failure(ValidationFailure.EMPTY_INPUT, "Pincode cannot be empty")

    if not set(value) <= _ASCII_DIGITS:
        return _failure(ValidationFailure.NON_NUMERIC, "Pincode must contain only digits")

    if len(value) != PINCODE_LENGTH:
        return _failure(
            ValidationFailure.WRONG_LENGTH,
            f"Pincode must be exactly {PINCODE_LENGTH} digits, got {len(value)}",
        )

    first_digit = value[0]
    if first_digit == "0":
        return _failure(ValidationFailure.LEADING_ZERO, "Pincode cannot start with 0")

    if first_digit not in REGION_BY_DIGIT:
        return _failure(
            ValidationFailure.UNKNOWN_REGION_DIGIT,
            f"Invalid pincode: First digit '{first_digit}' is not valid for Indian pincodes",
        )

    return ValidationResult(valid=True)
