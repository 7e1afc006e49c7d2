"""Validation helpers that raise ValidationError with descriptive messages."""

from __future__ import annotations

import os
from collections.abc import Sequence


class ValidationError(ValueError):
    """A configuration value failed validation."""


def validate_int_in_range(minimum: int, maximum: int, value: int, text: str) -> None:
    if not minimum <= value <= maximum:
        raise ValidationError(
            f"error the value of key ({text}) must be between {minimum} and {maximum}"
        )


def validate_int_greater_or_equals(minimum: int, value: int, text: str) -> None:
    if value < minimum:
        raise ValidationError(
            f"error the value of key ({text}) must be greater or equal to {minimum}"
        )


def validate_int_greater(minimum: int, value: int, text: str) -> None:
    if value <= minimum:
        raise ValidationError(f"error the value of key ({text}) must be greater than {minimum}")


def validate_string_in_array(array: Sequence[str], value: str, text: str) -> None:
    validate_string_not_empty(value, text)
    if value not in array:
        raise ValidationError(
            f"error the value of key ({text}) must be one of {','.join(array)}"
        )


def validate_string_not_empty(value: str, text: str) -> None:
    if value == "":
        raise error_key_empty(text)


def validate_strings_equal(value1: str, value2: str, text: str) -> None:
    """Reject a change to a key that may not change after creation."""
    if value1 != value2:
        raise ValidationError(
            f"error the value of key ({text}) may not be changed during update"
        )


def validate_file_path(path: str, text: str) -> None:
    validate_string_not_empty(path, text)
    if not os.path.isabs(path):
        raise ValidationError(
            f"error the value of key ({text}) is not a valid file absolute path"
        )


def validate_array_not_empty(array: Sequence[str], text: str) -> None:
    if len(array) == 0:
        raise error_key_empty(text)


def validate_array_even(array: Sequence[str], text: str) -> None:
    if len(array) % 2 != 0:
        raise error_key_empty(text)


def error_key_empty(text: str) -> ValidationError:
    return ValidationError(f"error the value of key ({text}) may not be empty")


def error_key_not_set(text: str) -> ValidationError:
    return ValidationError(f"error the key ({text}) must be set")


def error_item_exists(item: str, text: str) -> ValidationError:
    return ValidationError(f"error {text} with id ( {item} ) already exists")


def error_item_not_exists(item: str, text: str) -> ValidationError:
    return ValidationError(f"error {text} with id ( {item} ) does not exist")