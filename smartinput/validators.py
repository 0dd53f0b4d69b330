"""
Submit-time field validators.

Formatters only decide what may be typed; validators judge the finished
value. Every factory returns `validate(value) -> Optional[str]`: None when
the value is valid, otherwise an error message. `custom_error_message`
replaces every built-in message of that validator.
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Dict, List, Optional, Pattern

from .errors import FormatterConfigError, UnknownPresetError
from .formatters.password import SPECIAL_CHARS

Validator = Callable[[Optional[str]], Optional[str]]

_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_NAME = re.compile(r"^[a-zA-Z\u0600-\u06FF\s\-']+$")
_DIGITS = re.compile(r"^[0-9]+$")
_DECIMAL = re.compile(r"^[0-9]*\.?[0-9]+$")
_ALPHA = re.compile(r"^[a-zA-Z\s]+$")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_NUMBER = re.compile(r"[0-9]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARS) + "]")


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _check_lengths(kind: str, **bounds: Optional[int]) -> None:
    for key, bound in bounds.items():
        if bound is not None and (not isinstance(bound, int) or isinstance(bound, bool)):
            raise FormatterConfigError(f"{kind}: {key} must be an int, got {bound!r}")


def email(
    required: bool = True,
    field_name: str = "Email",
    custom_error_message: Optional[str] = None,
) -> Validator:
    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return (custom_error_message or f"{field_name} is required") if required else None
        if not _EMAIL.match(value.strip()):
            return custom_error_message or "Please enter a valid email address"
        return None
    return validate


def name(
    required: bool = True,
    field_name: str = "Name",
    min_length: int = 2,
    custom_error_message: Optional[str] = None,
) -> Validator:
    _check_lengths("name", min_length=min_length)

    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return (custom_error_message or f"{field_name} is required") if required else None
        trimmed = value.strip()
        if len(trimmed) < min_length:
            return custom_error_message or f"{field_name} must be at least {min_length} characters"
        if not _NAME.match(trimmed):
            return custom_error_message or (
                f"{field_name} can only contain letters, spaces, hyphens, and apostrophes"
            )
        return None
    return validate


def mobile(
    required: bool = True,
    field_name: str = "Mobile number",
    min_length: int = 10,
    max_length: int = 15,
    custom_error_message: Optional[str] = None,
) -> Validator:
    _check_lengths("mobile", min_length=min_length, max_length=max_length)

    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return (custom_error_message or f"{field_name} is required") if required else None
        trimmed = value.strip()
        if not _DIGITS.match(trimmed):
            return custom_error_message or f"{field_name} must contain only digits"
        if len(trimmed) < min_length:
            return custom_error_message or f"{field_name} must be at least {min_length} digits"
        if len(trimmed) > max_length:
            return custom_error_message or f"{field_name} must not exceed {max_length} digits"
        return None
    return validate


def required(field_name: str, custom_error_message: Optional[str] = None) -> Validator:
    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return custom_error_message or f"{field_name} is required"
        return None
    return validate


def numeric(
    required: bool = True,
    field_name: str = "This field",
    allow_decimal: bool = False,
    custom_error_message: Optional[str] = None,
) -> Validator:
    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return (custom_error_message or f"{field_name} is required") if required else None
        trimmed = value.strip()
        if allow_decimal:
            if not _DECIMAL.match(trimmed):
                return custom_error_message or f"{field_name} must be a valid number"
        elif not _DIGITS.match(trimmed):
            return custom_error_message or f"{field_name} must contain only digits"
        return None
    return validate


def password(
    required: bool = True,
    min_length: int = 4,
    require_uppercase: bool = False,
    require_lowercase: bool = False,
    require_numbers: bool = False,
    require_special_chars: bool = False,
    custom_error_message: Optional[str] = None,
) -> Validator:
    _check_lengths("password", min_length=min_length)

    # passwords are not trimmed: surrounding spaces are significant
    def validate(value: Optional[str]) -> Optional[str]:
        if not value:
            return (custom_error_message or "Password is required") if required else None
        if len(value) < min_length:
            return custom_error_message or f"Password must be at least {min_length} characters"
        if require_uppercase and not _UPPER.search(value):
            return custom_error_message or "Password must contain at least one uppercase letter"
        if require_lowercase and not _LOWER.search(value):
            return custom_error_message or "Password must contain at least one lowercase letter"
        if require_numbers and not _NUMBER.search(value):
            return custom_error_message or "Password must contain at least one number"
        if require_special_chars and not _SPECIAL.search(value):
            return custom_error_message or "Password must contain at least one special character"
        return None
    return validate


def confirm_password(password: str, custom_error_message: Optional[str] = None) -> Validator:
    def validate(value: Optional[str]) -> Optional[str]:
        if not value:
            return custom_error_message or "Please confirm your password"
        if value != password:
            return custom_error_message or "Passwords do not match"
        return None
    return validate


def custom(
    required: bool = False,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    pattern: Optional[str | Pattern[str]] = None,
    is_numeric: bool = False,
    is_email: bool = False,
    is_alphabetic: bool = False,
    custom_validator: Optional[Validator] = None,
    field_name: str = "This field",
    custom_error_message: Optional[str] = None,
) -> Validator:
    """
    Combination of the common checks, evaluated in order:
    required → min/max length → numeric → email → alphabetic → pattern → custom_validator.
    """
    _check_lengths("custom", min_length=min_length, max_length=max_length)
    if pattern is not None and not isinstance(pattern, (str, re.Pattern)):
        raise FormatterConfigError(f"custom: pattern must be a string, got {pattern!r}")
    try:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as e:
        raise FormatterConfigError(f"custom: invalid pattern {pattern!r}: {e}") from e

    def validate(value: Optional[str]) -> Optional[str]:
        if _blank(value):
            return (custom_error_message or f"{field_name} is required") if required else None
        trimmed = value.strip()
        if min_length is not None and len(trimmed) < min_length:
            return custom_error_message or f"{field_name} must be at least {min_length} characters"
        if max_length is not None and len(trimmed) > max_length:
            return custom_error_message or f"{field_name} must not exceed {max_length} characters"
        if is_numeric and not _DIGITS.match(trimmed):
            return custom_error_message or f"{field_name} must contain only digits"
        if is_email and not _EMAIL.match(trimmed):
            return custom_error_message or "Please enter a valid email address"
        if is_alphabetic and not _ALPHA.match(trimmed):
            return custom_error_message or f"{field_name} must contain only letters and spaces"
        if compiled is not None and not compiled.search(trimmed):
            return custom_error_message or f"{field_name} format is invalid"
        if custom_validator is not None:
            err = custom_validator(value)
            if err is not None:
                return custom_error_message or err
        return None
    return validate


# ---------------------------------------------------------------- #
# Registry (used by the field config loader)
# ---------------------------------------------------------------- #

VALIDATORS: Dict[str, Callable[..., Validator]] = {
    "email": email,
    "name": name,
    "mobile": mobile,
    "required": required,
    "numeric": numeric,
    "password": password,
    "confirm_password": confirm_password,
    "custom": custom,
}


def build_validator(kind: str, **options: Any) -> Validator:
    factory = VALIDATORS.get(kind)
    if factory is None:
        raise UnknownPresetError(
            f"Unknown validator '{kind}'. Available: {', '.join(list_validators())}"
        )
    try:
        inspect.signature(factory).bind(**options)
    except TypeError as e:
        raise FormatterConfigError(f"Validator '{kind}': {e}") from e
    return factory(**options)


def list_validators() -> List[str]:
    return sorted(VALIDATORS)


__all__ = ["Validator", "VALIDATORS", "build_validator", "list_validators", *VALIDATORS.keys()]
