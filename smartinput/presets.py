"""
Ready-made formatter chains for common form fields.

Every preset is a plain function of its tuning parameters returning a new
FormatterChain; the default values are part of the contract.
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from .chain import FormatterChain
from .errors import FormatterConfigError, UnknownPresetError
from .formatters import (
    AllowlistFormatter,
    DecimalFormatter,
    Formatter,
    GroupingFormatter,
    LengthLimitFormatter,
    LowerCaseFormatter,
    NoSpaceFormatter,
    PasswordComplexityFormatter,
    RangeFormatter,
    SingleSpaceFormatter,
    StartDigitFormatter,
    UpperCaseFormatter,
)

EMAIL_CHARS = r"[a-zA-Z0-9@._\-]"
NAME_CHARS = r"[a-zA-Z\u0600-\u06FF\s\-']"
ALNUM_CHARS = r"[a-zA-Z0-9]"
POSTAL_CHARS = r"[a-zA-Z0-9\-]"
USERNAME_CHARS = r"[a-zA-Z0-9_\-]"
URL_CHARS = r"[a-zA-Z0-9:/.?=&_\-#]"
# leading "digits, optional dot, up to two decimals"
MONEY_SHAPE = r"^\d*\.?\d{0,2}"

CREDIT_CARD_DIGITS = 16
CREDIT_CARD_GROUP = 4


def mobile(max_length: int = 15, start_digits: Sequence[int] = ()) -> FormatterChain:
    """Digits only, up to 15 by default; optional allowed first digits."""
    formatters: List[Formatter] = [
        AllowlistFormatter.digits_only(),
        LengthLimitFormatter(max_length),
    ]
    if start_digits:
        formatters.append(StartDigitFormatter(start_digits))
    return FormatterChain(formatters)


def email(max_length: int = 50) -> FormatterChain:
    return FormatterChain([
        AllowlistFormatter(EMAIL_CHARS),
        LengthLimitFormatter(max_length),
        NoSpaceFormatter(),
    ])


def name(max_length: int = 100) -> FormatterChain:
    """Latin and Arabic letters, spaces, hyphens and apostrophes; no double spaces."""
    return FormatterChain([
        AllowlistFormatter(NAME_CHARS),
        LengthLimitFormatter(max_length),
        SingleSpaceFormatter(),
    ])


def vital_sign(
    allow_decimal: bool = False,
    max_digits_before_decimal: Optional[int] = None,
    max_digits_after_decimal: int = 2,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    max_length: int = 6,
) -> FormatterChain:
    """
    Numeric measurement (temperature, heart rate, weight, ...).

    Examples:
      • temperature 99.9: vital_sign(allow_decimal=True, max_digits_before_decimal=2,
        max_digits_after_decimal=1, max_value=999.9)
      • heart rate: vital_sign(max_value=999, max_length=3)
    """
    formatters: List[Formatter] = []
    if allow_decimal:
        formatters.append(DecimalFormatter(max_digits_before_decimal, max_digits_after_decimal))
    else:
        formatters.append(AllowlistFormatter.digits_only())
    formatters.append(LengthLimitFormatter(max_length))
    if min_value is not None or max_value is not None:
        formatters.append(RangeFormatter(min_value, max_value))
    return FormatterChain(formatters)


def id_number(start_digits: Sequence[int] = (1, 2), max_length: int = 20) -> FormatterChain:
    """National ID: digits only, must start with 1 or 2 by default."""
    return FormatterChain([
        AllowlistFormatter.digits_only(),
        LengthLimitFormatter(max_length),
        StartDigitFormatter(start_digits),
    ])


def passport(max_length: int = 20) -> FormatterChain:
    return FormatterChain([
        AllowlistFormatter(ALNUM_CHARS),
        LengthLimitFormatter(max_length),
        UpperCaseFormatter(),
    ])


def password(max_length: int = 50) -> FormatterChain:
    return FormatterChain([LengthLimitFormatter(max_length)])


def secure_password(
    require_uppercase: bool = True,
    require_lowercase: bool = True,
    require_numbers: bool = True,
    require_special_chars: bool = True,
    min_length: int = 8,
    max_length: int = 50,
) -> FormatterChain:
    length = LengthLimitFormatter(max_length)
    complexity = PasswordComplexityFormatter(
        min_length,
        require_uppercase=require_uppercase,
        require_lowercase=require_lowercase,
        require_numbers=require_numbers,
        require_special_chars=require_special_chars,
    )
    if min_length > max_length:
        raise FormatterConfigError(
            f"secure_password: min_length ({min_length}) > max_length ({max_length})"
        )
    return FormatterChain([length, complexity])


def postal_code(max_length: int = 10) -> FormatterChain:
    return FormatterChain([
        AllowlistFormatter(POSTAL_CHARS),
        LengthLimitFormatter(max_length),
        UpperCaseFormatter(),
    ])


def credit_card() -> FormatterChain:
    """16 digits shown as XXXX XXXX XXXX XXXX."""
    return FormatterChain([
        AllowlistFormatter.digits_only(),
        LengthLimitFormatter(CREDIT_CARD_DIGITS),
        GroupingFormatter(CREDIT_CARD_GROUP),
    ])


def cvv(max_length: int = 3) -> FormatterChain:
    return FormatterChain([AllowlistFormatter.digits_only(), LengthLimitFormatter(max_length)])


def age(max_length: int = 3) -> FormatterChain:
    return FormatterChain([AllowlistFormatter.digits_only(), LengthLimitFormatter(max_length)])


def percentage() -> FormatterChain:
    """0-100 with up to two decimals."""
    return FormatterChain([
        AllowlistFormatter(MONEY_SHAPE),
        LengthLimitFormatter(6),
        RangeFormatter(0, 100, allow_trailing_dot=False),
    ])


def currency(max_value: Optional[float] = None) -> FormatterChain:
    formatters: List[Formatter] = [AllowlistFormatter(MONEY_SHAPE)]
    if max_value is not None:
        formatters.append(RangeFormatter(max_value=max_value, allow_trailing_dot=False))
    formatters.append(DecimalFormatter(max_digits_after=2))
    return FormatterChain(formatters)


def username(max_length: int = 30) -> FormatterChain:
    return FormatterChain([
        AllowlistFormatter(USERNAME_CHARS),
        LengthLimitFormatter(max_length),
        LowerCaseFormatter(),
    ])


def url(max_length: int = 2048) -> FormatterChain:
    return FormatterChain([
        AllowlistFormatter(URL_CHARS),
        LengthLimitFormatter(max_length),
        NoSpaceFormatter(),
    ])


# ---------------------------------------------------------------- #
# Registry
# ---------------------------------------------------------------- #

PresetFactory = Callable[..., FormatterChain]

PRESETS: Dict[str, PresetFactory] = {
    "mobile": mobile,
    "email": email,
    "name": name,
    "vital_sign": vital_sign,
    "id_number": id_number,
    "passport": passport,
    "password": password,
    "secure_password": secure_password,
    "postal_code": postal_code,
    "credit_card": credit_card,
    "cvv": cvv,
    "age": age,
    "percentage": percentage,
    "currency": currency,
    "username": username,
    "url": url,
}

_CAMEL = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def canonical_name(preset: str) -> str:
    """'creditCard' / 'credit-card' / 'credit_card' → 'credit_card'."""
    return _CAMEL.sub("_", preset.strip()).replace("-", "_").lower()


def get_preset(preset: str) -> PresetFactory:
    factory = PRESETS.get(canonical_name(preset))
    if factory is None:
        raise UnknownPresetError(
            f"Unknown preset '{preset}'. Available: {', '.join(list_presets())}"
        )
    return factory


def build_preset(preset: str, **options: Any) -> FormatterChain:
    """
    Build a chain by preset name. Option names are checked against the
    factory signature so a typo in a config file fails loudly.
    """
    factory = get_preset(preset)
    try:
        inspect.signature(factory).bind(**options)
    except TypeError as e:
        raise FormatterConfigError(f"Preset '{preset}': {e}") from e
    return factory(**options)


def list_presets() -> List[str]:
    return sorted(PRESETS)


def preset_defaults(preset: str) -> Dict[str, Any]:
    """Default tuning parameters of a preset."""
    sig = inspect.signature(get_preset(preset))
    return {k: p.default for k, p in sig.parameters.items()}


__all__ = [
    "PRESETS",
    "PresetFactory",
    "build_preset",
    "canonical_name",
    "get_preset",
    "list_presets",
    "preset_defaults",
    *PRESETS.keys(),
]
