"""
Interpolation arguments.

Arguments are classified once, at the call boundary, into one of three
variants. Only ``coerce_argument`` knows about the ``i18n:`` prefix; the
interpolation engine dispatches on the variant type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Number as _NumberABC
from typing import Any, Iterable, Tuple, Union

NESTED_KEY_PREFIX = "i18n:"


@dataclass(frozen=True)
class Text:
    """Literal text, substituted verbatim."""

    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    """Numeric value, rendered in canonical human-readable form."""

    value: Union[int, float, Decimal]

    def render(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class KeyRef:
    """Reference to another translation key, resolved in the requested language."""

    key: str

    @property
    def literal(self) -> str:
        return NESTED_KEY_PREFIX + self.key


Argument = Union[Text, Number, KeyRef]


def format_number(value: Any) -> str:
    """
    Render a number in plain decimal form without trailing-zero artifacts.

    Integral floats and Decimals drop the fractional part; other floats use
    the shortest round-trip form.

    >>> format_number(19.99)
    '19.99'
    >>> format_number(5.0)
    '5'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        return format(value.normalize(), "f")
    return str(value)


def coerce_argument(value: Any) -> Argument:
    """Classify a raw template argument into its variant."""
    if isinstance(value, (Text, Number, KeyRef)):
        return value
    if isinstance(value, str):
        if value.startswith(NESTED_KEY_PREFIX):
            return KeyRef(value[len(NESTED_KEY_PREFIX):])
        return Text(value)
    if isinstance(value, (bool, int, float, Decimal)) or (
        isinstance(value, _NumberABC) and not isinstance(value, complex)
    ):
        return Number(value)
    return Text(str(value))


def coerce_arguments(values: Iterable[Any]) -> Tuple[Argument, ...]:
    return tuple(coerce_argument(v) for v in values)
