"""Numbers that compare across unsigned, signed and floating kinds."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_INT_EMPTY = "cannot parse integer from empty string"
_INT_INVALID = "invalid digit found in string"
_INT_POS_OVERFLOW = "number too large to fit in target type"
_INT_NEG_OVERFLOW = "number too small to fit in target type"
_FLOAT_EMPTY = "cannot parse float from empty string"
_FLOAT_INVALID = "invalid float literal"

_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ParseNumberError(ValueError):
    """Raised when a string is neither an integer nor a float."""

    def __init__(self, uint_error: str, int_error: str, float_error: str) -> None:
        self.uint_error = uint_error
        self.int_error = int_error
        self.float_error = float_error
        if uint_error == int_error:
            message = f"can not parse number: {uint_error}, {float_error}"
        else:
            message = f"can not parse number: {uint_error}, {int_error}, {float_error}"
        super().__init__(message)


class _IntParseFailure(Exception):
    pass


def _parse_integer(text: str, signed: bool) -> int:
    if not text:
        raise _IntParseFailure(_INT_EMPTY)
    negative = False
    digits = text
    if text[0] == "+" or (signed and text[0] == "-"):
        negative = text[0] == "-"
        digits = text[1:]
    if not _DIGITS.fullmatch(digits):
        raise _IntParseFailure(_INT_INVALID)
    value = -int(digits) if negative else int(digits)
    low, high = (_I64_MIN, _I64_MAX) if signed else (0, _U64_MAX)
    if value > high:
        raise _IntParseFailure(_INT_POS_OVERFLOW)
    if value < low:
        raise _IntParseFailure(_INT_NEG_OVERFLOW)
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise _IntParseFailure(_FLOAT_EMPTY)
    if not _FLOAT.fullmatch(text):
        raise _IntParseFailure(_FLOAT_INVALID)
    return float(text)


class NumberKind(Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FLOAT = "float"


def _float_cmp(a: float, b: float) -> int:
    # NaN sorts above every other value and equals itself.
    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    return (a > b) - (a < b)


@total_ordering
@dataclass(frozen=True, eq=False)
class Number:
    """A number of one of three kinds, totally ordered across kinds."""

    kind: NumberKind
    value: int | float

    def __post_init__(self) -> None:
        if self.kind is NumberKind.FLOAT:
            object.__setattr__(self, "value", float(self.value))
            return
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{self.kind.value} number needs an integer value")
        low, high = (0, _U64_MAX) if self.kind is NumberKind.UNSIGNED else (_I64_MIN, _I64_MAX)
        if not low <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for a {self.kind.value} number")

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse as unsigned, then signed, then float, like the stored values."""
        try:
            return cls(NumberKind.UNSIGNED, _parse_integer(text, signed=False))
        except _IntParseFailure as error:
            uint_error = str(error)
        try:
            return cls(NumberKind.SIGNED, _parse_integer(text, signed=True))
        except _IntParseFailure as error:
            int_error = str(error)
        try:
            return cls(NumberKind.FLOAT, _parse_float(text))
        except _IntParseFailure as error:
            float_error = str(error)
        raise ParseNumberError(uint_error, int_error, float_error)

    def _compare(self, other: Number) -> int:
        if self.kind is not NumberKind.FLOAT and other.kind is not NumberKind.FLOAT:
            return (self.value > other.value) - (self.value < other.value)
        return _float_cmp(float(self.value), float(other.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        as_float = float(self.value)
        if math.isnan(as_float):
            return hash("nan")
        return hash(as_float)

    def __str__(self) -> str:
        return str(self.value)