"""Structured form of a parsed integer literal."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from nzlit.internals.report import Span
from nzlit.semantics.exceptions import MalformedLiteral

# Decimal digits in 2**128 - 1
MAX_DIGITS = 39


@dataclass(frozen=True)
class Literal:
    """A signed decimal literal with an optional width/sign suffix.

    `digits` is the digit run exactly as written (it may hold `_`
    separators); `suffix` is empty when the literal carries none.
    """
    is_negative: bool
    digits: str
    suffix: str = ""
    span: Optional[Span] = None

    def __str__(self) -> str:
        sign = "-" if self.is_negative else ""
        return f"{sign}{self.digits}{self.suffix}"

    @property
    def magnitude(self) -> int:
        """Absolute value of the literal, parsed as base 10."""
        return parse_decimal(self.digits, literal=str(self), span=self.span)

    @property
    def value(self) -> int:
        magnitude = self.magnitude
        return -magnitude if self.is_negative else magnitude

    @property
    def has_leading_zeros(self) -> bool:
        stripped = self.digits.replace("_", "")
        return len(stripped) > 1 and stripped[0] == "0"


@dataclass(frozen=True)
class Entry:
    """One literal plus the type its use site requires, if known."""
    literal: Literal
    into: Optional[str] = None
    into_span: Optional[Span] = None


def parse_decimal(digits: str, *, literal: str, span: Optional[Span] = None) -> int:
    cleaned = digits.replace("_", "")
    if not cleaned:
        raise MalformedLiteral(span, literal=literal, reason="expected at least one digit")
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise MalformedLiteral(span, literal=literal, reason="invalid digit found in string")
    # int() refuses very long digit strings; nothing past 128 bits is representable anyway
    if len(cleaned.lstrip("0")) > MAX_DIGITS:
        raise MalformedLiteral(span, literal=literal, reason="number too large to fit in 128 bits")
    return int(cleaned, 10)
