# semantics/validate.py
"""
Nonzero and range checks for a resolved type.

Both checks must pass before anything may construct a nonzero value without
a runtime check:
- check_nonzero: the value is not zero (CE0102)
- check_range: the value lies within the descriptor's range (CE0103)
"""
from __future__ import annotations
from typing import Optional

from nzlit.internals.report import Span
from nzlit.semantics.exceptions import OutOfRange, ZeroNotAllowed
from nzlit.semantics.typesys import TypeDescriptor


def check_nonzero(value: int, span: Optional[Span] = None) -> None:
    if value == 0:
        raise ZeroNotAllowed(span)


def check_range(descriptor: TypeDescriptor, value: int, literal: str, span: Optional[Span] = None) -> None:
    if not descriptor.contains(value):
        raise OutOfRange(span, literal=literal, type=str(descriptor),
                         min=descriptor.min, max=descriptor.max)


def validate(descriptor: TypeDescriptor, value: int, literal: str, span: Optional[Span] = None) -> None:
    """Run both checks in order; raise the first one that fails."""
    check_nonzero(value, span)
    check_range(descriptor, value, literal, span)
