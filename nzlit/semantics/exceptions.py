"""Exceptions raised while classifying a literal.

Each exception is bound to one registered error code and carries the span of
the offending literal, so callers either re-raise it or hand it to
`report_literal_error` for rendering through a Reporter.
"""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from nzlit.internals import errors as er

if TYPE_CHECKING:
    from nzlit.internals.report import Span, Reporter


class LiteralError(Exception):
    """Base class: a literal that cannot be turned into a nonzero value."""
    error = er.ERR.CE0100

    def __init__(self, span: Optional['Span'] = None, **params):
        self.span = span
        self.params = params
        super().__init__(er.format_message(self.error, **params))

    @property
    def code(self) -> str:
        return self.error.code


class MalformedLiteral(LiteralError):
    """Digit string is not parseable as base 10 at the chosen width."""
    error = er.ERR.CE0100


class SignMismatch(LiteralError):
    """Negative literal targeting an unsigned type."""
    error = er.ERR.CE0101


class ZeroNotAllowed(LiteralError):
    """Literal evaluates to zero."""
    error = er.ERR.CE0102


class OutOfRange(LiteralError):
    """Value does not fit the type named by the suffix."""
    error = er.ERR.CE0103


class UnsupportedSuffix(LiteralError):
    """Suffix token outside the recognized set."""
    error = er.ERR.CE0104

    @property
    def suffix(self) -> str:
        return self.params["suffix"]


class WideningMismatch(LiteralError):
    """Required type cannot losslessly receive the literal's type."""
    error = er.ERR.CE0105


class UnknownTargetType(LiteralError):
    """Widening target names no known nonzero type."""
    error = er.ERR.CE0106


def report_literal_error(exc: LiteralError, reporter: 'Reporter') -> None:
    er.emit(reporter, exc.error, exc.span, **exc.params)
