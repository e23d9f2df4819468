# internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from nzlit.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    SYNTAX    = "syntax"
    TYPE      = "type"
    VALUE     = "value"
    CONFIG    = "config"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e


ERR = _ErrorCatalog(REGISTRY)

def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **kwargs) -> None:
    text = format_message(em, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)

def format_message(em: ErrorMessage, **kwargs) -> str:
    return _fmt(em.code, **kwargs)

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for internal generator errors.

    Internal errors (IE codes) indicate bugs in nzlit itself, never a
    problem with the literal being processed.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Internal errors (generator bugs) - IE0xxx range
_add(ErrorMessage("IE0001", Severity.ERROR,
    "unchecked construction of {type} with invalid value {value}",
    Category.INTERNAL, "A value reached the emitter without passing validation."))

_add(ErrorMessage("IE0002", Severity.ERROR,
    "unexpected parse tree node '{node}'",
    Category.INTERNAL, "The literal grammar produced a tree the builder does not understand."))

# Literal errors - CE01xx range
_add(ErrorMessage("CE0100", Severity.ERROR,
    "malformed integer literal '{literal}': {reason}",
    Category.SYNTAX, "The digit string cannot be read as a base-10 integer at the chosen width."))

_add(ErrorMessage("CE0101", Severity.ERROR,
    "unsigned integer cannot be negative",
    Category.TYPE, "A negative literal carries an unsigned suffix (u8, u16, u32, u64, usize)."))

_add(ErrorMessage("CE0102", Severity.ERROR,
    "zero is not allowed",
    Category.VALUE, "Nonzero types cannot encode zero, whatever the suffix."))

_add(ErrorMessage("CE0103", Severity.ERROR,
    "literal '{literal}' is out of range for '{type}' ({min}..={max})",
    Category.VALUE, "The literal does not fit the type named by its suffix."))

_add(ErrorMessage("CE0104", Severity.ERROR,
    "the suffix '{suffix}' is not supported",
    Category.TYPE, "Recognized suffixes: u8 u16 u32 u64 usize i8 i16 i32 i64 isize, or none."))

_add(ErrorMessage("CE0105", Severity.ERROR,
    "cannot widen '{got}' losslessly into '{target}'",
    Category.TYPE, "The required type is narrower or of different signedness than the literal's type."))

_add(ErrorMessage("CE0106", Severity.ERROR,
    "unknown target type '{name}'",
    Category.TYPE, "A widening target must name one of the nonzero integer types."))

# Configuration errors - CE02xx range
_add(ErrorMessage("CE0200", Severity.ERROR,
    "invalid configuration '{path}': {reason}",
    Category.CONFIG, "The nzlit.toml file is malformed or holds an unsupported value."))

# Warnings
_add(ErrorMessage("CW0100", Severity.WARNING,
    "literal '{literal}' has leading zeros",
    Category.SYNTAX, "Leading zeros are accepted and ignored; the literal is still decimal."))
