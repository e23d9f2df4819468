# semantics/inference.py
"""
Minimal-width type inference for literals written without a suffix.

The literal's own sign picks the signedness class. The value is read into
the 128-bit container of that class, rejected if zero, then matched against
the fixed widths 8, 16, 32, 64 in order; the first range that holds it wins.
Values wider than 64 bits land on the 128-bit fallback.

The narrowest type is preferred because the use site can always reach a
wider type of the same signedness through a lossless conversion, while the
final width is usually decided by context this pass cannot see.
"""
from __future__ import annotations
from dataclasses import dataclass

from nzlit.semantics.exceptions import MalformedLiteral
from nzlit.semantics.literal import Literal
from nzlit.semantics.typesys import TypeCatalog, TypeDescriptor
from nzlit.semantics.validate import check_nonzero


@dataclass(frozen=True)
class Resolution:
    """Descriptor chosen for a literal, with the literal's signed value."""
    descriptor: TypeDescriptor
    value: int
    inferred: bool = False


def infer(literal: Literal, catalog: TypeCatalog) -> Resolution:
    signed = literal.is_negative
    container = catalog.fallback(signed)

    value = literal.value
    if not container.contains(value):
        raise MalformedLiteral(literal.span, literal=str(literal),
                               reason=f"number too large to fit in {container}")

    check_nonzero(value, literal.span)

    for descriptor in catalog.ascending(signed):
        if descriptor.contains(value):
            return Resolution(descriptor, value, inferred=True)

    return Resolution(container, value, inferred=True)
