# semantics/dispatch.py
"""
Suffix dispatch: map a literal's (sign, suffix) to the type it constructs.

One parametric procedure over the type catalog replaces a branch per type:
- unsigned suffix on a negative literal  -> SignMismatch (CE0101)
- explicit suffix matching the sign      -> exact type, validated
- no suffix                              -> minimal-width inference
- anything else                          -> UnsupportedSuffix (CE0104)
"""
from __future__ import annotations

from nzlit.semantics.exceptions import SignMismatch, UnsupportedSuffix
from nzlit.semantics.inference import Resolution, infer
from nzlit.semantics.literal import Literal
from nzlit.semantics.typesys import TypeCatalog, CATALOG
from nzlit.semantics.validate import validate


def resolve(literal: Literal, catalog: TypeCatalog = CATALOG) -> Resolution:
    if not literal.suffix:
        return infer(literal, catalog)

    descriptor = catalog.by_suffix(literal.suffix)
    if descriptor is None:
        raise UnsupportedSuffix(literal.span, suffix=literal.suffix)

    if literal.is_negative and not descriptor.signed:
        raise SignMismatch(literal.span)

    value = literal.value
    validate(descriptor, value, str(literal), literal.span)
    return Resolution(descriptor, value)
