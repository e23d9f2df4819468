"""
Rust source emission for validated nonzero constructions.

Every construction becomes an unchecked constructor call on the exact
nonzero type, e.g.

    unsafe { core::num::NonZeroU8::new_unchecked(123u8) }

Inferred constructions additionally carry the widening step:
- no required type known: `core::convert::Into::into(...)`, so the use site
  picks the final width;
- a wider required type: `core::num::NonZeroU32::from(...)`.
"""
from __future__ import annotations
from dataclasses import dataclass

from nzlit.internals.errors import raise_internal_error
from nzlit.semantics.typesys import TypeDescriptor
from nzlit.semantics.value import Construction

DEFAULT_CORE_PATH = "core::num"
CONVERT_PATH = "core::convert"


@dataclass(frozen=True)
class RustOptions:
    core_path: str = DEFAULT_CORE_PATH
    absolute_paths: bool = False

    def qualify(self, path: str, name: str) -> str:
        full = f"{path}::{name}"
        return f"::{full}" if self.absolute_paths else full


class RustEmitter:
    """Render constructions as Rust expressions."""

    def __init__(self, options: RustOptions | None = None) -> None:
        self.options = options or RustOptions()

    def type_path(self, descriptor: TypeDescriptor) -> str:
        return self.options.qualify(self.options.core_path, descriptor.nonzero_name)

    def literal(self, construction: Construction) -> str:
        """The primitive literal fed to the constructor, re-negated when negative."""
        value = construction.value
        sign = "-" if value.is_negative else ""
        return f"{sign}{construction.literal.digits}{value.descriptor.suffix}"

    def construct(self, construction: Construction) -> str:
        value = construction.value
        if value.value == 0 or not value.descriptor.contains(value.value):
            raise_internal_error("IE0001", type=value.descriptor, value=value.value)
        ty = self.type_path(value.descriptor)
        return f"unsafe {{ {ty}::new_unchecked({self.literal(construction)}) }}"

    def emit(self, construction: Construction) -> str:
        expr = self.construct(construction)
        if not construction.widening:
            return expr
        if construction.deferred:
            into = self.options.qualify(CONVERT_PATH, "Into::into")
            return f"{into}({expr})"
        return f"{self.type_path(construction.target)}::from({expr})"
