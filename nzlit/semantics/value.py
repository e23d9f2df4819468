"""Proof-carrying nonzero values.

`NonZeroInt` has two constructors. `new` checks its invariant and returns
None on failure; use it anywhere the value was not already validated.
`new_unchecked` skips the check: its caller must have proven that the value
is nonzero and inside the descriptor's range (see `semantics.validate`).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from nzlit.semantics.literal import Literal
from nzlit.semantics.typesys import TypeDescriptor


@dataclass(frozen=True)
class NonZeroInt:
    descriptor: TypeDescriptor
    value: int

    @classmethod
    def new(cls, descriptor: TypeDescriptor, value: int) -> Optional["NonZeroInt"]:
        if value == 0 or not descriptor.contains(value):
            return None
        return cls(descriptor, value)

    @classmethod
    def new_unchecked(cls, descriptor: TypeDescriptor, value: int) -> "NonZeroInt":
        """Build without checking.

        Precondition: `value != 0` and `descriptor.contains(value)`.
        """
        return cls(descriptor, value)

    def __str__(self) -> str:
        return f"{self.value}{self.descriptor.suffix}"

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    @property
    def magnitude(self) -> int:
        return abs(self.value)

    def widen(self, target: TypeDescriptor) -> "NonZeroInt":
        if not self.descriptor.widens_to(target):
            raise ValueError(f"cannot widen {self.descriptor} into {target}")
        return NonZeroInt(target, self.value)


@dataclass(frozen=True)
class Construction:
    """A validated value ready for emission.

    `target` is the type the use site requires, when known. Only inferred
    constructions are ever widened; `target is None` on an inferred value
    defers the widening to the use site.
    """
    value: NonZeroInt
    literal: Literal
    inferred: bool = False
    target: Optional[TypeDescriptor] = None

    @property
    def descriptor(self) -> TypeDescriptor:
        return self.value.descriptor

    @property
    def widening(self) -> bool:
        """True if the emitted expression carries a conversion step."""
        return self.inferred and self.target != self.descriptor

    @property
    def deferred(self) -> bool:
        """True if the final width is left to the use site."""
        return self.inferred and self.target is None
