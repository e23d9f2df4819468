from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field

DEFAULT_POINTER_WIDTH = 64
POINTER_WIDTHS = (16, 32, 64)

# Fixed widths scanned by inference, narrowest first
INFERENCE_WIDTHS = (8, 16, 32, 64)
FALLBACK_WIDTH = 128


class IntKind(Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    U128 = "u128"
    I128 = "i128"

    def __str__(self) -> str:
        return self.value

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def pointer_sized(self) -> bool:
        return self.value.endswith("size")

    @property
    def explicit(self) -> bool:
        """True for kinds a literal suffix may name (128-bit kinds are fallbacks only)."""
        return self not in (IntKind.U128, IntKind.I128)


@dataclass(frozen=True)
class TypeDescriptor:
    """One nonzero integer type: its width, signedness and value range."""
    kind: IntKind
    width: int
    min: int = field(init=False)
    max: int = field(init=False)

    def __post_init__(self) -> None:
        if self.kind.signed:
            lo, hi = -(1 << (self.width - 1)), (1 << (self.width - 1)) - 1
        else:
            lo, hi = 0, (1 << self.width) - 1
        # frozen dataclass: bypass __setattr__ for derived fields
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    def __str__(self) -> str:
        return self.kind.value

    @property
    def signed(self) -> bool:
        return self.kind.signed

    @property
    def pointer_sized(self) -> bool:
        return self.kind.pointer_sized

    @property
    def suffix(self) -> str:
        return self.kind.value

    @property
    def nonzero_name(self) -> str:
        """Name of the nonzero wrapper type, e.g. NonZeroU8 or NonZeroIsize."""
        name = self.kind.value
        return f"NonZero{name[0].upper()}{name[1:]}"

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def widens_to(self, other: "TypeDescriptor") -> bool:
        """True if every value of `self` converts losslessly into `other`.

        Only same-signedness widening counts. A pointer-sized target accepts
        fixed widths up to the smallest pointer width on any target, and a
        pointer-sized source never widens into a fixed width.
        """
        if self.signed != other.signed:
            return False
        if self.pointer_sized != other.pointer_sized:
            return not self.pointer_sized and self.width <= POINTER_WIDTHS[0]
        return self.width <= other.width


class TypeCatalog:
    """Read-only table of nonzero integer descriptors for one pointer width.

    Holds the ten explicit suffix targets plus the two 128-bit fallbacks used
    by inference. Build instances through `catalog_for` so each pointer width
    is constructed once.
    """

    def __init__(self, pointer_width: int = DEFAULT_POINTER_WIDTH) -> None:
        if pointer_width not in POINTER_WIDTHS:
            raise ValueError(f"unsupported pointer width {pointer_width} (expected one of {POINTER_WIDTHS})")
        self.pointer_width = pointer_width

        descriptors: Dict[IntKind, TypeDescriptor] = {}
        for kind in IntKind:
            if kind.pointer_sized:
                width = pointer_width
            elif kind in (IntKind.U128, IntKind.I128):
                width = FALLBACK_WIDTH
            else:
                width = int(kind.value[1:])
            descriptors[kind] = TypeDescriptor(kind, width)
        self._descriptors = descriptors

        self._explicit: Dict[str, TypeDescriptor] = {
            d.suffix: d for d in descriptors.values() if d.kind.explicit
        }
        self._ascending: Dict[bool, Tuple[TypeDescriptor, ...]] = {
            signed: tuple(
                sorted(
                    (d for d in descriptors.values()
                     if d.signed == signed and not d.pointer_sized and d.width in INFERENCE_WIDTHS),
                    key=lambda d: d.width,
                )
            )
            for signed in (False, True)
        }

    def __repr__(self) -> str:
        return f"TypeCatalog(pointer_width={self.pointer_width})"

    def by_suffix(self, suffix: str) -> Optional[TypeDescriptor]:
        """Explicit descriptor named by a literal suffix, or None."""
        return self._explicit.get(suffix)

    def by_name(self, name: str) -> Optional[TypeDescriptor]:
        """Any descriptor by type name, including the 128-bit fallbacks."""
        try:
            return self._descriptors[IntKind(name)]
        except ValueError:
            return None

    def lookup(self, width: int, signed: bool, pointer_sized: bool = False) -> Optional[TypeDescriptor]:
        for d in self._descriptors.values():
            if d.width == width and d.signed == signed and d.pointer_sized == pointer_sized:
                return d
        return None

    def ascending(self, signed: bool) -> Tuple[TypeDescriptor, ...]:
        """Fixed-width descriptors of one signedness, narrowest first."""
        return self._ascending[signed]

    def fallback(self, signed: bool) -> TypeDescriptor:
        return self._descriptors[IntKind.I128 if signed else IntKind.U128]

    @property
    def explicit(self) -> Tuple[TypeDescriptor, ...]:
        return tuple(self._explicit.values())


@lru_cache(maxsize=None)
def catalog_for(pointer_width: int = DEFAULT_POINTER_WIDTH) -> TypeCatalog:
    return TypeCatalog(pointer_width)


CATALOG = catalog_for(DEFAULT_POINTER_WIDTH)
