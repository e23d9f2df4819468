"""
Platform detection and target triple parsing.

The pointer-sized nonzero types (usize/isize) take their width from the
target; everything else about a literal is target independent.
"""
from __future__ import annotations
from dataclasses import dataclass
from llvmlite import binding as llvm

_ARCH_POINTER_WIDTH_16 = ("avr", "msp430")
_ARCH_POINTER_WIDTH_32 = (
    "i386", "i486", "i586", "i686", "x86",
    "arm", "armv", "thumb",
    "wasm32", "riscv32", "mips", "mipsel",
    "powerpc", "ppc", "sparc", "hexagon", "xtensa", "m68k",
)


@dataclass
class TargetPlatform:
    """Represents a compilation target platform."""
    arch: str      # arm64, x86_64, riscv64, etc.
    vendor: str    # apple, pc, unknown, etc.
    os: str        # darwin, linux, windows, etc.
    abi: str       # (empty), gnu, musl, etc.

    @property
    def triple(self) -> str:
        """Reconstruct the target triple string."""
        parts = [self.arch, self.vendor, self.os]
        if self.abi:
            parts.append(self.abi)
        return '-'.join(parts)

    @property
    def pointer_width(self) -> int:
        """Width in bits of usize/isize on this target."""
        arch = self.arch.lower()
        if arch.startswith(_ARCH_POINTER_WIDTH_16):
            return 16
        # 64-bit spellings of otherwise 32-bit families (mips64, powerpc64, sparcv9...)
        if "64" in arch or arch == "sparcv9" or arch == "s390x":
            return 64
        if arch.startswith(_ARCH_POINTER_WIDTH_32):
            return 32
        return 64


def parse_triple(triple: str) -> TargetPlatform:
    """
    Parse an LLVM target triple into components.

    Examples:
        arm64-apple-darwin25.0.0 -> TargetPlatform(arm64, apple, darwin, '')
        x86_64-pc-linux-gnu -> TargetPlatform(x86_64, pc, linux, gnu)
        thumbv7em-none-eabihf -> TargetPlatform(thumbv7em, none, eabihf, '')
    """
    parts = triple.strip().split('-')

    # Handle version numbers in OS (e.g., darwin25.0.0)
    os_part = parts[2] if len(parts) > 2 else 'unknown'
    if '.' in os_part:
        os_part = os_part.split('.')[0]
    if os_part.startswith('darwin'):
        os_part = 'darwin'

    return TargetPlatform(
        arch=parts[0] if parts and parts[0] else 'unknown',
        vendor=parts[1] if len(parts) > 1 else 'unknown',
        os=os_part,
        abi=parts[3] if len(parts) > 3 else '',
    )


def get_current_platform() -> TargetPlatform:
    """Get the platform llvmlite reports for the host."""
    return parse_triple(llvm.get_default_triple())
