"""
LLVM IR lowering for validated nonzero constructions.

A construction lowers to an integer constant of its resolved width. When the
use site requires a wider type, the widening is folded at generation time:
the value is already known, so a sign- or zero-extended constant of the
target width is emitted directly instead of a `sext`/`zext` instruction.

API:
    from nzlit.backend.llvm import LLVMEmitter
    em = LLVMEmitter()
    em.define(construction, "answer")
    em.verify()
    print(em.module)
"""
from __future__ import annotations
from typing import Dict, Optional

from llvmlite import ir, binding as llvm

from nzlit.internals.errors import raise_internal_error
from nzlit.semantics.typesys import TypeDescriptor
from nzlit.semantics.value import Construction


class LLVMEmitter:
    """Collect lowered constructions into a single LLVM module."""

    def __init__(self, module_name: str = "nzlit_module", triple: Optional[str] = None) -> None:
        self.module: ir.Module = ir.Module(name=module_name)
        if triple:
            self.module.triple = triple
        self._types: Dict[int, ir.IntType] = {}
        self._count = 0

    def int_type(self, descriptor: TypeDescriptor) -> ir.IntType:
        width = descriptor.width
        if width not in self._types:
            self._types[width] = ir.IntType(width)
        return self._types[width]

    def lower(self, construction: Construction) -> ir.Constant:
        """Constant for the construction, at the target width when one is known."""
        value = construction.value
        if value.value == 0 or not value.descriptor.contains(value.value):
            raise_internal_error("IE0001", type=value.descriptor, value=value.value)

        descriptor = value.descriptor
        if construction.widening and construction.target is not None:
            descriptor = value.widen(construction.target).descriptor

        return ir.Constant(self.int_type(descriptor), value.value)

    def define(self, construction: Construction, name: Optional[str] = None) -> ir.GlobalVariable:
        """Store the lowered constant as an internal global constant."""
        const = self.lower(construction)
        if name is None:
            name = f"nz.{self._count}"
        self._count += 1

        gv = ir.GlobalVariable(self.module, const.type, name=name)
        gv.linkage = "internal"
        gv.global_constant = True
        gv.initializer = const
        return gv

    def verify(self) -> None:
        """Parse the module back through LLVM and run its verifier.

        Raises:
            RuntimeError: If LLVM rejects the generated IR.
        """
        llmod = llvm.parse_assembly(str(self.module))
        llmod.verify()
