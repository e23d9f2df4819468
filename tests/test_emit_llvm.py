"""Tests for LLVM IR lowering."""

from llvmlite import ir

from nzlit.backend.llvm import LLVMEmitter
from nzlit.compiler.config import GeneratorConfig
from nzlit.compiler.pipeline import generate, lower

CONFIG = GeneratorConfig(pointer_width=64)


def test_lower_uses_resolved_width():
    const = lower("123", config=CONFIG)
    assert const.type == ir.IntType(8)
    assert str(const) == "i8 123"


def test_lower_explicit_negative():
    assert str(lower("-1i8", config=CONFIG)) == "i8 -1"


def test_widening_is_folded():
    assert str(lower("123", into="u32", config=CONFIG)) == "i32 123"
    assert str(lower("-5", into="i64", config=CONFIG)) == "i64 -5"


def test_pointer_sized_width_follows_config():
    const = lower("7usize", config=GeneratorConfig(pointer_width=32))
    assert const.type == ir.IntType(32)


def test_define_and_verify():
    em = LLVMEmitter(module_name="literals")
    em.define(generate("300", config=CONFIG))
    em.define(generate("-5", into="i32", config=CONFIG), name="minus_five")
    em.verify()
    text = str(em.module)
    assert "nz.0" in text
    assert "internal constant i16 300" in text
    assert "minus_five" in text
    assert "internal constant i32 -5" in text


def test_u128_fallback_round_trips_through_llvm():
    em = LLVMEmitter()
    em.define(generate(str(2**100), config=CONFIG))
    em.verify()
    assert f"i128 {2**100}" in str(em.module)
