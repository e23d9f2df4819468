"""Tests for target triple parsing and pointer width detection."""

import pytest

from nzlit.backend.platform_detect import get_current_platform, parse_triple


def test_parse_darwin_triple():
    p = parse_triple("arm64-apple-darwin25.0.0")
    assert (p.arch, p.vendor, p.os, p.abi) == ("arm64", "apple", "darwin", "")
    assert p.triple == "arm64-apple-darwin"


def test_parse_linux_triple():
    p = parse_triple("x86_64-pc-linux-gnu")
    assert p.abi == "gnu"
    assert p.triple == "x86_64-pc-linux-gnu"


@pytest.mark.parametrize("triple, width", [
    ("x86_64-pc-linux-gnu", 64),
    ("aarch64-unknown-linux-musl", 64),
    ("riscv64gc-unknown-none-elf", 64),
    ("wasm64-unknown-unknown", 64),
    ("mips64el-unknown-linux-gnuabi64", 64),
    ("s390x-unknown-linux-gnu", 64),
    ("i686-pc-windows-msvc", 32),
    ("thumbv7em-none-eabihf", 32),
    ("armv7-unknown-linux-gnueabihf", 32),
    ("wasm32-unknown-unknown", 32),
    ("riscv32imac-unknown-none-elf", 32),
    ("avr-unknown-gnu-atmega328", 16),
    ("msp430-none-elf", 16),
])
def test_pointer_width(triple, width):
    assert parse_triple(triple).pointer_width == width


def test_host_platform_has_supported_width():
    assert get_current_platform().pointer_width in (16, 32, 64)
