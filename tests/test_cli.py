"""Tests for the nzlit command line."""

from nzlit.compiler.cli import main


def test_single_literal(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "1u8"]) == 0
    out = capsys.readouterr().out
    assert out == "unsafe { core::num::NonZeroU8::new_unchecked(1u8) }\n"


def test_several_literals_one_per_line(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "1u8", "300", "7 => u32"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("core::convert::Into::into(")
    assert lines[2].startswith("core::num::NonZeroU32::from(")


def test_negative_after_separator(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "--", "-1u8"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CE0101" in captured.err


def test_leading_zero_warning(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "--no-color", "007"]) == 1
    captured = capsys.readouterr()
    assert "new_unchecked(007u8)" in captured.out
    assert "CW0100" in captured.err


def test_into_flag(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "--into", "u64", "5"]) == 0
    assert capsys.readouterr().out.startswith("core::num::NonZeroU64::from(")


def test_llvm_backend(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "--emit", "llvm", "--no-verify", "300"]) == 0
    assert "i16 300" in capsys.readouterr().out


def test_file_and_out(tmp_path, isolated_cwd):
    src = tmp_path / "lits.nz"
    src.write_text("# literals\n1u8\n-5\n")
    out = tmp_path / "out.rs"
    assert main(["--pointer-width", "64", "-f", str(src), "-o", str(out)]) == 0
    assert out.read_text().count("new_unchecked") == 2


def test_missing_file(capsys, tmp_path, isolated_cwd):
    assert main(["-f", str(tmp_path / "absent.nz")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_config_file_is_read(capsys, isolated_cwd):
    (isolated_cwd / "nzlit.toml").write_text('[target]\npointer_width = 64\n[emit]\nabsolute_paths = true\n')
    assert main(["1u8"]) == 0
    assert capsys.readouterr().out.startswith("unsafe { ::core::num::")


def test_bad_config(capsys, isolated_cwd):
    (isolated_cwd / "nzlit.toml").write_text('[emit]\nbackend = "c"\n')
    assert main(["1u8"]) == 2
    assert "CE0200" in capsys.readouterr().err


def test_version(capsys):
    assert main(["--version"]) == 0
    assert "nzlit" in capsys.readouterr().out


def test_no_input(capsys, isolated_cwd):
    assert main([]) == 2
    assert "no literals" in capsys.readouterr().err


def test_huge_literal_is_reported(capsys, isolated_cwd):
    assert main(["--pointer-width", "64", "--no-color", "1" * 5000]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CE0100" in captured.err
