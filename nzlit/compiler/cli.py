"""CLI entry point and argument parsing."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from nzlit.compiler.config import BACKENDS, ConfigError, load_config
from nzlit.internals.version import print_banner
from nzlit.semantics.typesys import POINTER_WIDTHS


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nzlit",
        description="Validate nonzero integer literals and emit unchecked constructions",
    )
    ap.add_argument("literals", nargs="*", metavar="LITERAL",
                    help="Literals to generate, e.g. 1u8 300 '7 => u32' (put '--' before negative literals)")
    ap.add_argument("-f", "--file", metavar="FILE",
                    help="Read literals from FILE, one per line ('#' starts a comment)")
    ap.add_argument("-o", "--out", metavar="OUT",
                    help="Write generated code to OUT instead of stdout")
    ap.add_argument("--emit", choices=BACKENDS, default=None,
                    help="Output backend (default: rust, or [emit] backend in nzlit.toml)")
    ap.add_argument("--into", metavar="TYPE",
                    help="Type required at the use site; inferred literals widen into it")
    ap.add_argument("--target", metavar="TRIPLE",
                    help="Target triple deciding the width of usize/isize (default: host)")
    ap.add_argument("--pointer-width", type=int, choices=POINTER_WIDTHS, default=None,
                    help="Override the width of usize/isize")
    ap.add_argument("--core-path", metavar="PATH",
                    help="Rust module holding the nonzero types (default: core::num)")
    ap.add_argument("--absolute-paths", action="store_true", default=None,
                    help="Emit '::'-prefixed Rust paths")
    ap.add_argument("--config", metavar="FILE",
                    help="Configuration file (default: ./nzlit.toml when present)")
    ap.add_argument("--no-verify", action="store_true",
                    help="Skip LLVM IR verification for --emit llvm")
    ap.add_argument("--no-color", action="store_true",
                    help="Disable colored diagnostics")
    ap.add_argument("--dump-parse", action="store_true", help="Print raw Lark tree")
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Generator entry point.

    Returns:
        0 on success, 1 on success with warnings, 2 on errors.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.version:
        print_banner()
        return 0

    if not args.literals and not args.file:
        print("error: no literals given (pass LITERAL arguments or --file)", file=sys.stderr)
        return 2

    from nzlit.compiler.pipeline import compile_source, render
    from nzlit.internals import errors as er
    from nzlit.internals.report import Reporter

    try:
        config = load_config(Path(args.config) if args.config else None)
        config = config.override(
            triple=args.target,
            pointer_width=args.pointer_width,
            backend=args.emit,
            core_path=args.core_path,
            absolute_paths=args.absolute_paths,
        )
    except ConfigError as e:
        msg = er.ERR.CE0200
        path = e.path or args.config or "<command line>"
        print(f"{msg.code}: {msg.text.format(path=path, reason=e.reason)}", file=sys.stderr)
        return 2

    if args.file:
        src_path = Path(args.file)
        try:
            source = src_path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"error: cannot read {src_path}: {e}", file=sys.stderr)
            return 2
        filename = str(src_path)
    else:
        source = "\n".join(args.literals) + "\n"
        filename = "<args>"

    reporter = Reporter(source=source, filename=filename)
    constructions = compile_source(source, config, reporter, into=args.into, dump_parse=args.dump_parse)

    use_color = False if args.no_color else None
    if reporter.has_errors:
        reporter.print(use_color=use_color)
        return 2

    try:
        text = render(constructions, config, verify=not args.no_verify)
    except RuntimeError as e:
        print(f"error: LLVM rejected generated IR: {e}", file=sys.stderr)
        return 2

    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    reporter.print(use_color=use_color)
    return reporter.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
