"""Lark parser setup and Literal construction."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Tree, UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from nzlit.internals.errors import raise_internal_error
from nzlit.internals.report import Span, span_of
from nzlit.semantics.exceptions import MalformedLiteral
from nzlit.semantics.literal import Entry, Literal

GRAMMAR_PATH = Path(__file__).parent.parent / "grammar.lark"


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark.open(
        str(GRAMMAR_PATH),
        parser="lalr",
        start=["start", "entry"],
        propagate_positions=True,
        maybe_placeholders=False,
    )


def describe_parse_error(e: UnexpectedInput) -> str:
    """Short reason text for a lark parse failure."""
    if isinstance(e, UnexpectedCharacters):
        return f"unexpected character {e.char!r}"
    if isinstance(e, UnexpectedToken):
        if e.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {e.token.value!r}"
    return "unexpected end of input"


def _error_span(e: UnexpectedInput) -> Optional[Span]:
    line = getattr(e, "line", -1)
    col = getattr(e, "column", -1)
    if line is None or col is None or line < 1 or col < 1:
        return None
    return Span(line, col, line, col + 1)


def _line_of(source: str, span: Optional[Span]) -> str:
    if span is None:
        return source.strip()
    lines = source.splitlines()
    return lines[span.line - 1].strip() if 0 < span.line <= len(lines) else source.strip()


class LiteralBuilder:
    """Turn lark parse trees into Literal and Entry objects."""

    def build_literal(self, tree: Tree) -> Literal:
        is_negative = False
        digits: Optional[Token] = None
        suffix: Optional[Token] = None

        for tok in tree.children:
            if not isinstance(tok, Token):
                raise_internal_error("IE0002", node=getattr(tok, "data", tok))
            if tok.type == "MINUS":
                is_negative = True
            elif tok.type == "DIGITS":
                digits = tok
            elif tok.type == "NAME":
                suffix = tok
            else:
                raise_internal_error("IE0002", node=tok.type)

        if digits is None:
            raise_internal_error("IE0002", node=tree.data)

        span = span_of(tree)
        if suffix is not None and suffix.start_pos != digits.end_pos:
            text = f"{'-' if is_negative else ''}{digits} {suffix}"
            raise MalformedLiteral(span, literal=text, reason="suffix must directly follow the digits")

        return Literal(
            is_negative=is_negative,
            digits=str(digits),
            suffix=str(suffix) if suffix is not None else "",
            span=span,
        )

    def build_entry(self, tree: Tree) -> Entry:
        literal_tree = tree.children[0]
        into = tree.children[1] if len(tree.children) > 1 else None
        return Entry(
            literal=self.build_literal(literal_tree),
            into=str(into) if into is not None else None,
            into_span=span_of(into) if into is not None else None,
        )

    def build(self, tree: Tree) -> List[Entry]:
        return [self.build_entry(child) for child in tree.children]


def parse_entry(text: str) -> Entry:
    """Parse a single literal, optionally followed by `=> TYPE`."""
    try:
        tree = _parser().parse(text.strip(), start="entry")
    except UnexpectedInput as e:
        raise MalformedLiteral(_error_span(e), literal=text.strip(), reason=describe_parse_error(e)) from None
    return LiteralBuilder().build_entry(tree)


def parse_literal(text: str) -> Literal:
    """Parse a single literal such as `-12i8` or `300`."""
    entry = parse_entry(text)
    if entry.into is not None:
        raise MalformedLiteral(entry.into_span, literal=text.strip(), reason="unexpected '=>' after literal")
    return entry.literal


def parse_entries(source: str, dump_parse: bool = False) -> List[Entry]:
    """Parse a literal list: one entry per line, `#` comments allowed."""
    if not source.endswith("\n"):
        source += "\n"
    try:
        tree = _parser().parse(source, start="start")
    except UnexpectedInput as e:
        span = _error_span(e)
        raise MalformedLiteral(span, literal=_line_of(source, span), reason=describe_parse_error(e)) from None
    if dump_parse:
        print(tree.pretty())
    return LiteralBuilder().build(tree)
