"""Single-literal generation and literal-list compilation."""
from __future__ import annotations

from typing import List, Optional, Union

from llvmlite import ir

from nzlit.backend.llvm import LLVMEmitter
from nzlit.backend.rust import RustEmitter
from nzlit.compiler.config import GeneratorConfig
from nzlit.internals import errors as er
from nzlit.internals.parser import parse_entries, parse_literal
from nzlit.internals.report import Reporter, Span
from nzlit.semantics.dispatch import resolve
from nzlit.semantics.exceptions import LiteralError, UnknownTargetType, WideningMismatch, report_literal_error
from nzlit.semantics.literal import Entry, Literal
from nzlit.semantics.typesys import TypeCatalog, TypeDescriptor
from nzlit.semantics.value import Construction, NonZeroInt


def resolve_target(name: Optional[str], catalog: TypeCatalog, span: Optional[Span] = None) -> Optional[TypeDescriptor]:
    if name is None:
        return None
    descriptor = catalog.by_name(name)
    if descriptor is None:
        raise UnknownTargetType(span, name=name)
    return descriptor


def construct(literal: Literal, catalog: TypeCatalog, target: Optional[TypeDescriptor] = None,
              target_span: Optional[Span] = None) -> Construction:
    """Classify and validate `literal`, then pair it with its widening target.

    Raises:
        LiteralError: If the literal cannot become a nonzero value, or its
            type cannot reach `target`.
    """
    resolution = resolve(literal, catalog)
    descriptor = resolution.descriptor

    if target is not None:
        # An explicit suffix fixes the type; only inferred values widen.
        fits = descriptor.widens_to(target) if resolution.inferred else descriptor == target
        if not fits:
            raise WideningMismatch(target_span or literal.span, got=str(descriptor), target=str(target))

    value = NonZeroInt.new_unchecked(descriptor, resolution.value)
    return Construction(value=value, literal=literal, inferred=resolution.inferred, target=target)


def generate(literal: Union[str, Literal], *, into: Optional[str] = None,
             config: Optional[GeneratorConfig] = None) -> Construction:
    """Run one generation pass over a literal given as text or as a Literal."""
    config = config or GeneratorConfig()
    if isinstance(literal, str):
        literal = parse_literal(literal)
    catalog = config.catalog
    return construct(literal, catalog, resolve_target(into, catalog))


def nonzero(text: str, *, into: Optional[str] = None, config: Optional[GeneratorConfig] = None) -> str:
    """Rust expression constructing the nonzero value written as `text`.

    >>> nonzero("1u8")
    'unsafe { core::num::NonZeroU8::new_unchecked(1u8) }'
    """
    config = config or GeneratorConfig()
    return RustEmitter(config.rust_options).emit(generate(text, into=into, config=config))


def lower(text: str, *, into: Optional[str] = None, config: Optional[GeneratorConfig] = None) -> ir.Constant:
    """LLVM constant for the nonzero value written as `text`."""
    return LLVMEmitter().lower(generate(text, into=into, config=config))


def compile_entries(entries: List[Entry], config: GeneratorConfig, reporter: Reporter,
                    into: Optional[str] = None) -> List[Construction]:
    """Generate every entry, reporting failures instead of raising.

    `into` applies to entries that do not name their own target.
    """
    catalog = config.catalog
    constructions: List[Construction] = []

    for entry in entries:
        literal = entry.literal
        if literal.has_leading_zeros:
            er.emit(reporter, er.ERR.CW0100, literal.span, literal=str(literal))
        try:
            name = entry.into if entry.into is not None else into
            target = resolve_target(name, catalog, entry.into_span)
            constructions.append(construct(literal, catalog, target, entry.into_span))
        except LiteralError as exc:
            report_literal_error(exc, reporter)

    return constructions


def render(constructions: List[Construction], config: GeneratorConfig, verify: bool = True) -> str:
    """Emitted text for a batch: one Rust expression per line, or an LLVM module."""
    if config.backend == "llvm":
        emitter = LLVMEmitter(triple=config.triple)
        for construction in constructions:
            emitter.define(construction)
        if verify:
            emitter.verify()
        return str(emitter.module)

    rust = RustEmitter(config.rust_options)
    return "\n".join(rust.emit(c) for c in constructions) + ("\n" if constructions else "")


def compile_source(source: str, config: GeneratorConfig, reporter: Reporter,
                   into: Optional[str] = None, dump_parse: bool = False) -> List[Construction]:
    """Parse a literal list and generate its entries.

    A parse failure aborts the whole list; per-literal failures are reported
    and skipped.
    """
    try:
        entries = parse_entries(source, dump_parse=dump_parse)
    except LiteralError as exc:
        report_literal_error(exc, reporter)
        return []
    return compile_entries(entries, config, reporter, into=into)
