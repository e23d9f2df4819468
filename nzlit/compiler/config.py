"""Generator configuration (nzlit.toml) loading and validation."""
from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from nzlit.backend.rust import DEFAULT_CORE_PATH, RustOptions
from nzlit.semantics.typesys import POINTER_WIDTHS, TypeCatalog, catalog_for

CONFIG_NAME = "nzlit.toml"
BACKENDS = ("rust", "llvm")

# Rust module path: identifiers joined by '::'
CORE_PATH_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)*$")


class ConfigError(Exception):
    def __init__(self, reason: str, path: Optional[Path] = None):
        super().__init__(reason)
        self.reason = reason
        self.path = path


@dataclass(frozen=True)
class GeneratorConfig:
    triple: Optional[str] = None
    pointer_width: Optional[int] = None
    backend: str = "rust"
    core_path: str = DEFAULT_CORE_PATH
    absolute_paths: bool = False

    def validate(self) -> None:
        if self.pointer_width is not None and self.pointer_width not in POINTER_WIDTHS:
            raise ConfigError(
                f"Invalid pointer_width {self.pointer_width}. Must be one of {', '.join(map(str, POINTER_WIDTHS))}."
            )
        if self.backend not in BACKENDS:
            raise ConfigError(f"Invalid backend '{self.backend}'. Must be one of: {', '.join(BACKENDS)}.")
        if not CORE_PATH_PATTERN.match(self.core_path):
            raise ConfigError(f"Invalid core_path '{self.core_path}'. Expected a Rust module path such as core::num.")

    def resolved_pointer_width(self) -> int:
        """Explicit pointer_width, else the triple's, else the host's."""
        if self.pointer_width is not None:
            return self.pointer_width
        from nzlit.backend.platform_detect import get_current_platform, parse_triple
        platform = parse_triple(self.triple) if self.triple else get_current_platform()
        return platform.pointer_width

    @property
    def catalog(self) -> TypeCatalog:
        return catalog_for(self.resolved_pointer_width())

    @property
    def rust_options(self) -> RustOptions:
        return RustOptions(core_path=self.core_path, absolute_paths=self.absolute_paths)

    def override(self, **changes) -> "GeneratorConfig":
        """Copy with every non-None keyword applied (CLI flags over file values)."""
        changes = {k: v for k, v in changes.items() if v is not None}
        updated = replace(self, **changes)
        updated.validate()
        return updated


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load nzlit.toml from `path`, or from the cwd if present.

    A missing file in the cwd yields the defaults; an explicit `path` must
    exist.
    """
    if path is None:
        candidate = Path.cwd() / CONFIG_NAME
        if not candidate.exists():
            return GeneratorConfig()
        path = candidate
    if not path.exists():
        raise ConfigError(f"No {CONFIG_NAME} found at {path}", path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(str(e), path) from None
    try:
        return _parse_config(data)
    except ConfigError as e:
        raise ConfigError(e.reason, path) from None


def load_config_from_string(text: str) -> GeneratorConfig:
    return _parse_config(tomllib.loads(text))


def _parse_config(data: dict) -> GeneratorConfig:
    target = data.get("target", {})
    emit = data.get("emit", {})
    if not isinstance(target, dict) or not isinstance(emit, dict):
        raise ConfigError("[target] and [emit] must be tables")

    pointer_width = target.get("pointer_width")
    if pointer_width is not None and (isinstance(pointer_width, bool) or not isinstance(pointer_width, int)):
        raise ConfigError(f"Invalid pointer_width {pointer_width!r}. Must be an integer.")

    config = GeneratorConfig(
        triple=target.get("triple"),
        pointer_width=pointer_width,
        backend=emit.get("backend", "rust"),
        core_path=emit.get("core_path", DEFAULT_CORE_PATH),
        absolute_paths=bool(emit.get("absolute_paths", False)),
    )
    config.validate()
    return config
