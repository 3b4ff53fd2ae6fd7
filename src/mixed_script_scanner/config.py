from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

DEFAULT_EXTENSIONS = [
    ".txt",
    ".md",
    ".rst",
    ".py",
    ".cs",
    ".json",
    ".yaml",
    ".yml",
    ".xml",
    ".html",
]


@dataclass(slots=True)
class ScannerConfig:
    """Configuration options for scanning files for mixed-script words."""

    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    encoding: str = "utf-8"
    max_line_length: int | None = None
    fail_on_match: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ScannerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "extensions" in kwargs:
        kwargs["extensions"] = _normalize_extensions(kwargs["extensions"])
    if "max_line_length" in kwargs:
        kwargs["max_line_length"] = _validate_max_line_length(kwargs["max_line_length"])
    return kwargs


def _validate_max_line_length(value: Any) -> int | None:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("'max_line_length' must be a non-negative integer or null.")
    return value


def _normalize_extensions(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError("'extensions' must be a list of file suffixes.")
    normalized: List[str] = []
    for item in value:
        suffix = str(item).strip().lower()
        if not suffix:
            continue
        normalized.append(suffix if suffix.startswith(".") else f".{suffix}")
    return normalized


def config_from_dict(data: Mapping[str, Any] | None) -> ScannerConfig:
    """Build a ScannerConfig from a dictionary-like input."""
    if data is None:
        return ScannerConfig()
    return ScannerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ScannerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ScannerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ScannerConfig()
    return config_from_yaml(path)
