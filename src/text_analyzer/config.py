from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_TOP_N = 10


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for the text analyzer CLI."""

    top_n: int = DEFAULT_TOP_N
    word_column_width: int = 15
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        for name in ("top_n", "word_column_width"):
            value = getattr(self, name)
            # bool is an int subclass but never a sensible count.
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"{name} must be a non-negative integer, got {value!r}."
                )
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError(
                f"encoding must be a non-empty string, got {self.encoding!r}."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return AnalyzerConfig()
    allowed = {field.name for field in fields(AnalyzerConfig)}
    return AnalyzerConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"Configuration YAML at {path} must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
