"""
text_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analysis import analyze
from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .loader import ReadError, read_text_file
from .models import TextStats, WordCount
from .report import build_payload, render_report

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze",
    "read_text_file",
    "ReadError",
    "TextStats",
    "WordCount",
    "render_report",
    "build_payload",
]

__version__ = "0.1.0"
