"""
mixed_script_scanner package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ScannerConfig, config_from_dict, config_from_yaml, load_config
from .models import Document, DocumentReport, Highlight, Line, Match
from .pipeline import highlight_line, process_corpus, process_document
from .scanner import MixedScriptScanner, find_mixed_words, is_mixed_script_word, scan

__all__ = [
    "ScannerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Document",
    "DocumentReport",
    "Highlight",
    "Line",
    "Match",
    "MixedScriptScanner",
    "find_mixed_words",
    "is_mixed_script_word",
    "scan",
    "highlight_line",
    "process_corpus",
    "process_document",
]

__version__ = "0.1.0"
