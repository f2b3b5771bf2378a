from __future__ import annotations

from .load import load_hosts, load_languages, load_tables, parse_hosts, parse_languages
from .model import (
    ALIAS_SLOT,
    BoundaryTemplate,
    EmbeddedLanguage,
    HostLanguageTemplate,
    Tables,
)
from .typed import build_typed

__all__ = [
    "ALIAS_SLOT",
    "BoundaryTemplate",
    "EmbeddedLanguage",
    "HostLanguageTemplate",
    "Tables",
    "build_typed",
    "load_hosts",
    "load_languages",
    "load_tables",
    "parse_hosts",
    "parse_languages",
]
