from __future__ import annotations

from pathlib import Path

# Single source of truth for table and output locations.
TABLES_PKG = "ctg._tables"
LANGUAGES_FILE = "languages.yaml"
HOSTS_FILE = "hosts.yaml"
OUTPUT_DIR = "syntaxes"


def default_out_dir(root: Path | None = None) -> Path:
    """Directory generated grammars are written to: <root>/syntaxes."""
    return ((root or Path.cwd()) / OUTPUT_DIR).resolve()


def grammar_filename(host: str) -> str:
    """File name of the basic injection grammar of a host language."""
    return f"grammar-{host}.json"


def reinjection_filename(host: str) -> str:
    """File name of the reinjection grammar of a host language."""
    return f"reinject-grammar-{host}.json"


__all__ = [
    "TABLES_PKG",
    "LANGUAGES_FILE",
    "HOSTS_FILE",
    "OUTPUT_DIR",
    "default_out_dir",
    "grammar_filename",
    "reinjection_filename",
]
