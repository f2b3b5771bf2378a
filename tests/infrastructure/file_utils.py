"""
Utilities for creating table files in tests.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Optional, Tuple


def write(p: Path, text: str) -> Path:
    """
    Writes text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content

    Returns:
        Path of the written file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


SQL_LANGUAGES = """
languages:
  - name: sql
    identifiers: [sql, postgres]
    source: source.sql
"""


def write_tables(root: Path, languages: str = SQL_LANGUAGES, hosts: Optional[str] = None) -> Tuple[Path, Optional[Path]]:
    """
    Writes a language table (and optionally a host table) under root/tables.

    Returns:
        (languages_path, hosts_path or None)
    """
    lang_path = write(root / "tables" / "languages.yaml", textwrap.dedent(languages).lstrip())
    hosts_path = None
    if hosts is not None:
        hosts_path = write(root / "tables" / "hosts.yaml", textwrap.dedent(hosts).lstrip())
    return lang_path, hosts_path
