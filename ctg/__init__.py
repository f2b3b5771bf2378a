"""
Comment-tagged grammars: generator of editor injection grammars that highlight
foreign-language code inside comment-tagged template strings.
"""

from __future__ import annotations

from .engine import check_grammars, generate, update_grammars

__all__ = ["generate", "update_grammars", "check_grammars"]
