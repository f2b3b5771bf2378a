from __future__ import annotations

from typing import Iterable, Sequence

from ..config.model import EmbeddedLanguage
from .pattern import embedded_scope


def basic_injection_selector(target_scopes: Iterable[str]) -> str:
    """
    Where the basic grammar activates: inside the host scope, outside comments,
    and outside strings unless the string is part of an embedded block.
    """
    return ", ".join(f"L:{scope} -comment -(string - meta.embedded)" for scope in target_scopes)


def reinjection_selector(target_scopes: Iterable[str], languages: Sequence[EmbeddedLanguage]) -> str:
    """Where host substitutions are re-exposed: only inside generated embedded blocks."""
    embedded = ", ".join(embedded_scope(lang) for lang in languages)
    return ", ".join(f"L:{scope} ({embedded})" for scope in target_scopes)


__all__ = ["basic_injection_selector", "reinjection_selector"]
