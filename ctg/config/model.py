"""
Input tables of the generator.

Embedded languages and host-language templates are plain frozen dataclasses
built from YAML by the typed loader. They are read-only during a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

# Placeholder for the escaped alias union inside a begin regex shape.
ALIAS_SLOT = "{aliases}"

DEFAULT_SUBSTITUTION_INCLUDE = "source.ts#template-substitution-element"
DEFAULT_STRING_SCOPE = "string.js"


@dataclass(frozen=True)
class EmbeddedLanguage:
    """A language that may appear inside a tagged template string."""

    name: str
    """Unique key: "sql", "html", "glsl", etc."""

    identifiers: Tuple[str, ...]
    """Case-insensitive aliases accepted in the tag comment, in priority order."""

    source: Union[str, Tuple[str, ...]]
    """Scope name(s) of the embedded grammar. Several when the grammar is known by equivalent names."""

    @property
    def sources(self) -> Tuple[str, ...]:
        if isinstance(self.source, str):
            return (self.source,)
        return tuple(self.source)


@dataclass(frozen=True)
class BoundaryTemplate:
    """
    Begin/end shape of one rule of a host language.

    `begin` is a regex with the ALIAS_SLOT placeholder; it is never passed
    through str.format so regex braces stay intact.
    """

    begin: str
    end: str
    begin_captures: Dict[int, str]
    end_captures: Optional[Dict[int, str]] = None

    def render_begin(self, aliases: str) -> str:
        return self.begin.replace(ALIAS_SLOT, aliases)


@dataclass(frozen=True)
class HostLanguageTemplate:
    """
    A host language whose comments may tag template strings.

    basic_grammar_pattern recognizes "tag comment + opening delimiter" for one
    embedded language; basic_grammar is the outer rule that only consumes the
    first comment character and dispatches into the repository.
    """

    name: str
    target_scopes: Tuple[str, ...]
    basic_grammar_pattern: BoundaryTemplate
    basic_grammar: BoundaryTemplate
    substitution_include: str = DEFAULT_SUBSTITUTION_INCLUDE
    string_scope: str = DEFAULT_STRING_SCOPE


@dataclass(frozen=True)
class Tables:
    """Everything a generation run reads."""

    languages: Tuple[EmbeddedLanguage, ...]
    hosts: Tuple[HostLanguageTemplate, ...]

    def host(self, name: str) -> Optional[HostLanguageTemplate]:
        for h in self.hosts:
            if h.name == name:
                return h
        return None


__all__ = [
    "ALIAS_SLOT",
    "DEFAULT_SUBSTITUTION_INCLUDE",
    "DEFAULT_STRING_SCOPE",
    "EmbeddedLanguage",
    "BoundaryTemplate",
    "HostLanguageTemplate",
    "Tables",
]
