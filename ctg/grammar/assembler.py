"""
Assembly of the per-host grammars.

The basic grammar holds one repository entry per embedded language and a
single outer rule. The outer rule looks ahead for a tag comment naming any
known language, consumes only the first comment character and lets the
repository entries (tried in table order) match the rest.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ..config.model import EmbeddedLanguage, HostLanguageTemplate
from ..errors import ConfigError
from .pattern import build_language_pattern, repository_key
from .regex import alias_union
from .schema import GrammarDescriptor, IncludeRule, PatternDescriptor, ReinjectionDescriptor, captures
from .selectors import basic_injection_selector, reinjection_selector

logger = logging.getLogger(__name__)


def basic_scope_name(host: HostLanguageTemplate) -> str:
    return f"inline.{host.name}.template-tagged-languages"


def reinjection_scope_name(host: HostLanguageTemplate) -> str:
    return basic_scope_name(host) + ".reinjection"


def all_identifiers(languages: Sequence[EmbeddedLanguage]) -> List[str]:
    """Aliases of every language, in table order."""
    return [alias for lang in languages for alias in lang.identifiers]


def shared_aliases(languages: Sequence[EmbeddedLanguage]) -> Dict[str, List[str]]:
    """
    Aliases declared by more than one language (case-insensitive).

    Returns:
        alias → names of the declaring languages, first declared first
    """
    owners: Dict[str, List[str]] = {}
    for lang in languages:
        for alias in dict.fromkeys(a.lower() for a in lang.identifiers):
            owners.setdefault(alias, []).append(lang.name)
    return {alias: names for alias, names in owners.items() if len(names) > 1}


def build_repository(
    host: HostLanguageTemplate,
    languages: Sequence[EmbeddedLanguage],
) -> Dict[str, PatternDescriptor]:
    repository: Dict[str, PatternDescriptor] = {}
    for lang in languages:
        key = repository_key(lang)
        if key in repository:
            raise ConfigError(f"duplicate language name '{lang.name}'", ("languages",))
        repository[key] = build_language_pattern(host, lang)
    return repository


def build_dispatch_pattern(
    host: HostLanguageTemplate,
    languages: Sequence[EmbeddedLanguage],
) -> PatternDescriptor:
    tpl = host.basic_grammar
    return PatternDescriptor(
        begin=tpl.render_begin(alias_union(all_identifiers(languages))),
        begin_captures=captures(tpl.begin_captures),
        end=tpl.end,
        end_captures=captures(tpl.end_captures),
        patterns=[IncludeRule(include="#" + repository_key(lang)) for lang in languages],
    )


def build_basic_grammar(
    host: HostLanguageTemplate,
    languages: Sequence[EmbeddedLanguage],
) -> GrammarDescriptor:
    """
    Build the injection grammar of one host language.

    Args:
        host: Host template
        languages: Language table; its order is the dispatch priority

    Returns:
        Grammar with the repository, the outer dispatch rule and its selector
    """
    repository = build_repository(host, languages)
    logger.debug(f"Assembled {host.name} grammar with {len(repository)} language(s)")
    return GrammarDescriptor(
        file_types=[],
        injection_selector=basic_injection_selector(host.target_scopes),
        patterns=[build_dispatch_pattern(host, languages)],
        repository=repository,
        scope_name=basic_scope_name(host),
    )


def build_reinjection_grammar(
    host: HostLanguageTemplate,
    languages: Sequence[EmbeddedLanguage],
) -> ReinjectionDescriptor:
    """Grammar re-exposing host substitutions inside the embedded blocks."""
    return ReinjectionDescriptor(
        file_types=[],
        injection_selector=reinjection_selector(host.target_scopes, languages),
        patterns=[IncludeRule(include=host.substitution_include)],
        scope_name=reinjection_scope_name(host),
    )


__all__ = [
    "basic_scope_name",
    "reinjection_scope_name",
    "all_identifiers",
    "shared_aliases",
    "build_repository",
    "build_dispatch_pattern",
    "build_basic_grammar",
    "build_reinjection_grammar",
]
