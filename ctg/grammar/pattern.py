"""
Per-language rules.

One PatternDescriptor per (host, embedded language): it matches the tag
comment and the opening delimiter (the first comment character was already
consumed by the outer rule), names the embedded region, and hands its
content to the embedded grammar.
"""

from __future__ import annotations

import logging

from ..config.model import EmbeddedLanguage, HostLanguageTemplate
from .regex import alias_union
from .schema import IncludeRule, MatchRule, PatternDescriptor, captures

logger = logging.getLogger(__name__)

REPOSITORY_PREFIX = "commentTaggedTemplate-"

# Consumes anything the embedded grammar did not, e.g. when it is not installed,
# so the region is still fully matched but left unhighlighted.
FALLBACK_RULE = MatchRule(match=".")


def repository_key(language: EmbeddedLanguage) -> str:
    return REPOSITORY_PREFIX + language.name


def embedded_scope(language: EmbeddedLanguage) -> str:
    """Scope of the region holding the embedded code."""
    return f"meta.embedded.block.{language.name}"


def pattern_scope(host: HostLanguageTemplate, language: EmbeddedLanguage) -> str:
    return f"{host.string_scope}.taggedTemplate.commentTaggedTemplate.{language.name}"


def build_language_pattern(host: HostLanguageTemplate, language: EmbeddedLanguage) -> PatternDescriptor:
    tpl = host.basic_grammar_pattern
    includes = [IncludeRule(include=src) for src in language.sources]
    logger.debug(
        f"Pattern {host.name}/{language.name}: aliases={list(language.identifiers)}, "
        f"sources={list(language.sources)}"
    )
    return PatternDescriptor(
        name=pattern_scope(host, language),
        content_name=embedded_scope(language),
        begin=tpl.render_begin(alias_union(language.identifiers)),
        begin_captures=captures(tpl.begin_captures),
        end=tpl.end,
        end_captures=captures(tpl.end_captures),
        patterns=[*includes, FALLBACK_RULE],
    )


__all__ = [
    "REPOSITORY_PREFIX",
    "FALLBACK_RULE",
    "repository_key",
    "embedded_scope",
    "pattern_scope",
    "build_language_pattern",
]
