from __future__ import annotations

from .assembler import build_basic_grammar, build_reinjection_grammar
from .pattern import FALLBACK_RULE, build_language_pattern, repository_key
from .regex import alias_union, escape_regexp
from .schema import GrammarDescriptor, PatternDescriptor, ReinjectionDescriptor
from .selectors import basic_injection_selector, reinjection_selector

__all__ = [
    "FALLBACK_RULE",
    "GrammarDescriptor",
    "PatternDescriptor",
    "ReinjectionDescriptor",
    "alias_union",
    "basic_injection_selector",
    "build_basic_grammar",
    "build_language_pattern",
    "build_reinjection_grammar",
    "escape_regexp",
    "reinjection_selector",
    "repository_key",
]
