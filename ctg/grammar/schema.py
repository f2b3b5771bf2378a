"""
Generated grammar documents.

Field declaration order is the serialized key order, so two runs over the
same tables produce byte-identical JSON.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def to_document(self) -> dict:
        """JSON-ready mapping with editor (camelCase) keys and unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Capture(_Model):
    name: str


class IncludeRule(_Model):
    include: str


class MatchRule(_Model):
    match: str


Rule = Union[IncludeRule, MatchRule]

Captures = Dict[str, Capture]


class PatternDescriptor(_Model):
    """begin/end rule. The outer dispatch rule has neither name nor contentName."""

    name: Optional[str] = None
    content_name: Optional[str] = Field(default=None, alias="contentName")
    begin: str
    begin_captures: Captures = Field(alias="beginCaptures")
    end: str
    end_captures: Optional[Captures] = Field(default=None, alias="endCaptures")
    patterns: List[Rule]


class GrammarDescriptor(_Model):
    file_types: List[str] = Field(default_factory=list, alias="fileTypes")
    injection_selector: str = Field(alias="injectionSelector")
    patterns: List[PatternDescriptor]
    repository: Dict[str, PatternDescriptor]
    scope_name: str = Field(alias="scopeName")


class ReinjectionDescriptor(_Model):
    file_types: List[str] = Field(default_factory=list, alias="fileTypes")
    injection_selector: str = Field(alias="injectionSelector")
    patterns: List[IncludeRule]
    scope_name: str = Field(alias="scopeName")


def captures(mapping: Optional[Dict[int, str]]) -> Optional[Captures]:
    """Capture index → scope name, as {"<index>": {"name": scope}} in index order."""
    if mapping is None:
        return None
    return {str(i): Capture(name=mapping[i]) for i in sorted(mapping)}


__all__ = [
    "Capture",
    "IncludeRule",
    "MatchRule",
    "Rule",
    "PatternDescriptor",
    "GrammarDescriptor",
    "ReinjectionDescriptor",
    "captures",
]
