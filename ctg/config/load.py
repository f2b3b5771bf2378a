"""
Loading of the language and host tables.

Bundled tables live in the ctg._tables package; a run may point at user
YAML files instead. Every problem is reported as ConfigError before anything
is generated or written.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import ALIAS_SLOT, BoundaryTemplate, EmbeddedLanguage, HostLanguageTemplate, Tables
from .paths import HOSTS_FILE, LANGUAGES_FILE, TABLES_PKG
from .typed import build_typed

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_table_text(path: Optional[Path], resource: str) -> Tuple[str, str]:
    """Returns (text, origin) of a user file or of the bundled resource."""
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Table file not found: {path}")
        return path.read_text(encoding="utf-8"), str(path)
    res = resources.files(TABLES_PKG) / resource
    return res.read_text(encoding="utf-8"), f"{TABLES_PKG}/{resource}"


def _read_yaml_map(path: Optional[Path], resource: str) -> Dict[str, Any]:
    text, origin = _read_table_text(path, resource)
    logger.info(f"Reading {origin}")
    try:
        raw = _yaml.load(text) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {origin}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {origin}")
    return raw


# --------------------------- languages --------------------------- #

def parse_languages(raw: Dict[str, Any]) -> Tuple[EmbeddedLanguage, ...]:
    """Build and validate the ordered language table from a raw mapping."""
    items = raw.get("languages")
    if not isinstance(items, list):
        raise ConfigError("expected a list of languages", ("languages",))
    extras = set(raw.keys()) - {"languages"}
    if extras:
        raise ConfigError(f"unexpected keys: {sorted(map(str, extras))!r}")

    languages = tuple(
        build_typed(EmbeddedLanguage, item, path=("languages", str(i)))
        for i, item in enumerate(items)
    )
    validate_languages(languages)
    return languages


def validate_languages(languages: Tuple[EmbeddedLanguage, ...]) -> None:
    if not languages:
        raise ConfigError("at least one embedded language is required", ("languages",))
    seen: Dict[str, int] = {}
    for i, lang in enumerate(languages):
        path = ("languages", str(i))
        if not lang.name.strip():
            raise ConfigError("must not be empty", (*path, "name"))
        if lang.name in seen:
            raise ConfigError(
                f"duplicate language name '{lang.name}' (first declared at languages.{seen[lang.name]})",
                (*path, "name"),
            )
        seen[lang.name] = i
        if not lang.identifiers:
            raise ConfigError("must not be empty", (*path, "identifiers"))
        for j, alias in enumerate(lang.identifiers):
            if not alias.strip():
                raise ConfigError("alias must not be blank", (*path, "identifiers", str(j)))
        if not lang.sources or any(not s.strip() for s in lang.sources):
            raise ConfigError("scope reference must not be empty", (*path, "source"))


def load_languages(path: Optional[Path] = None) -> Tuple[EmbeddedLanguage, ...]:
    return parse_languages(_read_yaml_map(path, LANGUAGES_FILE))


# ----------------------------- hosts ----------------------------- #

def parse_hosts(raw: Dict[str, Any]) -> Tuple[HostLanguageTemplate, ...]:
    """Build and validate host templates from the `hosts` mapping (name → template)."""
    table = raw.get("hosts")
    if not isinstance(table, dict):
        raise ConfigError("expected a mapping of host languages", ("hosts",))
    extras = set(raw.keys()) - {"hosts"}
    if extras:
        raise ConfigError(f"unexpected keys: {sorted(map(str, extras))!r}")

    hosts: List[HostLanguageTemplate] = []
    for name, body in table.items():
        path = ("hosts", str(name))
        if not isinstance(body, dict):
            raise ConfigError(f"expected mapping, got {type(body).__name__}", path)
        if "name" in body:
            raise ConfigError("host name is taken from the mapping key", (*path, "name"))
        hosts.append(build_typed(HostLanguageTemplate, {"name": name, **body}, path=path))

    result = tuple(hosts)
    validate_hosts(result)
    return result


def _validate_boundary(tpl: BoundaryTemplate, path: Tuple[str, ...]) -> None:
    if ALIAS_SLOT not in tpl.begin:
        raise ConfigError(f"begin must contain the {ALIAS_SLOT} placeholder", (*path, "begin"))
    if not tpl.end:
        raise ConfigError("must not be empty", (*path, "end"))


def validate_hosts(hosts: Tuple[HostLanguageTemplate, ...]) -> None:
    if not hosts:
        raise ConfigError("at least one host language is required", ("hosts",))
    for host in hosts:
        path = ("hosts", host.name)
        if not host.name.strip():
            raise ConfigError("host name must not be empty", path)
        # the name becomes part of the output file names
        if "/" in host.name or "\\" in host.name or ".." in host.name:
            raise ConfigError("host name must not contain '/', '\\' or '..'", path)
        if not host.target_scopes:
            raise ConfigError("must not be empty", (*path, "target_scopes"))
        _validate_boundary(host.basic_grammar_pattern, (*path, "basic_grammar_pattern"))
        _validate_boundary(host.basic_grammar, (*path, "basic_grammar"))


def load_hosts(path: Optional[Path] = None) -> Tuple[HostLanguageTemplate, ...]:
    return parse_hosts(_read_yaml_map(path, HOSTS_FILE))


def load_tables(languages_path: Optional[Path] = None, hosts_path: Optional[Path] = None) -> Tables:
    """
    Load both tables for one generation run.

    Args:
        languages_path: User language table, bundled table when None
        hosts_path: User host table, bundled table when None

    Returns:
        Validated, immutable tables
    """
    return Tables(languages=load_languages(languages_path), hosts=load_hosts(hosts_path))


__all__ = [
    "parse_languages",
    "parse_hosts",
    "validate_languages",
    "validate_hosts",
    "load_languages",
    "load_hosts",
    "load_tables",
]
