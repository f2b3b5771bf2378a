"""
Generation run.

Every document of every host is built in memory first; files are written
only once the whole set is known to be valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import load_tables
from .config.load import validate_hosts, validate_languages
from .config.model import EmbeddedLanguage, HostLanguageTemplate, Tables
from .config.paths import default_out_dir, grammar_filename, reinjection_filename
from .errors import UnknownHostError
from .grammar import build_basic_grammar, build_reinjection_grammar
from .grammar.assembler import shared_aliases
from .writer import render_document, write_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """Rendered document together with its file name inside the output directory."""
    name: str
    text: str


def build_host_files(
    host: HostLanguageTemplate,
    languages: Sequence[EmbeddedLanguage],
) -> List[GeneratedFile]:
    """Basic and reinjection grammars of one host language."""
    return [
        GeneratedFile(grammar_filename(host.name), render_document(build_basic_grammar(host, languages))),
        GeneratedFile(reinjection_filename(host.name), render_document(build_reinjection_grammar(host, languages))),
    ]


def generate(
    languages: Sequence[EmbeddedLanguage],
    hosts: Sequence[HostLanguageTemplate],
) -> List[GeneratedFile]:
    """
    Pure part of the run: all documents for all hosts, in host order.

    Tables are validated here as well, so callers passing dataclasses directly
    get the same ConfigError as the YAML loader raises.
    """
    validate_languages(tuple(languages))
    validate_hosts(tuple(hosts))

    for alias, names in shared_aliases(languages).items():
        logger.warning(
            f"Alias '{alias}' is declared by {', '.join(names)}; '{names[0]}' takes precedence"
        )

    out: List[GeneratedFile] = []
    for host in hosts:
        out.extend(build_host_files(host, languages))
    return out


def render_host(tables: Tables, host_name: str, *, reinjection: bool = False) -> str:
    """Text of a single document, for printing."""
    host = tables.host(host_name)
    if host is None:
        raise UnknownHostError(host_name, [h.name for h in tables.hosts])
    if reinjection:
        return render_document(build_reinjection_grammar(host, tables.languages))
    return render_document(build_basic_grammar(host, tables.languages))


def update_grammars(
    out_dir: Optional[Path] = None,
    *,
    languages_path: Optional[Path] = None,
    hosts_path: Optional[Path] = None,
) -> List[Path]:
    """
    Regenerate every grammar file.

    Args:
        out_dir: Destination directory, ./syntaxes when None
        languages_path: User language table, bundled table when None
        hosts_path: User host table, bundled table when None

    Returns:
        Paths written, in generation order
    """
    tables = load_tables(languages_path, hosts_path)
    files = generate(tables.languages, tables.hosts)

    target = out_dir if out_dir is not None else default_out_dir()
    written: List[Path] = []
    for f in files:
        path = target / f.name
        write_document(path, f.text)
        written.append(path)
    logger.info(f"Generated {len(written)} grammar file(s) for {len(tables.hosts)} host language(s)")
    return written


def check_grammars(
    out_dir: Optional[Path] = None,
    *,
    languages_path: Optional[Path] = None,
    hosts_path: Optional[Path] = None,
) -> List[str]:
    """
    Compare files on disk with what would be generated.

    Returns:
        Names of missing or outdated files (empty when everything is up to date)
    """
    tables = load_tables(languages_path, hosts_path)
    target = out_dir if out_dir is not None else default_out_dir()
    stale: List[str] = []
    for f in generate(tables.languages, tables.hosts):
        path = target / f.name
        if not path.is_file() or path.read_text(encoding="utf-8") != f.text:
            logger.debug(f"Outdated: {path}")
            stale.append(f.name)
    return stale


__all__ = ["GeneratedFile", "build_host_files", "generate", "render_host", "update_grammars", "check_grammars"]
