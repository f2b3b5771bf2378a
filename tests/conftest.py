from __future__ import annotations

from pathlib import Path

import pytest

from ctg.config import EmbeddedLanguage, HostLanguageTemplate, load_hosts

from tests.infrastructure.file_utils import write_tables


def _host(name: str) -> HostLanguageTemplate:
    for host in load_hosts():
        if host.name == name:
            return host
    raise LookupError(name)


@pytest.fixture
def fsharp_host() -> HostLanguageTemplate:
    """Bundled template of the language whose comments precede triple-quoted strings."""
    return _host("fsharp")


@pytest.fixture
def js_host() -> HostLanguageTemplate:
    """Bundled template of the language whose comments precede back-tick strings."""
    return _host("javascript")


@pytest.fixture
def sql() -> EmbeddedLanguage:
    return EmbeddedLanguage(name="sql", identifiers=("sql", "postgres"), source="source.sql")


@pytest.fixture
def js_and_python() -> tuple[EmbeddedLanguage, ...]:
    return (
        EmbeddedLanguage(name="js", identifiers=("js", "javascript"), source="source.js"),
        EmbeddedLanguage(name="python", identifiers=("python", "py"), source="source.python"),
    )


@pytest.fixture
def tmptables(tmp_path: Path) -> Path:
    """Temporary project with a one-language table at tables/languages.yaml."""
    write_tables(tmp_path)
    return tmp_path
