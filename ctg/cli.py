from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Dict, Optional

from .config import load_tables
from .config.load import load_hosts, load_languages
from .engine import check_grammars, render_host, update_grammars
from .errors import CtgUserError
from .jsonic import dumps as jdumps

DIST_NAME = "comment-tagged-grammars"


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        # running from a source checkout
        return "0.0.0"


def _setup_logging() -> None:
    """One stderr handler on the package logger; CTG_DEBUG=1 turns on debug output."""
    log = logging.getLogger("ctg")
    if log.handlers:
        return
    log.setLevel(logging.DEBUG if os.environ.get("CTG_DEBUG") else logging.INFO)
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ctg",
        description="Comment-tagged template grammar generator",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Table overrides shared by every subcommand
    def add_tables(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--languages",
            type=Path,
            metavar="FILE",
            help="YAML language table (default: bundled table)",
        )
        sp.add_argument(
            "--hosts",
            type=Path,
            metavar="FILE",
            help="YAML host language table (default: bundled table)",
        )

    sp_gen = sub.add_parser("generate", help="Write grammar files for every host language")
    add_tables(sp_gen)
    sp_gen.add_argument(
        "--out",
        type=Path,
        metavar="DIR",
        help="output directory (default: ./syntaxes)",
    )
    sp_gen.add_argument(
        "--check",
        action="store_true",
        help="do not write; exit 1 if any file is missing or outdated",
    )

    sp_render = sub.add_parser("render", help="Print one grammar to stdout")
    add_tables(sp_render)
    sp_render.add_argument("host", help="host language name, e.g. fsharp or javascript")
    sp_render.add_argument(
        "--reinjection",
        action="store_true",
        help="print the reinjection grammar instead of the basic one",
    )

    sp_list = sub.add_parser("list", help="List table entries (JSON)")
    add_tables(sp_list)
    sp_list.add_argument("what", choices=["languages", "hosts"], help="what to list")

    return p


def _list(what: str, languages: Optional[Path], hosts: Optional[Path]) -> Dict[str, Any]:
    if what == "languages":
        return {
            "languages": [
                {"name": lang.name, "identifiers": list(lang.identifiers), "sources": list(lang.sources)}
                for lang in load_languages(languages)
            ]
        }
    if what == "hosts":
        return {
            "hosts": [
                {"name": host.name, "targetScopes": list(host.target_scopes)}
                for host in load_hosts(hosts)
            ]
        }
    raise ValueError(f"Unknown list target: {what}")


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        if ns.cmd == "generate":
            if ns.check:
                stale = check_grammars(ns.out, languages_path=ns.languages, hosts_path=ns.hosts)
                for name in stale:
                    sys.stderr.write(f"Outdated grammar: {name}\n")
                return 1 if stale else 0
            update_grammars(ns.out, languages_path=ns.languages, hosts_path=ns.hosts)
            return 0

        if ns.cmd == "render":
            tables = load_tables(ns.languages, ns.hosts)
            sys.stdout.write(render_host(tables, ns.host, reinjection=ns.reinjection))
            return 0

        if ns.cmd == "list":
            sys.stdout.write(jdumps(_list(ns.what, ns.languages, ns.hosts)))
            return 0

    except CtgUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
