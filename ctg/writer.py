from __future__ import annotations

import logging
from pathlib import Path

from .errors import GrammarWriteError
from .grammar.schema import GrammarDescriptor, ReinjectionDescriptor
from .jsonic import dumps_document

logger = logging.getLogger(__name__)


def render_document(doc: GrammarDescriptor | ReinjectionDescriptor) -> str:
    """Stable JSON text of a generated grammar."""
    return dumps_document(doc.to_document())


def write_document(path: Path, text: str) -> None:
    """
    Atomically write one document: temp file next to the target, then replace.
    Any OSError is fatal to the run and surfaces as GrammarWriteError.
    """
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        tmp.replace(path)
    except OSError as e:
        if tmp.exists():
            tmp.unlink()
        raise GrammarWriteError(f"Failed to write {path}: {e}") from e
    logger.info(f"Wrote {path}")


__all__ = ["render_document", "write_document"]
