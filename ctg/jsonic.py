from __future__ import annotations

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Minimal JSON dumper for simple CLI answers.
    No prettify; ensure_ascii=False; no trailing newline (the CLI decides).
    """
    return json.dumps(obj, ensure_ascii=False)


def dumps_document(obj: Any) -> str:
    """
    Stable rendering of a generated grammar document.
    Key order is taken from the input as is, never sorted.
    """
    return json.dumps(obj, ensure_ascii=False, indent=4) + "\n"


__all__ = ["dumps", "dumps_document"]
