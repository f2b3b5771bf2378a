from __future__ import annotations

import re
from typing import Iterable

# Characters that change meaning inside an Oniguruma pattern, plus whitespace
# (significant under the x flag).
_SPECIAL = re.compile(r"[-\[\]{}()*+?.,\\^$|#\s]")


def escape_regexp(text: str) -> str:
    """Backslash-escape `text` so it matches literally."""
    return _SPECIAL.sub(lambda m: "\\" + m.group(0), text)


def alias_union(aliases: Iterable[str]) -> str:
    """Escaped, pipe-joined alternation of aliases, order preserved."""
    return "|".join(escape_regexp(a) for a in aliases)


__all__ = ["escape_regexp", "alias_union"]
