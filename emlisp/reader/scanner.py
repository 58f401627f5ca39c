"""Expression-boundary scanning.

Finds the expression that ends just before a cursor offset in raw buffer
text, so "evaluate the expression before point" can feed the reader.
"""

from __future__ import annotations

from typing import Optional


def _is_delimiter(c: str) -> bool:
    return c.isspace() or c in "()"


def find_last_expression(text: str, cursor: int) -> Optional[str]:
    """Return the source of the expression ending before `cursor`, or None.

    - `)` : the balanced list ending there, if its `(` can be found.
    - `"` : back to the nearest earlier `"` not preceded by a backslash.
    - otherwise the atom ending there.
    """
    pos = min(cursor, len(text)) - 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    if pos < 0:
        return None

    end = pos + 1
    c = text[pos]

    if c == ")":
        depth = 1
        pos -= 1
        while pos >= 0:
            if text[pos] == ")":
                depth += 1
            elif text[pos] == "(":
                depth -= 1
                if depth == 0:
                    return text[pos:end]
            pos -= 1
        return None

    if c == '"':
        pos -= 1
        while pos >= 0:
            if text[pos] == '"' and (pos == 0 or text[pos - 1] != "\\"):
                return text[pos:end]
            pos -= 1
        return None

    while pos >= 0 and not _is_delimiter(text[pos]):
        pos -= 1
    return text[pos + 1:end]
