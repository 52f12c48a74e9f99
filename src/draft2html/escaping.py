"""Character escaping for section text."""

from __future__ import annotations

from typing import Sequence

_REPLACEMENTS = {
    "\n": "<br>\n",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

NBSP = "&nbsp;"


def render_text(text: Sequence[str]) -> str:
    """Escape *text* and turn its leading/trailing spaces into ``&nbsp;``.

    Only ``\\n``, ``&``, ``<`` and ``>`` are replaced. Interior spaces are
    left alone, since the browser only collapses them at the edges of a run.
    """
    if not text:
        return ""
    chars = [_REPLACEMENTS.get(ch, ch) for ch in text]

    for i, ch in enumerate(chars):
        if ch != " ":
            break
        chars[i] = NBSP
    for i in range(len(chars) - 1, -1, -1):
        if chars[i] != " ":
            break
        chars[i] = NBSP

    return "".join(chars)
