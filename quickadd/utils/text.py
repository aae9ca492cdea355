import re
from collections.abc import Iterable

_SPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()


def cut_spans(text: str, spans: Iterable[tuple[int, int]]) -> str:
    """Return ``text`` with every (start, end) span removed.

    Spans must not overlap; they are applied left to right.
    """
    pieces: list[str] = []
    pos = 0
    for start, end in sorted(spans):
        pieces.append(text[pos:start])
        pos = max(pos, end)
    pieces.append(text[pos:])
    return "".join(pieces)
