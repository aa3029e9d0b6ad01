import re
from typing import List, Optional

from app.core.schemas import Line


# Glyphs that open a bullet line. A leading hyphen counts too.
BULLET_CHARS = "•●▪◦‣·*-"
BULLET_RE = re.compile(r"^[\s•●▪◦‣·*\-]+")
LINE_SPLIT_RE = re.compile(r"\r?\n")


def normalize_lines(text: str) -> List[Line]:
    """
    Split raw text into trimmed, non-empty lines.

    Indexes are positions in the returned list; source_line is the 1-based
    line number in the original text.
    """
    out: List[Line] = []
    for source_i, raw in enumerate(LINE_SPLIT_RE.split(text or ""), start=1):
        t = raw.strip()
        if t:
            out.append(Line(index=len(out), text=t, source_line=source_i))
    return out


def is_bullet(text: str) -> bool:
    t = text.strip()
    return bool(t) and t[0] in BULLET_CHARS


def strip_bullet(text: str) -> str:
    return BULLET_RE.sub("", text).strip()


class LineCursor:
    """
    Bounded cursor over a section's lines.

    peek() never raises: offsets outside the section return None, so
    end-of-section handling is an explicit branch in the callers.
    """

    def __init__(self, lines: List[str]):
        self.lines = lines
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.lines)

    @property
    def current(self) -> Optional[str]:
        return self.peek(0)

    def peek(self, offset: int) -> Optional[str]:
        i = self.pos + offset
        if 0 <= i < len(self.lines):
            return self.lines[i]
        return None

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, len(self.lines))
