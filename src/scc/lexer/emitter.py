from __future__ import annotations

from enum import Enum
from typing import List


class Channel(Enum):
    CODE = 'code'
    COMMENT = 'comment'


class Emitter:
    """Append-only output buffer fed through two channels.

    Normally only CODE text is kept; in inverted mode only COMMENT text is
    kept, plus the code newline ending any line that contained a comment so
    extracted comments stay on separate lines.
    """

    def __init__(self, *, invert: bool = False) -> None:
        self._parts: List[str] = []
        self._invert = invert
        self._line_had_comment = False

    def emit(self, text: str, channel: Channel = Channel.CODE) -> None:
        if not text:
            return
        if channel is Channel.COMMENT:
            if self._invert:
                self._parts.append(text)
            return
        if not self._invert:
            self._parts.append(text)
        elif self._line_had_comment and '\n' in text:
            self._parts.append('\n')
        if '\n' in text:
            self._line_had_comment = False

    def emit_kept(self, text: str) -> None:
        """Emit *text* into whichever channel this emitter keeps."""
        if text:
            self._parts.append(text)

    def mark_comment(self) -> None:
        """Record that the current line holds a comment."""
        self._line_had_comment = True

    def clear(self) -> None:
        self._parts.clear()

    def text(self) -> str:
        return ''.join(self._parts)
