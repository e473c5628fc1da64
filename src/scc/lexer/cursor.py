from __future__ import annotations

from scc.constants import EOF

MAX_PUSHBACK = 2


class Cursor:
    """Forward-only reader over an immutable source string.

    The cursor is an index into the text plus the current 1-based line
    number. `pushback` steps the index back over characters that were just
    read (at most `MAX_PUSHBACK` in a row) and rolls the line counter back
    when one of them is a newline.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 1
        self._pending = 0

    @property
    def line(self) -> int:
        return self._line

    @property
    def pos(self) -> int:
        return self._pos

    def next(self) -> str:
        """Consume and return the next character, or EOF."""
        if self._pos >= len(self._text):
            return EOF
        ch = self._text[self._pos]
        self._pos += 1
        if self._pending:
            self._pending -= 1
        if ch == '\n':
            self._line += 1
        return ch

    def peek(self) -> str:
        if self._pos >= len(self._text):
            return EOF
        return self._text[self._pos]

    def pushback(self, ch: str) -> None:
        """Return *ch*, the most recently consumed character, to the stream.

        Raises:
            ValueError: If *ch* is not the character before the cursor or the
                pushback depth would exceed `MAX_PUSHBACK`.
        """
        if ch == EOF:
            return
        if self._pending >= MAX_PUSHBACK:
            raise ValueError(f'pushback depth exceeds {MAX_PUSHBACK}')
        if self._pos == 0 or self._text[self._pos - 1] != ch:
            raise ValueError(f'pushback of {ch!r} does not match consumed input')
        self._pos -= 1
        self._pending += 1
        if ch == '\n':
            self._line -= 1
