"""Backslash-newline (line splice) handling.

A splice may sit between the two characters of a delimiter such as ``/*``.
`count_splices` consumes the run of splices ahead of the cursor without
touching the character after it; `emit_splices` writes the same run back so
it lands between the delimiter characters in the output.
"""
from __future__ import annotations

from scc.lexer.cursor import Cursor
from scc.lexer.emitter import Channel, Emitter

SPLICE = '\\\n'


def count_splices(cursor: Cursor) -> int:
    count = 0
    while cursor.peek() == '\\':
        backslash = cursor.next()
        if cursor.peek() != '\n':
            cursor.pushback(backslash)
            break
        cursor.next()
        count += 1
    return count


def emit_splices(out: Emitter, count: int, channel: Channel = Channel.CODE) -> None:
    if count > 0:
        out.emit(SPLICE * count, channel)
