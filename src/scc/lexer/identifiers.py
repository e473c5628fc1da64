from __future__ import annotations

"""Identifiers, encoding prefixes and universal character names.

An identifier may turn out to be the prefix of a literal:

    L"x" L'x'                       all standards
    u"x" U"x" u8"x" u'x' U'x'       C11 / C++11 onwards
    R"d(x)d" LR"" uR"" UR"" u8R""   C++11 onwards

No space is allowed between prefix and quote. Character constants do not
care whether the prefix is valid; they are scanned the same either way.
"""

from scc.constants import (
    CHAR_CONTEXT,
    DQ_RAW_PREFIXES,
    DQ_REG_PREFIXES,
    EOF,
    HEX_DIGITS,
    IDENT_CHARS,
    MAX_PREFIX_LEN,
    PREFIX_CHARS,
    STRING_CONTEXT,
)
from scc.lexer.context import ScanContext
from scc.lexer.features import Feature
from scc.lexer.literals import LiteralScanner


class IdentifierScanner:
    def __init__(self, ctx: ScanContext, literals: LiteralScanner) -> None:
        self._ctx = ctx
        self._literals = literals

    def scan(self, first: str) -> None:
        """Scan an identifier (or prefixed literal) starting with *first*."""
        if first in PREFIX_CHARS:
            self._scan_possible_literal(first)
        else:
            self._ctx.out.emit(first)
            self._scan_rest()

    def _scan_rest(self) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        while cur.peek() in IDENT_CHARS:
            out.emit(cur.next())

    def _scan_possible_literal(self, first: str) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        prefix = first
        while True:
            ch = cur.peek()
            if ch == "'":
                out.emit(prefix + cur.next())
                self._literals.scan_quoted(ch, CHAR_CONTEXT)
                return
            if ch == '"':
                cur.next()
                self._scan_string(prefix)
                return
            if ch != EOF and ch in PREFIX_CHARS and len(prefix) < MAX_PREFIX_LEN:
                prefix += cur.next()
                continue
            out.emit(prefix)
            self._scan_rest()
            return

    def _scan_string(self, prefix: str) -> None:
        out = self._ctx.out
        if prefix in DQ_RAW_PREFIXES:
            self._ctx.require(Feature.RAW_STRINGS)
            out.emit(prefix)
            self._literals.scan_raw_string(prefix)
            return
        if prefix in DQ_REG_PREFIXES and prefix != 'L':
            self._ctx.require(Feature.UNICODE_LITERALS)
        # Unrecognised prefixes fall through as an identifier + plain string.
        out.emit(prefix + '"')
        self._literals.scan_quoted('"', STRING_CONTEXT)

    def scan_ucn(self) -> None:
        """Scan \\uXXXX or \\UXXXXXXXX outside a literal.

        The backslash has been consumed; the 'u' or 'U' is next. Scanning
        stops at the first non-hex character, which is left for the caller.
        """
        cur, out = self._ctx.cursor, self._ctx.out
        self._ctx.require(Feature.UNIVERSAL_CHARS)
        letter = cur.next()
        out.emit('\\' + letter)
        width = 4 if letter == 'u' else 8
        digits = ''
        while len(digits) < width:
            ch = cur.peek()
            if ch not in HEX_DIGITS:
                self._ctx.warn(f'Invalid UCN \\{letter}{digits}{ch} detected')
                return
            digits += cur.next()
            out.emit(ch)
