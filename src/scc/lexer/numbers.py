from __future__ import annotations

"""Numeric constants.

Numbers have to be recognised in full only because C++14 digit separators
reuse the single quote: without this scanner ``1'000`` would open a
character constant. Recognised forms::

    12345  0x1F  0b0101  0777  9.23  .987E+30  0xA.BCp12  0'234'127  9'234.192'214e-8

A leading zero followed by 8 or 9 is emitted without comment; such tokens
are valid preprocessing numbers (e.g. a macro pasted into "%08X").
Suffixes (``u``, ``LL``, ``f``, user-defined) are left to the identifier
scanner.
"""

from typing import FrozenSet

from scc.constants import BINARY_DIGITS, DIGITS, EOF, HEX_DIGITS, OCTAL_DIGITS
from scc.lexer.context import ScanContext
from scc.lexer.features import Feature


class NumericScanner:
    def __init__(self, ctx: ScanContext) -> None:
        self._ctx = ctx
        self._separator_warned = False

    def scan(self, first: str) -> None:
        """Scan a constant whose first character (a digit or '.') was consumed."""
        self._separator_warned = False
        out = self._ctx.out
        nxt = self._ctx.cursor.peek()
        if first != '0':
            self._decimal(first)
        elif nxt in ('x', 'X'):
            self._hex()
        elif nxt in ('b', 'B'):
            self._binary()
        elif nxt in OCTAL_DIGITS or nxt == "'":
            self._octal()
        elif nxt in ('e', 'E', '.'):
            self._decimal(first)
        else:
            # Plain zero, or a bogus-but-harmless 08 / 09.
            out.emit(first)

    def _digits(self, prev: str, digits: FrozenSet[str]) -> str:
        """Copy a run of *digits* and separators; return the first other char."""
        cur, out = self._ctx.cursor, self._ctx.out
        while True:
            ch = cur.peek()
            if ch == "'":
                prev = self._separator(prev, digits)
            elif ch in digits:
                prev = cur.next()
                out.emit(prev)
            else:
                return ch

    def _separator(self, prev: str, digits: FrozenSet[str]) -> str:
        cur = self._ctx.cursor
        quote = cur.next()
        self._ctx.out.emit(quote)
        if not self._separator_warned and not self._ctx.features.digit_separators:
            self._ctx.warn_feature(Feature.DIGIT_SEPARATORS)
            self._separator_warned = True
        if prev not in digits:
            self._ctx.warn('Single quote in numeric context not preceded by a valid digit')
            return quote
        nxt = cur.peek()
        if nxt == EOF:
            self._ctx.warn('Single quote in numeric context followed by EOF')
            return quote
        if nxt not in digits:
            self._ctx.warn('Single quote in numeric context not followed by a valid digit')
        return nxt

    def _exponent(self) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        marker = cur.next()
        out.emit(marker)
        if cur.peek() in ('+', '-'):
            out.emit(cur.next())
        count = 0
        while cur.peek() in DIGITS:
            out.emit(cur.next())
            count += 1
        if count == 0:
            self._ctx.warn(f'Exponent {marker} not followed by (optional sign and) one or more digits')

    def _decimal(self, first: str) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        out.emit(first)
        stop = self._digits(first, DIGITS)
        if first != '.' and stop == '.':
            dot = cur.next()
            out.emit(dot)
            stop = self._digits(dot, DIGITS)
        if stop in ('e', 'E'):
            self._exponent()

    def _hex(self) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        out.emit('0')
        prev = cur.next()
        out.emit(prev)
        warned = False
        while True:
            ch = cur.peek()
            if ch == "'":
                prev = self._separator(prev, HEX_DIGITS)
            elif ch in HEX_DIGITS or ch == '.':
                if ch == '.' and not warned and not self._ctx.features.hex_float:
                    self._ctx.warn_feature(Feature.HEX_FLOAT)
                    warned = True
                prev = cur.next()
                out.emit(prev)
            else:
                break
        if ch in ('p', 'P'):
            if not warned and not self._ctx.features.hex_float:
                self._ctx.warn_feature(Feature.HEX_FLOAT)
            self._exponent()

    def _binary(self) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        self._ctx.require(Feature.BINARY_LITERALS)
        out.emit('0')
        prev = cur.next()
        out.emit(prev)
        stop = self._digits(prev, BINARY_DIGITS)
        if stop in DIGITS:
            self._ctx.warn(f'Non-binary digit {stop} in binary constant')

    def _octal(self) -> None:
        self._ctx.out.emit('0')
        stop = self._digits('0', OCTAL_DIGITS)
        if stop in DIGITS:
            self._ctx.warn(f'Non-octal digit {stop} in octal constant')
