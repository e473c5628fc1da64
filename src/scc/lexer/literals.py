from __future__ import annotations

"""Character constants, string literals and raw string literals.

The scanners here are entered after the opening quote has been consumed.
They copy the literal to the code channel, optionally replacing its
contents with the placeholder configured for the quote kind. Quotes,
encoding prefixes, raw-string delimiters and line splices are never
replaced, and newlines are kept so the line structure of the output
matches the input.
"""

from typing import Optional, Tuple

from scc.constants import (
    CHAR_CONTEXT,
    EOF,
    INVALID_MARK_CHARS,
    MAX_RAW_MARKER,
    STRING_CONTEXT,
)
from scc.lexer.context import ScanContext
from scc.lexer.features import Feature


def _describe_mark_char(ch: str) -> str:
    if ch.isprintable() and not ch.isspace():
        escape = '\\' if ch in ("'", '\\') else ''
        return f" '{escape}{ch}'"
    return ''


class LiteralScanner:
    def __init__(self, ctx: ScanContext) -> None:
        self._ctx = ctx

    def put(self, quote: str, text: str) -> None:
        """Emit literal contents, substituting the placeholder for *quote*."""
        placeholder = self._ctx.config.placeholder_for(quote)
        if placeholder is not None:
            text = ''.join(ch if ch == '\n' else placeholder for ch in text)
        self._ctx.out.emit(text)

    # ------------------------------------------------------------------ #
    # Quoted literals                                                    #
    # ------------------------------------------------------------------ #
    def scan_quoted(self, quote: str, context: Optional[str] = None) -> None:
        """Scan up to and including the closing *quote*.

        A raw newline ends the literal early (the closing quote is assumed
        missing) and so does EOF; both are reported. No closing quote is
        synthesized in either case.
        """
        if context is None:
            context = CHAR_CONTEXT if quote == "'" else STRING_CONTEXT
        cur, out = self._ctx.cursor, self._ctx.out
        while True:
            ch = cur.next()
            if ch == EOF:
                self._ctx.warn(f'EOF in {context}')
                return
            if ch == quote:
                out.emit(ch)
                return
            if ch == '\\':
                if self._scan_backslashes(quote, context):
                    return
            elif ch == '\n':
                out.emit(ch)
                self._ctx.warn(f'newline in {context}', cur.line - 1)
                return
            else:
                self.put(quote, ch)

    def _scan_backslashes(self, quote: str, context: str) -> bool:
        """Handle a run of backslashes; return True when the literal ended."""
        cur, out = self._ctx.cursor, self._ctx.out
        run = 1
        ch = cur.next()
        while ch == '\\':
            run += 1
            ch = cur.next()

        if ch == EOF:
            self.put(quote, '\\' * run)
            self._ctx.warn(f'EOF in {context}')
            return True
        if ch == '\n':
            # The last backslash splices the line; the others stay literal.
            self.put(quote, '\\' * (run - 1))
            out.emit('\\\n')
            return False

        self.put(quote, '\\\\' * (run // 2))
        if run % 2 == 0:
            cur.pushback(ch)
            return False
        self.put(quote, '\\' + ch)
        if ch in ('u', 'U'):
            self._ctx.require(Feature.UNIVERSAL_CHARS)
        return False

    # ------------------------------------------------------------------ #
    # Raw strings                                                        #
    # ------------------------------------------------------------------ #
    def scan_raw_string(self, prefix: str) -> None:
        """Scan a raw string whose prefix was emitted and opening quote read.

        The d-char-sequence runs up to the first '('. When it is invalid or
        too long the text read so far is re-scanned as an ordinary string
        literal. Otherwise the body extends to the first ')' followed by the
        same d-char-sequence and a double quote.
        """
        out = self._ctx.out
        start_line = self._ctx.cursor.line
        marker, valid = self._read_marker(prefix)
        if not valid:
            out.emit('"')
            self.put('"', marker)
            self.scan_quoted('"', STRING_CONTEXT)
            return
        out.emit('"' + marker + '(')
        self._scan_raw_body(marker, start_line)

    def _read_marker(self, prefix: str) -> Tuple[str, bool]:
        cur = self._ctx.cursor
        marker = ''
        while True:
            ch = cur.next()
            if ch == EOF:
                self._ctx.warn(f'Unexpected EOF in raw string d-char-sequence: {prefix}"{marker}')
                return marker, False
            if ch == '(':
                return marker, True
            if len(marker) >= MAX_RAW_MARKER:
                self._ctx.warn(f'Too long a raw string d-char-sequence: {prefix}"{marker}{ch}')
                cur.pushback(ch)
                return marker, False
            if ch in INVALID_MARK_CHARS:
                self._ctx.warn(
                    f'Invalid mark character (code {ord(ch)}{_describe_mark_char(ch)}) '
                    f'in d-char-sequence: {prefix}"{marker}'
                )
                cur.pushback(ch)
                return marker, False
            marker += ch

    def _scan_raw_body(self, marker: str, start_line: int) -> None:
        cur, out = self._ctx.cursor, self._ctx.out
        while True:
            ch = cur.next()
            if ch == EOF:
                break
            if ch != ')':
                self.put('"', ch)
                continue
            # Candidate terminator: ')' + marker + '"'. Anything short of a
            # full match is body text and is replayed as such.
            matched = ''
            while True:
                ch = cur.next()
                if ch == EOF:
                    self.put('"', ')' + matched)
                    break
                if ch == '"' and len(matched) == len(marker):
                    out.emit(')' + marker + '"')
                    return
                if len(matched) < len(marker) and ch == marker[len(matched)]:
                    matched += ch
                elif ch == ')':
                    self.put('"', ')' + matched)
                    matched = ''
                else:
                    self.put('"', ')' + matched + ch)
                    break
            if ch == EOF:
                break
        self._ctx.warn('Unexpected EOF in raw string starting at this line', start_line)
