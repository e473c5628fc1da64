from __future__ import annotations

"""Top-level comment state machine.

States are CODE, BLOCK_COMMENT and LINE_COMMENT. In CODE the machine hands
literals, numbers and identifiers to the sub-scanners so that comment-like
text inside them is never taken for a comment. Block comments are replaced
by a single space in the code channel; line comments vanish up to, but not
including, their terminating newline. Backslash-newline splices inside a
two-character delimiter are copied back between its characters.
"""

from enum import Enum
from typing import Optional

from scc.core.interfaces.logging import LoggerLikeProtocol
from scc.constants import CHAR_CONTEXT, DIGITS, EOF, IDENT_START, STRING_CONTEXT
from scc.lexer.context import ScanContext
from scc.lexer.emitter import Channel
from scc.lexer.features import Feature
from scc.lexer.identifiers import IdentifierScanner
from scc.lexer.literals import LiteralScanner
from scc.lexer.numbers import NumericScanner
from scc.lexer.splices import SPLICE, count_splices, emit_splices
from scc.logging.helpers import get_logger


class ScanState(Enum):
    CODE = 'code'
    BLOCK_COMMENT = 'block_comment'
    LINE_COMMENT = 'line_comment'


class CommentStateMachine:
    def __init__(self, ctx: ScanContext, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._ctx = ctx
        self._log = logger or get_logger('lexer.machine')
        self._literals = LiteralScanner(ctx)
        self._numbers = NumericScanner(ctx)
        self._idents = IdentifierScanner(ctx, self._literals)
        # Last lines that produced the once-per-line warnings.
        self._nested_line = 0
        self._stray_end_line = 0

    def run(self) -> ScanState:
        """Consume the whole input; return the state at EOF."""
        cur = self._ctx.cursor
        state = ScanState.CODE
        prev = ''
        while True:
            ch = cur.next()
            if ch == EOF:
                break
            if state is ScanState.CODE:
                state = self._code(ch)
            elif state is ScanState.BLOCK_COMMENT:
                state = self._block_comment(ch)
            else:
                state = self._line_comment(ch, prev)
            prev = ch
        if state is not ScanState.CODE:
            self._ctx.warn('unterminated C-style comment')
        self._log.debug('scan finished at line %d in state %s', cur.line, state.value)
        return state

    def _code(self, ch: str) -> ScanState:
        ctx = self._ctx
        cur, out = ctx.cursor, ctx.out
        if ch == '/':
            return self._slash()
        if ch == '*':
            splices = count_splices(cur)
            if cur.peek() == '/':
                cur.next()
                out.emit('*')
                emit_splices(out, splices)
                out.emit('/')
                if self._stray_end_line != cur.line:
                    ctx.warn("C-style comment end marker ('*/') not in a comment")
                self._stray_end_line = cur.line
            else:
                out.emit('*')
                emit_splices(out, splices)
        elif ch == "'":
            out.emit(ch)
            self._literals.scan_quoted(ch, CHAR_CONTEXT)
        elif ch == '"':
            out.emit(ch)
            self._literals.scan_quoted(ch, STRING_CONTEXT)
        elif ch in DIGITS or (ch == '.' and cur.peek() in DIGITS):
            self._numbers.scan(ch)
        elif ch in IDENT_START:
            self._idents.scan(ch)
        elif ch == '\\' and cur.peek() in ('u', 'U'):
            self._idents.scan_ucn()
        else:
            out.emit(ch)
        return ScanState.CODE

    def _slash(self) -> ScanState:
        ctx = self._ctx
        cur, out = ctx.cursor, ctx.out
        mark = ctx.config.mark_blank_comment
        splices = count_splices(cur)
        nxt = cur.peek()
        if nxt == '*':
            cur.next()
            out.emit('/', Channel.COMMENT)
            out.emit_kept(SPLICE * splices)
            out.emit('*', Channel.COMMENT)
            if mark:
                out.emit('/*')
            return ScanState.BLOCK_COMMENT
        if nxt == '/' and ctx.features.double_slash:
            cur.next()
            out.emit('/', Channel.COMMENT)
            out.emit_kept(SPLICE * splices)
            out.emit('/', Channel.COMMENT)
            out.mark_comment()
            if mark:
                out.emit('//')
            return ScanState.LINE_COMMENT
        if nxt == '/':
            ctx.warn_feature(Feature.DOUBLE_SLASH)
            cur.next()
            out.emit('/')
            emit_splices(out, splices)
            out.emit('/')
            return ScanState.CODE
        out.emit('/')
        emit_splices(out, splices)
        return ScanState.CODE

    def _block_comment(self, ch: str) -> ScanState:
        ctx = self._ctx
        cur, out = ctx.cursor, ctx.out
        if ch == '*':
            splices = count_splices(cur)
            if cur.peek() == '/':
                cur.next()
                out.emit('*', Channel.COMMENT)
                emit_splices(out, splices, Channel.COMMENT)
                out.emit('/', Channel.COMMENT)
                out.emit(' ')
                if ctx.config.mark_blank_comment:
                    out.emit('*/')
                out.mark_comment()
                return ScanState.CODE
            out.emit('*', Channel.COMMENT)
            emit_splices(out, splices, Channel.COMMENT)
            return ScanState.BLOCK_COMMENT
        if ch == '/' and ctx.config.warn_nested_comment and cur.peek() == '*':
            if self._nested_line != cur.line:
                ctx.warn('nested C-style comment')
            self._nested_line = cur.line
        out.emit(ch, Channel.COMMENT)
        return ScanState.BLOCK_COMMENT

    def _line_comment(self, ch: str, prev: str) -> ScanState:
        out = self._ctx.out
        if ch == '\n' and prev != '\\':
            out.emit(ch)
            return ScanState.CODE
        out.emit(ch, Channel.COMMENT)
        return ScanState.LINE_COMMENT
