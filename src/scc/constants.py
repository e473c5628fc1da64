from __future__ import annotations

"""Character classes and limits of the C and C++ lexical grammar.

All classes are frozensets, and EOF is the empty string, so `ch in DIGITS`
is False at end of input without a separate check.
"""

from typing import FrozenSet, Tuple

# End-of-input sentinel returned by the cursor.
EOF: str = ''

# A raw string d-char-sequence holds at most this many characters.
MAX_RAW_MARKER: int = 16

# Longest encoding prefix in front of a quote ('u8R').
MAX_PREFIX_LEN: int = 3

DQ_REG_PREFIXES: Tuple[str, ...] = ('L', 'u', 'U', 'u8')
DQ_RAW_PREFIXES: Tuple[str, ...] = ('R', 'LR', 'uR', 'UR', 'u8R')

PREFIX_CHARS: FrozenSet[str] = frozenset('UuLR8')

DIGITS: FrozenSet[str] = frozenset('0123456789')
OCTAL_DIGITS: FrozenSet[str] = frozenset('01234567')
BINARY_DIGITS: FrozenSet[str] = frozenset('01')
HEX_DIGITS: FrozenSet[str] = frozenset('0123456789abcdefABCDEF')

IDENT_START: FrozenSet[str] = frozenset(
    'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_'
)
IDENT_CHARS: FrozenSet[str] = IDENT_START | DIGITS

# Characters that may not appear in a raw string d-char-sequence.
INVALID_MARK_CHARS: FrozenSet[str] = frozenset('") \\\t\v\f\n')

CHAR_CONTEXT: str = 'character constant'
STRING_CONTEXT: str = 'string literal'
