from __future__ import annotations

"""Feature table: which lexical constructs each language standard supports.

Every `Standard` maps to exactly one `FeatureSet` through `FEATURE_TABLE`.
Newer standards carry the flags of the ones they extend, built with
`dataclasses.replace` from their predecessor.
"""

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from scc.core.models import Standard
from scc.errors import UnknownStandardError


class Feature(Enum):
    """Optional lexical features, in listing order."""

    DOUBLE_SLASH = ('Double slash comment', 'Double slash comments // to EOL')
    RAW_STRINGS = ('Raw string', 'Raw strings R"ZZ(string)ZZ"')
    UNICODE_LITERALS = ('Unicode character or string', 'Unicode strings (u"A", U"A", u8"A")')
    BINARY_LITERALS = ('Binary literal', 'Binary constants 0b0101')
    HEX_FLOAT = ('Hexadecimal floating point constant', 'Hexadecimal floats 0x2.34P-12')
    DIGIT_SEPARATORS = ('Numeric punctuation', "Numeric punctuation 0x1234'5678")
    UNIVERSAL_CHARS = ('Universal character name', 'Universal character names \\uXXXX and \\Uxxxxxxxx')

    def __init__(self, label: str, description: str) -> None:
        self.label = label
        self.description = description


@dataclass(frozen=True)
class FeatureSet:
    double_slash: bool = False
    raw_strings: bool = False
    unicode_literals: bool = False
    binary_literals: bool = False
    hex_float: bool = False
    digit_separators: bool = False
    universal_chars: bool = False

    def supports(self, feature: Feature) -> bool:
        return bool(getattr(self, feature.name.lower()))

    def describe(self) -> List[str]:
        """Return the descriptions of the enabled features, in listing order."""
        return [f.description for f in Feature if self.supports(f)]

    @classmethod
    def for_standard(cls, standard: Standard) -> 'FeatureSet':
        """Look up the features of *standard*.

        Raises:
            UnknownStandardError: If the table has no entry for *standard*.
        """
        try:
            return FEATURE_TABLE[standard]
        except KeyError:
            raise UnknownStandardError(f'Invalid standard code: {standard}') from None


_C90 = FeatureSet()
_C99 = FeatureSet(double_slash=True, hex_float=True, universal_chars=True)
_C11 = replace(_C99, unicode_literals=True)

_CXX98 = FeatureSet(double_slash=True, universal_chars=True)
_CXX11 = replace(_CXX98, raw_strings=True, unicode_literals=True)
_CXX14 = replace(_CXX11, binary_literals=True, digit_separators=True)
_CXX17 = replace(_CXX14, hex_float=True)

FEATURE_TABLE: Mapping[Standard, FeatureSet] = MappingProxyType({
    Standard.C: _C11,
    Standard.C89: _C90,
    Standard.C90: _C90,
    Standard.C94: _C90,
    Standard.C99: _C99,
    Standard.C11: _C11,
    Standard.C18: _C11,
    Standard.CXX: _CXX17,
    Standard.CXX98: _CXX98,
    Standard.CXX03: _CXX98,
    Standard.CXX11: _CXX11,
    Standard.CXX14: _CXX14,
    Standard.CXX17: _CXX17,
})
