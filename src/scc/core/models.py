from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from scc.errors import UnknownStandardError


class Standard(Enum):
    """Language standards understood by the scanner.

    Member values are the printable names. ``C`` and ``CXX`` stand for the
    current C (C18) and C++ (C++17) standards.
    """

    C = 'C'
    C89 = 'C89'
    C90 = 'C90'
    C94 = 'C94'
    C99 = 'C99'
    C11 = 'C11'
    C18 = 'C18'
    CXX = 'C++'
    CXX98 = 'C++98'
    CXX03 = 'C++03'
    CXX11 = 'C++11'
    CXX14 = 'C++14'
    CXX17 = 'C++17'

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union['Standard', str]) -> 'Standard':
        """Resolve a member from itself or from a case-insensitive name.

        Both printable names ('C++14') and member names ('CXX14') are accepted.

        Raises:
            UnknownStandardError: If *value* names no standard.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace('CXX', 'C++')
        for member in cls:
            if member.value == key:
                return member
        raise UnknownStandardError(f'Invalid standard code: {value}')


@dataclass(frozen=True)
class ScanConfig:
    """Immutable options for one scan.

    Attributes:
        standard: Standard member or name; validated when the scan starts.
        invert_output: Emit comment text instead of code.
        mark_blank_comment: Replace a removed comment with an empty comment
            marker instead of a bare blank.
        warn_nested_comment: Warn about '/*' inside a block comment.
        char_placeholder: Replacement for character-constant contents.
        string_placeholder: Replacement for string-literal contents.
    """

    standard: Union[Standard, str] = Standard.C
    invert_output: bool = False
    mark_blank_comment: bool = False
    warn_nested_comment: bool = False
    char_placeholder: Optional[str] = None
    string_placeholder: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ('char_placeholder', 'string_placeholder'):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or len(value) != 1):
                raise ValueError(f'{name} must be a single character, got {value!r}')

    def placeholder_for(self, quote: str) -> Optional[str]:
        if quote == "'":
            return self.char_placeholder
        return self.string_placeholder


@dataclass(frozen=True)
class Diagnostic:
    line: int
    message: str

    def __str__(self) -> str:
        return f'{self.line}: {self.message}'


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan: transformed text plus advisory diagnostics."""
    ok: bool
    text: str
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def messages(self) -> list[str]:
        return [str(d) for d in self.diagnostics]
