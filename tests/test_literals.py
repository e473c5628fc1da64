"""Quoted literals, prefixes, raw strings, placeholders and UCNs."""
from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from scc import ScanConfig, Standard, scan  # noqa: E402


class LiteralBaseTest(unittest.TestCase):
    def assertScan(self, source: str, expected: str, messages=(), **options) -> None:
        result = scan(source, ScanConfig(**options))
        self.assertTrue(result.ok)
        self.assertEqual(result.text, expected)
        self.assertEqual(result.messages, list(messages))

    def assertUnchanged(self, source: str, messages=(), **options) -> None:
        self.assertScan(source, source, messages, **options)


class QuotedLiteralTests(LiteralBaseTest):
    def test_eof_in_string(self) -> None:
        self.assertUnchanged('"abc', ["1: EOF in string literal"])

    def test_eof_in_char(self) -> None:
        self.assertUnchanged("x = 'a", ["1: EOF in character constant"])

    def test_newline_in_string_ends_literal(self) -> None:
        self.assertScan('x\n"ab\n/* c */', 'x\n"ab\n ', ["2: newline in string literal"])

    def test_newline_in_char(self) -> None:
        self.assertUnchanged("'a\nb", ["1: newline in character constant"])

    def test_escaped_quote(self) -> None:
        self.assertUnchanged('s = "a\\"/*b*/";')

    def test_even_backslashes_close_literal(self) -> None:
        self.assertScan('s = "a\\\\"/*b*/;', 's = "a\\\\" ;')

    def test_odd_backslashes_escape_quote(self) -> None:
        self.assertUnchanged('s = "\\\\\\"/*";')

    def test_splice_inside_string(self) -> None:
        self.assertUnchanged('s = "ab\\\ncd";\n')

    def test_backslashes_before_splice(self) -> None:
        self.assertUnchanged('s = "ab\\\\\\\ncd";\n')

    def test_backslashes_at_eof(self) -> None:
        self.assertUnchanged('"ab\\\\', ["1: EOF in string literal"])

    def test_multi_char_constant(self) -> None:
        self.assertUnchanged("c = '/*'; d = '\\'';")

    def test_ucn_escape_needs_feature(self) -> None:
        src = 's = "\\u00e9";'
        self.assertUnchanged(src)
        self.assertUnchanged(
            src, ["1: Universal character name feature used but not supported in C89"],
            standard=Standard.C89,
        )


class PlaceholderTests(LiteralBaseTest):
    def test_string_placeholder(self) -> None:
        self.assertScan('a = "abc"; b = \'d\';', 'a = "XXX"; b = \'d\';', string_placeholder="X")

    def test_char_placeholder(self) -> None:
        self.assertScan('a = "abc"; b = \'d\';', 'a = "abc"; b = \'Q\';', char_placeholder="Q")

    def test_escapes_are_replaced_per_character(self) -> None:
        self.assertScan('"a\\"b"', '"XXXX"', string_placeholder="X")
        self.assertScan('"\\\\"', '"XX"', string_placeholder="X")

    def test_prefix_and_quotes_kept(self) -> None:
        self.assertScan('L"ab" u8"c"', 'L"XX" u8"X"', string_placeholder="X")
        self.assertScan("L'a'", "L'Q'", char_placeholder="Q")

    def test_splices_and_newlines_kept(self) -> None:
        self.assertScan('"ab\\\ncd"', '"XX\\\nXX"', string_placeholder="X")
        self.assertScan('"ab\nc', '"XX\nc', ["1: newline in string literal"], string_placeholder="X")

    def test_raw_string_body_replaced(self) -> None:
        self.assertScan(
            'R"x(a)b\nc)x"',
            'R"x(XXX\nX)x"',
            string_placeholder="X",
            standard=Standard.CXX11,
        )


class PrefixTests(LiteralBaseTest):
    def test_unicode_prefixes(self) -> None:
        src = 'a = u8"x"; b = u"y"; c = U"z"; d = L"w";'
        self.assertUnchanged(src, standard=Standard.C11)
        self.assertUnchanged(
            src,
            [
                "1: Unicode character or string feature used but not supported in C89",
                "1: Unicode character or string feature used but not supported in C89",
                "1: Unicode character or string feature used but not supported in C89",
            ],
            standard=Standard.C89,
        )

    def test_char_prefixes_accept_anything(self) -> None:
        self.assertUnchanged("a = L'x'; b = u8'y'; c = RUL'z';", standard=Standard.C89)

    def test_unknown_prefix_is_identifier_plus_string(self) -> None:
        self.assertUnchanged('RL"/*x*/"', standard=Standard.C89)

    def test_identifiers_that_start_like_prefixes(self) -> None:
        self.assertUnchanged("uint8_t u8x = LR + Ru8 + UUUU + L;")

    def test_prefix_at_eof(self) -> None:
        self.assertUnchanged("x = u8")

    def test_long_prefix_run_is_identifier(self) -> None:
        # Four prefix letters cannot be an encoding prefix.
        self.assertUnchanged('u8RR"a"')


class RawStringTests(LiteralBaseTest):
    def test_comment_inside_raw_string(self) -> None:
        self.assertUnchanged('a R"(/* not a comment */)" b', standard=Standard.CXX11)

    def test_raw_string_before_cxx11(self) -> None:
        self.assertUnchanged(
            'a R"(/* x */)" b',
            ["1: Raw string feature used but not supported in C"],
        )

    def test_all_raw_prefixes(self) -> None:
        src = 'R"(a)" LR"(b)" uR"(c)" UR"(d)" u8R"(e)"'
        self.assertUnchanged(src, standard=Standard.CXX)

    def test_delimiter_and_partial_matches(self) -> None:
        self.assertUnchanged('R"xy(a)x)xy"', standard=Standard.CXX14)
        self.assertScan('R"xy(a)x"y)xy" /**/', 'R"xy(a)x"y)xy"  ', standard=Standard.CXX14)

    def test_multiline_raw_string(self) -> None:
        src = 'R"(a\n*/ "\nb)"\nx;\n'
        self.assertUnchanged(src, standard=Standard.CXX11)

    def test_backslashes_are_plain_in_raw_string(self) -> None:
        self.assertUnchanged('R"(\\)" x', standard=Standard.CXX11)

    def test_eof_in_raw_string_replays_partial_match(self) -> None:
        self.assertUnchanged(
            'x\nR"ab(abc)a',
            ["2: Unexpected EOF in raw string starting at this line"],
            standard=Standard.CXX11,
        )

    def test_invalid_delimiter_char_falls_back_to_string(self) -> None:
        self.assertUnchanged(
            'R"a b" /',
            ['1: Invalid mark character (code 32) in d-char-sequence: R"a'],
            standard=Standard.CXX11,
        )

    def test_quote_in_delimiter_closes_string(self) -> None:
        self.assertUnchanged(
            'R"ab" x',
            ["1: Invalid mark character (code 34 '\"') in d-char-sequence: R\"ab"],
            standard=Standard.CXX11,
        )

    def test_too_long_delimiter(self) -> None:
        marker = "a" * 17
        self.assertUnchanged(
            'R"' + marker + '"',
            ['1: Too long a raw string d-char-sequence: R"' + marker],
            standard=Standard.CXX11,
        )

    def test_sixteen_char_delimiter_is_fine(self) -> None:
        marker = "d" * 16
        self.assertUnchanged('R"' + marker + '(x)' + marker + '"', standard=Standard.CXX11)

    def test_eof_in_delimiter(self) -> None:
        self.assertUnchanged(
            'R"abc',
            [
                '1: Unexpected EOF in raw string d-char-sequence: R"abc',
                "1: EOF in string literal",
            ],
            standard=Standard.CXX11,
        )


class UniversalCharacterNameTests(LiteralBaseTest):
    def test_valid_ucns_in_identifiers(self) -> None:
        self.assertUnchanged("int caf\\u00e9 = \\U0001F600;")

    def test_ucn_needs_feature(self) -> None:
        self.assertUnchanged(
            "x\\u00e9",
            ["1: Universal character name feature used but not supported in C90"],
            standard=Standard.C90,
        )

    def test_invalid_ucn(self) -> None:
        self.assertUnchanged("x\\u12g", ["1: Invalid UCN \\u12g detected"])

    def test_invalid_ucn_does_not_swallow_comment(self) -> None:
        self.assertScan("x\\u1/* c */y", "x\\u1 y", ["1: Invalid UCN \\u1/ detected"])

    def test_truncated_ucn_at_eof(self) -> None:
        self.assertUnchanged("x\\U1234", ["1: Invalid UCN \\U1234 detected"])


if __name__ == "__main__":
    unittest.main()
