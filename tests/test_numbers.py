from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from scc import ScanConfig, Standard, scan  # noqa: E402


def _messages(source: str, standard=Standard.C) -> list:
    result = scan(source, ScanConfig(standard=standard))
    assert result.ok
    assert result.text == source
    return result.messages


@pytest.mark.parametrize(
    "source",
    [
        "12345",
        "0x1F",
        "0777",
        "9.23",
        ".987E+30",
        "1.5e3f",
        "10ULL + 0u",
        "0",
        "0.",
        "3.",
    ],
)
def test_plain_constants_are_silent(source):
    assert _messages(f"x = {source};\n") == []


def test_zero_followed_by_eight_or_nine():
    assert _messages('printf("%" "08X", 09 + 08);') == []


def test_separators_need_cxx14():
    src = "n = 1'000'000;"
    assert _messages(src, Standard.CXX14) == []
    assert _messages(src) == ["1: Numeric punctuation feature used but not supported in C"]


def test_separator_warning_once_per_constant():
    assert _messages("a = 1'2 + 3'4'5;", Standard.CXX11) == [
        "1: Numeric punctuation feature used but not supported in C++11",
        "1: Numeric punctuation feature used but not supported in C++11",
    ]


def test_separators_do_not_open_character_constants():
    src = "x = 0'234'127 + 9'234.192'214e-8; /* c */\n"
    result = scan(src, ScanConfig(standard=Standard.CXX17))
    assert result.text == "x = 0'234'127 + 9'234.192'214e-8;  \n"
    assert result.messages == []


def test_separators_in_hex_and_binary():
    assert _messages("0x1234'5678 + 0b0101'1010", Standard.CXX14) == []


def test_doubled_separator():
    assert _messages("1''2", Standard.CXX14) == [
        "1: Single quote in numeric context not followed by a valid digit",
        "1: Single quote in numeric context not preceded by a valid digit",
    ]


def test_separator_before_non_digit():
    assert _messages("1'a", Standard.CXX14) == [
        "1: Single quote in numeric context not followed by a valid digit",
    ]


def test_separator_at_eof():
    assert _messages("x = 1'", Standard.CXX14) == [
        "1: Single quote in numeric context followed by EOF",
    ]


def test_separator_right_after_radix_prefix():
    assert _messages("0x'1", Standard.CXX14) == [
        "1: Single quote in numeric context not preceded by a valid digit",
    ]


@pytest.mark.parametrize(
    "standard, expected",
    [
        (Standard.C89, ["1: Hexadecimal floating point constant feature used but not supported in C89"]),
        (Standard.C99, []),
        (Standard.CXX14, ["1: Hexadecimal floating point constant feature used but not supported in C++14"]),
        (Standard.CXX17, []),
    ],
)
def test_hex_float_warns_once(standard, expected):
    assert _messages("f = 0x1.8p3;", standard) == expected


def test_hex_float_without_fraction():
    assert _messages("0x1p-3", Standard.CXX11) == [
        "1: Hexadecimal floating point constant feature used but not supported in C++11",
    ]


def test_binary_constants():
    assert _messages("0b0101", Standard.CXX14) == []
    assert _messages("0B1", Standard.CXX11) == [
        "1: Binary literal feature used but not supported in C++11",
    ]


def test_non_binary_digit():
    assert _messages("0b102", Standard.CXX14) == ["1: Non-binary digit 2 in binary constant"]


def test_non_octal_digit():
    assert _messages("0128") == ["1: Non-octal digit 8 in octal constant"]


@pytest.mark.parametrize("source", ["1e", "1e+", ".5E-", "0e", "0x1p"])
def test_exponent_without_digits(source):
    marker = "p" if "p" in source else source.lstrip(".0123456789x")[0]
    assert _messages(source, Standard.CXX17) == [
        f"1: Exponent {marker} not followed by (optional sign and) one or more digits",
    ]


def test_comment_right_after_number():
    result = scan("1/*x*/2")
    assert result.text == "1 2"
