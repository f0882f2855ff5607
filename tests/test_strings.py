"""Tests for string helpers."""

from __future__ import annotations

import pytest

from gtf.helpers import strings


@pytest.mark.parametrize(
    ("n", "s", "expected"),
    [
        (5, "hello world", "he..."),
        (4, "hello world", "h..."),
        (3, "hello world", "hel"),
        (2, "hello", "he"),
        (0, "hello", ""),
        (-1, "hello", "hello"),
        (5, "hello", "hello"),
        (10, "hello", "hello"),
        (5, "日本語のテキスト", "日本..."),
    ],
)
def test_truncatechars(n, s, expected):
    assert strings.truncatechars(n, s) == expected


def test_truncatechars_rejects_non_strings():
    assert strings.truncatechars(5, 12345678) == ""
    assert strings.truncatechars("5", "hello world") == ""


def test_title_keeps_inner_case():
    assert strings.title("hello iPhone world") == "Hello IPhone World"
    assert strings.title("o'neil_x") == "O'Neil_x"
    assert strings.title(None) == ""


def test_capfirst():
    assert strings.capfirst("élan") == "Élan"
    assert strings.capfirst("") == ""
    assert strings.capfirst(5) == ""


def test_casing_and_trim():
    assert strings.lower("HeLLo") == "hello"
    assert strings.upper("straße") == "STRASSE"
    assert strings.trim("  x \n") == "x"
    assert strings.lower(None) == ""


@pytest.mark.parametrize(
    ("func", "width", "value", "expected"),
    [
        (strings.rjust, 5, "ab", "   ab"),
        (strings.ljust, 5, "ab", "ab   "),
        (strings.center, 7, "abc", "  abc  "),
        (strings.center, 6, "abc", " abc  "),
        (strings.center, 2, "abc", "abc"),
        (strings.rjust, 4, "日本", "  日本"),
    ],
)
def test_justification(func, width, value, expected):
    assert func(width, value) == expected


@pytest.mark.parametrize(
    ("arg", "value", "expected"),
    [
        ("s", 1, ""),
        ("s", 2, "s"),
        ("s", 0, "s"),
        ("apple,apples", 1, "apple"),
        ("apple,apples", 2, "apples"),
        ("x,y,z", 2, ""),
        ("s", "2", ""),
        ("s", True, ""),
        ("s", 1.0, ""),
    ],
)
def test_pluralize(arg, value, expected):
    assert strings.pluralize(arg, value) == expected


def test_yesno():
    assert strings.yesno("yes", "no", True) == "yes"
    assert strings.yesno("yes", "no", False) == "no"
    assert strings.yesno("yes", "no", 1) == ""


def test_striptags():
    assert strings.striptags("<p>Hello <b>world</b></p>\n") == "Hello world"


def test_misc_string_helpers():
    assert strings.wordcount("  a b\tc\n") == 3
    assert strings.wordcount(None) == 0
    assert strings.repeat(3, "ab") == "ababab"
    assert strings.repeat(-1, "ab") == ""
    assert strings.replace("-", "a-b-c") == "abc"
    assert strings.findreplace("-", "+", "a-b-c") == "a+b+c"
    assert strings.gettitle("pkg.module.Name") == "Name"
    assert strings.gettitle("plain") == "plain"
    assert strings.isblank("  \t") is True
    assert strings.isblank(" x ") is False
    assert strings.isblank(None) is False
