"""Tests for collection helpers."""

from __future__ import annotations

import pytest

from gtf.helpers import sequences


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", "fallback"),
        ("x", "x"),
        (0, 0),
        (0.0, 0.0),
        ([], "fallback"),
        ((), "fallback"),
        ({}, "fallback"),
        (set(), "fallback"),
        ([0], [0]),
        (False, "fallback"),
        (True, True),
        (None, None),
    ],
)
def test_default(value, expected):
    assert sequences.default("fallback", value) == expected


def test_length_and_lengthis():
    assert sequences.length("héllo") == 5
    assert sequences.length([1, 2]) == 2
    assert sequences.length({"a": 1}) == 1
    assert sequences.length(5) == 0
    assert sequences.lengthis(2, [1, 2]) is True
    assert sequences.lengthis(2, "日本") is True
    assert sequences.lengthis(2, 5) is False


def test_first_and_last():
    assert sequences.first("héllo") == "h"
    assert sequences.last("héllo") == "o"
    assert sequences.first([3, 4]) == 3
    assert sequences.last((3, 4)) == 4
    assert sequences.first([]) == ""
    assert sequences.last("") == ""
    assert sequences.first(5) == ""


def test_join():
    assert sequences.join(", ", ["a", "b"]) == "a, b"
    assert sequences.join(", ", ("a",)) == "a"
    assert sequences.join(", ", [1, 2]) == ""
    assert sequences.join(", ", "ab") == ""


@pytest.mark.parametrize(
    ("start", "end", "value", "expected"),
    [
        (1, 3, "héllo", "él"),
        (-5, 2, "abc", "ab"),
        (0, 100, "abc", "abc"),
        (2, 1, "abc", ""),
        (0, 2, [1, 2, 3], [1, 2]),
        (-1, 3, [1, 2, 3], [1, 2, 3]),
        (0, 2, (1, 2, 3), (1, 2)),
        (0, 5, [1, 2, 3], ""),
        (2, 1, [1, 2, 3], ""),
        (0, 1, 5, ""),
        (0, 1, {"a": 1}, ""),
    ],
)
def test_slice(start, end, value, expected):
    assert sequences.slice_value(start, end, value) == expected


def test_random_item():
    for _ in range(20):
        assert sequences.random_item("abc") in "abc"
        assert sequences.random_item([1, 2, 3]) in (1, 2, 3)
    assert sequences.random_item([]) == ""
    assert sequences.random_item(5) == ""


def test_membership():
    assert sequences.existin(["a", "b"], "a") is True
    assert sequences.existin(["a", "b"], "c") is False
    assert sequences.existin(None, "a") is False
    assert sequences.existin("ab", "a") is False
    assert sequences.is_checked(["a", "b"], "b") == "checked"
    assert sequences.is_checked(["a"], "c") == ""
    assert sequences.is_checked("a", "a") == ""


def test_func_map():
    assert sequences.func_map(1, "two", None) == [1, "two", None]
    assert sequences.func_map() == []
