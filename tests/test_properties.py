"""Hypothesis property tests for the helper catalog.

- **intcomma**: matches the naive "comma every three digits from the right"
  algorithm for every integer, sign preserved.
- **truncatechars / slice round-trip**: a full-length truncation or slice
  returns the string unchanged.
- **No propagation**: no helper raises, whatever it is called with,
  keyword arguments included.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gtf import FILTERS, FUNCS
from gtf.helpers import numbers, sequences, strings

pytestmark = [pytest.mark.property]

ANY_VALUE = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-10_000, max_value=10_000),
    st.floats(allow_nan=True),
    st.text(),
    st.binary(),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
    st.datetimes(),
    st.builds(object),
)


def naive_intcomma(x: int) -> str:
    digits = str(abs(x))
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ("-" if x < 0 else "") + ",".join(groups)


@given(st.integers())
def test_intcomma_matches_naive_algorithm(x):
    assert numbers.intcomma(x) == naive_intcomma(x)


@given(st.text())
def test_truncatechars_full_length_round_trips(s):
    assert strings.truncatechars(len(s), s) == s


@given(st.text(), st.integers(min_value=0, max_value=50))
def test_truncatechars_never_longer_than_n(s, n):
    result = strings.truncatechars(n, s)
    assert result == s or len(result) <= n


@given(st.text())
def test_slice_full_range_round_trips(s):
    assert sequences.slice_value(0, len(s), s) == s


@settings(max_examples=50, deadline=None)
@given(
    st.lists(ANY_VALUE, min_size=0, max_size=4),
    st.dictionaries(st.sampled_from(["n", "s", "value", "arg", "sep"]), ANY_VALUE, max_size=2),
)
def test_no_helper_raises(args, kwargs):
    for name in FUNCS:
        FUNCS[name](*args)
        FILTERS[name](*args)
        FUNCS[name](*args, **kwargs)
        FILTERS[name](*args, **kwargs)
