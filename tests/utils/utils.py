"""Common utilities used in tests."""
from typing import List

import hypothesis.extra.numpy
import hypothesis.strategies as st
import numpy as np


def small_alphabet() -> st.SearchStrategy[str]:
    """Returns a strategy which generates one of a few characters.

    A small alphabet makes matching units, and so non-trivial distances,
    likely.
    """
    return st.sampled_from("abcAB")


def texts(max_size: int = 12) -> st.SearchStrategy[str]:
    """Returns a strategy which generates short strings."""
    return st.one_of(
        st.text(alphabet=small_alphabet(), max_size=max_size),
        st.text(max_size=max_size),
    )


def int_lists(max_size: int = 12) -> st.SearchStrategy[List[int]]:
    """Returns a strategy which generates short lists of small ints."""
    return st.lists(
        st.integers(min_value=0, max_value=3), max_size=max_size
    )


def int_arrays(max_size: int = 12) -> st.SearchStrategy[np.ndarray]:
    """Returns a strategy for generating 1D `np.ndarray`s of small ints."""
    return hypothesis.extra.numpy.arrays(
        np.int64,
        shape=st.integers(min_value=0, max_value=max_size),
        elements=st.integers(min_value=0, max_value=3),
    )


def naive_levenshtein(a, b) -> int:
    """Full distance matrix implementation used as an oracle."""
    d = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        d[i][0] = i
    for j in range(len(b) + 1):
        d[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost
            )
    return d[len(a)][len(b)]
