from collections.abc import Sequence


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(s: str) -> str:
    """Returns the ``str`` ``s`` with only ASCII ``A-Z`` lower-cased."""
    return s.translate(_ASCII_LOWER)


def levenshtein(a: Sequence, b: Sequence) -> int:
    """Calculates the Levenshtein distance between a and b.

    The Levenshtein distance is the minimum number of single unit insertions,
    deletions or substitutions required to change one sequence into the
    other. It ranges from 0 (the sequences are equal) to the length of the
    longer sequence (the sequences are unrelated).

    Units are compared with ``!=`` and nothing else: there is no case folding
    or normalisation. A :py:class:`str` is compared code point by code point
    so a grapheme cluster made of several code points counts as several
    units.

    Only two rows of the distance matrix are kept and the shorter sequence
    indexes them so this uses ``O(len(a) * len(b))`` time and
    ``O(min(len(a), len(b)))`` space. Bounding the size of the inputs is the
    responsibility of the caller.

    Args:
        a: A :py:class:`Sequence` that supports equality (e.g.
            :py:meth:`object.__eq__`).

        b: A :py:class:`Sequence` that supports equality (e.g.
            :py:meth:`object.__eq__`).

    Returns:
        An integer giving the minimum number of edits (insertions, deletions or
        substitutions) required to change one sequence to the other.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("rust", "rusty")
        1
        >>> levenshtein(["hello", "world"], ["hallo", "world", "!"])
        2
        >>> levenshtein([1, 2, 3, 4, 5], [])
        5
    """
    if len(a) < len(b):
        a, b = b, a
    n_long, n_short = len(a), len(b)
    if n_short == 0:
        return n_long

    previous = list(range(n_short + 1))
    for i in range(1, n_long + 1):
        current = [i] + [0] * n_short
        unit = a[i - 1]
        for j in range(1, n_short + 1):
            if unit == b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(
                    previous[j], current[j - 1], previous[j - 1]
                )
        previous = current

    return previous[n_short]


def levenshtein_ignore_ascii_case(a: str, b: str) -> int:
    """Returns :py:func:`levenshtein` of ``a`` and ``b`` ignoring ASCII case.

    Only ``A-Z`` are folded, so ``"Ñ"`` and ``"ñ"`` still differ.

    Example:
        >>> levenshtein_ignore_ascii_case("unrelated", "SCREAMING")
        7
    """
    return levenshtein(_ascii_lower(a), _ascii_lower(b))
