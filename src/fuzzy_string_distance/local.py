from collections.abc import Sequence

from fuzzy_string_distance.levenshtein import _ascii_lower


def local_levenshtein(source: Sequence, target: Sequence) -> int:
    """Calculates the Levenshtein distance from source to any part of target.

    This is a fuzzy "contains": the result is the minimum number of single
    unit insertions, deletions or substitutions required to change
    ``source`` into some contiguous subsequence of ``target``. A result of 0
    means ``source`` occurs in ``target`` exactly.

    The first row of the distance matrix is all zeros so a match may start
    anywhere in ``target`` and the result is the minimum of the last row so a
    match may end anywhere. Unlike :py:func:`levenshtein` this is
    asymmetric and is bounded by ``len(source)`` rather than by the longer
    input.

    See `Fuzzy Substring Matching: On-device Fuzzy Friend Search at Snapchat
    <http://arxiv.org/pdf/2211.02767>`_.

    Args:
        source: The :py:class:`Sequence` to search for, e.g. a query.

        target: The :py:class:`Sequence` to search in.

    Returns:
        An integer in ``[0, len(source)]``.

    Example:
        >>> local_levenshtein("long", "A long sentence")
        0
        >>> local_levenshtein("A long sentence", "long")
        11
        >>> local_levenshtein("Piñata", "Pinecone tree")
        4
    """
    n_source, n_target = len(source), len(target)
    if n_source == 0:
        return 0
    if n_target == 0:
        return n_source

    previous = [0] * (n_target + 1)
    for i in range(1, n_source + 1):
        current = [i] + [0] * n_target
        unit = source[i - 1]
        for j in range(1, n_target + 1):
            if unit == target[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(
                    previous[j], current[j - 1], previous[j - 1]
                )
        previous = current

    return min(previous)


def local_levenshtein_ignore_ascii_case(source: str, target: str) -> int:
    """Returns :py:func:`local_levenshtein` ignoring ASCII case.

    Example:
        >>> local_levenshtein_ignore_ascii_case("SCREAM", "unrelated")
        4
    """
    return local_levenshtein(_ascii_lower(source), _ascii_lower(target))
