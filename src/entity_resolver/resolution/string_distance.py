"""
Levenshtein edit distance for fuzzy alias matching.

Two interchangeable backends: a pure-Python two-row DP and rapidfuzz.
"""
from typing import Callable, Dict

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance with unit insertion, deletion and substitution costs.

    Only two rows sized to the shorter string are kept in memory.

    :param a: First string
    :param b: Second string
    :return: Minimum number of single-character edits
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Shorter string indexes the row
    if len(a) > len(b):
        a, b = b, a

    prev = list(range(len(a) + 1))
    curr = [0] * (len(a) + 1)

    for j, cb in enumerate(b, 1):
        curr[0] = j
        for i, ca in enumerate(a, 1):
            cost = 0 if ca == cb else 1
            curr[i] = min(
                prev[i] + 1,         # deletion
                curr[i - 1] + 1,     # insertion
                prev[i - 1] + cost,  # substitution
            )
        prev, curr = curr, prev

    return prev[len(a)]


def rapidfuzz_levenshtein(a: str, b: str) -> int:
    """Levenshtein distance computed by rapidfuzz."""
    return Levenshtein.distance(a, b)


_BACKENDS: Dict[str, Callable[[str, str], int]] = {
    "builtin": levenshtein,
    "rapidfuzz": rapidfuzz_levenshtein,
}


def get_distance_function(backend: str = "builtin") -> Callable[[str, str], int]:
    """
    Look up a distance implementation by name.

    :param backend: "builtin" or "rapidfuzz"
    :raises: ValueError for unknown backend names
    """
    if backend not in _BACKENDS:
        raise ValueError(
            f"Unknown distance backend '{backend}'. "
            f"Must be one of: {list(_BACKENDS.keys())}"
        )
    return _BACKENDS[backend]
