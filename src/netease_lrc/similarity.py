"""Character-level string likeness on a 0-100 scale.

Implements the classic "similar text" measure: find the longest common
substring of the two strings, then recurse on what lies to its left in both
strings and on what lies to its right, summing the matched characters.  The
percentage is taken relative to the combined length::

    similarity = matched * 2 * 100 / (len(a) + len(b))

The measure is not symmetric in general: when several common substrings share
the maximal length, the first one found scanning *a* (then *b*) wins, and the
recursion splits differently depending on which one that was.

Usage::

    >>> similarity("World", "Word")
    88.88888888888889
"""


def similarity(a: str, b: str) -> float:
    """Return the similarity of *a* and *b* as a percentage in ``[0, 100]``.

    Either operand being empty yields ``0.0``.  Comparison is case-sensitive;
    callers lower-case first if they want otherwise.
    """
    total = len(a) + len(b)
    if not a or not b:
        return 0.0
    return _matched_chars(a, b) * 2 * 100 / total


def _matched_chars(a: str, b: str) -> int:
    """Sum of the lengths of the recursively found common substrings."""
    if not a or not b:
        return 0
    pos_a, pos_b, length = _longest_common_substring(a, b)
    if length == 0:
        return 0

    matched = length
    if pos_a and pos_b:
        matched += _matched_chars(a[:pos_a], b[:pos_b])
    end_a = pos_a + length
    end_b = pos_b + length
    if end_a < len(a) and end_b < len(b):
        matched += _matched_chars(a[end_a:], b[end_b:])
    return matched


def _longest_common_substring(a: str, b: str) -> tuple[int, int, int]:
    """Return ``(pos_a, pos_b, length)`` of the first longest common substring.

    Only a strictly longer run replaces the current best, so ties resolve to
    the earliest position in *a*, then in *b*.
    """
    best_a = best_b = best_len = 0
    len_a, len_b = len(a), len(b)
    for i in range(len_a):
        # No run starting here can beat the current best.
        if len_a - i <= best_len:
            break
        for j in range(len_b):
            if len_b - j <= best_len:
                break
            k = 0
            while i + k < len_a and j + k < len_b and a[i + k] == b[j + k]:
                k += 1
            if k > best_len:
                best_a, best_b, best_len = i, j, k
    return best_a, best_b, best_len
