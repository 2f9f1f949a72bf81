# scoring.py
# Edit distance and the fixed scoring formula used by Trie.search_ranked.
# score = 1 / (1 + distance) + len(word) * 0.02 + freq * 0.05
# The bonuses are additive on purpose: a longer or more frequent word can
# outrank a closer but shorter one.

from __future__ import annotations

LENGTH_WEIGHT = 0.02
FREQUENCY_WEIGHT = 0.05


def levenshtein(a: str, b: str) -> int:
    """
    Classic Levenshtein distance (unit cost insert/delete/substitute).
    Two-row DP, O(len(a) * len(b)) time, O(min(len(a), len(b))) space.
    """
    if a == b:
        return 0

    # keep b as the shorter string, rows are sized on it
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)
    if lb == 0:
        return la

    prev = list(range(lb + 1))
    for i in range(1, la + 1):
        ca = a[i - 1]
        curr = [i]
        for j in range(1, lb + 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr.append(val)
        prev = curr
    return prev[-1]


def similarity(distance: int) -> float:
    """1.0 for an exact match, falling towards 0 as distance grows."""
    return 1.0 / (1.0 + distance)


def score_word(query: str, word: str, freq: int) -> float:
    """Score `word` (inserted `freq` times) against `query`."""
    d = levenshtein(query, word)
    len_bonus = len(word) * LENGTH_WEIGHT
    freq_bonus = freq * FREQUENCY_WEIGHT
    return similarity(d) + len_bonus + freq_bonus
