# fuzzy.py
# Edit-distance ranking for prefix completions.
# - edit_distance: classic Levenshtein with a single rolling row
# - rank_closest: stable sort of candidates by distance, truncated to a cap
# No normalization happens in here: callers decide what to compare.

from __future__ import annotations
from typing import Iterable, List, NamedTuple


class WordDistance(NamedTuple):
    word: str
    distance: int


def edit_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning `a` into `b`.
    Runs in O(len(a) * len(b)) time, keeps one row of the shorter string.
    """
    if a == b:
        return 0

    # ensure b is the shorter string so the row stays small
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    lb = len(b)
    prev = list(range(lb + 1))

    for i, ca in enumerate(a, 1):
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


def rank_closest(target: str, candidates: Iterable[str], limit: int) -> List[str]:
    """
    Return up to `limit` candidates closest to `target`.
    Ties keep the order the candidates came in (sorted() is stable), so the
    same input always gives the same ranking.
    """
    if limit <= 0:
        return []
    scored = [WordDistance(w, edit_distance(target, w)) for w in candidates]
    scored.sort(key=lambda wd: wd.distance)
    return [wd.word for wd in scored[:limit]]
