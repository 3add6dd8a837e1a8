# normalizer.py
# Key normalization shared by insertion and lookup, so "New York",
# "new-york" and "NEW YORK!" all land on the same trie path ("newyork").

from __future__ import annotations


def normalize(text: str) -> str:
    """
    Strip everything that is not a letter or a decimal digit and lowercase
    the rest. Lowercasing happens first: some capitals (e.g. "İ") lower into
    a letter plus a combining mark, and the mark must be dropped too.
    """
    if not text:
        return ""
    return "".join(ch for ch in text.lower() if ch.isalpha() or ch.isdecimal())
