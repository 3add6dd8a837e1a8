# trie.py
# Trie (prefix tree) over normalized place names.
# Each terminal node keeps the original display string so results come back
# exactly as they were inserted ("Los Angeles", not "losangeles").

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from .fuzzy import rank_closest
from .normalizer import normalize

SearchResult = Tuple[bool, List[str]]

DEFAULT_LIMIT = 10


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: True if an inserted word ends here
    display: original (unnormalized) string, only set on terminal nodes
    """

    __slots__ = ("children", "is_word", "display")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.display: Optional[str] = None


class Trie:
    """
    Trie to store place names for prefix lookup:
     - exact match on a full (normalized) name
     - every name sharing a prefix, ranked by edit distance
    Built once, then only read.
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    # insertion -----------------------------------------------------
    def insert(self, word: str, display: Optional[str] = None) -> None:
        """
        Insert `word` keyed by its normalized form.
        `display` is what searches return (defaults to `word`).
        Two words with the same normalized form share a node: last write wins.
        """
        node = self._root
        for ch in normalize(word):
            node = node.children[ch]
        node.is_word = True
        node.display = word if display is None else display

    # search/traversal ---------------------------------------------------------
    def _walk(self, key: str) -> Optional[TrieNode]:
        node = self._root
        for ch in key:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> SearchResult:
        """
        Exact-or-prefix search.
        Returned: (found, matches)
         - (False, []) if the normalized query leaves the trie
         - (True, [display]) if the query lands on a terminal node
         - (True, up to `limit` completions ranked by edit distance to the
           raw query) otherwise
        A broken path never falls back to fuzzy matching here.
        """
        node = self._walk(normalize(query))
        if node is None:
            return False, []
        if node.is_word:
            return True, [node.display]

        words: List[str] = []
        self._collect(node, words)
        ranked = rank_closest(query, words, limit)
        if not ranked:
            return False, []
        return True, ranked

    def completions(self, prefix: str) -> List[str]:
        """All display strings under `prefix`, in trie order (unranked)."""
        node = self._walk(normalize(prefix))
        if node is None:
            return []
        out: List[str] = []
        self._collect(node, out)
        return out

    # internal collector ---------------------------------------------------------
    def _collect(self, node: TrieNode, results: List[str]) -> None:
        """
        DFS collecting display strings under a node.
        Explicit stack (no recursion): words can be longer than the recursion limit.
        Children are pushed reversed so the visit order is plain pre-order.
        """
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_word:
                results.append(n.display)
            stack.extend(reversed(list(n.children.values())))

    # convenience -----------------------------------------------------
    def words(self) -> List[str]:
        """Every stored display string."""
        out: List[str] = []
        self._collect(self._root, out)
        return out

    def size(self) -> int:
        """
        Count words in the Trie.
        (O(N) walk. For inspection, not the search path.)
        """
        return len(self.words())

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: str) -> bool:
        """Exact membership on the normalized form."""
        node = self._walk(normalize(word))
        return node is not None and node.is_word
