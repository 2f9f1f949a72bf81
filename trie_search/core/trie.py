# trie.py
# Prefix tree (trie) with exact lookup, prefix autocomplete and a ranked
# fuzzy search over the whole vocabulary.
# Words are stored as given: no lowercasing or trimming, one edge per code point.
# Optional coarse locking: thread_safe=True serializes every public call.

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .scoring import score_word

logger = logging.getLogger(__name__)

Word = str
Score = float
ScoredWord = Tuple[Word, Score]


class TrieNode:
    """
    One character position in the trie.
    children: char -> TrieNode (owned exclusively by this node)
    is_word: True when an inserted word ends exactly here
    freq: how many times that word was inserted
    """

    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.freq = 0


def _check_text(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def _check_limit(limit: object) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"limit must be a non-negative int, got {limit!r}")


class Trie:
    """
    Trie used for:
     - exact membership checks (contains / `in`)
     - prefix completions (suggest)
     - typo-tolerant ranking of the whole vocabulary (search_ranked)

    Not thread-safe unless built with thread_safe=True, in which case a single
    lock is held for the whole duration of each public operation.
    """

    def __init__(self, thread_safe: bool = False) -> None:
        self._root = TrieNode()
        self._size = 0
        self.thread_safe = bool(thread_safe)
        self._lock: Optional[threading.Lock] = threading.Lock() if thread_safe else None
        logger.debug("Trie created (thread_safe=%s)", self.thread_safe)

    def _guard(self):
        return self._lock if self._lock is not None else nullcontext()

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. Missing nodes are created on the way down, the last
        node is marked as a word and its frequency bumped. Inserting "" marks
        the root itself.
        """
        _check_text(word, "word")
        with self._guard():
            node = self._root
            for ch in word:
                nxt = node.children.get(ch)
                if nxt is None:
                    nxt = node.children[ch] = TrieNode()
                node = nxt
            if not node.is_word:
                node.is_word = True
                self._size += 1
            node.freq += 1

    def insert_many(self, words: Iterable[str]) -> None:
        """Convenience bulk insert."""
        for w in words:
            self.insert(w)

    # lookup -----------------------------------------------------------------
    def _find(self, chars: str) -> Optional[TrieNode]:
        node = self._root
        for ch in chars:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """True only if `word` itself was inserted (a mere prefix is not enough)."""
        _check_text(word, "word")
        with self._guard():
            node = self._find(word)
            return node is not None and node.is_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def frequency(self, word: str) -> int:
        """How many times `word` was inserted (0 if never)."""
        _check_text(word, "word")
        with self._guard():
            node = self._find(word)
            if node is None or not node.is_word:
                return 0
            return node.freq

    # traversal ---------------------------------------------------------
    @staticmethod
    def _walk(node: TrieNode, prefix: str) -> Iterator[Tuple[str, TrieNode]]:
        """
        Pre-order DFS yielding (word, node) for every word node under `node`.
        Explicit stack; children are visited in dict order.
        """
        stack = [(node, prefix)]
        while stack:
            n, path = stack.pop()
            if n.is_word:
                yield path, n
            # reversed so the first child is popped first
            for ch, child in reversed(list(n.children.items())):
                stack.append((child, path + ch))

    def suggest(self, prefix: str, limit: int = 0) -> List[str]:
        """
        Words starting with `prefix`, in traversal order (not sorted).
        limit=0 returns every match, otherwise the walk stops after `limit`.
        Unknown prefix -> [].
        """
        _check_text(prefix, "prefix")
        _check_limit(limit)
        with self._guard():
            node = self._find(prefix)
            if node is None:
                return []
            out: List[str] = []
            for word, _ in self._walk(node, prefix):
                out.append(word)
                if limit and len(out) >= limit:
                    break
            return out

    def search_ranked_with_scores(self, query: str, limit: int = 10) -> List[ScoredWord]:
        """
        Score every stored word against `query` and return (word, score) pairs
        sorted by score (desc) then word (asc). limit=0 returns everything.
        Scans the whole vocabulary on every call.
        """
        _check_text(query, "query")
        _check_limit(limit)
        with self._guard():
            scored: List[ScoredWord] = [
                (word, score_word(query, word, node.freq))
                for word, node in self._walk(self._root, "")
            ]
            scored.sort(key=lambda t: (-t[1], t[0]))
            logger.debug("search_ranked(%r): scored %d words", query, len(scored))
            return scored[:limit] if limit else scored

    def search_ranked(self, query: str, limit: int = 10) -> List[str]:
        """Ranked fuzzy search; see search_ranked_with_scores."""
        return [w for w, _ in self.search_ranked_with_scores(query, limit)]

    # convenience ----------------------------------------------------------
    def words(self) -> List[str]:
        """Every stored word, in traversal order."""
        with self._guard():
            return [w for w, _ in self._walk(self._root, "")]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())

    def __len__(self) -> int:
        """Number of distinct inserted words."""
        return self._size

    def size(self) -> int:
        return self._size
