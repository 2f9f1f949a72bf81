"""
trie_search

In-memory prefix tree with exact lookup, prefix autocomplete and ranked
fuzzy (edit distance) search.
"""

from .core.trie import Trie, TrieNode

__all__ = ["Trie", "TrieNode"]

__version__ = "0.1.0"
