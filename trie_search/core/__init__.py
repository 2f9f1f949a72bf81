"""
trie_search.core

The data structure and its scoring:
 - Trie / TrieNode: prefix tree with contains, suggest and search_ranked
 - scoring: Levenshtein distance and the fixed ranking formula
"""

from .trie import Trie, TrieNode
from .scoring import levenshtein, score_word

__all__ = [
    "Trie",
    "TrieNode",
    "levenshtein",
    "score_word",
]
