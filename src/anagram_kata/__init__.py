"""Anagram-Kata package.

Normalizes words into canonical anagram keys and groups stored words by key
so that any word can be looked up for its stored anagrams.
"""

from .normalize import compute_key
from .store import AnagramStore, InsertOutcome, insert, lookup

__all__ = [
    "compute_key",
    "AnagramStore",
    "InsertOutcome",
    "insert",
    "lookup",
]
