"""Seed an anagram store from word lists and text streams.

Tokens are whitespace-delimited; a word file may hold one word per line or
several per line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .store import AnagramStore

DEMO_WORDS = ("bob", "god", "act", "dog")


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def load_words(store: AnagramStore, words: Iterable[str]) -> int:
    """Insert every word and return how many were new to the store."""
    inserted = 0
    for word in words:
        if store.insert(word):
            inserted += 1
    return inserted


def load_stream(store: AnagramStore, stream: TextIO | Iterable[str]) -> int:
    return load_words(store, iter_tokens(stream))


def load_file(store: AnagramStore, path: str | Path) -> int:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return load_stream(store, f)


def seed_demo(store: AnagramStore) -> int:
    return load_words(store, DEMO_WORDS)
