"""In-memory anagram store: canonical key -> group of stored words.

Words are kept verbatim; grouping happens on the normalized key only, so
'Kayak' and 'kayak' live side by side in the 'aakky' group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .normalize import canonical_key, compute_key


class InsertOutcome(Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already-present"
    NO_VALID_KEY = "no-valid-key"


Group = Tuple[str, ...]


@dataclass
class AnagramStore:
    entries: Dict[str, Set[str]] = field(default_factory=dict)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), repr=False, compare=False
    )

    def add(self, text: str) -> InsertOutcome:
        """Insert ``text`` under its anagram key and report what happened.

        Texts without a valid key are rejected and leave the store untouched.
        """
        key = compute_key(text, logger=self.logger)
        if key is None:
            return InsertOutcome.NO_VALID_KEY
        group = self.entries.setdefault(key, set())
        if text in group:
            self.logger.debug("The '%s' already exists within the anagram dictionary.", text)
            return InsertOutcome.ALREADY_PRESENT
        group.add(text)
        self.logger.debug("Inserted '%s' into the anagram dictionary.", text)
        return InsertOutcome.INSERTED

    def insert(self, text: str) -> bool:
        return self.add(text) is InsertOutcome.INSERTED

    def lookup(self, text: str) -> Optional[Group]:
        """Return the stored anagrams of ``text`` in sorted order, or None.

        The query itself does not need to be stored.
        """
        key = compute_key(text, logger=self.logger)
        if key is None:
            return None
        # .get, not setdefault: lookups must not create groups
        group = self.entries.get(key)
        if not group:
            return None
        return tuple(sorted(group))

    def group(self, key: str) -> Group:
        return tuple(sorted(self.entries.get(key, ())))

    def keys(self) -> List[str]:
        return sorted(k for k, g in self.entries.items() if g)

    def groups(self) -> Iterator[Tuple[str, Group]]:
        for key in self.keys():
            yield key, self.group(key)

    def entry_count(self) -> int:
        return sum(len(g) for g in self.entries.values())

    def __len__(self) -> int:
        return len(self.keys())

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        # membership tests stay silent; only add/lookup log
        key = canonical_key(text)
        return key is not None and bool(self.entries.get(key))

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


def insert(store: AnagramStore, text: str) -> bool:
    """Insert ``text`` into ``store``; True only if it was newly added."""
    return store.insert(text)


def lookup(store: AnagramStore, text: str) -> Optional[Group]:
    """Sorted group of words in ``store`` that are anagrams of ``text``."""
    return store.lookup(text)

