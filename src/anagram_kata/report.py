"""Rendering and reporting of anagram lookups."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .store import AnagramStore

_LOG = logging.getLogger(__name__)


def format_group(group: Iterable[str]) -> str:
    """Render a group as a bracketed, comma-separated list: '[act, cat]'."""
    return "[" + ", ".join(group) + "]"


def report_matches(
    store: AnagramStore, text: str, logger: Optional[logging.Logger] = None
) -> bool:
    """Log the anagrams of ``text`` held by ``store``.

    Returns True when at least one match was found.
    """
    log = logger or _LOG
    matches = store.lookup(text)
    if matches:
        log.info("Here is the list of matching anagrams for '%s' are %s.", text, format_group(matches))
        return True
    log.info("No matching anagrams were found for '%s'.", text)
    return False


def describe_store(store: AnagramStore) -> List[str]:
    return [f"{key}: {format_group(group)}" for key, group in store.groups()]


def print_summary(store: AnagramStore) -> None:
    """Print key and entry counts followed by every group in key order."""
    print("Anagram Dictionary Summary:")
    print(f"  Keys:    {len(store)}")
    print(f"  Entries: {store.entry_count()}")
    for line in describe_store(store):
        print(f"    {line}")
    print()
