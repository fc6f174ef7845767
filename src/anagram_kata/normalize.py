"""Anagram key normalization.

Policy:
- Keep ASCII letters and digits only; whitespace, tabs, punctuation and any
  non-ASCII characters are dropped.
- Lowercase, then sort by character code.
- Text with nothing left after filtering has no valid key.
"""

from __future__ import annotations

import logging
import string
from typing import Optional

_ALNUM = frozenset(string.ascii_letters + string.digits)

_LOG = logging.getLogger(__name__)


def _filter_alnum(text: str) -> str:
    return "".join(ch for ch in text if ch in _ALNUM)


def canonical_key(text: Optional[str]) -> Optional[str]:
    """Same key as compute_key, without logging."""
    filtered = _filter_alnum("" if text is None else str(text))
    if not filtered:
        return None
    return "".join(sorted(filtered.lower()))


def compute_key(text: Optional[str], logger: Optional[logging.Logger] = None) -> Optional[str]:
    """Return the canonical anagram key of ``text``, or None if it has none.

    'God', 'dog' and ' D.o.G ' all produce 'dgo'. None and empty input are
    treated alike.
    """
    log = logger or _LOG
    text = "" if text is None else str(text)
    key = canonical_key(text)
    if key is None:
        log.error("Failed to compute a valid anagram key for the text '%s'.", text)
        return None
    log.debug("For the text '%s' produced an anagram key of '%s'", text, key)
    return key


def is_anagram(
    first: Optional[str], second: Optional[str], logger: Optional[logging.Logger] = None
) -> bool:
    """True when both texts have a valid key and the keys match."""
    key = compute_key(first, logger=logger)
    return key is not None and key == compute_key(second, logger=logger)
