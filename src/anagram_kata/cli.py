"""Demo entrypoint for Anagram-Kata.

Usage:
  python -m anagram_kata.cli

Settings come from resources/config.json when present; built-in defaults
otherwise.
"""

from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, load_config
from .loader import load_file, load_words
from .logging_setup import configure_logging
from .report import print_summary, report_matches
from .store import AnagramStore, InsertOutcome


def main(config_path: str | Path = DEFAULT_CONFIG_PATH) -> int:
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    logger = configure_logging(cfg.level(), Path(cfg.log_file) if cfg.log_file else None)
    store = AnagramStore(logger=logger)

    seeded = load_words(store, cfg.seed_words)
    print(f"Seeded {seeded} words")
    if cfg.word_list:
        try:
            loaded = load_file(store, cfg.word_list)
        except (OSError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(f"Loaded {loaded} words from: {cfg.word_list}")

    outcomes = {outcome: 0 for outcome in InsertOutcome}
    for word in cfg.extra_words:
        outcomes[store.add(word)] += 1
    print(
        f"Inserted {outcomes[InsertOutcome.INSERTED]}, "
        f"already present {outcomes[InsertOutcome.ALREADY_PRESENT]}, "
        f"rejected {outcomes[InsertOutcome.NO_VALID_KEY]}"
    )

    found = sum(1 for query in cfg.queries if report_matches(store, query, logger=logger))
    print(f"Matched {found} of {len(cfg.queries)} queries")
    print_summary(store)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
