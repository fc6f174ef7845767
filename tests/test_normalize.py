"""Tests for anagram key normalization."""

import logging

import pytest

from anagram_kata.normalize import canonical_key, compute_key, is_anagram


class TestComputeKey:
    """Test canonical key computation."""

    def test_sorted_lowercase_key(self):
        """Test that characters are lower-cased and sorted."""
        assert compute_key("God") == "dgo"
        assert compute_key("dog") == "dgo"

    def test_case_insensitive(self):
        """Test that casing never changes the key."""
        assert compute_key("Kayak") == compute_key("kayak") == compute_key("KAYAK") == "aakky"

    def test_tabs_are_stripped(self):
        """Test that tab-separated letters produce the same key as the bare word."""
        assert compute_key("C\tA\tT\t") == "act"
        assert compute_key("C\tA\tT\t") == compute_key("cat") == compute_key("act")

    def test_punctuation_and_whitespace_are_stripped(self):
        """Test that symbols interleaved with letters are ignored."""
        assert compute_key("***Cat***") == "act"
        assert compute_key(" d.o-g! ") == "dgo"

    def test_digits_are_kept(self):
        """Test that digits take part in the key and sort before letters."""
        assert compute_key("b2a1") == "12ab"

    def test_non_ascii_is_dropped(self):
        """Test that only ASCII letters and digits count."""
        assert compute_key("café") == "acf"
        assert compute_key("λόγος") is None

    def test_symbol_only_has_no_key(self):
        """Test that text without letters or digits has no valid key."""
        assert compute_key("###") is None
        assert compute_key(" \t\n") is None

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input_has_no_key(self, text):
        """Test that empty and None input have no valid key."""
        assert compute_key(text) is None

    def test_deterministic(self):
        """Test that repeated calls give identical keys."""
        assert compute_key("Listen") == compute_key("Listen") == compute_key("Silent")


class TestKeyDiagnostics:
    """Test logging emitted during key computation."""

    def test_debug_on_success(self, caplog):
        caplog.set_level(logging.DEBUG)
        compute_key("dog")
        assert any(
            r.levelno == logging.DEBUG and "'dgo'" in r.getMessage() for r in caplog.records
        )

    def test_error_on_failure(self, caplog):
        caplog.set_level(logging.DEBUG)
        compute_key("###")
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "'###'" in errors[0].getMessage()

    def test_injected_logger(self, caplog):
        """Test that an injected logger receives the diagnostics."""
        caplog.set_level(logging.DEBUG)
        custom = logging.getLogger("tests.custom")
        compute_key("act", logger=custom)
        assert {r.name for r in caplog.records} == {"tests.custom"}


class TestIsAnagram:
    """Test the anagram predicate."""

    def test_anagrams(self):
        assert is_anagram("dog", "God")
        assert is_anagram("C\tA\tT\t", "act")

    def test_not_anagrams(self):
        assert not is_anagram("dog", "dogs")
        assert not is_anagram("bob", "unknown")

    def test_symbols_are_never_anagrams(self):
        """Test that two symbol-only texts are not anagrams of each other."""
        assert not is_anagram("###", "###")

    def test_injected_logger(self, caplog):
        """Test that both key computations report to the given logger."""
        caplog.set_level(logging.DEBUG)
        assert not is_anagram("dog", "###", logger=logging.getLogger("tests.anagram"))
        assert len(caplog.records) == 2
        assert {r.name for r in caplog.records} == {"tests.anagram"}


class TestCanonicalKey:
    """Test the silent key computation."""

    def test_matches_compute_key(self):
        for text in ["God", "C\tA\tT\t", "###", "", None]:
            assert canonical_key(text) == compute_key(text)

    def test_no_logging(self, caplog):
        caplog.set_level(logging.DEBUG)
        canonical_key("dog")
        canonical_key("###")
        assert caplog.records == []
