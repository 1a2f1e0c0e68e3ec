"""
Word analysis for pratyaya.

Splits a transliterated word into stem + suffix by picking the longest
registered suffix that ends the word.

Example:
    >>> from pratyaya.suffixes import create_registry
    >>> analyzer = WordAnalyzer(create_registry())
    >>> analyzer.analyze("devasya")
    WordAnalysis(word='devasya', stem='dev', suffix='asya', category="Genitive singular (e.g. 'devasya')")
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pratyaya.suffixes import SuffixEntry, SuffixRegistry

logger = logging.getLogger(__name__)

# Stem reported when the matched suffix covers the whole word
NO_STEM = "(no stem)"


class EmptyInputError(ValueError):
    """Raised when analysis is requested for an empty or missing word."""

    def __init__(self, word: Optional[str] = None):
        self.word = word
        super().__init__("Empty word")


@dataclass(frozen=True)
class WordAnalysis:
    """Result of splitting a word at its best-matching suffix."""
    word: str
    stem: str
    suffix: str
    category: str


# ============================================================================
# Matching
# ============================================================================

def is_suffix_of(word: str, candidate: str) -> bool:
    """Check whether candidate is exactly the trailing part of word."""
    if not word or len(candidate) > len(word):
        return False
    return word.endswith(candidate)


def find_best_match(registry: SuffixRegistry, word: str) -> Optional[SuffixEntry]:
    """
    Find the longest registered suffix that ends word.

    Entries are scanned in insertion order and only a strictly longer match
    replaces the current best, so among equal-length matches the earliest
    registered entry wins. An empty suffix can never be selected.

    Args:
        registry: Registry to search (read only).
        word: Word to match against.

    Returns:
        The winning SuffixEntry, or None if no suffix matches.
    """
    best: Optional[SuffixEntry] = None
    best_len = 0

    for entry in registry.enumerate():
        if not is_suffix_of(word, entry.suffix):
            continue
        current_len = len(entry.suffix)
        if current_len > best_len:
            best_len = current_len
            best = entry

    return best


# ============================================================================
# Analyzer
# ============================================================================

class WordAnalyzer:
    """Analyze words against a suffix registry it does not modify."""

    def __init__(self, registry: SuffixRegistry):
        self.registry = registry

    def find_best_match(self, word: str) -> Optional[SuffixEntry]:
        return find_best_match(self.registry, word)

    def analyze(self, word: Optional[str]) -> Optional[WordAnalysis]:
        """
        Split word into stem and suffix.

        Args:
            word: Transliterated word, e.g. "ramena".

        Returns:
            WordAnalysis for the longest matching suffix, or None when no
            known suffix matches.

        Raises:
            EmptyInputError: If word is None or empty.
        """
        if not word:
            raise EmptyInputError(word)

        match = self.find_best_match(word)
        if match is None:
            logger.debug(f"No known suffix for {word!r}")
            return None

        stem_len = len(word) - len(match.suffix)
        stem = word[:stem_len] if stem_len > 0 else NO_STEM

        logger.debug(f"Analyzed {word!r} as {stem!r} + {match.suffix!r}")
        return WordAnalysis(
            word=word,
            stem=stem,
            suffix=match.suffix,
            category=match.category,
        )
