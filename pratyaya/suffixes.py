"""
Suffix registry for pratyaya.

Suffixes (pratyaya) are endings that attach to a stem to mark case, number,
or derivation. Examples include:
- ah (nominative singular masculine): rama + ah -> ramah
- ena (instrumental singular): ram + ena -> ramena
- asya (genitive singular): dev + asya -> devasya

The registry is an ordered, append-only list of (suffix, category) entries.
Insertion order matters: when two suffixes of the same length both match a
word, the one registered first wins.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)


# ============================================================================
# Seed Data
# ============================================================================

SUFFIX_SEED: Tuple[Tuple[str, str], ...] = (
    ('ah', "Nominative singular masculine (e.g. 'Ramah')"),
    ('am', 'Accusative singular / neuter nominative'),
    ('ena', "Instrumental singular (e.g. 'ramena')"),
    ('asya', "Genitive singular (e.g. 'devasya')"),
    ('e', 'Locative singular / vocative variation'),
    ('esu', "Locative plural (e.g. 'vanesu')"),
    ('bhih', 'Instrumental plural'),
    ('su', 'Locative plural (alternative)'),
    ('tva', "Abstract noun forming suffix (e.g. 'satyatva')"),
    ('ka', 'Diminutive / derivative suffix'),
    ('ta', 'Past participle / abstract noun suffix'),
    ('yah', 'Future passive participle or derivative ending'),
)


# ============================================================================
# Registry
# ============================================================================

@dataclass(frozen=True)
class SuffixEntry:
    """A known suffix and the grammatical category it marks."""
    suffix: str
    category: str


class SuffixRegistry:
    """
    Ordered collection of suffix entries.

    Entries can only be appended; there is no removal or update. Duplicate
    suffixes are allowed and keep their insertion order.
    """

    def __init__(self, entries: Iterable[Tuple[str, str]] = ()):
        self._entries: List[SuffixEntry] = []
        for suffix, category in entries:
            self.insert(suffix, category)

    def insert(self, suffix: str, category: str) -> SuffixEntry:
        """Append a new entry at the end of the registry and return it."""
        entry = SuffixEntry(suffix=suffix, category=category)
        self._entries.append(entry)
        logger.debug(f"Registered suffix {suffix!r} ({len(self._entries)} total)")
        return entry

    def enumerate(self) -> Iterator[SuffixEntry]:
        """Iterate over all entries in insertion order."""
        return iter(tuple(self._entries))

    def __iter__(self) -> Iterator[SuffixEntry]:
        return self.enumerate()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SuffixRegistry({len(self._entries)} entries)"


def create_registry(
    seed: Iterable[Tuple[str, str]] = SUFFIX_SEED,
) -> SuffixRegistry:
    """
    Create a registry loaded with the seed suffixes.

    Args:
        seed: (suffix, category) pairs to load, in order. Defaults to the
            twelve canonical Sanskrit endings.

    Returns:
        A new SuffixRegistry owned by the caller.
    """
    registry = SuffixRegistry(seed)
    logger.debug(f"Created suffix registry with {len(registry)} seed entries")
    return registry
