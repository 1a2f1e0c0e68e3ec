"""
Pratyaya: Sanskrit suffix identifier.
Splits transliterated Sanskrit words into stem + suffix using longest-suffix matching.
"""

__version__ = "0.1.0"


def analyze(word: str, registry=None):
    """
    Analyze a transliterated Sanskrit word.

    This is the main high-level API.

    Args:
        word: Word to analyze, e.g. "ramena".
        registry: Optional SuffixRegistry. If None, a freshly seeded one is used.

    Returns:
        WordAnalysis for the longest matching suffix, or None if no known
        suffix matches.

    Raises:
        EmptyInputError: If word is empty.

    Example:
        >>> import pratyaya
        >>> result = pratyaya.analyze("ramena")
        >>> result.stem, result.suffix
        ('ram', 'ena')
    """
    from pratyaya.analyzer import WordAnalyzer
    from pratyaya.suffixes import create_registry

    if registry is None:
        registry = create_registry()

    return WordAnalyzer(registry).analyze(word)
