"""
Pydantic models for pratyaya results.

These models give the CLI (and any API wrapping the library) a stable,
JSON-serializable shape for suffix listings and word analyses.

Usage:
    from pratyaya.models import AnalysisResult, SuffixListResult

    result = AnalysisResult.from_analysis("ramena", analyzer.analyze("ramena"))
    print(result.model_dump_json())
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from pratyaya.analyzer import WordAnalysis
from pratyaya.suffixes import SuffixRegistry


class SuffixResult(BaseModel):
    """A single registry entry with its 1-based position."""
    index: int = Field(..., description="1-based position in the registry")
    suffix: str = Field(..., description="Suffix text in transliteration")
    category: str = Field(..., description="Grammatical category or description")


class SuffixListResult(BaseModel):
    """All registry entries in insertion order."""
    suffixes: List[SuffixResult] = Field(default_factory=list, description="Known suffixes")
    count: int = Field(0, description="Number of known suffixes")

    @classmethod
    def from_registry(cls, registry: SuffixRegistry) -> "SuffixListResult":
        """Create SuffixListResult from a registry snapshot."""
        suffixes = [
            SuffixResult(index=i, suffix=entry.suffix, category=entry.category)
            for i, entry in enumerate(registry.enumerate(), start=1)
        ]
        return cls(suffixes=suffixes, count=len(suffixes))


class AnalysisResult(BaseModel):
    """
    Outcome of analyzing one word.

    When no known suffix matches, matched is False and the stem, suffix and
    category fields are None.
    """
    word: str = Field(..., description="Word as given")
    matched: bool = Field(False, description="True if a known suffix was found")
    stem: Optional[str] = Field(None, description="Word with the suffix removed, or '(no stem)'")
    suffix: Optional[str] = Field(None, description="Longest matching suffix")
    category: Optional[str] = Field(None, description="Category of the matched suffix")

    @classmethod
    def from_analysis(cls, word: str, analysis: Optional[WordAnalysis]) -> "AnalysisResult":
        """Create AnalysisResult from WordAnalyzer.analyze() output."""
        if analysis is None:
            return cls(word=word)
        return cls(
            word=analysis.word,
            matched=True,
            stem=analysis.stem,
            suffix=analysis.suffix,
            category=analysis.category,
        )


class ReportResult(BaseModel):
    """Suffix listing and word analyses together, for a single JSON document."""
    suffixes: SuffixListResult = Field(..., description="Known suffixes")
    analyses: List[AnalysisResult] = Field(default_factory=list, description="Analyzed words")
