"""
Tests for models.py - Pydantic result models.
"""

from pratyaya.analyzer import WordAnalyzer
from pratyaya.models import AnalysisResult, SuffixListResult


class TestSuffixListResult:

    def test_from_registry(self, registry):
        result = SuffixListResult.from_registry(registry)
        assert result.count == 12
        assert [s.index for s in result.suffixes] == list(range(1, 13))
        assert result.suffixes[2].suffix == 'ena'

    def test_empty(self, empty_registry):
        result = SuffixListResult.from_registry(empty_registry)
        assert result.count == 0
        assert result.suffixes == []


class TestAnalysisResult:

    def test_matched(self, analyzer):
        result = AnalysisResult.from_analysis('vanesu', analyzer.analyze('vanesu'))
        assert result.matched
        assert result.stem == 'van'
        assert result.suffix == 'esu'
        assert result.category == "Locative plural (e.g. 'vanesu')"

    def test_no_match(self):
        result = AnalysisResult.from_analysis('xyz', None)
        assert not result.matched
        assert result.word == 'xyz'
        assert result.stem is None

    def test_no_stem(self, registry):
        result = AnalysisResult.from_analysis('ena', WordAnalyzer(registry).analyze('ena'))
        assert result.stem == '(no stem)'
        assert result.model_dump()['suffix'] == 'ena'
