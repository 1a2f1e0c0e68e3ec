"""
Tests for suffixes.py - Suffix registry and seed data.
"""

import logging

import pytest

from pratyaya.suffixes import (
    SUFFIX_SEED,
    SuffixEntry,
    SuffixRegistry,
    create_registry,
)


class TestSeedData:
    """Tests for the canonical seed suffixes."""

    def test_seed_has_twelve_entries(self):
        assert len(SUFFIX_SEED) == 12

    def test_seed_order(self, registry):
        """Seed suffixes are loaded in their canonical order."""
        suffixes = [e.suffix for e in registry.enumerate()]
        assert suffixes == [
            'ah', 'am', 'ena', 'asya', 'e', 'esu',
            'bhih', 'su', 'tva', 'ka', 'ta', 'yah',
        ]

    def test_seed_categories(self, registry):
        entries = list(registry.enumerate())
        assert entries[0] == SuffixEntry('ah', "Nominative singular masculine (e.g. 'Ramah')")
        assert entries[6] == SuffixEntry('bhih', 'Instrumental plural')
        assert entries[-1] == SuffixEntry(
            'yah', 'Future passive participle or derivative ending'
        )

    def test_custom_seed(self):
        reg = create_registry([('x', 'first'), ('y', 'second')])
        assert [(e.suffix, e.category) for e in reg] == [('x', 'first'), ('y', 'second')]

    def test_registries_are_independent(self):
        """Each call creates a separately owned registry."""
        a = create_registry()
        b = create_registry()
        a.insert('foo', 'bar')
        assert len(a) == 13
        assert len(b) == 12


class TestInsert:
    """Tests for SuffixRegistry.insert."""

    def test_insert_appends_at_end(self, registry):
        before = list(registry.enumerate())
        registry.insert('foo', 'bar')
        after = list(registry.enumerate())

        assert after[-1] == SuffixEntry('foo', 'bar')
        assert after[:-1] == before

    def test_insert_returns_entry(self, empty_registry):
        entry = empty_registry.insert('ena', 'Instrumental singular')
        assert entry.suffix == 'ena'
        assert entry.category == 'Instrumental singular'

    def test_duplicates_allowed(self, registry):
        registry.insert('ah', 'Another reading')
        matches = [e for e in registry if e.suffix == 'ah']
        assert [e.category for e in matches] == [
            "Nominative singular masculine (e.g. 'Ramah')",
            'Another reading',
        ]

    def test_insert_logs_at_debug(self, registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="pratyaya.suffixes"):
            registry.insert('bhyam', 'Dative / ablative dual')
        assert "Registered suffix 'bhyam' (13 total)" in caplog.text

    def test_entries_are_immutable(self, registry):
        entry = next(registry.enumerate())
        with pytest.raises(AttributeError):
            entry.suffix = 'xx'


class TestEnumerate:
    """Tests for SuffixRegistry.enumerate."""

    def test_empty_registry(self, empty_registry):
        assert list(empty_registry.enumerate()) == []
        assert len(empty_registry) == 0

    def test_enumerate_is_idempotent(self, registry):
        assert list(registry.enumerate()) == list(registry.enumerate())

    def test_enumerate_is_restartable(self, registry):
        it = registry.enumerate()
        next(it)
        next(it)
        assert len(list(registry.enumerate())) == 12

    def test_iter_matches_enumerate(self, registry):
        assert list(registry) == list(registry.enumerate())

    def test_traversal_not_affected_by_later_insert(self, registry):
        """A traversal started before an insert sees the earlier snapshot."""
        it = registry.enumerate()
        registry.insert('foo', 'bar')
        assert len(list(it)) == 12
        assert len(list(registry.enumerate())) == 13
