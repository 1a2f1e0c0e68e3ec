"""
Shared fixtures for pratyaya tests.
"""

import io

import pytest

from pratyaya.analyzer import WordAnalyzer
from pratyaya.shell import SuffixShell
from pratyaya.suffixes import SuffixRegistry, create_registry


@pytest.fixture
def registry():
    """Freshly seeded registry."""
    return create_registry()


@pytest.fixture
def empty_registry():
    """Registry with no entries."""
    return SuffixRegistry()


@pytest.fixture
def analyzer(registry):
    """Analyzer over the seeded registry."""
    return WordAnalyzer(registry)


@pytest.fixture
def run_shell():
    """Run the interactive shell on scripted input and return (exit_code, output)."""
    def _run(script, reg=None):
        if reg is None:
            reg = create_registry()
        out = io.StringIO()
        shell = SuffixShell(reg, stdin=io.StringIO(script), stdout=out)
        code = shell.run()
        return code, out.getvalue()

    return _run
