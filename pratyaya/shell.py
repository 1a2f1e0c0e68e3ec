"""
Interactive menu shell for pratyaya.

Presents the four-choice menu (list, analyze, add, exit) and dispatches to
the registry and analyzer. Input and output streams are injectable so the
shell can be driven from tests.
"""

import logging
import sys
from typing import Optional, TextIO

from pratyaya import settings
from pratyaya.analyzer import EmptyInputError, WordAnalysis, WordAnalyzer
from pratyaya.suffixes import SuffixRegistry

logger = logging.getLogger(__name__)

BANNER = (
    "===================================\n"
    " Sanskrit Suffix Identifier\n"
    "===================================\n"
)

MENU = (
    "1. Show all known suffixes\n"
    "2. Analyze a word\n"
    "3. Add a new suffix\n"
    "4. Exit\n"
)

CHOICE_LIST = 1
CHOICE_ANALYZE = 2
CHOICE_ADD = 3
CHOICE_EXIT = 4


# ============================================================================
# Formatting
# ============================================================================

def format_suffix_list(registry: SuffixRegistry) -> str:
    """Format the registry as a numbered table."""
    if not len(registry):
        return "No suffixes in the list.\n"

    lines = ["", "Current Suffix List:", "--------------------"]
    for i, entry in enumerate(registry.enumerate(), start=1):
        lines.append(f"{i:2d}. {entry.suffix:<10s} -> {entry.category}")
    lines.append("")
    return '\n'.join(lines) + '\n'


def format_analysis(word: str, analysis: Optional[WordAnalysis]) -> str:
    """Format an analysis (or a no-match outcome) as text."""
    if analysis is None:
        return (
            f"Word: {word}\n"
            "No known suffix found in the list.\n\n"
        )
    return (
        f"Word           : {analysis.word}\n"
        f"Identified stem: {analysis.stem}\n"
        f"Identified suffix: {analysis.suffix}\n"
        f"Category       : {analysis.category}\n\n"
    )


def suffix_error(suffix: str) -> Optional[str]:
    """Return why a user-supplied suffix cannot be added, or None if it can."""
    if not suffix:
        return "Suffix cannot be empty."
    if len(suffix) > settings.MAX_SUFFIX_LENGTH:
        return f"Suffix too long (max {settings.MAX_SUFFIX_LENGTH} characters)."
    return None


def clip_category(suffix: str, category: str) -> str:
    """Cut a user-supplied category down to MAX_CATEGORY_LENGTH."""
    if len(category) <= settings.MAX_CATEGORY_LENGTH:
        return category
    logger.info(
        f"Truncating category for {suffix!r} to {settings.MAX_CATEGORY_LENGTH} characters"
    )
    return category[:settings.MAX_CATEGORY_LENGTH]


def _strip_newline(line: str) -> str:
    return line.rstrip('\r\n')


# ============================================================================
# Shell
# ============================================================================

class SuffixShell:
    """Menu-driven front end over a registry it owns for the session."""

    def __init__(
        self,
        registry: SuffixRegistry,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.registry = registry
        self.analyzer = WordAnalyzer(registry)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def prompt(self, text: str) -> Optional[str]:
        """Show a prompt and read one line; None on end of input."""
        self.write(text)
        line = self.stdin.readline()
        if not line:
            return None
        return _strip_newline(line)

    def run(self) -> int:
        """
        Run the menu loop until the user exits or input ends.

        Returns:
            Exit code (always 0).
        """
        while True:
            self.write(BANNER)
            self.write(MENU)
            raw = self.prompt("Enter your choice: ")
            if raw is None:
                self.write("\n")
                break

            try:
                choice = int(raw.strip())
            except ValueError:
                self.write("Invalid input. Try again.\n\n")
                continue

            if choice == CHOICE_LIST:
                self.show_suffixes()
            elif choice == CHOICE_ANALYZE:
                self.analyze_word()
            elif choice == CHOICE_ADD:
                self.add_suffix()
            elif choice == CHOICE_EXIT:
                break
            else:
                self.write("Invalid choice. Try again.\n\n")

        self.write("Exiting...\n")
        return 0

    def show_suffixes(self) -> None:
        self.write(format_suffix_list(self.registry))

    def analyze_word(self) -> None:
        word = self.prompt("Enter a Sanskrit word (transliterated, no spaces): ")
        if word is None:
            self.write("Error reading word.\n\n")
            return

        try:
            analysis = self.analyzer.analyze(word)
        except EmptyInputError:
            self.write("Empty word.\n")
            return

        self.write(format_analysis(word, analysis))

    def add_suffix(self) -> None:
        suffix = self.prompt("Enter new suffix (e.g. 'ena', 'asya'): ")
        if suffix is None:
            self.write("Error reading suffix.\n\n")
            return

        error = suffix_error(suffix)
        if error:
            self.write(f"{error}\n\n")
            return

        category = self.prompt("Enter category / description: ")
        if category is None:
            self.write("Error reading category.\n\n")
            return

        self.registry.insert(suffix, clip_category(suffix, category))
        self.write("Suffix added successfully.\n\n")
