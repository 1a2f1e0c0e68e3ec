"""
Command line interface for pratyaya.

Usage:
    pratyaya                          # interactive menu
    pratyaya ramena devasya           # analyze words
    pratyaya -j ramena                # analysis as JSON
    pratyaya -l                       # list known suffixes
    pratyaya -a bhyam "Dative dual" rambhyam
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from pratyaya import __version__, settings
from pratyaya.analyzer import EmptyInputError, WordAnalysis, WordAnalyzer
from pratyaya.models import AnalysisResult, ReportResult, SuffixListResult
from pratyaya.shell import (
    SuffixShell,
    clip_category,
    format_analysis,
    format_suffix_list,
    suffix_error,
)
from pratyaya.suffixes import SuffixRegistry, create_registry


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for command-line use."""
    level = logging.DEBUG if debug or settings.DEBUG else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        stream=sys.stderr,
    )


Analyzed = Tuple[str, Optional[WordAnalysis]]


def analyze_words(registry: SuffixRegistry, words: List[str]) -> Tuple[List[Analyzed], int]:
    """
    Analyze each word, reporting empty words on stderr.

    Returns:
        Tuple of ((word, analysis) pairs for the non-empty words, exit
        status). The status is 1 if any word was empty.
    """
    analyzer = WordAnalyzer(registry)
    status = 0
    results = []

    for word in words:
        try:
            analysis = analyzer.analyze(word)
        except EmptyInputError:
            print("Error: Empty word.", file=sys.stderr)
            status = 1
            continue
        results.append((word, analysis))

    return results, status


def print_text(registry: SuffixRegistry, words: List[str], show_list: bool) -> int:
    """Print the suffix list and/or word analyses as text."""
    if show_list:
        print(format_suffix_list(registry), end='')

    results, status = analyze_words(registry, words)
    for word, analysis in results:
        print(format_analysis(word, analysis), end='')
    return status


def print_json(registry: SuffixRegistry, words: List[str], show_list: bool) -> int:
    """
    Print one JSON document.

    --list alone prints the suffix listing, words alone print an array of
    analyses, and both together print {"suffixes": ..., "analyses": [...]}.
    """
    results, status = analyze_words(registry, words)
    analyses = [AnalysisResult.from_analysis(word, a) for word, a in results]

    if show_list and words:
        report = ReportResult(
            suffixes=SuffixListResult.from_registry(registry),
            analyses=analyses,
        )
        output = report.model_dump()
    elif show_list:
        output = SuffixListResult.from_registry(registry).model_dump()
    else:
        output = [r.model_dump() for r in analyses]

    print(json.dumps(output, ensure_ascii=False))
    return status


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Identify the suffix of transliterated Sanskrit words',
        prog='pratyaya',
        epilog='Run without arguments to start the interactive menu.',
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Transliterated Sanskrit words to analyze',
    )

    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='List all known suffixes',
    )

    parser.add_argument(
        '-a', '--add',
        nargs=2,
        action='append',
        default=[],
        metavar=('SUFFIX', 'CATEGORY'),
        help='Register an extra suffix for this run (repeatable)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print results as JSON',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'pratyaya {__version__}')
        return 0

    configure_logging(parsed.debug)

    registry = create_registry()
    for suffix, category in parsed.add:
        error = suffix_error(suffix)
        if error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        registry.insert(suffix, clip_category(suffix, category))

    if not parsed.words and not parsed.list:
        return SuffixShell(registry).run()

    if parsed.json:
        return print_json(registry, parsed.words, parsed.list)
    return print_text(registry, parsed.words, parsed.list)


if __name__ == '__main__':
    sys.exit(main())
