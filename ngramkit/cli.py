#!/usr/bin/env python3
"""
ngramkit CLI
============
Command-line interface for n-gram frequency analysis of a weighted lexicon.

Usage:
    ngramkit analyze --subtlex SUBTLEXus.csv -k 20
    ngramkit analyze --words words.txt --json
    ngramkit normalize quick boy cow
    ngramkit alphabet
"""

import argparse
import json
import logging
import sys

from ngramkit import __version__

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def status(self, msg: str):
        """Progress/status line on stderr."""
        if not self.quiet:
            print(msg, file=sys.stderr)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def top_k_arg(value: str) -> int:
    """argparse type for -k: an int within the configured report bounds."""
    from ngramkit.report import top_k_bounds

    low, high = top_k_bounds()
    try:
        k = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if not low <= k <= high:
        raise argparse.ArgumentTypeError(f"{k} not in range [{low}, {high}]")
    return k


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# Commands
# =============================================================================

def load_source(args, out: Output):
    """Load the word -> weight mapping selected by --subtlex / --words."""
    from ngramkit.settings import resolve_path
    from ngramkit.sources import SubtlexImporter, WordListImporter

    if args.subtlex:
        path = resolve_path(args.subtlex)
        importer = SubtlexImporter(path)
        out.status(f"Loaded SUBTLEX file: {path}")
    else:
        path = resolve_path(args.words)
        importer = WordListImporter(path)
        out.status(f"Loaded word list: {path}")

    weights = importer.weights(args.column)
    out.status(f"Words loaded: {len(weights)}")
    return weights


def cmd_analyze(args, out: Output):
    """Count weighted n-grams and print the report."""
    from ngramkit import analyze, render, ReportFormat, NGramKitError
    from ngramkit.profiler import AnalysisProfiler, set_profiler
    from ngramkit.ui import AnalysisProgress

    profiler = AnalysisProfiler(enabled=args.profiling)
    set_profiler(profiler)
    profiler.start()

    try:
        try:
            with profiler.stage("load") as stage:
                weights = load_source(args, out)
                stage.items = len(weights)
        except (NGramKitError, OSError) as e:
            out.error(f"loading word source: {e}")
            return 1

        fmt = ReportFormat.JSON if args.json else ReportFormat.TEXT
        with AnalysisProgress(total=len(weights), quiet=out.quiet or args.json) as progress:
            result = analyze(weights, workers=args.workers, on_progress=progress.update)

        ngram_count = sum(len(table) for table in result.tables)
        with profiler.stage("render", items=ngram_count):
            report = render(result, top_k=args.top_k, fmt=fmt, include_classes=args.classes)
    finally:
        set_profiler(None)

    if fmt is ReportFormat.JSON:
        print(json.dumps(report, indent=2))
    else:
        print(report, end="")

    if args.profiling:
        print(profiler.report(), file=sys.stderr)
        if args.profile_output:
            from ngramkit.settings import resolve_path

            profile_path = resolve_path(args.profile_output)
            profiler.save_json(profile_path)
            out.status(f"Profile saved to {profile_path}")

    return 0


def cmd_normalize(args, out: Output):
    """Show the normalized symbol string for each word."""
    from ngramkit import normalize
    from ngramkit.alphabet import is_valid_word

    status = 0
    for raw in args.words:
        word = raw.lower()
        if not is_valid_word(word):
            out.error(f"Invalid word: {raw!r}")
            status = 1
            continue
        print(f"{word}: {normalize(word)}")
    return status


def cmd_alphabet(args, out: Output):
    """List vowel and consonant alphabets."""
    from ngramkit.alphabet import VOWEL_ORDER, CONSONANT_ORDER

    out.print("Synthetic symbols: Q = qu, Y = vowel y, W = vowel w")
    print(f"Vowels ({len(VOWEL_ORDER)}):     {' '.join(VOWEL_ORDER)}")
    print(f"Consonants ({len(CONSONANT_ORDER)}): {' '.join(CONSONANT_ORDER)}")
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    from ngramkit.settings import get_setting

    parser = argparse.ArgumentParser(
        prog='ngramkit',
        description='ngramkit - Weighted N-gram Analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze --subtlex SUBTLEXus.csv
  %(prog)s analyze --subtlex SUBTLEXus.csv --column FREQcount -k 25 --classes
  %(prog)s analyze --words words.txt --json > ngrams.json
  %(prog)s normalize quick boy cow
  %(prog)s alphabet
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- analyze ---
    p = subparsers.add_parser('analyze', aliases=['a'], help='Count weighted n-grams')
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument('--subtlex', help='Path to SUBTLEX CSV file to load')
    src.add_argument('--words', help='Path to word list ("word [weight]" per line)')
    p.add_argument('--column', help='Weight column (default: SUBTLWF for SUBTLEX)')
    p.add_argument('-k', '--top-k', type=top_k_arg, default=get_setting("report.top_k", 10),
                   help='Top K n-grams to display (default: 10)')
    p.add_argument('--json', '-j', action='store_true', help='Output results in JSON format')
    p.add_argument('--classes', action='store_true', help='Also show top vowel/consonant n-grams')
    p.add_argument('--workers', type=positive_int, help='Worker processes for aggregation (default: 1)')
    p.add_argument('--profiling', action='store_true', help='Print stage timings to stderr')
    p.add_argument('--profile-output', help='Save profiling data to JSON file')
    p.add_argument('--verbose', '-v', action='store_true', help='Log progress details')

    # --- normalize ---
    p = subparsers.add_parser('normalize', aliases=['n'], help='Show normalized symbol strings')
    p.add_argument('words', nargs='+', help='Words to normalize')

    # --- alphabet ---
    subparsers.add_parser('alphabet', help='List vowel and consonant alphabets')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'a': 'analyze', 'n': 'normalize'}
    command = cmd_map.get(args.command, args.command)

    configure_logging(getattr(args, 'verbose', False))
    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'analyze': cmd_analyze,
        'normalize': cmd_normalize,
        'alphabet': cmd_alphabet,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
