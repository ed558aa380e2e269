#!/usr/bin/env python3
"""
wordchain CLI
=============
Command-line interface for building word chains and sampling text.

Usage:
    wordchain generate corpus.txt --avoid avoid.txt -n 5 --words 40
    wordchain generate - --order 3 --seed 7 < corpus.txt
    wordchain stats corpus.txt --top 20
"""

import argparse
import logging
import sys

from wordchain import __version__
from wordchain.chain import ChainModel
from wordchain.config import ChainConfig
from wordchain.settings import get_setting
from wordchain.sources import open_source

logger = logging.getLogger(__name__)

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

    def result(self, text: str):
        # generated text is the payload, printed even in quiet mode
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else get_setting("logging.level", "WARNING")
    logging.basicConfig(
        level=level,
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )


def build_model(args, config: ChainConfig) -> ChainModel:
    """Build a model from the corpus/avoid arguments."""
    model = ChainModel(max_order=config.max_order, seed=getattr(args, 'seed', None))
    with open_source(args.corpus, config.encoding) as corpus, \
            open_source(args.avoid, config.encoding) as avoid:
        model.build(corpus, avoid)
    return model


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate text from a corpus."""
    config = ChainConfig(max_order=args.order, max_words=args.words, count=args.count)
    model = build_model(args, config)

    out.print(f"Generating {config.count} line(s) of up to {config.max_words} words "
              f"(order {config.max_order})...", file=sys.stderr)

    for line in model.generate_lines(config.count, config.max_words):
        out.result(line)
    return 0


def cmd_stats(args, out: Output):
    """Show transition table statistics."""
    from wordchain.ui import render_stats

    config = ChainConfig(max_order=args.order, top_prefixes=args.top)
    model = build_model(args, config)

    if not out.quiet:
        render_stats(model.stats(top=config.top_prefixes))
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='wordchain',
        description='wordchain - variable-order word chain text generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate corpus.txt -n 5 --words 40
  %(prog)s generate corpus.txt --avoid names.txt --order 3 --seed 7
  %(prog)s stats corpus.txt --top 20
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate text')
    p.add_argument('corpus', help="Corpus file ('-' for stdin)")
    p.add_argument('--avoid', '-a', help='File of words to obfuscate')
    p.add_argument('--order', '-o', type=int, help='Maximum prefix length')
    p.add_argument('--words', '-w', type=int, help='Maximum words per line')
    p.add_argument('-n', '--count', type=int, help='Number of lines to generate')
    p.add_argument('--seed', '-s', type=int, help='Random seed for reproducible output')

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show transition table statistics')
    p.add_argument('corpus', help="Corpus file ('-' for stdin)")
    p.add_argument('--avoid', '-a', help='File of words to obfuscate')
    p.add_argument('--order', '-o', type=int, help='Maximum prefix length')
    p.add_argument('--top', '-t', type=int, help='Number of prefixes to list')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'gen': 'generate', 'g': 'generate'}
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'stats': cmd_stats,
    }

    handler = commands.get(command)
    if handler:
        try:
            setup_logging(args.verbose)
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (OSError, ValueError, RuntimeError) as e:
            out.error(str(e))
            if args.verbose:
                logger.exception("Command failed")
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
