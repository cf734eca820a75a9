"""Command-line interface for chord-symbol.

Parses each chord symbol given on the command line and prints one JSON
object per line, or ``null`` when a symbol is not a recognized chord.

Usage:
    chord-symbol Cmaj7 "Dm7b5/F" "G7(no5,add13)"
    python -m chord_symbol --verbose Cxyz
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from chord_symbol.parser import parse_chord


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-symbol",
        description="Parse chord symbols into root, bass, modifiers and intervals.",
    )
    parser.add_argument("symbols", nargs="+", metavar="SYMBOL", help="Chord symbol to parse (e.g. Cmaj7)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log why symbols are rejected")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns
    -------
    int
        0 if every symbol parsed, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    failed = 0
    for symbol in args.symbols:
        chord = parse_chord(symbol)
        if chord is None:
            failed += 1
            sys.stdout.write("null\n")
        else:
            sys.stdout.write(json.dumps(chord.to_dict(), ensure_ascii=False) + "\n")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
