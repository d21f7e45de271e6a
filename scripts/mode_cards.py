#!/usr/bin/env python3
"""
scripts/mode_cards.py — print the five modal cards for a tonic.

Each card shows the spelled scale, characteristic note, tonic chord,
characteristic chords, the avoid chord and the avoid progression.

Usage:
    python scripts/mode_cards.py                 # tonic C
    python scripts/mode_cards.py F#
    python scripts/mode_cards.py Bb --mode lydian --mode dorian
    python scripts/mode_cards.py eb --no-color
"""
import argparse
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from modecards.cards import render_cards
from modecards.modes import MODE_NAMES, compute_mode_results
from modecards.pitch import InvalidNoteSyntax, UnknownNoteName, normalize_and_index


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show modal cards for a tonic.")
    parser.add_argument("tonic", nargs="?", default="C",
                        help="Tonic note, e.g. C, F#, Bb (default: C)")
    parser.add_argument("--mode", action="append", dest="modes",
                        type=str.capitalize, choices=MODE_NAMES,
                        help="Only show this mode (repeatable)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colours")
    args = parser.parse_args(argv)

    try:
        tonic, tonic_pc = normalize_and_index(args.tonic or "C")
    except InvalidNoteSyntax:
        print("Enter a note like C, F#, Bb", file=sys.stderr)
        return 2
    except UnknownNoteName:
        print("Unrecognized note", file=sys.stderr)
        return 2

    results = compute_mode_results(tonic, tonic_pc, args.modes)
    print(render_cards(results, color=not args.no_color and sys.stdout.isatty()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
