#!/usr/bin/env python3
"""
scripts/analyze_chords.py — tonal depth and string degrees for chord symbols.

For every chord prints its depth on the circle of fifths (relative to the
tonal center), the best-fitting key(s), the chord tones, and the degree each
open string of the tuning plays against the chord root.

Usage (from project root):
    python scripts/analyze_chords.py                       # demo progression
    python scripts/analyze_chords.py Fm9 C/Bb G13 Dbdim7
    python scripts/analyze_chords.py --tuning GUITAR Am7 D7 Gmaj7
    python scripts/analyze_chords.py --tuning "D2 A2 D3 G3 A3 D4" --center G D
    python scripts/analyze_chords.py --interactive
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chorddepth.analysis import analyze_chord
from chorddepth.constants import DEFAULT_PROGRESSION
from chorddepth.display import chord_row, render_table, table_headers
from chorddepth.parser import is_error, parse_chord, split_progression
from chorddepth.tunings import (
    DEFAULT_TUNING, TUNINGS, parse_center, resolve_tuning, string_headers,
    tuning_spelling,
)


def build_table(symbols, tuning_pcs, center, color=True) -> str:
    rows = []
    for sym in symbols:
        chord = parse_chord(sym)
        if is_error(chord):
            print(f"[analyze] unknown root {chord.token!r} in {sym!r}", file=sys.stderr)
        analysis = analyze_chord(chord, tuning_pcs, center)
        rows.append(chord_row(sym, analysis, center))
    return render_table(rows, table_headers(string_headers(tuning_pcs)), color=color)


def run_interactive(tuning_pcs, center, color=True):
    """Read a line of chords at a time; blank line or EOF quits."""
    print("Enter chords separated by spaces (blank line to quit).")
    while True:
        try:
            line = input("chords> ").strip()
        except EOFError:
            print()
            break
        if not line:
            break
        print(build_table(split_progression(line), tuning_pcs, center, color=color))
        print()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Analyse chord symbols: circle-of-fifths depth and string degrees")
    parser.add_argument("chords", nargs="*",
                        help=f"Chord symbols (default: {DEFAULT_PROGRESSION})")
    parser.add_argument("--tuning", default=DEFAULT_TUNING,
                        help="Tuning name or spelling, low string first "
                             f"(names: {', '.join(TUNINGS)})")
    parser.add_argument("--center", default="C",
                        help="Tonal center that depth 0 refers to (default: C)")
    parser.add_argument("--interactive", action="store_true",
                        help="Read chord lines from stdin until a blank line")
    parser.add_argument("--no-color", action="store_true")
    args = parser.parse_args(argv)

    try:
        tuning_pcs = resolve_tuning(args.tuning)
        center = parse_center(args.center)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    color = not args.no_color
    bar = "─" * 60
    print(bar)
    print(f"  Tuning : {tuning_spelling(args.tuning)}")
    print(f"  Center : {args.center.strip()} (depth 0)")
    print(bar)

    if args.interactive:
        run_interactive(tuning_pcs, center, color=color)
        return 0

    symbols = split_progression(" ".join(args.chords) or DEFAULT_PROGRESSION)
    print(build_table(symbols, tuning_pcs, center, color=color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
