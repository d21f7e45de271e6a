#!/usr/bin/env python3
"""
scripts/audit_spellings.py — cross-check modal spellings against music21.

For every tonic and mode, each spelled note (scale, chord roots, avoid chord)
is re-parsed with music21 and its pitch class compared with the expected one;
the scale letters must also run through the alphabet without gaps or repeats.

Usage:
    python scripts/audit_spellings.py              # all 12 sharp + 5 flat tonics
    python scripts/audit_spellings.py --tonic F# --tonic Bb
"""
import argparse
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import music21

from modecards.cards import BOLD, CYAN, GREEN, RED, RESET
from modecards.constants import FLAT_NAMES, ROMAN_DEGREES, SHARP_NAMES
from modecards.modes import MODES, compute_mode_result
from modecards.pitch import letters_from, normalize_and_index, note_letter

DEFAULT_TONICS = list(SHARP_NAMES) + [n for n in FLAT_NAMES if n not in SHARP_NAMES]


def music21_pc(name: str) -> int:
    """Pitch class via music21, which spells flats with '-'."""
    return music21.pitch.Pitch(name[0] + name[1:].replace("b", "-")).pitchClass


def audit_result(result, tonic_pc: int, mode) -> list[str]:
    """Return a list of problems (empty when every spelling checks out)."""
    problems = []
    for step, name in zip(mode.steps, result.scale):
        expected = (tonic_pc + step) % 12
        if music21_pc(name) != expected:
            problems.append(f"scale note {name} is not pitch class {expected}")
    letters = [note_letter(n) for n in result.scale]
    if tuple(letters) != letters_from(note_letter(result.tonic)):
        problems.append(f"scale letters {''.join(letters)} skip or repeat")

    for chord in list(result.characteristic_chords) + list(result.avoid_progression):
        expected = (tonic_pc + ROMAN_DEGREES[chord.degree][0]) % 12
        if music21_pc(chord.note) != expected:
            problems.append(f"{chord.degree} root {chord.note} is not pitch class {expected}")
    avoid_root = result.avoid_chord.split()[0]
    expected = (tonic_pc + ROMAN_DEGREES[result.avoid_degree][0]) % 12
    if music21_pc(avoid_root) != expected:
        problems.append(f"avoid root {avoid_root} is not pitch class {expected}")
    return problems


def main(argv=None):
    parser = argparse.ArgumentParser(description="Audit modal spellings with music21.")
    parser.add_argument("--tonic", action="append", dest="tonics",
                        help="Tonic to audit (repeatable, default: all)")
    args = parser.parse_args(argv)

    failures = 0
    print(f"{BOLD}{'Tonic':<6}  {'Mode':<11}  {'Scale':<34}  Status{RESET}")
    print(f"{'─'*6}  {'─'*11}  {'─'*34}  {'─'*6}")
    for raw in args.tonics or DEFAULT_TONICS:
        tonic, tonic_pc = normalize_and_index(raw)
        for mode in MODES:
            result = compute_mode_result(tonic, tonic_pc, mode)
            problems = audit_result(result, tonic_pc, mode)
            status = f"{GREEN}ok{RESET}" if not problems else f"{RED}FAIL{RESET}"
            print(f"{CYAN}{tonic:<6}{RESET}  {mode.name:<11}  "
                  f"{' '.join(result.scale):<34}  {status}")
            for problem in problems:
                print(f"        {RED}{problem}{RESET}")
            failures += bool(problems)

    print(f"\n{failures} failing tonic/mode combination(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
