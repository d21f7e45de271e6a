"""
Modal theory: per-mode tables and the derived information shown on a card.

For each tonic and mode, compute_mode_result spells the scale, reads the
characteristic note straight from that scale, and resolves the tonic chord,
characteristic chords, avoid chord and avoid progression from fixed
roman-numeral tables.
"""
from collections import namedtuple

from .constants import (
    DOMINANT_7,
    FLAT,
    FLAT_TONICS,
    HALF_DIMINISHED,
    MAJOR_7,
    MINOR_7,
)
from .pitch import note_accidental, note_letter
from .spelling import build_scale, resolve_roman

Mode = namedtuple("Mode", [
    "name",
    "steps",                 # semitones above the tonic, one per degree
    "characteristic_degree", # 1-based
    "characteristic_label",
    "prefer_flat",
    "tonic_quality",
    "avoid_degree",
    "characteristic_chords",
    "avoid_progression",
])

ChordSpec = namedtuple("ChordSpec", ["degree", "quality", "emphasized"],
                       defaults=[False])

ResolvedChord = namedtuple("ResolvedChord",
                           ["degree", "quality", "emphasized", "note", "label"])

ModeResult = namedtuple("ModeResult", [
    "mode",
    "tonic",
    "scale",
    "characteristic_note",
    "characteristic_label",
    "tonic_chord",
    "characteristic_chords",
    "avoid_degree",
    "avoid_chord",
    "avoid_progression",
])

# ── Mode table ────────────────────────────────────────────────────────────────

DORIAN = Mode(
    "Dorian", (0, 2, 3, 5, 7, 9, 10), 6, "6", True, MINOR_7, "VI",
    (ChordSpec("II", MINOR_7), ChordSpec("IV", DOMINANT_7),
     ChordSpec("♭VII", MAJOR_7, True)),
    (ChordSpec("I", MINOR_7), ChordSpec("IV", DOMINANT_7),
     ChordSpec("♭VII", MAJOR_7, True)),
)
PHRYGIAN = Mode(
    "Phrygian", (0, 1, 3, 5, 7, 8, 10), 2, "♭2", True, MINOR_7, "V",
    (ChordSpec("♭II", MAJOR_7), ChordSpec("♭III", DOMINANT_7, True),
     ChordSpec("♭VII", MINOR_7)),
    (ChordSpec("♭VII", MINOR_7), ChordSpec("♭III", DOMINANT_7, True),
     ChordSpec("♭VI", MAJOR_7)),
)
LYDIAN = Mode(
    "Lydian", (0, 2, 4, 6, 7, 9, 11), 4, "#4", False, MAJOR_7, "#IV",
    (ChordSpec("II", DOMINANT_7), ChordSpec("V", MAJOR_7, True),
     ChordSpec("VII", MINOR_7)),
    (ChordSpec("VI", MINOR_7, True), ChordSpec("II", DOMINANT_7),
     ChordSpec("V", MAJOR_7)),
)
MIXOLYDIAN = Mode(
    "Mixolydian", (0, 2, 4, 5, 7, 9, 10), 7, "♭7", False, DOMINANT_7, "III",
    (ChordSpec("I", DOMINANT_7, True), ChordSpec("V", MINOR_7),
     ChordSpec("♭VII", MAJOR_7)),
    (ChordSpec("V", MINOR_7, True), ChordSpec("I", DOMINANT_7),
     ChordSpec("IV", MAJOR_7)),
)
AEOLIAN = Mode(
    "Aeolian", (0, 2, 3, 5, 7, 8, 10), 6, "♭6", True, MINOR_7, "II",
    (ChordSpec("IV", MINOR_7), ChordSpec("♭VI", MAJOR_7),
     ChordSpec("♭VII", DOMINANT_7, True)),
    (ChordSpec("IV", MINOR_7), ChordSpec("♭VII", DOMINANT_7),
     ChordSpec("♭III", MAJOR_7, True)),
)

MODES: tuple[Mode, ...] = (DORIAN, PHRYGIAN, LYDIAN, MIXOLYDIAN, AEOLIAN)
MODE_NAMES: tuple[str, ...] = tuple(m.name for m in MODES)


def get_mode(name: str) -> Mode:
    """Look up a mode by name (case-insensitive)."""
    for mode in MODES:
        if mode.name.lower() == name.lower():
            return mode
    raise KeyError(f"unknown mode: {name!r}")


def prefers_flat(mode: Mode, tonic: str) -> bool:
    """Flat bias of the mode, overridden by a flat-leaning tonic."""
    return mode.prefer_flat or FLAT in note_accidental(tonic) or tonic in FLAT_TONICS


def _resolve_chords(specs, tonic_pc, prefer_flat, tonic_letter):
    chords = []
    for spec in specs:
        note = resolve_roman(tonic_pc, spec.degree, prefer_flat, tonic_letter)
        chords.append(ResolvedChord(spec.degree, spec.quality, spec.emphasized,
                                    note, f"{note} {spec.quality}"))
    return chords


def compute_mode_result(tonic: str, tonic_pc: int, mode: Mode) -> ModeResult:
    """Everything a card shows for ``tonic`` (already normalised) in ``mode``."""
    prefer_flat = prefers_flat(mode, tonic)
    letter = note_letter(tonic)
    scale = build_scale(tonic_pc, mode, prefer_flat, letter)
    avoid_root = resolve_roman(tonic_pc, mode.avoid_degree, prefer_flat, letter)
    return ModeResult(
        mode=mode.name,
        tonic=tonic,
        scale=scale,
        characteristic_note=scale[mode.characteristic_degree - 1],
        characteristic_label=mode.characteristic_label,
        tonic_chord=f"{tonic}{mode.tonic_quality}",
        characteristic_chords=_resolve_chords(
            mode.characteristic_chords, tonic_pc, prefer_flat, letter),
        avoid_degree=mode.avoid_degree,
        avoid_chord=f"{avoid_root} {HALF_DIMINISHED}",
        avoid_progression=_resolve_chords(
            mode.avoid_progression, tonic_pc, prefer_flat, letter),
    )


def compute_mode_results(tonic: str, tonic_pc: int,
                         mode_names=None) -> list[ModeResult]:
    """
    One ModeResult per mode in declaration order
    (Dorian, Phrygian, Lydian, Mixolydian, Aeolian).

    ``mode_names`` restricts the output to a subset; order is unaffected.
    """
    if mode_names is None:
        modes = MODES
    else:
        wanted = {get_mode(name).name for name in mode_names}
        modes = [m for m in MODES if m.name in wanted]
    return [compute_mode_result(tonic, tonic_pc, mode) for mode in modes]
