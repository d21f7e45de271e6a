"""
Pitch model: note-name parsing, enharmonic normalisation and pitch classes.

Note names are plain strings, a letter A-G followed by up to two accidentals
("C", "F#", "Bb", "G##").  Pitch classes are integers 0-11, C = 0.
"""
import re

from .constants import (
    ACCIDENTAL_SHIFT,
    ENHARMONIC_ALIASES,
    FLAT_NAMES,
    LETTER_PC,
    LETTERS,
    SHARP_NAMES,
    UNICODE_ACCIDENTALS,
)

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b♯♭]{0,2})$")


class InvalidNoteSyntax(ValueError):
    """Input is not a letter A-G followed by at most two accidentals."""


class UnknownNoteName(ValueError):
    """Note name is in neither the sharp nor the flat table."""


def normalize(note: str) -> str:
    """
    Canonicalise user-supplied note text.

    Surrounding whitespace is trimmed, the letter is upper-cased, ♯/♭ become
    #/b, and rare spellings (B#, Cb, G##, Ebb, ...) collapse onto the
    canonical sharp/flat tables.  Mixed accidentals ("C#b") pass the syntax
    check and are left for to_pitch_class to reject:

        normalize(" bb ") → "Bb"
        normalize("B#")   → "C"
        normalize("G##")  → "A"
    """
    if note is None:
        raise InvalidNoteSyntax("empty note")
    m = _NOTE_RE.match(note.strip())
    if not m:
        raise InvalidNoteSyntax(f"not a note name: {note!r}")
    accidentals = "".join(UNICODE_ACCIDENTALS.get(c, c) for c in m.group(2))
    name = m.group(1).upper() + accidentals
    return ENHARMONIC_ALIASES.get(name, name)


def to_pitch_class(name: str) -> int:
    """Pitch class (0-11) of a note name; aliases are resolved first."""
    name = ENHARMONIC_ALIASES.get(name, name)
    if name in SHARP_NAMES:
        return SHARP_NAMES.index(name)
    if name in FLAT_NAMES:
        return FLAT_NAMES.index(name)
    raise UnknownNoteName(f"unrecognised note: {name!r}")


def normalize_and_index(raw: str) -> tuple[str, int]:
    """Validate a tonic typed by the user; returns (note name, pitch class)."""
    name = normalize(raw)
    return name, to_pitch_class(name)


def note_letter(name: str) -> str:
    return name[0]


def note_accidental(name: str) -> str:
    return name[1:]


def canonical_name(pitch_class: int, prefer_flat: bool = False) -> str:
    table = FLAT_NAMES if prefer_flat else SHARP_NAMES
    return table[pitch_class % 12]


def spell_on_letter(pitch_class: int, letter: str) -> str | None:
    """
    Spell ``pitch_class`` on ``letter`` using up to two accidentals.

    Returns None when the letter's natural pitch is more than two semitones
    away, e.g. spell_on_letter(0, "B") → "B#", spell_on_letter(0, "F") → None.
    """
    # Signed distance in the range -6..5
    shift = (pitch_class - LETTER_PC[letter] + 6) % 12 - 6
    for accidental, semitones in ACCIDENTAL_SHIFT.items():
        if semitones == shift:
            return letter + accidental
    return None


def letters_from(start_letter: str) -> tuple[str, ...]:
    """The seven letters A-G rotated to begin at ``start_letter``."""
    start = LETTERS.index(start_letter)
    return tuple(LETTERS[(start + i) % 7] for i in range(7))
