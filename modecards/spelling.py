"""
Enharmonic spelling: choose one name for a pitch class in a diatonic context.

resolve_name applies, in order, the first rule that matches:

  1. requested accidental  – candidate carrying that mark (♭VII → "Bb")
  2. expected letter       – candidate on that letter, falling back to a
                             B#/Cb/double-accidental spelling of the letter
  3. flat/sharp preference – candidate carrying a flat (or sharp) mark
  4. first candidate in the enharmonic table

build_scale and resolve_roman seed the expected letters from the tonic so a
scale or chord set never skips or repeats a letter.
"""
from collections import namedtuple

from .constants import ENHARMONIC_CANDIDATES, FLAT, ROMAN_DEGREES, SHARP
from .pitch import canonical_name, letters_from, note_letter, spell_on_letter


class UnknownDegreeSymbol(KeyError):
    """Roman-numeral symbol missing from the degree table."""


class SpellingConstraintUnsatisfiable(ValueError):
    """Strict mode: the expected letter cannot spell the pitch class."""


SpellingContext = namedtuple(
    "SpellingContext",
    ["expected_letter", "prefer_flat", "requested_accidental"],
    defaults=[None, False, None],
)


def _with_mark(candidates, mark):
    for name in candidates:
        if mark in name[1:]:
            return name
    return None


def resolve_name(pitch_class: int, context: SpellingContext = SpellingContext(),
                 strict: bool = False) -> str:
    """
    Pick the spelling of ``pitch_class`` that fits ``context``.

    Unsatisfiable requests fall through to the next rule; with ``strict`` an
    expected letter that cannot reach the pitch class raises
    SpellingConstraintUnsatisfiable instead.
    """
    candidates = ENHARMONIC_CANDIDATES[pitch_class % 12]

    if context.requested_accidental:
        name = _with_mark(candidates, context.requested_accidental)
        if name:
            return name

    if context.expected_letter:
        for name in candidates:
            if note_letter(name) == context.expected_letter:
                return name
        name = spell_on_letter(pitch_class % 12, context.expected_letter)
        if name:
            return name
        if strict:
            raise SpellingConstraintUnsatisfiable(
                f"pitch class {pitch_class % 12} cannot be spelled on "
                f"{context.expected_letter}"
            )

    name = _with_mark(candidates, FLAT if context.prefer_flat else SHARP)
    if name:
        return name
    return candidates[0]


def _tonic_letter(tonic_pc, prefer_flat, tonic_letter):
    if tonic_letter:
        return tonic_letter
    return note_letter(canonical_name(tonic_pc, prefer_flat))


def build_scale(tonic_pc: int, mode, prefer_flat: bool | None = None,
                tonic_letter: str | None = None) -> list[str]:
    """
    Spell the seven notes of ``mode`` on ``tonic_pc``.

    ``mode`` is anything with ``steps`` (and ``prefer_flat`` when the bias is
    not given explicitly).  Each letter from the tonic's letter onward is used
    exactly once:

        build_scale(6, LYDIAN) → ["F#", "G#", "A#", "B#", "C#", "D#", "E#"]
    """
    if prefer_flat is None:
        prefer_flat = mode.prefer_flat
    letters = letters_from(_tonic_letter(tonic_pc, prefer_flat, tonic_letter))
    scale = []
    for letter, step in zip(letters, mode.steps):
        context = SpellingContext(expected_letter=letter, prefer_flat=prefer_flat)
        scale.append(resolve_name((tonic_pc + step) % 12, context))
    return scale


def _normalise_symbol(symbol):
    # ASCII "bVII" is accepted for "♭VII"
    if symbol.startswith("b"):
        return "♭" + symbol[1:]
    return symbol


def resolve_roman(tonic_pc: int, symbol: str, prefer_flat: bool = False,
                  tonic_letter: str | None = None) -> str:
    """Spelled root of the roman-numeral degree ``symbol`` above the tonic."""
    key = _normalise_symbol(symbol)
    try:
        semitones, letter_offset = ROMAN_DEGREES[key]
    except KeyError:
        raise UnknownDegreeSymbol(symbol) from None

    if key.startswith("♭"):
        requested = FLAT
    elif key.startswith("#"):
        requested = SHARP
    else:
        requested = None
    letters = letters_from(_tonic_letter(tonic_pc, prefer_flat, tonic_letter))
    context = SpellingContext(
        expected_letter=letters[letter_offset],
        prefer_flat=prefer_flat,
        requested_accidental=requested,
    )
    return resolve_name((tonic_pc + semitones) % 12, context)
