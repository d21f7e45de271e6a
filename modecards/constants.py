from types import MappingProxyType

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

SHARP_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
)
FLAT_NAMES: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
)

# Pitch class → enharmonic candidates.  White keys have a single spelling,
# black keys list the sharp name first, then the flat name.
ENHARMONIC_CANDIDATES: tuple[tuple[str, ...], ...] = tuple(
    (sharp,) if sharp == flat else (sharp, flat)
    for sharp, flat in zip(SHARP_NAMES, FLAT_NAMES)
)

# Rare spellings collapsed onto the canonical tables above.
ENHARMONIC_ALIASES = MappingProxyType({
    "B#": "C",   "E#": "F",   "Cb": "B",   "Fb": "E",
    "C##": "D",  "D##": "E",  "E##": "F#", "F##": "G",
    "G##": "A",  "A##": "B",  "B##": "C#",
    "Cbb": "Bb", "Dbb": "C",  "Ebb": "D",  "Fbb": "Eb",
    "Gbb": "F",  "Abb": "G",  "Bbb": "A",
})

# ── Diatonic letters ──────────────────────────────────────────────────────────

LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")
# Natural pitch class of each letter
LETTER_PC = MappingProxyType({
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
})

SHARP = "#"
FLAT = "b"
# Semitone shift per accidental string
ACCIDENTAL_SHIFT = MappingProxyType({
    "bb": -2, "b": -1, "": 0, "#": 1, "##": 2,
})
# Unicode accidentals accepted on input
UNICODE_ACCIDENTALS = MappingProxyType({"♯": SHARP, "♭": FLAT})

# ── Roman-numeral degrees ─────────────────────────────────────────────────────

# Symbol → (semitones above tonic, letter offset from the tonic letter)
ROMAN_DEGREES = MappingProxyType({
    "I":    (0, 0),  "II":   (2, 1),  "III":  (4, 2),  "IV":   (5, 3),
    "V":    (7, 4),  "VI":   (9, 5),  "VII":  (11, 6),
    "♭II":  (1, 1),  "♭III": (3, 2),  "♭VI":  (8, 5),  "♭VII": (10, 6),
    "#IV":  (6, 3),
})

# ── Chord qualities ───────────────────────────────────────────────────────────

MINOR_7 = "-7"
MAJOR_7 = "Maj7"
DOMINANT_7 = "7"
HALF_DIMINISHED = "-7(♭5)"

# Tonics whose derived spellings lean on flats regardless of the mode.
FLAT_TONICS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})
