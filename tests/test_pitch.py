import unittest
from types import MappingProxyType

from modecards.constants import ENHARMONIC_ALIASES, ENHARMONIC_CANDIDATES, ROMAN_DEGREES
from modecards.pitch import (
    InvalidNoteSyntax,
    UnknownNoteName,
    letters_from,
    normalize,
    normalize_and_index,
    spell_on_letter,
    to_pitch_class,
)


class TestNormalize(unittest.TestCase):
    def test_plain_names(self):
        self.assertEqual(normalize("C"), "C")
        self.assertEqual(normalize("F#"), "F#")
        self.assertEqual(normalize("Bb"), "Bb")

    def test_case_and_whitespace(self):
        self.assertEqual(normalize("  c "), "C")
        self.assertEqual(normalize("f#"), "F#")
        # "bb" is B-flat, not an error
        self.assertEqual(normalize("bb"), "Bb")
        self.assertEqual(normalize("eb"), "Eb")

    def test_unicode_accidentals(self):
        self.assertEqual(normalize("F♯"), "F#")
        self.assertEqual(normalize("B♭"), "Bb")
        self.assertEqual(normalize("e♭♭"), "D")

    def test_enharmonic_aliases(self):
        self.assertEqual(normalize("B#"), normalize("C"))
        self.assertEqual(normalize("Cb"), "B")
        self.assertEqual(normalize("E#"), "F")
        self.assertEqual(normalize("Fb"), "E")
        self.assertEqual(normalize("G##"), "A")
        self.assertEqual(normalize("E##"), "F#")
        self.assertEqual(normalize("B##"), "C#")
        self.assertEqual(normalize("Cbb"), "Bb")
        self.assertEqual(normalize("Fbb"), "Eb")

    def test_idempotent(self):
        for letter in "ABCDEFGabcdefg":
            for acc in ("", "#", "b", "##", "bb"):
                once = normalize(letter + acc)
                self.assertEqual(normalize(once), once, letter + acc)

    def test_invalid_syntax(self):
        for bad in ("H", "C###", "", "   ", "Cx", "bbb3", "C-",
                    "♭", "♭♭", "♭♭♭", "♯", "#", "C♯♯♯"):
            with self.assertRaises(InvalidNoteSyntax, msg=bad):
                normalize(bad)
        with self.assertRaises(InvalidNoteSyntax):
            normalize(None)

    def test_mixed_accidentals_are_unknown_names(self):
        # Well-formed syntax, but no such spelling in either table
        for raw in ("C#b", "Eb#", "F♯♭"):
            name = normalize(raw)
            with self.assertRaises(UnknownNoteName, msg=raw):
                to_pitch_class(name)
            with self.assertRaises(UnknownNoteName, msg=raw):
                normalize_and_index(raw)

    def test_invalid_syntax_is_value_error(self):
        with self.assertRaises(ValueError):
            normalize("H")


class TestPitchClass(unittest.TestCase):
    def test_sharp_and_flat_tables(self):
        self.assertEqual(to_pitch_class("C"), 0)
        self.assertEqual(to_pitch_class("C#"), 1)
        self.assertEqual(to_pitch_class("Db"), 1)
        self.assertEqual(to_pitch_class("Bb"), 10)
        self.assertEqual(to_pitch_class("B"), 11)

    def test_aliases_resolved(self):
        self.assertEqual(to_pitch_class("B#"), 0)
        self.assertEqual(to_pitch_class("Cb"), 11)
        self.assertEqual(to_pitch_class("F##"), 7)
        self.assertEqual(to_pitch_class("Ebb"), 2)

    def test_unknown_name(self):
        # Callers bypassing normalize still get a checked error
        for bad in ("H", "c", "C###", ""):
            with self.assertRaises(UnknownNoteName, msg=bad):
                to_pitch_class(bad)

    def test_normalize_and_index(self):
        self.assertEqual(normalize_and_index("eb"), ("Eb", 3))
        self.assertEqual(normalize_and_index("B#"), ("C", 0))
        self.assertEqual(normalize_and_index(" f# "), ("F#", 6))
        with self.assertRaises(InvalidNoteSyntax):
            normalize_and_index("H")

    def test_aliases_land_on_canonical_names(self):
        for alias, target in ENHARMONIC_ALIASES.items():
            self.assertNotIn(target, ENHARMONIC_ALIASES, alias)
            to_pitch_class(target)


class TestTables(unittest.TestCase):
    def test_candidate_counts(self):
        # One spelling per white key, two per black key
        counts = [len(c) for c in ENHARMONIC_CANDIDATES]
        self.assertEqual(counts, [1, 2, 1, 2, 1, 1, 2, 1, 2, 1, 2, 1])
        self.assertEqual(ENHARMONIC_CANDIDATES[1], ("C#", "Db"))

    def test_tables_are_read_only(self):
        self.assertIsInstance(ROMAN_DEGREES, MappingProxyType)
        with self.assertRaises(TypeError):
            ROMAN_DEGREES["IX"] = (2, 1)
        with self.assertRaises(TypeError):
            ENHARMONIC_ALIASES["H"] = "B"


class TestLetters(unittest.TestCase):
    def test_letters_from(self):
        self.assertEqual(letters_from("C"), ("C", "D", "E", "F", "G", "A", "B"))
        self.assertEqual(letters_from("A"), ("A", "B", "C", "D", "E", "F", "G"))
        self.assertEqual(letters_from("G"), ("G", "A", "B", "C", "D", "E", "F"))

    def test_every_letter_once(self):
        for start in "ABCDEFG":
            seq = letters_from(start)
            self.assertEqual(seq[0], start)
            self.assertEqual(sorted(seq), list("ABCDEFG"))

    def test_spell_on_letter(self):
        self.assertEqual(spell_on_letter(0, "B"), "B#")
        self.assertEqual(spell_on_letter(4, "F"), "Fb")
        self.assertEqual(spell_on_letter(7, "F"), "F##")
        self.assertEqual(spell_on_letter(7, "A"), "Abb")
        self.assertEqual(spell_on_letter(3, "E"), "Eb")
        self.assertEqual(spell_on_letter(2, "D"), "D")
        self.assertIsNone(spell_on_letter(0, "F"))
        self.assertIsNone(spell_on_letter(6, "C"))


if __name__ == "__main__":
    unittest.main()
