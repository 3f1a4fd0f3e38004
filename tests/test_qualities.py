import unittest
from chorddepth.qualities import (
    FALLBACK_INTERVALS,
    QUALITY_ALIASES,
    QUALITY_INTERVALS,
    equivalent_qualities,
    intervals_for,
    is_known_quality,
    known_qualities,
)


class TestQualities(unittest.TestCase):
    def test_triads(self):
        self.assertEqual(intervals_for(""), (0, 4, 7))
        self.assertEqual(intervals_for("m"), (0, 3, 7))
        self.assertEqual(intervals_for("dim"), (0, 3, 6))
        self.assertEqual(intervals_for("aug"), (0, 4, 8))
        self.assertEqual(intervals_for("sus4"), (0, 5, 7))
        self.assertEqual(intervals_for("sus2"), (0, 2, 7))

    def test_half_diminished_aliases(self):
        expected = (0, 3, 6, 10)
        for token in ["m7b5", "m7-5", "half-dim", "ø"]:
            self.assertEqual(intervals_for(token), expected)

    def test_alias_classes_share_offsets(self):
        groups = [
            ["", "M", "maj"],
            ["m", "min", "-"],
            ["dim", "o"],
            ["aug", "+"],
            ["sus4", "sus"],
            ["7", "dom7"],
            ["maj7", "M7", "Maj7", "j7", "jq"],
            ["m7", "min7", "-7"],
            ["mM7", "mMaj7"],
            ["dim7", "o7"],
            ["maj9", "M9"],
            ["m9", "min9"],
            ["7#5", "aug7"],
        ]
        for group in groups:
            first = intervals_for(group[0])
            for token in group[1:]:
                self.assertEqual(intervals_for(token), first, token)

    def test_major_seventh_spellings(self):
        for token in ["maj7", "M7", "Maj7", "j7", "jq"]:
            self.assertEqual(intervals_for(token), (0, 4, 7, 11), token)
        self.assertIn("jq", equivalent_qualities("maj7"))

    def test_extensions_keep_compound_offsets(self):
        self.assertEqual(intervals_for("9"), (0, 4, 7, 10, 14))
        self.assertEqual(intervals_for("m9"), (0, 3, 7, 10, 14))
        self.assertEqual(intervals_for("11"), (0, 4, 7, 10, 14, 17))
        self.assertEqual(intervals_for("13"), (0, 4, 7, 10, 14, 21))
        self.assertEqual(intervals_for("M13"), (0, 4, 7, 11, 14, 21))
        self.assertEqual(intervals_for("add9"), (0, 4, 7, 14))

    def test_altered_dominants(self):
        self.assertEqual(intervals_for("7#9"), (0, 4, 7, 10, 15))
        self.assertEqual(intervals_for("7b9"), (0, 4, 7, 10, 13))
        self.assertEqual(intervals_for("7#5"), (0, 4, 8, 10))

    def test_unknown_token_falls_back_to_power_chord(self):
        self.assertEqual(FALLBACK_INTERVALS, (0, 7))
        for token in ["5", "xyz", "maj13#11", "MAJ7"]:
            self.assertEqual(intervals_for(token), (0, 7))
            self.assertFalse(is_known_quality(token))

    def test_every_alias_points_at_a_canonical_token(self):
        for alias, canon in QUALITY_ALIASES.items():
            self.assertIn(canon, QUALITY_INTERVALS, alias)
            self.assertNotIn(alias, QUALITY_INTERVALS, alias)

    def test_known_qualities(self):
        tokens = known_qualities()
        self.assertEqual(len(tokens), len(QUALITY_INTERVALS) + len(QUALITY_ALIASES))
        self.assertIn("ø", tokens)
        self.assertIn("", tokens)

    def test_equivalent_qualities(self):
        self.assertEqual(set(equivalent_qualities("ø")), {"m7b5", "m7-5", "half-dim", "ø"})
        self.assertEqual(equivalent_qualities("m7b5")[0], "m7b5")
        self.assertEqual(equivalent_qualities("sus2"), ("sus2",))
        self.assertEqual(equivalent_qualities("nonsense"), ())

if __name__ == "__main__":
    unittest.main()
