# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# E and B have no sharp spellings of their own; E#/Fb/B#/Cb are not accepted.
NOTE_TO_PC: dict[str, int] = {
    "C": 0,  "C#": 1,  "Db": 1,  "D": 2,  "D#": 3,  "Eb": 3,
    "E": 4,  "F": 5,   "F#": 6,  "Gb": 6, "G": 7,   "G#": 8,
    "Ab": 8, "A": 9,   "A#": 10, "Bb": 10, "B": 11,
}
# Display spelling per pitch class: flats for black keys, except F#.
PC_TO_NOTE: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"
)
# Chromatic distance above the chord root → degree label
INTERVAL_LABELS: tuple[str, ...] = (
    "R", "b9", "9", "m3", "M3", "11", "#11", "5", "b13", "13", "m7", "M7"
)
MAJOR_SCALE_STEPS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# ── Circle of fifths search table ─────────────────────────────────────────────
# (depth, root pitch class, root name) in visitation order.  Depth is counted
# in fifths from the tonal center (C = 0); +6 and -6 share a pitch class but
# are kept as separate candidates.
CIRCLE_OF_FIFTHS: tuple[tuple[int, int, str], ...] = (
    (0, 0, "C"),
    (1, 7, "G"),   (-1, 5, "F"),
    (2, 2, "D"),   (-2, 10, "Bb"),
    (3, 9, "A"),   (-3, 3, "Eb"),
    (4, 4, "E"),   (-4, 8, "Ab"),
    (5, 11, "B"),  (-5, 1, "Db"),
    (6, 6, "F#"),  (-6, 6, "Gb"),
)

# Demo input shown when no chords are given: minor 9th, slash chord,
# dominant 13th and a diminished seventh.
DEFAULT_PROGRESSION = "Fm9 C/Bb G13 Dbdim7"
