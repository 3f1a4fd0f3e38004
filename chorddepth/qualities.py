"""
Chord vocabulary: quality token → semitone offsets above the root.

Offsets are not reduced mod 12 so that extensions keep their identity
(9th = 14, 11th = 17, 13th = 21).  Adding a chord type is a data change:
put the canonical token in QUALITY_INTERVALS and its other spellings in
QUALITY_ALIASES.
"""

# Root + fifth; used for any token not in the table.
FALLBACK_INTERVALS: tuple[int, ...] = (0, 7)

QUALITY_INTERVALS: dict[str, tuple[int, ...]] = {
    # Triads
    "":       (0, 4, 7),
    "m":      (0, 3, 7),
    "dim":    (0, 3, 6),
    "aug":    (0, 4, 8),
    "sus4":   (0, 5, 7),
    "sus2":   (0, 2, 7),
    # Sixths and sevenths
    "6":      (0, 4, 7, 9),
    "m6":     (0, 3, 7, 9),
    "7":      (0, 4, 7, 10),
    "maj7":   (0, 4, 7, 11),
    "m7":     (0, 3, 7, 10),
    "mM7":    (0, 3, 7, 11),
    "dim7":   (0, 3, 6, 9),
    "m7b5":   (0, 3, 6, 10),
    "7sus4":  (0, 5, 7, 10),
    # Extensions
    "9":      (0, 4, 7, 10, 14),
    "add9":   (0, 4, 7, 14),
    "maj9":   (0, 4, 7, 11, 14),
    "m9":     (0, 3, 7, 10, 14),
    "11":     (0, 4, 7, 10, 14, 17),
    "m11":    (0, 3, 7, 10, 14, 17),
    "13":     (0, 4, 7, 10, 14, 21),
    "M13":    (0, 4, 7, 11, 14, 21),
    # Altered dominants
    "7#9":    (0, 4, 7, 10, 15),
    "7b9":    (0, 4, 7, 10, 13),
    "7#5":    (0, 4, 8, 10),
}

# Alternative spelling → canonical token
QUALITY_ALIASES: dict[str, str] = {
    "M": "", "maj": "",
    "min": "m", "-": "m",
    "o": "dim",
    "+": "aug",
    "sus": "sus4",
    "dom7": "7",
    "M7": "maj7", "Maj7": "maj7", "j7": "maj7", "jq": "maj7",
    "min7": "m7", "-7": "m7",
    "mMaj7": "mM7",
    "o7": "dim7",
    "m7-5": "m7b5", "half-dim": "m7b5", "ø": "m7b5",
    "M9": "maj9",
    "min9": "m9",
    "aug7": "7#5",
}

_LOOKUP: dict[str, tuple[int, ...]] = {
    **QUALITY_INTERVALS,
    **{alias: QUALITY_INTERVALS[canon] for alias, canon in QUALITY_ALIASES.items()},
}


def intervals_for(quality: str) -> tuple[int, ...]:
    """Return the semitone offsets for a quality token, or FALLBACK_INTERVALS."""
    return _LOOKUP.get(quality, FALLBACK_INTERVALS)


def is_known_quality(quality: str) -> bool:
    return quality in _LOOKUP


def known_qualities() -> list[str]:
    """Every accepted token, canonical and alias, sorted."""
    return sorted(_LOOKUP)


def equivalent_qualities(quality: str) -> tuple[str, ...]:
    """
    Return the equivalence class of a token: the canonical token followed by
    its aliases.  Unknown tokens have no class and yield an empty tuple.
    """
    if quality not in _LOOKUP:
        return ()
    canon = QUALITY_ALIASES.get(quality, quality)
    aliases = [a for a, c in QUALITY_ALIASES.items() if c == canon]
    return (canon, *aliases)
