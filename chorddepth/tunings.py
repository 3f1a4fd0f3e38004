"""
Reference tunings: the open-string pitches every chord is labelled against.

Tunings are written low string first as note names with optional octave
("E2 A2 D3 G3 B3 E4").  Users are encouraged to add their own to TUNINGS.
"""
import re

import music21.pitch

from chorddepth.pitch import pc_to_note

TUNINGS: dict[str, str] = {
    "CGDGAD":          "C2 G2 D3 G3 A3 D4",   # default
    "GUITAR":          "E2 A2 D3 G3 B3 E4",   # standard 6 string
    "DADGAD":          "D2 A2 D3 G3 A3 D4",
    "DROP_D":          "D2 A2 D3 G3 B3 E4",
    "OPEN_D":          "D2 A2 D3 F#3 A3 D4",
    "OPEN_G":          "D2 G2 D3 G3 B3 D4",
    "TENOR_GUITAR":    "C3 G3 D4 A4",
    "BASS":            "E1 A1 D2 G2",
    "BASS_5_STRING":   "B0 E1 A1 D2 G2",
    "UKULELE":         "G4 C4 E4 A4",         # re-entrant, G out of order
    "MANDOLIN":        "G3 D4 A4 E5",
    "CELLO":           "C2 G2 D3 A3",
    "VIOLA":           "C3 G3 D4 A4",
    "VIOLIN":          "G3 D4 A4 E5",
}
DEFAULT_TUNING = "CGDGAD"

# Note letter, optional accidental, optional octave: "Bb3", "F#", "e2"
_NOTE_RE = re.compile(r"^([A-Ga-g])(#|b|-)?(\d)?$")


def _to_music21_name(token: str) -> str:
    """Rewrite 'Bb3' as music21's 'B-3'; sharps and naturals pass through."""
    m = _NOTE_RE.match(token)
    if not m:
        raise ValueError(f"invalid note: {token!r}")
    letter, accidental, octave = m.groups()
    accidental = "-" if accidental in ("b", "-") else (accidental or "")
    return f"{letter.upper()}{accidental}{octave or ''}"


def parse_tuning(spelling: str) -> list[int]:
    """
    Parse a tuning spelling into pitch classes, in the order written.

    Notes may be separated by whitespace or commas.  Raises ValueError on an
    empty spelling or an unparseable note.
    """
    tokens = [t for t in re.split(r"[\s,]+", spelling.strip()) if t]
    if not tokens:
        raise ValueError("empty tuning")
    return [music21.pitch.Pitch(_to_music21_name(t)).pitchClass for t in tokens]


def tuning_spelling(name_or_spelling: str) -> str:
    """Look up a named tuning (case-insensitive); anything else is a spelling."""
    return TUNINGS.get(name_or_spelling.strip().upper(), name_or_spelling)


def resolve_tuning(name_or_spelling: str) -> list[int]:
    return parse_tuning(tuning_spelling(name_or_spelling))


def string_headers(pitch_classes) -> list[str]:
    """
    Column headers, string 1 being the last (highest) entry:
    [0, 7, 2, 7, 9, 2] → ['6(C)', '5(G)', '4(D)', '3(G)', '2(A)', '1(D)']
    """
    n = len(pitch_classes)
    return [f"{n - i}({pc_to_note(pc)})" for i, pc in enumerate(pitch_classes)]


def parse_center(name: str) -> int:
    """Tonal center note name (e.g. "Eb", "G") → pitch class."""
    return music21.pitch.Pitch(_to_music21_name(name.strip())).pitchClass
