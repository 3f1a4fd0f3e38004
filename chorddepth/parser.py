"""
Chord-symbol parsing: "Fm9", "C/Bb", "G13" → root, quality, bass and the
pitch classes the chord sounds.

Parsing never raises on malformed input.  An unknown root comes back as a
ChordError, an unknown quality falls back to root + fifth, and an unknown
bass note is dropped.
"""
from typing import NamedTuple

from chorddepth.pitch import note_to_pc
from chorddepth.qualities import intervals_for


class ParsedChord(NamedTuple):
    display_name: str
    root_name: str = ""
    root_pc: int | None = None
    quality: str = ""
    bass_name: str | None = None
    bass_pc: int | None = None
    # Parse order, bass first when added; may repeat a pitch class.
    pitch_classes: tuple[int, ...] = ()


class ChordError(NamedTuple):
    """A chord whose root spelling could not be resolved."""
    token: str
    source: str = ""

    @property
    def display_name(self) -> str:
        return f"Err:{self.token}"

    @property
    def quality(self) -> str:
        return ""

    @property
    def root_pc(self) -> None:
        return None

    @property
    def pitch_classes(self) -> tuple[int, ...]:
        return ()


# Returned for blank input
EMPTY_CHORD = ParsedChord(display_name="?")


def is_error(chord) -> bool:
    return isinstance(chord, ChordError)


def _split_root(symbol: str) -> tuple[str, str]:
    """Split a chord symbol (no bass) into (root spelling, quality token)."""
    if len(symbol) > 1 and symbol[1] in ("#", "b"):
        return symbol[:2], symbol[2:]
    return symbol[:1], symbol[1:]


def parse_chord(text: str) -> ParsedChord | ChordError:
    """
    Parse one chord symbol.

    Rules (applied in order):
      1. Strip whitespace; blank input → EMPTY_CHORD ("?")
      2. Split on '/'                 C/Bb → symbol C, bass Bb
      3. Root is two chars when the second is '#' or 'b', else one char
      4. Unknown root                 H7 → ChordError("H")
      5. Quality offsets added to the root, mod 12, in table order
      6. A resolvable bass not already in the chord is put first
    """
    s = text.strip()
    if not s:
        return EMPTY_CHORD

    parts = s.split("/")
    symbol = parts[0]
    bass_name = parts[1] if len(parts) > 1 else ""

    root_name, quality = _split_root(symbol)
    root_pc = note_to_pc(root_name)
    if root_pc is None:
        return ChordError(token=root_name, source=s)

    pcs = [(root_pc + off) % 12 for off in intervals_for(quality)]

    bass_pc = note_to_pc(bass_name) if bass_name else None
    if bass_pc is not None and bass_pc not in pcs:
        pcs.insert(0, bass_pc)

    display_name = f"{root_name}/{bass_name}" if bass_name else root_name
    return ParsedChord(
        display_name=display_name,
        root_name=root_name,
        root_pc=root_pc,
        quality=quality,
        bass_name=bass_name or None,
        bass_pc=bass_pc,
        pitch_classes=tuple(pcs),
    )


def split_progression(text: str) -> list[str]:
    """Split whitespace-separated chord input into symbols."""
    return text.split()


def parse_progression(text: str) -> list[ParsedChord | ChordError]:
    return [parse_chord(sym) for sym in split_progression(text)]
