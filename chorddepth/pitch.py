"""Note-name ↔ pitch-class conversion."""
from chorddepth.constants import NOTE_TO_PC, PC_TO_NOTE


def note_to_pc(name: str) -> int | None:
    """Map a note name (e.g. 'C', 'F#', 'Bb') to its pitch class, or None."""
    return NOTE_TO_PC.get(name)


def pc_to_note(pc: int) -> str:
    """Canonical display name for a pitch class (taken mod 12)."""
    return PC_TO_NOTE[pc % 12]


def transpose_pc(pc: int, semitones: int) -> int:
    return (pc + semitones) % 12
