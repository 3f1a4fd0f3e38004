"""
Tonal depth: which major key(s) on the circle of fifths best explain a set of
pitch classes, and how many fifths that key sits from the tonal center.

Pitch-class sets are handled as 12-element indicator vectors so every
candidate key is scored in a single matrix product against the precomputed
scale masks.
"""
from typing import NamedTuple

import numpy as np

from chorddepth.constants import CIRCLE_OF_FIFTHS, MAJOR_SCALE_STEPS
from chorddepth.pitch import transpose_pc


class KeyCandidate(NamedTuple):
    depth: int
    root_pc: int
    root_name: str

    def transposed(self, center: int) -> int:
        """Absolute root pitch class when the tonal center is `center`."""
        return transpose_pc(self.root_pc, center)


class TonalDepthResult(NamedTuple):
    candidates: tuple[KeyCandidate, ...]
    score: int
    total: int
    is_perfect_match: bool

    @property
    def primary(self) -> KeyCandidate | None:
        return self.candidates[0] if self.candidates else None


def scale_mask(root_pc: int) -> frozenset[int]:
    """The 7 pitch classes of the major scale on `root_pc`."""
    return frozenset((root_pc + step) % 12 for step in MAJOR_SCALE_STEPS)


def pitch_class_vector(pitch_classes) -> np.ndarray:
    """Indicator vector: 1 at each pitch class present, duplicates collapse."""
    v = np.zeros(12, dtype=np.int8)
    for pc in pitch_classes:
        v[pc % 12] = 1
    return v


def scale_mask_vector(root_pc: int) -> np.ndarray:
    return pitch_class_vector(scale_mask(root_pc))


_CANDIDATES: tuple[KeyCandidate, ...] = tuple(
    KeyCandidate(depth, pc, name) for depth, pc, name in CIRCLE_OF_FIFTHS
)
# (13, 12) matrix, one scale mask per row in visitation order
_MASKS: np.ndarray = np.stack(
    [scale_mask_vector(c.root_pc) for c in _CANDIDATES]
).astype(np.int32)
_MASKS.setflags(write=False)


def nearest_keys(pitch_classes, center: int = 0) -> TonalDepthResult:
    """
    Score every candidate key against the chord and keep the best.

    Args:
        pitch_classes: Chord pitch classes (any order, duplicates allowed).
        center: Tonal center pitch class; depths are measured from it.

    Returns:
        TonalDepthResult.  A perfect match (all chord tones inside the best
        scale) collapses ties to the candidate nearest the center; an
        imperfect match keeps every tied candidate in visitation order.
    """
    chord = pitch_class_vector((pc - center) % 12 for pc in pitch_classes)
    total = int(chord.sum())
    if total == 0:
        return TonalDepthResult(candidates=(), score=0, total=0, is_perfect_match=False)

    scores = _MASKS @ chord.astype(np.int32)
    max_score = int(scores.max())
    candidates = [c for c, s in zip(_CANDIDATES, scores) if s == max_score]

    is_perfect = max_score == total
    if is_perfect and len(candidates) > 1:
        # sorted() is stable: +6 stays ahead of -6
        candidates = sorted(candidates, key=lambda c: abs(c.depth))[:1]

    return TonalDepthResult(
        candidates=tuple(candidates),
        score=max_score,
        total=total,
        is_perfect_match=is_perfect,
    )
