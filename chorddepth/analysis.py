"""
Per-chord analysis: tonal depth of the chord plus, for every string of the
reference tuning, its degree above the chord root and whether it sounds a
chord tone or a tone of the best-fitting scale.
"""
from typing import NamedTuple

from chorddepth.intervals import interval_label
from chorddepth.parser import ChordError, ParsedChord, parse_progression
from chorddepth.tonal_depth import TonalDepthResult, nearest_keys, scale_mask


class StringLabel(NamedTuple):
    pc: int
    label: str
    in_chord: bool
    in_scale: bool


class ChordAnalysis(NamedTuple):
    chord: ParsedChord | ChordError
    depth_result: TonalDepthResult
    root_pc: int
    key_root_pc: int | None
    scale: frozenset[int]
    strings: tuple[StringLabel, ...]


def analyze_chord(chord, reference_pcs, tonal_center: int = 0) -> ChordAnalysis:
    """
    Analyse one parsed chord against a tuning.

    Args:
        chord: ParsedChord or ChordError from parse_chord().
        reference_pcs: Pitch classes of the open strings, in display order.
        tonal_center: Pitch class that depth 0 refers to.

    Degraded chords (ChordError, blank input) have no pitch classes: the
    depth result is empty and the root falls back to the tonal center so
    every string still gets a label.
    """
    tonal_center %= 12
    depth_result = nearest_keys(chord.pitch_classes, center=tonal_center)
    root_pc = chord.root_pc if chord.root_pc is not None else tonal_center

    primary = depth_result.primary
    if primary is not None:
        key_root_pc = primary.transposed(tonal_center)
        scale = scale_mask(key_root_pc)
    else:
        key_root_pc = None
        scale = frozenset()

    chord_set = set(chord.pitch_classes)
    strings = tuple(
        StringLabel(
            pc=pc % 12,
            label=interval_label(root_pc, pc),
            in_chord=pc % 12 in chord_set,
            in_scale=pc % 12 in scale,
        )
        for pc in reference_pcs
    )
    return ChordAnalysis(
        chord=chord,
        depth_result=depth_result,
        root_pc=root_pc,
        key_root_pc=key_root_pc,
        scale=scale,
        strings=strings,
    )


def analyze_progression(text: str, reference_pcs, tonal_center: int = 0) -> list[ChordAnalysis]:
    """Parse whitespace-separated chords and analyse each one independently."""
    reference_pcs = list(reference_pcs)
    return [analyze_chord(c, reference_pcs, tonal_center) for c in parse_progression(text)]
