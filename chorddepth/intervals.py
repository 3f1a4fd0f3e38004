"""Scale-degree labels of a pitch relative to a chord root."""
from chorddepth.constants import INTERVAL_LABELS


def interval_label(root_pc: int, target_pc: int) -> str:
    """Degree name of target above root, e.g. (0, 1) → 'b9', (5, 0) → '5'."""
    return INTERVAL_LABELS[(target_pc - root_pc) % 12]


def interval_labels(root_pc: int, pitch_classes) -> list[str]:
    return [interval_label(root_pc, pc) for pc in pitch_classes]
