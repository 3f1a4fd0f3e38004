"""
Display strings and style hints for a chord analysis table.

Styles are plain names ("green", "chord", "outside", ...) so any front end
can map them; render_table() maps them to ANSI colours for the terminal.
"""
from chorddepth.parser import is_error
from chorddepth.pitch import pc_to_note

# ── ANSI colours ────────────────────────────────────────────────────────────
RED     = "\033[91m"
YELLOW  = "\033[93m"
GREEN   = "\033[92m"
CYAN    = "\033[96m"
MAGENTA = "\033[95m"
GREY    = "\033[90m"
BOLD    = "\033[1m"
ITALIC  = "\033[3m"
RESET   = "\033[0m"

STYLE_CODES: dict[str, str] = {
    "green":   GREEN,
    "yellow":  YELLOW,
    "red":     RED,
    "magenta": MAGENTA + ITALIC,   # superposition of tied keys
    "dim":     GREY,
    "chord":   GREEN + BOLD,       # string sounds a chord tone
    "scale":   CYAN,               # string sounds a scale tone
    "outside": RED,
    "header":  YELLOW + BOLD,
    "name":    BOLD,
    "error":   RED + BOLD,
    "":        "",
}


def depth_text(result) -> str:
    """'+0', or '-3 +0 +3' when several keys tie."""
    return " ".join(f"{c.depth:+d}" for c in result.candidates)


def key_text(result, center: int = 0) -> str:
    """Candidate key names; with a moved tonal center, absolute names."""
    if center % 12 == 0:
        return " ".join(c.root_name for c in result.candidates)
    return " ".join(pc_to_note(c.transposed(center)) for c in result.candidates)


def notes_text(chord) -> str:
    return " ".join(pc_to_note(pc) for pc in chord.pitch_classes)


def depth_style(result) -> str:
    primary = result.primary
    if primary is None:
        return "dim"
    if not result.is_perfect_match:
        return "magenta"
    if primary.depth == 0:
        return "green"
    if abs(primary.depth) <= 1:
        return "yellow"
    return "red"


def string_cell(string_label) -> tuple[str, str]:
    if string_label.in_chord:
        return string_label.label, "chord"
    if string_label.in_scale:
        return string_label.label, "scale"
    return f"X({string_label.label})", "outside"


def chord_row(source: str, analysis, center: int = 0) -> list[tuple[str, str]]:
    """One table row of (text, style) cells: chord, depth, key, notes, strings."""
    result = analysis.depth_result
    name_style = "error" if is_error(analysis.chord) else "name"
    cells = [
        (source, name_style),
        (depth_text(result), depth_style(result)),
        (key_text(result, center), ""),
        (notes_text(analysis.chord), "dim"),
    ]
    cells.extend(string_cell(s) for s in analysis.strings)
    return cells


def table_headers(string_headers) -> list[str]:
    return ["Chord", "Depth", "Local Key", "Notes", *string_headers]


def render_table(rows, headers, color: bool = True) -> str:
    """Left-aligned fixed-width table; each row is a list of (text, style)."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, (text, _) in enumerate(row):
            widths[i] = max(widths[i], len(text))

    def paint(text, style, width):
        padded = f"{text:<{width}}"
        code = STYLE_CODES.get(style, "") if color else ""
        return f"{code}{padded}{RESET}" if code else padded

    lines = ["  ".join(paint(h, "header", w) for h, w in zip(headers, widths)).rstrip()]
    lines.append("  ".join("─" * w for w in widths))
    for row in rows:
        lines.append("  ".join(paint(t, s, w) for (t, s), w in zip(row, widths)).rstrip())
    return "\n".join(lines)
