"""
Plain-text mode cards for the terminal.

    C Dorian                                    [Dorian]
      Scale: C • D • Eb • F • G • A • Bb
      Characteristic note (6): A
      ...
"""

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"

CARD_WIDTH = 52


def _paint(text, code, enabled):
    return f"{code}{text}{RESET}" if enabled else text


def _chord_line(chord, color):
    degree = chord.degree + ("*" if chord.emphasized else "")
    line = f"{degree:<7} {chord.label}"
    if chord.emphasized:
        return _paint(line, YELL, color)
    return line


def render_card(result, color: bool = True) -> str:
    """Render one ModeResult as a multi-line text card."""
    title = f"{result.tonic} {result.mode}"
    badge = f"[{result.mode}]"
    lines = [
        _paint(f"{title:<{CARD_WIDTH - len(badge)}}{badge}", BOLD, color),
        f"  Scale: {_paint(' • '.join(result.scale), CYAN, color)}",
        "",
        f"  Mode: {result.mode}",
        f"  Characteristic note ({result.characteristic_label}): "
        f"{_paint(result.characteristic_note, GREEN, color)}",
        f"  Tonic chord: {result.tonic_chord}",
        "",
        "  Characteristic chords",
    ]
    lines += [f"    {_chord_line(c, color)}" for c in result.characteristic_chords]
    lines += [
        "",
        f"  Avoid chord: {result.avoid_degree} — "
        f"{_paint(result.avoid_chord, RED, color)}",
        "",
        "  Avoid progression",
    ]
    lines += [f"    {_chord_line(c, color)}" for c in result.avoid_progression]
    lines.append(_paint(f"  Avoid to preserve {result.mode} focus.", DIM, color))
    return "\n".join(lines)


def render_cards(results, color: bool = True) -> str:
    return "\n\n".join(render_card(r, color) for r in results)
