"""Single-stroke vector font used for text engraving.

Each glyph is a list of strokes; each stroke is a polyline in a unit em
box with the baseline at y=0 and cap height at y=1 (Y up). Glyphs are 0.6
wide and advance 0.8, both scaled by the font size.
"""
from typing import Dict, List, Optional, Tuple

GLYPH_WIDTH = 0.6
GLYPH_ADVANCE = 0.8

Stroke = List[Tuple[float, float]]

STROKE_FONT: Dict[str, List[Stroke]] = {
    ' ': [],
    'A': [[(0, 0), (0.3, 1), (0.6, 0)], [(0.12, 0.4), (0.48, 0.4)]],
    'B': [
        [(0, 0), (0, 1), (0.45, 1), (0.6, 0.85), (0.6, 0.65), (0.45, 0.5), (0, 0.5)],
        [(0.45, 0.5), (0.6, 0.35), (0.6, 0.15), (0.45, 0), (0, 0)],
    ],
    'C': [[(0.6, 1), (0, 1), (0, 0), (0.6, 0)]],
    'D': [[(0, 0), (0, 1), (0.4, 1), (0.6, 0.8), (0.6, 0.2), (0.4, 0), (0, 0)]],
    'E': [[(0.6, 1), (0, 1), (0, 0), (0.6, 0)], [(0, 0.5), (0.45, 0.5)]],
    'F': [[(0.6, 1), (0, 1), (0, 0)], [(0, 0.5), (0.45, 0.5)]],
    'G': [[(0.6, 1), (0, 1), (0, 0), (0.6, 0), (0.6, 0.5), (0.3, 0.5)]],
    'H': [[(0, 0), (0, 1)], [(0.6, 0), (0.6, 1)], [(0, 0.5), (0.6, 0.5)]],
    'I': [[(0.3, 0), (0.3, 1)], [(0.1, 1), (0.5, 1)], [(0.1, 0), (0.5, 0)]],
    'J': [[(0.6, 1), (0.6, 0), (0, 0), (0, 0.3)]],
    'K': [[(0, 0), (0, 1)], [(0.6, 1), (0, 0.5), (0.6, 0)]],
    'L': [[(0, 1), (0, 0), (0.6, 0)]],
    'M': [[(0, 0), (0, 1), (0.3, 0.5), (0.6, 1), (0.6, 0)]],
    'N': [[(0, 0), (0, 1), (0.6, 0), (0.6, 1)]],
    'O': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0), (0, 0)]],
    'P': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0.5), (0, 0.5)]],
    'Q': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0), (0, 0)], [(0.35, 0.25), (0.6, 0)]],
    'R': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0.5), (0, 0.5), (0.6, 0)]],
    'S': [[(0.6, 1), (0, 1), (0, 0.5), (0.6, 0.5), (0.6, 0), (0, 0)]],
    'T': [[(0, 1), (0.6, 1)], [(0.3, 1), (0.3, 0)]],
    'U': [[(0, 1), (0, 0), (0.6, 0), (0.6, 1)]],
    'V': [[(0, 1), (0.3, 0), (0.6, 1)]],
    'W': [[(0, 1), (0.15, 0), (0.3, 0.5), (0.45, 0), (0.6, 1)]],
    'X': [[(0, 0), (0.6, 1)], [(0, 1), (0.6, 0)]],
    'Y': [[(0, 1), (0.3, 0.5), (0.6, 1)], [(0.3, 0.5), (0.3, 0)]],
    'Z': [[(0, 1), (0.6, 1), (0, 0), (0.6, 0)]],
    '0': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0), (0, 0), (0.6, 1)]],
    '1': [[(0.1, 0.8), (0.3, 1), (0.3, 0)], [(0.1, 0), (0.5, 0)]],
    '2': [[(0, 1), (0.6, 1), (0.6, 0.5), (0, 0.5), (0, 0), (0.6, 0)]],
    '3': [[(0, 1), (0.6, 1), (0.6, 0), (0, 0)], [(0.15, 0.5), (0.6, 0.5)]],
    '4': [[(0, 1), (0, 0.5), (0.6, 0.5)], [(0.6, 1), (0.6, 0)]],
    '5': [[(0.6, 1), (0, 1), (0, 0.5), (0.6, 0.5), (0.6, 0), (0, 0)]],
    '6': [[(0.6, 1), (0, 1), (0, 0), (0.6, 0), (0.6, 0.5), (0, 0.5)]],
    '7': [[(0, 1), (0.6, 1), (0.2, 0)]],
    '8': [[(0, 0), (0, 1), (0.6, 1), (0.6, 0), (0, 0)], [(0, 0.5), (0.6, 0.5)]],
    '9': [[(0.6, 0.5), (0, 0.5), (0, 1), (0.6, 1), (0.6, 0), (0, 0)]],
    '-': [[(0.1, 0.5), (0.5, 0.5)]],
    '+': [[(0.1, 0.5), (0.5, 0.5)], [(0.3, 0.3), (0.3, 0.7)]],
    '/': [[(0, 0), (0.6, 1)]],
    '.': [[(0.3, 0), (0.3, 0.05)]],
    ',': [[(0.3, 0.05), (0.2, -0.15)]],
    ':': [[(0.3, 0.7), (0.3, 0.65)], [(0.3, 0.3), (0.3, 0.25)]],
    "'": [[(0.3, 1), (0.3, 0.8)]],
    '!': [[(0.3, 1), (0.3, 0.3)], [(0.3, 0.05), (0.3, 0)]],
    '?': [[(0, 1), (0.6, 1), (0.6, 0.5), (0.3, 0.5), (0.3, 0.3)], [(0.3, 0.05), (0.3, 0)]],
}


def get_glyph(char: str) -> Optional[List[Stroke]]:
    """
    Look up the strokes for a character.

    Lowercase ASCII letters use their uppercase strokes.

    Args:
        char: Single character

    Returns:
        List of strokes (empty for a space), or None if unsupported
    """
    glyph = STROKE_FONT.get(char)
    if glyph is None and 'a' <= char <= 'z':
        glyph = STROKE_FONT.get(char.upper())
    return glyph
