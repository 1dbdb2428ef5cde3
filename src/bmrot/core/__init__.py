"""Core processing for bmrot.

This module contains:

- The rotation engine (clockwise quarter turn of a whole descriptor)
- The processing pipeline tying parsing, rotation and rendering together

The rotation functions are pure apart from mutating the descriptor they are
given; they never fail on a well-formed descriptor.

Key functions:
- rotate: Rotate a descriptor 90 degrees clockwise in place
- rotate_times: Apply several quarter turns
- rotate_char: Reposition a single glyph
- rotate_padding / rotate_spacing: Rotate info metrics

Key classes:
- FontRotator: Load, rotate and render a descriptor file
"""

from bmrot.core.processor import FontRotator
from bmrot.core.rotation import (
    rotate,
    rotate_char,
    rotate_padding,
    rotate_spacing,
    rotate_times,
)

__all__ = [
    # Processor classes
    "FontRotator",
    # Rotation functions
    "rotate",
    "rotate_char",
    "rotate_padding",
    "rotate_spacing",
    "rotate_times",
]
