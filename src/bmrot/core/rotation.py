"""Rotation of a font descriptor by 90 degrees clockwise.

The whole layout is rotated in place. The steps run in a fixed order because
later steps read values written by earlier ones:

1. Padding rotates clockwise: (up, right, down, left) -> (left, up, right, down)
2. Spacing swaps its axes
3. Page dimensions swap
4. Each glyph is repositioned against the swapped page width
5. Line height and base are set to the tallest rotated glyph

Kerning pairs, page ids and glyph channels are not changed. Rotating twice
gives a 180 degree rotation, not the original layout.
"""

from bmrot.domain import Char, Descriptor, Padding, Spacing


def rotate_padding(padding: Padding) -> Padding:
    """Rotate glyph padding clockwise.

    Args:
        padding: Padding before rotation

    Returns:
        Padding whose top is the old left side, right the old top, and so on
    """
    return Padding(
        up=padding.left,
        right=padding.up,
        down=padding.right,
        left=padding.down,
    )


def rotate_spacing(spacing: Spacing) -> Spacing:
    """Swap horizontal and vertical spacing."""
    return Spacing(horizontal=spacing.vertical, vertical=spacing.horizontal)


def rotate_char(char: Char, canvas_width: int) -> None:
    """Reposition a glyph in place for a clockwise rotation.

    The advance is recomputed from the rotated width and x offset; the
    original advance is discarded.

    Args:
        char: Glyph to rotate
        canvas_width: Page width after rotation
    """
    char.x, char.y = canvas_width - char.y - char.height, char.x
    char.xoffset, char.yoffset = char.yoffset, char.xoffset
    char.width, char.height = char.height, char.width
    char.xadvance = char.width + char.xoffset


def rotate(descriptor: Descriptor) -> None:
    """Rotate a descriptor 90 degrees clockwise, in place.

    Args:
        descriptor: Descriptor to rotate
    """
    info = descriptor.info
    common = descriptor.common

    info.padding = rotate_padding(info.padding)
    info.spacing = rotate_spacing(info.spacing)
    common.scale_w, common.scale_h = common.scale_h, common.scale_w

    line_height = 0
    for char in descriptor.chars.values():
        rotate_char(char, common.scale_w)
        line_height = max(line_height, char.height)

    # Baseline is placed at the line height; the ascent/descent split is lost
    common.line_height = line_height
    common.base = line_height


def rotate_times(descriptor: Descriptor, turns: int) -> None:
    """Apply `rotate` a number of times.

    Args:
        descriptor: Descriptor to rotate
        turns: Number of clockwise quarter turns (0 leaves it unchanged)

    Raises:
        ValueError: If turns is negative
    """
    if turns < 0:
        raise ValueError(f"turns must not be negative, got {turns}")
    for _ in range(turns):
        rotate(descriptor)
