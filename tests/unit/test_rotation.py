"""Unit tests for the rotation engine."""

import copy
from pathlib import Path

import pytest

from bmrot.core import rotate, rotate_char, rotate_padding, rotate_spacing, rotate_times
from bmrot.domain import (
    Channel,
    Char,
    CharPair,
    Common,
    Descriptor,
    Info,
    Kerning,
    Padding,
    Spacing,
)
from bmrot.io import load_descriptor, render_descriptor

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def make_descriptor(*chars: Char, scale_w: int = 256, scale_h: int = 128) -> Descriptor:
    """Build a descriptor holding the given glyphs."""
    descriptor = Descriptor(common=Common(line_height=32, base=26, scale_w=scale_w, scale_h=scale_h))
    for char in chars:
        descriptor.add_char(char)
    return descriptor


class TestMetrics:
    """Tests for padding and spacing rotation."""

    def test_padding(self):
        """Test padding rotates clockwise."""
        assert rotate_padding(Padding(up=1, right=2, down=3, left=4)) == Padding(
            up=4, right=1, down=2, left=3
        )

    def test_padding_four_turns(self):
        """Test four padding rotations restore the original."""
        padding = Padding(1, 2, 3, 4)
        rotated = padding
        for _ in range(4):
            rotated = rotate_padding(rotated)
        assert rotated == padding

    def test_spacing(self):
        """Test spacing axes swap."""
        assert rotate_spacing(Spacing(horizontal=5, vertical=7)) == Spacing(
            horizontal=7, vertical=5
        )

    def test_descriptor_info(self):
        """Test rotate updates info padding and spacing."""
        descriptor = Descriptor(info=Info(padding=Padding(1, 2, 3, 4), spacing=Spacing(5, 7)))
        rotate(descriptor)
        assert descriptor.info.padding == Padding(4, 1, 2, 3)
        assert descriptor.info.spacing == Spacing(7, 5)


class TestCanvas:
    """Tests for page dimension handling."""

    def test_canvas_swap(self):
        """Test page width and height swap."""
        descriptor = make_descriptor(scale_w=256, scale_h=128)
        rotate(descriptor)
        assert descriptor.common.scale_w == 128
        assert descriptor.common.scale_h == 256


class TestGlyph:
    """Tests for glyph repositioning."""

    def test_rotate_char(self):
        """Test the documented glyph transform against the swapped width."""
        char = Char(id=65, x=10, y=20, width=30, height=5, xoffset=1, yoffset=2, xadvance=31)
        rotate_char(char, 128)
        assert (char.x, char.y) == (103, 10)
        assert (char.width, char.height) == (5, 30)
        assert (char.xoffset, char.yoffset) == (2, 1)
        assert char.xadvance == 7

    def test_glyph_uses_rotated_canvas_width(self):
        """Test rotate positions glyphs against the post-swap page width."""
        descriptor = make_descriptor(
            Char(id=65, x=10, y=20, width=30, height=5, xoffset=1, yoffset=2),
            scale_w=256,
            scale_h=128,
        )
        rotate(descriptor)
        assert descriptor.chars[65].x == 128 - 20 - 5

    def test_page_and_channel_unchanged(self):
        """Test page id and channel survive rotation."""
        descriptor = make_descriptor(Char(id=65, width=3, height=4, page=2, channel=Channel.RED))
        rotate(descriptor)
        assert descriptor.chars[65].page == 2
        assert descriptor.chars[65].channel == Channel.RED

    def test_advance_recomputed(self):
        """Test the original advance is discarded."""
        descriptor = make_descriptor(Char(id=65, width=10, height=6, yoffset=3, xadvance=99))
        rotate(descriptor)
        assert descriptor.chars[65].xadvance == 6 + 3

    def test_out_of_canvas_input(self):
        """Test glyphs outside the canvas produce negative coordinates."""
        descriptor = make_descriptor(Char(id=65, x=0, y=200, width=4, height=10), scale_h=128)
        rotate(descriptor)
        assert descriptor.chars[65].x == 128 - 200 - 10


class TestLineMetrics:
    """Tests for line height and base after rotation."""

    def test_line_height_is_tallest_glyph(self):
        """Test line height and base equal the tallest rotated glyph."""
        descriptor = make_descriptor(
            Char(id=65, width=30, height=1),
            Char(id=66, width=12, height=2),
            Char(id=67, width=45, height=3),
        )
        rotate(descriptor)
        heights = sorted(char.height for char in descriptor.chars.values())
        assert heights == [12, 30, 45]
        assert descriptor.common.line_height == 45
        assert descriptor.common.base == 45

    def test_no_glyphs(self):
        """Test an empty font gets zero line metrics."""
        descriptor = make_descriptor()
        rotate(descriptor)
        assert descriptor.common.line_height == 0
        assert descriptor.common.base == 0


class TestDescriptorRotation:
    """Tests for whole-descriptor behavior."""

    def test_kerning_unchanged(self):
        """Test kerning amounts are not transformed."""
        descriptor = make_descriptor(Char(id=65, width=3, height=4))
        descriptor.add_kerning(CharPair(65, 66), Kerning(-2))
        rotate(descriptor)
        assert descriptor.kerning == {CharPair(65, 66): Kerning(-2)}

    def test_empty_descriptor(self):
        """Test rotating a default descriptor does not fail."""
        descriptor = Descriptor()
        rotate(descriptor)
        assert descriptor.common.scale_w == 0

    def test_fixture(self):
        """Test the fixture font renders as expected after one turn."""
        descriptor = load_descriptor(FIXTURES_DIR / "arial.fnt")
        rotate(descriptor)
        expected = (FIXTURES_DIR / "arial_rotated.txt").read_text(encoding="utf-8")
        assert render_descriptor(descriptor) == expected

    def test_double_rotation_is_not_identity(self):
        """Test two turns apply the per-field rules twice."""
        original = make_descriptor(
            Char(id=65, x=10, y=20, width=30, height=5, xoffset=1, yoffset=2),
            scale_w=256,
            scale_h=128,
        )
        descriptor = copy.deepcopy(original)
        rotate_times(descriptor, 2)

        char = descriptor.chars[65]
        # First turn: x=103 y=10 w=5 h=30 on a 128x256 canvas; second on 256x128
        assert (descriptor.common.scale_w, descriptor.common.scale_h) == (256, 128)
        assert (char.x, char.y) == (256 - 10 - 30, 103)
        assert (char.width, char.height) == (30, 5)
        assert (char.xoffset, char.yoffset) == (1, 2)
        assert char.xadvance == 31
        assert descriptor.common.line_height == 5
        assert descriptor != original

    def test_rotate_times_zero(self):
        """Test zero turns leave the descriptor unchanged."""
        original = make_descriptor(Char(id=65, x=1, y=2, width=3, height=4))
        descriptor = copy.deepcopy(original)
        rotate_times(descriptor, 0)
        assert descriptor == original

    def test_rotate_times_negative(self):
        """Test negative turns are rejected."""
        with pytest.raises(ValueError, match="turns"):
            rotate_times(Descriptor(), -1)
