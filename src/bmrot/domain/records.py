"""Records making up a BMFont descriptor.

Each record mirrors one tag of the BMFont text format:
- Info: the `info` line (how the font was generated)
- Common: the `common` line (information shared by all glyphs)
- Page: a `page` line (one atlas sheet)
- Char: a `char` line (one glyph)
- CharPair / Kerning: a `kerning` line (key and value of the kerning map)

The numeric values of ChannelInfo and Channel are part of the file format.
"""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from bmrot.domain.geometry import Padding, Point, Rectangle, Spacing


class ChannelInfo(IntEnum):
    """What a color channel of the atlas holds."""

    GLYPH = 0
    OUTLINE = 1
    GLYPH_AND_OUTLINE = 2
    ZERO = 3
    ONE = 4


class Channel(IntFlag):
    """Texture channel(s) where a glyph is found."""

    BLUE = 1
    GREEN = 2
    RED = 4
    ALPHA = 8
    ALL = 15


@dataclass
class Info:
    """Information on how the font was generated.

    Attributes:
        face: Name of the true type font
        size: Size of the true type font (negative when matching char height)
        bold: Font is bold
        italic: Font is italic
        charset: Name of the OEM charset (when not unicode)
        unicode: Charset is unicode
        stretch_h: Font height stretch in percentage (100 means no stretch)
        smooth: Smoothing was turned on
        aa: Supersampling level used (1 means no supersampling)
        padding: Padding for each glyph
        spacing: Spacing for each glyph
        outline: Outline thickness for the glyphs
    """

    face: str = ""
    size: int = 0
    bold: bool = False
    italic: bool = False
    charset: str = ""
    unicode: bool = False
    stretch_h: int = 0
    smooth: bool = False
    aa: int = 0
    padding: Padding = field(default_factory=Padding)
    spacing: Spacing = field(default_factory=Spacing)
    outline: int = 0


@dataclass
class Common:
    """Information common to all glyphs.

    Attributes:
        line_height: Distance in pixels between each line of text
        base: Pixels from the absolute top of the line to the glyph base
        scale_w: Width of the atlas pages
        scale_h: Height of the atlas pages
        packed: Monochrome glyphs are packed into each of the channels
        alpha_channel: Content of the alpha channel
        red_channel: Content of the red channel
        green_channel: Content of the green channel
        blue_channel: Content of the blue channel
    """

    line_height: int = 0
    base: int = 0
    scale_w: int = 0
    scale_h: int = 0
    packed: bool = False
    alpha_channel: ChannelInfo = ChannelInfo.GLYPH
    red_channel: ChannelInfo = ChannelInfo.GLYPH
    green_channel: ChannelInfo = ChannelInfo.GLYPH
    blue_channel: ChannelInfo = ChannelInfo.GLYPH

    @property
    def scale(self) -> Point:
        """Atlas page dimensions as a (width, height) point."""
        return Point(self.scale_w, self.scale_h)


@dataclass
class Page:
    """One atlas page sheet."""

    id: int = 0
    file: str = ""


@dataclass
class Char:
    """One glyph and its placement on the atlas.

    Attributes:
        id: Character codepoint
        x: Left position of the glyph image on the page
        y: Top position of the glyph image on the page
        width: Width of the glyph image
        height: Height of the glyph image
        xoffset: Horizontal offset from the pen position when drawing
        yoffset: Vertical offset from the top of the line when drawing
        xadvance: How much to advance the pen after drawing
        page: Page id holding the glyph image (not checked against pages)
        channel: Texture channel(s) holding the glyph image
    """

    id: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    xoffset: int = 0
    yoffset: int = 0
    xadvance: int = 0
    page: int = 0
    channel: Channel = Channel(0)

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    @property
    def bounds(self) -> Rectangle:
        """Glyph rectangle on its page."""
        return Rectangle(self.pos, self.pos + self.size)

    @property
    def offset(self) -> Point:
        return Point(self.xoffset, self.yoffset)


@dataclass(frozen=True, slots=True)
class CharPair:
    """Ordered pair of codepoints; the key of the kerning map."""

    first: int
    second: int


@dataclass(frozen=True, slots=True)
class Kerning:
    """Horizontal pen adjustment applied when `second` follows `first`."""

    amount: int
