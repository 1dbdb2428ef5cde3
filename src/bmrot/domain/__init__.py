"""Domain models for bmrot.

This module contains the in-memory model of a BMFont descriptor. The records
are plain dataclasses with no behavior beyond small geometric accessors;
parsing, rotation and rendering live in the io and core packages.

Key classes:
- Point, Rectangle: Geometric values returned by accessors
- Padding, Spacing: Glyph padding and atlas spacing
- Info, Common, Page, Char: One record per descriptor tag
- ChannelInfo, Channel: Channel content codes and channel flags
- CharPair, Kerning: Key and value of the kerning map
- Descriptor: The aggregate owning all records of one font
"""

from bmrot.domain.descriptor import Descriptor
from bmrot.domain.geometry import Padding, Point, Rectangle, Spacing
from bmrot.domain.records import (
    Channel,
    ChannelInfo,
    Char,
    CharPair,
    Common,
    Info,
    Kerning,
    Page,
)

__all__: list[str] = [
    # Enums
    "Channel",
    "ChannelInfo",
    # Geometry
    "Padding",
    "Point",
    "Rectangle",
    "Spacing",
    # Records
    "Char",
    "CharPair",
    "Common",
    "Descriptor",
    "Info",
    "Kerning",
    "Page",
]
