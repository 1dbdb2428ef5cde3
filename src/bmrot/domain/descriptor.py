"""Font descriptor aggregate.

The Descriptor owns every record of one bitmap font. Pages, chars and
kerning pairs are kept in dicts keyed by id (or pair), so a repeated key
overwrites the earlier record while keeping its original position.
"""

from dataclasses import dataclass, field

from bmrot.domain.records import Char, CharPair, Common, Info, Kerning, Page


@dataclass
class Descriptor:
    """Metadata of one bitmap font (without page sheet pixel data).

    Attributes:
        info: How the font was generated
        common: Information shared by all glyphs
        pages: Atlas pages keyed by page id
        chars: Glyphs keyed by codepoint
        kerning: Kerning amounts keyed by character pair
    """

    info: Info = field(default_factory=Info)
    common: Common = field(default_factory=Common)
    pages: dict[int, Page] = field(default_factory=dict)
    chars: dict[int, Char] = field(default_factory=dict)
    kerning: dict[CharPair, Kerning] = field(default_factory=dict)

    def add_page(self, page: Page) -> None:
        """Insert a page, replacing any page with the same id."""
        self.pages[page.id] = page

    def add_char(self, char: Char) -> None:
        """Insert a glyph, replacing any glyph with the same codepoint."""
        self.chars[char.id] = char

    def add_kerning(self, pair: CharPair, kerning: Kerning) -> None:
        """Insert a kerning pair, replacing any previous amount for it."""
        self.kerning[pair] = kerning

    def kerning_amount(self, first: int, second: int) -> int:
        """Get the kerning amount for a character pair.

        Args:
            first: Codepoint of the preceding character
            second: Codepoint of the following character

        Returns:
            Kerning amount in pixels, 0 if the pair has no entry
        """
        kerning = self.kerning.get(CharPair(first, second))
        return kerning.amount if kerning is not None else 0

    def is_empty(self) -> bool:
        """Check if the descriptor has no glyphs."""
        return len(self.chars) == 0
