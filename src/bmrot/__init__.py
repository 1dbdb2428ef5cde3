"""bmrot - Rotate BMFont descriptors by 90 degrees.

bmrot is a CLI tool and library that reads a bitmap font descriptor in the
BMFont text format (usually a .fnt file), rotates the whole glyph layout
90 degrees clockwise and prints the resulting descriptor.

Example:
    $ bmrot font.fnt

Only the descriptor is transformed; the referenced page sheet images are
left untouched.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
