"""Descriptor I/O layer for bmrot.

This module handles reading BMFont text descriptors into the domain model
and rendering the model back to text.

Key responsibilities:
- Tokenize tag lines and `key=value` attributes (quoted or bare)
- Convert attribute values to typed record fields
- Render descriptors as a deterministic diagnostic dump

Key classes and functions:
- DescriptorParser: Single-pass parser building a Descriptor
- parse_descriptor / read_descriptor / load_descriptor: Parsing entry points
- render_descriptor / write_descriptor: Diagnostic serializer
"""

from bmrot.io.reader import (
    DescriptorParser,
    load_descriptor,
    parse_descriptor,
    read_descriptor,
)
from bmrot.io.writer import render_descriptor, write_descriptor

__all__ = [
    "DescriptorParser",
    "load_descriptor",
    "parse_descriptor",
    "read_descriptor",
    "render_descriptor",
    "write_descriptor",
]
