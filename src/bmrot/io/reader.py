"""Descriptor reader for the BMFont text format.

This module provides the DescriptorParser class, which builds a Descriptor
from a line stream, and convenience functions for parsing from streams
and files.

Each non-empty line starts with a tag (info, common, page, chars, char,
kernings, kerning) followed by whitespace separated `key=value` attributes.
Values are bare tokens or double-quoted strings. Unknown tags and keys are
skipped; repeated ids overwrite earlier records.
"""

import io
import re
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

from bmrot.domain import (
    Channel,
    ChannelInfo,
    Char,
    CharPair,
    Descriptor,
    Kerning,
    Padding,
    Page,
    Spacing,
)
from bmrot.exceptions import MalformedValueError, SourceUnavailableError

DEFAULT_SOURCE_NAME = "bmfont"

_INTEGER = re.compile(r"[+-]?\d+")


def _to_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError("expected an integer")
    return int(value)


def _to_bool(value: str) -> bool:
    return _to_int(value) != 0


def _to_str(value: str) -> str:
    return value


def _to_int_list(value: str, count: int) -> list[int]:
    parts = value.split(",")
    if len(parts) != count:
        raise ValueError(f"expected {count} comma-separated integers")
    return [_to_int(part) for part in parts]


def _to_padding(value: str) -> Padding:
    up, right, down, left = _to_int_list(value, 4)
    return Padding(up=up, right=right, down=down, left=left)


def _to_spacing(value: str) -> Spacing:
    horizontal, vertical = _to_int_list(value, 2)
    return Spacing(horizontal=horizontal, vertical=vertical)


def _to_channel_info(value: str) -> ChannelInfo:
    code = _to_int(value)
    try:
        return ChannelInfo(code)
    except ValueError:
        # The content codes form a closed set; other values have no member to hold them
        raise ValueError(f"unknown channel content code {code}") from None


def _to_channel(value: str) -> Channel:
    flags = _to_int(value)
    if flags < 0:
        raise ValueError("channel flags must not be negative")
    return Channel(flags)


# Attribute key -> (record field, converter), per tag
FieldTable = dict[str, tuple[str, Callable[[str], Any]]]

INFO_FIELDS: FieldTable = {
    "face": ("face", _to_str),
    "size": ("size", _to_int),
    "bold": ("bold", _to_bool),
    "italic": ("italic", _to_bool),
    "charset": ("charset", _to_str),
    "unicode": ("unicode", _to_bool),
    "stretchH": ("stretch_h", _to_int),
    "smooth": ("smooth", _to_bool),
    "aa": ("aa", _to_int),
    "padding": ("padding", _to_padding),
    "spacing": ("spacing", _to_spacing),
    "outline": ("outline", _to_int),
}

COMMON_FIELDS: FieldTable = {
    "lineHeight": ("line_height", _to_int),
    "base": ("base", _to_int),
    "scaleW": ("scale_w", _to_int),
    "scaleH": ("scale_h", _to_int),
    "packed": ("packed", _to_bool),
    "alphaChnl": ("alpha_channel", _to_channel_info),
    "redChnl": ("red_channel", _to_channel_info),
    "greenChnl": ("green_channel", _to_channel_info),
    "blueChnl": ("blue_channel", _to_channel_info),
}

PAGE_FIELDS: FieldTable = {
    "id": ("id", _to_int),
    "file": ("file", _to_str),
}

CHAR_FIELDS: FieldTable = {
    "id": ("id", _to_int),
    "x": ("x", _to_int),
    "y": ("y", _to_int),
    "width": ("width", _to_int),
    "height": ("height", _to_int),
    "xoffset": ("xoffset", _to_int),
    "yoffset": ("yoffset", _to_int),
    "xadvance": ("xadvance", _to_int),
    "page": ("page", _to_int),
    "chnl": ("channel", _to_channel),
}

KERNING_FIELDS: FieldTable = {
    "first": ("first", _to_int),
    "second": ("second", _to_int),
    "amount": ("amount", _to_int),
}

COUNT_FIELDS: FieldTable = {
    "count": ("count", _to_int),
}


class DescriptorParser:
    """Parses one BMFont text descriptor into a Descriptor.

    A parser instance holds the state of a single pass: the descriptor under
    construction, the current line number and the record counts declared by
    `chars` and `kernings` lines. Declared counts are informational only.

    Example:
        parser = DescriptorParser("font.fnt")
        with open("font.fnt", "rb") as stream:
            descriptor = parser.parse(stream)
        print(len(descriptor.chars), parser.declared_char_count)
    """

    def __init__(self, source: str = DEFAULT_SOURCE_NAME, encoding: str = "utf-8") -> None:
        """Initialize the parser.

        Args:
            source: Name identifying the input in error messages
            encoding: Encoding used to decode lines read as bytes
        """
        self.source = source
        self.encoding = encoding
        self.declared_char_count: int | None = None
        self.declared_kerning_count: int | None = None
        self.ignored_tags: set[str] = set()
        self._line_number = 0
        self._descriptor = Descriptor()
        self._handlers: dict[str, Callable[[str, str], None]] = {
            "info": self._parse_info,
            "common": self._parse_common,
            "page": self._parse_page,
            "chars": self._parse_chars,
            "char": self._parse_char,
            "kernings": self._parse_kernings,
            "kerning": self._parse_kerning,
        }

    def parse(self, stream: str | bytes | Iterable[str] | Iterable[bytes]) -> Descriptor:
        """Parse all lines of a stream.

        Args:
            stream: Text or binary stream, any iterable of lines, or the
                whole descriptor as a single str or bytes value

        Returns:
            The parsed descriptor

        Raises:
            SourceUnavailableError: If the stream cannot be read or decoded
            MalformedValueError: If an attribute value cannot be decoded
        """
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        elif isinstance(stream, bytes):
            stream = io.BytesIO(stream)

        for line in self._read_lines(stream):
            self._line_number += 1
            self._parse_line(line)
        return self._descriptor

    def parse_file(self, path: Path) -> Descriptor:
        """Open a descriptor file and parse it.

        Args:
            path: Path to the descriptor file

        Returns:
            The parsed descriptor

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            MalformedValueError: If an attribute value cannot be decoded
        """
        try:
            with path.open("rb") as stream:
                return self.parse(stream)
        except OSError as e:
            raise SourceUnavailableError(self.source, e.strerror or str(e)) from e

    def _read_lines(self, stream: Iterable[str] | Iterable[bytes]) -> Iterator[str]:
        try:
            for raw in stream:
                if isinstance(raw, bytes):
                    line = raw.decode(self.encoding)
                else:
                    line = raw
                if self._line_number == 0:
                    line = line.removeprefix("\ufeff")
                yield line
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(self.source, str(e)) from e

    def _parse_line(self, line: str) -> None:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return

        tag = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        handler = self._handlers.get(tag)
        if handler is None:
            self.ignored_tags.add(tag)
            return
        handler(tag, rest)

    def _split_attributes(self, tag: str, text: str) -> Iterator[tuple[str, str]]:
        """Split the attribute part of a line into (key, raw value) pairs.

        Words without `=` are skipped. Quoted values may contain whitespace.
        """
        pos = 0
        length = len(text)
        while pos < length:
            if text[pos].isspace():
                pos += 1
                continue

            end = pos
            while end < length and not text[end].isspace() and text[end] != "=":
                end += 1
            if end >= length or text[end] != "=":
                pos = end
                continue

            key = text[pos:end]
            pos = end + 1
            if pos < length and text[pos] == '"':
                close = text.find('"', pos + 1)
                if close < 0:
                    raise self._malformed(tag, key, text[pos:], "unterminated quoted string")
                yield key, text[pos + 1 : close]
                pos = close + 1
            else:
                end = pos
                while end < length and not text[end].isspace():
                    end += 1
                yield key, text[pos:end]
                pos = end

    def _decode(self, tag: str, text: str, fields: FieldTable) -> dict[str, Any]:
        """Convert the known attributes of a line into record field values."""
        values: dict[str, Any] = {}
        for key, raw in self._split_attributes(tag, text):
            entry = fields.get(key)
            if entry is None:
                continue
            name, convert = entry
            try:
                values[name] = convert(raw)
            except ValueError as e:
                raise self._malformed(tag, key, raw, str(e)) from e
        return values

    def _malformed(self, tag: str, key: str, value: str, reason: str) -> MalformedValueError:
        return MalformedValueError(
            source=self.source,
            line_number=self._line_number,
            tag=tag,
            key=key,
            value=value,
            reason=reason,
        )

    def _parse_info(self, tag: str, text: str) -> None:
        for name, value in self._decode(tag, text, INFO_FIELDS).items():
            setattr(self._descriptor.info, name, value)

    def _parse_common(self, tag: str, text: str) -> None:
        for name, value in self._decode(tag, text, COMMON_FIELDS).items():
            setattr(self._descriptor.common, name, value)

    def _parse_page(self, tag: str, text: str) -> None:
        self._descriptor.add_page(Page(**self._decode(tag, text, PAGE_FIELDS)))

    def _parse_char(self, tag: str, text: str) -> None:
        self._descriptor.add_char(Char(**self._decode(tag, text, CHAR_FIELDS)))

    def _parse_kerning(self, tag: str, text: str) -> None:
        values = self._decode(tag, text, KERNING_FIELDS)
        pair = CharPair(values.get("first", 0), values.get("second", 0))
        self._descriptor.add_kerning(pair, Kerning(values.get("amount", 0)))

    def _parse_chars(self, tag: str, text: str) -> None:
        count = self._decode(tag, text, COUNT_FIELDS).get("count")
        if count is not None:
            self.declared_char_count = count

    def _parse_kernings(self, tag: str, text: str) -> None:
        count = self._decode(tag, text, COUNT_FIELDS).get("count")
        if count is not None:
            self.declared_kerning_count = count


def parse_descriptor(
    source: str,
    stream: str | bytes | Iterable[str] | Iterable[bytes],
    encoding: str = "utf-8",
) -> Descriptor:
    """Parse a BMFont text descriptor from a stream.

    Args:
        source: Name identifying the input in error messages
        stream: Text or binary stream, any iterable of lines, or the whole
            descriptor as a single str or bytes value
        encoding: Encoding used to decode lines read as bytes

    Returns:
        The parsed descriptor

    Raises:
        SourceUnavailableError: If the stream cannot be read or decoded
        MalformedValueError: If an attribute value cannot be decoded
    """
    return DescriptorParser(source, encoding).parse(stream)


def read_descriptor(
    stream: str | bytes | Iterable[str] | Iterable[bytes],
    encoding: str = "utf-8",
) -> Descriptor:
    """Parse a BMFont text descriptor from an anonymous stream.

    Page sheet images referenced by the descriptor are not loaded.
    """
    return parse_descriptor(DEFAULT_SOURCE_NAME, stream, encoding)


def load_descriptor(path: Path | str, encoding: str = "utf-8") -> Descriptor:
    """Load a BMFont text descriptor (usually a .fnt file).

    Page sheet images referenced by the descriptor are not loaded.

    Args:
        path: Path to the descriptor file
        encoding: Encoding of the descriptor file

    Returns:
        The parsed descriptor

    Raises:
        SourceUnavailableError: If the file cannot be opened or read
        MalformedValueError: If an attribute value cannot be decoded
    """
    path = Path(path)
    return DescriptorParser(path.name, encoding).parse_file(path)
