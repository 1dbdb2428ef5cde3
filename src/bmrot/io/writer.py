"""Diagnostic serializer for font descriptors.

This module renders a Descriptor as BMFont-style text, one line per record,
for inspection and test comparison. Kerning pairs are not emitted and string
values are not escaped, so the dump does not always parse back into an
identical descriptor.
"""

from pathlib import Path

from bmrot.domain import Char, Common, Descriptor, Info, Page
from bmrot.exceptions import DescriptorWriteError


def _flag(value: bool) -> int:
    return 1 if value else 0


def format_info(info: Info) -> str:
    """Render the `info` line."""
    padding = info.padding
    spacing = info.spacing
    return (
        f'info face="{info.face}" size={info.size} bold={_flag(info.bold)} '
        f'italic={_flag(info.italic)} charset="{info.charset}" '
        f"unicode={_flag(info.unicode)} stretchH={info.stretch_h} "
        f"smooth={_flag(info.smooth)} aa={info.aa} "
        f"padding={padding.up},{padding.right},{padding.down},{padding.left} "
        f"spacing={spacing.horizontal},{spacing.vertical} outline={info.outline}"
    )


def format_common(common: Common, page_count: int) -> str:
    """Render the `common` line.

    Args:
        common: Common record
        page_count: Number of pages, taken from the live page map

    Returns:
        The rendered line without a trailing newline
    """
    return (
        f"common lineHeight={common.line_height} base={common.base} "
        f"scaleW={common.scale_w} scaleH={common.scale_h} pages={page_count} "
        f"packed={_flag(common.packed)} alphaChnl={int(common.alpha_channel)} "
        f"redChnl={int(common.red_channel)} greenChnl={int(common.green_channel)} "
        f"blueChnl={int(common.blue_channel)}"
    )


def format_page(page: Page) -> str:
    """Render a `page` line."""
    return f'page id={page.id} file="{page.file}"'


def format_char(char: Char) -> str:
    """Render a `char` line."""
    return (
        f"char id={char.id} x={char.x} y={char.y} width={char.width} "
        f"height={char.height} xoffset={char.xoffset} yoffset={char.yoffset} "
        f"xadvance={char.xadvance} page={char.page} chnl={int(char.channel)}"
    )


def render_descriptor(descriptor: Descriptor) -> str:
    """Render a descriptor as a multi-line text dump.

    Lines appear in this order: info, common, one per page, `chars count=N`,
    one per char. Pages and chars follow the insertion order of their maps.
    Every line, including the last, ends with a newline.

    Args:
        descriptor: Descriptor to render

    Returns:
        The rendered dump
    """
    lines = [
        format_info(descriptor.info),
        format_common(descriptor.common, len(descriptor.pages)),
    ]
    lines.extend(format_page(page) for page in descriptor.pages.values())
    lines.append(f"chars count={len(descriptor.chars)}")
    lines.extend(format_char(char) for char in descriptor.chars.values())
    return "".join(f"{line}\n" for line in lines)


def write_descriptor(descriptor: Descriptor, output_path: Path) -> None:
    """Write the rendered dump of a descriptor to a file.

    Args:
        descriptor: Descriptor to render
        output_path: Destination file, overwritten if it exists

    Raises:
        DescriptorWriteError: If the file cannot be written
    """
    try:
        output_path.write_text(render_descriptor(descriptor), encoding="utf-8")
    except OSError as e:
        raise DescriptorWriteError(str(output_path), e.strerror or str(e)) from e
