"""Processing orchestration for the rotation pipeline.

This module coordinates the full workflow: load a descriptor file, rotate it
the configured number of times and render the diagnostic dump.

Key components:
- FontRotator: Main orchestrator class for descriptor processing
"""

import time
from pathlib import Path

from bmrot.config import BmrotSettings
from bmrot.core.rotation import rotate_times
from bmrot.domain import Descriptor
from bmrot.io import DescriptorParser, render_descriptor, write_descriptor
from bmrot.utils import RotationStats, configure_logging


class FontRotator:
    """Orchestrates loading, rotating and rendering a font descriptor.

    Manages the complete workflow:
    1. Parse the descriptor file
    2. Report declared record counts that do not match the parsed records
    3. Rotate the descriptor in place
    4. Render the dump and optionally write it to a file

    Example:
        settings = BmrotSettings()
        rotator = FontRotator(settings)
        dump, stats = rotator.process(Path("font.fnt"))
    """

    def __init__(self, config: BmrotSettings) -> None:
        """Initialize the rotator with configuration.

        Args:
            config: bmrot settings containing rotation, parser and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )

    def load(self, font_path: Path) -> Descriptor:
        """Parse a descriptor file and log what was found.

        Args:
            font_path: Path to the descriptor file

        Returns:
            The parsed descriptor

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            MalformedValueError: If the file contains a malformed value
        """
        parser = DescriptorParser(font_path.name, self.config.parser.encoding)
        descriptor = parser.parse_file(font_path)

        self.logger.info(
            "Descriptor loaded",
            source=parser.source,
            pages=len(descriptor.pages),
            chars=len(descriptor.chars),
            kernings=len(descriptor.kerning),
        )

        if parser.ignored_tags:
            self.logger.debug("Ignored unknown tags", tags=sorted(parser.ignored_tags))

        declared_chars = parser.declared_char_count
        if declared_chars is not None and declared_chars != len(descriptor.chars):
            self.logger.warning(
                "Declared char count does not match",
                declared=declared_chars,
                found=len(descriptor.chars),
            )

        declared_kernings = parser.declared_kerning_count
        if declared_kernings is not None and declared_kernings != len(descriptor.kerning):
            self.logger.warning(
                "Declared kerning count does not match",
                declared=declared_kernings,
                found=len(descriptor.kerning),
            )

        return descriptor

    def process(
        self,
        font_path: Path,
        output_path: Path | None = None,
    ) -> tuple[str, RotationStats]:
        """Rotate a descriptor file and render the result.

        Args:
            font_path: Path to the input descriptor file
            output_path: If given, the dump is also written to this file

        Returns:
            Tuple of (rendered dump, run statistics)

        Raises:
            SourceUnavailableError: If the input cannot be opened or read
            MalformedValueError: If the input contains a malformed value
            DescriptorWriteError: If the output file cannot be written
        """
        stats = RotationStats()
        stats.start_time = time.time()

        self.logger.info(
            "Starting descriptor processing",
            input=str(font_path),
            output=str(output_path) if output_path else None,
            turns=self.config.rotation.turns,
        )

        descriptor = self.load(font_path)

        rotate_times(descriptor, self.config.rotation.turns)
        stats.turns = self.config.rotation.turns

        self.logger.debug(
            "Descriptor rotated",
            turns=stats.turns,
            scale_w=descriptor.common.scale_w,
            scale_h=descriptor.common.scale_h,
            line_height=descriptor.common.line_height,
        )

        dump = render_descriptor(descriptor)
        if output_path is not None:
            write_descriptor(descriptor, output_path)
            self.logger.info("Descriptor written", output=str(output_path))

        stats.page_count = len(descriptor.pages)
        stats.char_count = len(descriptor.chars)
        stats.kerning_count = len(descriptor.kerning)
        stats.end_time = time.time()

        return dump, stats
