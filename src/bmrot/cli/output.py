"""Rich console output helpers for the CLI.

Status messages go to stderr so that the descriptor dump printed on stdout
can be piped or redirected unchanged.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bmrot[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    pages: int,
    chars: int,
    turns: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        pages: Number of atlas pages
        chars: Number of glyphs rotated
        turns: Number of quarter turns applied
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(f"  {pages} pages {SYM_DOT} {chars} glyphs {SYM_DOT} {turns * 90}° clockwise")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message))
    if details:
        console.print(Text(f"  {details}"))
