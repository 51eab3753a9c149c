"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and mesh data listings.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from ttfmesh.io import FontInfo

console = Console()

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
    console.print(f"\n[bold]ttfmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_loaded(font_path: str, glyph_count: int) -> None:
    """Print the engine's view of a loaded font."""
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    line.append(f" {SYM_DOT} {glyph_count:,} glyphs")
    console.print(line)


def print_font_info(font_path: str, info: FontInfo, engine_glyphs: int | None) -> None:
    """Print font metadata.

    Args:
        font_path: Path to the font file
        info: Metadata read with fontTools
        engine_glyphs: Glyph count reported by the engine, if loaded
    """
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({info.format})")
    console.print(line)
    console.print(Text(f"  {info.display_name}"))
    console.print(f"  {info.glyph_count:,} glyphs {SYM_DOT} {info.units_per_em:,} UPM")
    if engine_glyphs is not None:
        console.print(f"  {engine_glyphs:,} glyphs decoded by engine")


def print_check_result(char: str, result: tuple[int, int] | None) -> None:
    """Print one line of the check report.

    Args:
        char: Character checked
        result: (2D vertex count, 3D vertex count), or None if no glyph
    """
    line = Text(f"  {char} = ")
    if result is None:
        line.append("ERR", style="red")
    else:
        style = "green" if all(result) else "yellow"
        line.append(f"OK ({result[0]}, {result[1]})", style=style)
    console.print(line)


def print_check_legend() -> None:
    """Explain the check report columns."""
    console.print(
        "\n  OK (x, y): x = 2D vertex count, y = 3D vertex count, both at medium quality"
    )
    console.print("  (0, 0) means the glyph exists but no mesh could be generated")


def print_mesh_data(
    char: str,
    vertices: Iterable[tuple[float, float]],
    faces: Iterable[tuple[int, int, int]],
) -> None:
    """Print the vertices and faces of a 2D mesh.

    Args:
        char: Character the mesh was generated for
        vertices: (x, y) pairs
        faces: Vertex index triples
    """
    console.print(Text(f"\nMesh data char {char!r}"))
    vertex_str = ", ".join(f"({x:.3f}, {y:.2f})" for x, y in vertices)
    face_str = ", ".join(f"({a}, {b}, {c})" for a, b, c in faces)
    console.print(Text(f"  vertices: [{vertex_str}]"))
    console.print(Text(f"  faces: [{face_str}]"))


def print_warning(message: str) -> None:
    """Print a non-fatal problem."""
    console.print(Text(f"  {SYM_DOT} {message}", style="yellow"))


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


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
