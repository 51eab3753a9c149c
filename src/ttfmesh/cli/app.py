"""CLI application entry point for ttfmesh.

This module provides the command-line tools using Typer:

- check: report whether each character of a string can be meshed
- dump: print 2D mesh vertices and faces for each character
- export: write every glyph of a font to a Wavefront .obj file
- info: show font metadata
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from ttfmesh import __version__
from ttfmesh.cli.output import (
    console,
    print_check_legend,
    print_check_result,
    print_error,
    print_font_info,
    print_font_loaded,
    print_header,
    print_mesh_data,
    print_step,
    print_success,
    print_warning,
)
from ttfmesh.config import EngineConfig, LoggingConfig, MeshConfig, TTFMeshSettings
from ttfmesh.core import Font
from ttfmesh.domain import Quality
from ttfmesh.engine import Engine, load_engine
from ttfmesh.exceptions import (
    EngineNotFoundError,
    FontError,
    FontLoadError,
    GlyphMeshError,
    GlyphNotFoundError,
    ObjExportError,
    QualityParseError,
)
from ttfmesh.io import read_font_info
from ttfmesh.utils import ConversionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="ttfmesh",
    help="Convert TrueType glyphs to 2D and 3D meshes with the ttf2mesh engine.",
    add_completion=False,
    no_args_is_help=True,
)

FontArg = Annotated[
    Path,
    typer.Argument(help="Path to input TTF font file", show_default=False),
]
QualityArg = Annotated[
    str,
    typer.Argument(help="Mesh quality: low, medium, high or an integer 0-255"),
]
LibraryOpt = Annotated[
    Path | None,
    typer.Option("--library", "-L", help="Path to the ttf2mesh shared library"),
]
LogFileOpt = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOpt = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Echo log records to the console"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]ttfmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert TrueType glyphs to 2D and 3D meshes."""


def _build_settings(
    library: Path | None,
    quality: str = "medium",
    depth: float = 0.5,
    log_file: Path | None = None,
    log_level: str = "WARNING",
) -> TTFMeshSettings:
    """Create settings from CLI arguments, exiting on invalid quality."""
    try:
        Quality.parse(quality)
    except QualityParseError as e:
        print_error(
            f"Can not parse quality ({e.text})",
            details="Try 'low', 'medium', 'high' or an integer from 0 to 255",
        )
        raise typer.Exit(code=1) from None

    try:
        return TTFMeshSettings(
            engine=EngineConfig(library_path=library),
            mesh=MeshConfig(quality=quality, depth=depth),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1) from None


def _load_engine(settings: TTFMeshSettings) -> Engine:
    try:
        return load_engine(settings.engine)
    except EngineNotFoundError as e:
        print_error(
            "ttf2mesh library not available",
            details=f"{e}. Use --library or set $TTFMESH_LIBRARY.",
        )
        raise typer.Exit(code=1) from None


def _open_font(font_path: Path, engine: Engine) -> Font:
    """Load a font through the engine, exiting with a diagnostic on failure."""
    try:
        return Font.from_path(font_path, engine=engine)
    except FontLoadError as e:
        print_error(
            f"Could not load font: {e.reason.message}",
            details=f"{e.reason.kind.name} (status {e.reason.code})",
        )
        raise typer.Exit(code=1) from None
    except FontError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def _conversion_logger(settings: TTFMeshSettings, verbose: bool) -> ConversionLogger:
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=not verbose,
    )
    return ConversionLogger(logger)


@app.command()
def check(
    font_path: FontArg,
    text: Annotated[str, typer.Argument(help="Characters to check", show_default=False)],
    depth: Annotated[
        float,
        typer.Option("--depth", "-d", help="Extrusion depth for the 3D mesh"),
    ] = 0.5,
    library: LibraryOpt = None,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
) -> None:
    """Check whether each character of TEXT can be meshed.

    Prints OK (x, y) with the 2D and 3D vertex counts at medium quality, or
    ERR if the font has no glyph for the character.
    """
    settings = _build_settings(library, depth=depth, log_file=log_file, log_level=log_level)
    quality = settings.mesh.get_quality()
    engine = _load_engine(settings)
    tracker = _conversion_logger(settings, verbose)

    print_header(__version__)
    print_step("Loading font")
    with _open_font(font_path, engine) as font:
        print_font_loaded(str(font_path), font.glyph_count)
        print_step(f"Input string: {text!r}")
        tracker.start(font.source, text)

        for char in text:
            try:
                glyph = font.glyph_by_char(char)
            except GlyphNotFoundError:
                tracker.log_missing(char)
                print_check_result(char, None)
                continue

            vertices_2d = vertices_3d = 0
            try:
                with glyph.to_2d_mesh(quality) as mesh_2d:
                    vertices_2d = mesh_2d.vertex_count
                    tracker.log_converted(char, glyph.index, vertices_2d, mesh_2d.face_count)
            except GlyphMeshError as e:
                tracker.log_mesh_error(char, glyph.index, e.reason)

            try:
                with glyph.to_3d_mesh(quality, settings.mesh.depth) as mesh_3d:
                    vertices_3d = mesh_3d.vertex_count
            except GlyphMeshError as e:
                tracker.log_mesh_error(char, glyph.index, e.reason)

            print_check_result(char, (vertices_2d, vertices_3d))

        tracker.finish()

    print_check_legend()


@app.command()
def dump(
    font_path: FontArg,
    text: Annotated[str, typer.Argument(help="Characters to dump", show_default=False)],
    quality: QualityArg = "medium",
    library: LibraryOpt = None,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
) -> None:
    """Print 2D mesh vertices and faces for each character of TEXT."""
    settings = _build_settings(library, quality, log_file=log_file, log_level=log_level)
    mesh_quality = settings.mesh.get_quality()
    engine = _load_engine(settings)
    tracker = _conversion_logger(settings, verbose)

    with _open_font(font_path, engine) as font:
        tracker.start(font.source, text)

        for char in text:
            try:
                glyph = font.glyph_by_char(char)
            except GlyphNotFoundError as e:
                tracker.log_missing(char)
                print_warning(f"{char!r}: can not find glyph in the font file: {e}")
                continue

            try:
                with glyph.to_2d_mesh(mesh_quality) as mesh:
                    print_mesh_data(char, mesh.iter_vertices(), mesh.iter_faces())
                    tracker.log_converted(char, glyph.index, mesh.vertex_count, mesh.face_count)
            except GlyphMeshError as e:
                tracker.log_mesh_error(char, glyph.index, e.reason)
                print_warning(f"{char!r}: could not generate 2D mesh: {e.reason}")

        tracker.finish()


@app.command()
def export(
    font_path: FontArg,
    output: Annotated[Path, typer.Argument(help="Output .obj file", show_default=False)],
    quality: QualityArg = "medium",
    library: LibraryOpt = None,
) -> None:
    """Export every glyph of a font as 2D meshes to a Wavefront .obj file."""
    settings = _build_settings(library, quality)
    mesh_quality = settings.mesh.get_quality()
    engine = _load_engine(settings)

    print_step(f"Loading font {font_path}")
    with _open_font(font_path, engine) as font:
        print_step(f"Export to obj {output} with quality={mesh_quality}")
        try:
            font.export_to_obj(output, mesh_quality)
        except ObjExportError as e:
            print_error(
                f"Export failed: {e.reason.message}",
                details=f"{e.reason.kind.name} (status {e.reason.code})",
            )
            raise typer.Exit(code=1) from None

    print_success(f"Done: {output}")


@app.command()
def info(
    font_path: FontArg,
    library: LibraryOpt = None,
) -> None:
    """Show font names, format and glyph counts."""
    try:
        font_info = read_font_info(font_path)
    except FontError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    engine_glyphs: int | None = None
    try:
        engine = load_engine(EngineConfig(library_path=library))
    except EngineNotFoundError as e:
        print_warning(f"engine unavailable: {e}")
    else:
        with _open_font(font_path, engine) as font:
            engine_glyphs = font.glyph_count

    print_font_info(str(font_path), font_info, engine_glyphs)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
