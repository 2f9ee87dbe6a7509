"""
Main CLI application.

Entry point for textrange command.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated, NoReturn

import typer

import textrange
from textrange.cli.context import CliContext, ExitCode, configure_logging, exit_code_for
from textrange.cli.output import OutputFormat, get_output_adapter
from textrange.cli.output.terminal import TerminalOutput

if TYPE_CHECKING:
    from textrange.core.encoding.labels import EncodingLabel

# Create main app
app = typer.Typer(
    name="textrange",
    help="Detect text file encodings and decode byte ranges",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"textrange {textrange.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (YAML). Defaults to TEXTRANGE_CONFIG or .textrange.yaml"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Detect text file encodings and decode byte ranges."""
    from textrange.core.encoding import ConfigError, format_error, load_settings

    configure_logging(verbose)

    try:
        settings = load_settings(config)
    except ConfigError as e:
        _fail(format_error(e.code, e), ExitCode.CONFIG)

    ctx.obj = CliContext(verbose=verbose, settings=settings)


# Code reported for plain OSErrors, which carry no code of their own
IO_ERROR_CODE = "TXR-IO-001"


def _fail(message: str, exit_code: ExitCode) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(exit_code)


def _get_context(ctx: typer.Context) -> CliContext:
    if isinstance(ctx.obj, CliContext):
        return ctx.obj
    return CliContext()


def _resolve_format(format: str) -> OutputFormat:
    try:
        return OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


def _resolve_label(encoding: str) -> EncodingLabel:
    from textrange.core.encoding import EncodingLabel

    label = EncodingLabel.parse(encoding)
    if label is None:
        typer.echo(f"Unknown encoding: {encoding}", err=True)
        typer.echo(f"Available encodings: {', '.join(e.value for e in EncodingLabel)}", err=True)
        raise typer.Exit(ExitCode.USAGE)
    return label


# =============================================================================
# Detect Command
# =============================================================================


@app.command()
def detect(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Text file to inspect", exists=True, dir_okay=False)],
    explain: Annotated[
        bool,
        typer.Option("--explain", "-e", help="Show the byte statistics behind the guess"),
    ] = False,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
) -> None:
    """Detect the encoding of a text file."""
    from textrange.core.encoding import analyze_sample, detect_encoding, format_error
    from textrange.core.encoding.detector import read_sample

    cli = _get_context(ctx)
    adapter = get_output_adapter(_resolve_format(format), color=color)

    label = detect_encoding(file, settings=cli.settings)

    stats = None
    if explain:
        try:
            stats = analyze_sample(read_sample(file, cli.settings.sample_size))
        except OSError as e:
            _fail(format_error(IO_ERROR_CODE, e), ExitCode.FATAL)

    typer.echo(adapter.render_detection(file, label, stats))


# =============================================================================
# Read Command
# =============================================================================


@app.command()
def read(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Text file to read", exists=True, dir_okay=False)],
    start: Annotated[
        int,
        typer.Option("--start", "-s", help="First byte offset", min=0),
    ] = 0,
    end: Annotated[
        int | None,
        typer.Option("--end", help="Byte offset to stop at (exclusive). Defaults to start + chunk size"),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", "-E", help="Encoding hint. Defaults to the detected encoding"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
) -> None:
    """Decode a byte range of a text file."""
    from textrange.core.encoding import (
        InvalidWindowError,
        WindowOutOfRangeError,
        detect_encoding,
        format_error,
        read_range,
    )
    from textrange.core.paging import get_file_size

    cli = _get_context(ctx)
    output_format = _resolve_format(format)
    adapter = get_output_adapter(output_format, color=color)

    hint = _resolve_label(encoding) if encoding else detect_encoding(file, settings=cli.settings)

    try:
        if end is None:
            end = min(get_file_size(file), start + cli.settings.chunk_size)
        result = read_range(file, start, end, hint, settings=cli.settings)
    except InvalidWindowError as e:
        _fail(format_error(e.code, e), ExitCode.USAGE)
    except WindowOutOfRangeError as e:
        # Past EOF counts as an I/O failure
        _fail(format_error(e.code, e), ExitCode.FATAL)
    except OSError as e:
        _fail(format_error(IO_ERROR_CODE, e), ExitCode.FATAL)

    if isinstance(adapter, TerminalOutput):
        typer.echo(adapter.render_decode_header(result), err=True)
    elif result.is_degraded:
        typer.echo("Warning: content may be garbled (hex fallback)", err=True)

    typer.echo(adapter.render_decode(result))
    raise typer.Exit(exit_code_for(result.is_degraded))


# =============================================================================
# Utility Commands
# =============================================================================


@app.command()
def score(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Text file to score", exists=True, dir_okay=False)],
    encoding: Annotated[
        str,
        typer.Option("--encoding", "-E", help="Encoding to decode the sample with"),
    ] = "utf8",
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
) -> None:
    """Score how well the opening sample decodes under an encoding."""
    from textrange.core.encoding import decode_bytes, format_error, score_text
    from textrange.core.encoding.detector import read_sample

    cli = _get_context(ctx)
    adapter = get_output_adapter(_resolve_format(format), color=color)
    label = _resolve_label(encoding)

    try:
        sample = read_sample(file, cli.settings.sample_size)
    except OSError as e:
        _fail(format_error(IO_ERROR_CODE, e), ExitCode.FATAL)

    typer.echo(adapter.render_score(file, label, score_text(decode_bytes(sample, label))))


@app.command()
def window(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Text file to plan a window for", exists=True, dir_okay=False)],
    progress: Annotated[
        float,
        typer.Option("--progress", "-p", help="Reading position in percent", min=0, max=100),
    ] = 0.0,
    chunk_size: Annotated[
        int | None,
        typer.Option("--chunk-size", help="Chunk size in bytes. Defaults to the configured chunk size", min=1),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
) -> None:
    """Show the first byte window a reader would load at a position."""
    from textrange.core.encoding import format_error
    from textrange.core.paging import get_file_size, initial_window

    cli = _get_context(ctx)
    adapter = get_output_adapter(_resolve_format(format), color=False)

    try:
        file_size = get_file_size(file)
    except OSError as e:
        _fail(format_error(IO_ERROR_CODE, e), ExitCode.FATAL)

    planned = initial_window(
        file,
        progress,
        file_size=file_size,
        chunk_size=chunk_size or cli.settings.chunk_size,
    )
    typer.echo(adapter.render_window(planned, file_size))


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
