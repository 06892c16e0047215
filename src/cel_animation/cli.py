"""CLI interface for cel-animation."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .console_printer import CelAnimationConsolePrinter
from .constants import DEFAULT_FRAME_RATE, DEFAULT_SELECTOR, INFINITE
from .declarations import IterationCount, StyleOutput
from .errors import CelAnimationError
from .generator import generate
from .images import CelImage, load_cel_images
from .output import CssOutputProvider, resolve_output_provider, supported_output_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    cels: list[int] = typer.Argument(
        ...,
        help="Frames each child stays visible, in order (positive integers)",
    ),
    frame_rate: float = typer.Option(
        DEFAULT_FRAME_RATE,
        "--frame-rate",
        "-r",
        envvar="CEL_ANIMATION_FRAME_RATE",
        help="Seconds each frame stays on screen",
    ),
    alternate: bool = typer.Option(
        False,
        "--alternate",
        "-a",
        help="Play the sequence forward, then backward",
    ),
    iterations: str = typer.Option(
        INFINITE,
        "--iterations",
        "-n",
        envvar="CEL_ANIMATION_ITERATIONS",
        help=f"Number of passes, or '{INFINITE}'",
    ),
    selector: str = typer.Option(
        DEFAULT_SELECTOR,
        "--selector",
        "-s",
        envvar="CEL_ANIMATION_SELECTOR",
        help="CSS selector of the container whose children are the cels",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Write the animation to a file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    images: list[str] = typer.Option(
        None,
        "--image",
        "-i",
        help="Image file for a cel in the HTML preview (repeat once per cel)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """
    Generate a stepped CSS cel animation from per-child frame counts.

    Examples:
      # Three equal cels, printed to stdout
      cel-animation 1 1 1

      # Ping-pong twice at 10 frames per second into a stylesheet
      cel-animation 3 1 2 --frame-rate 0.1 --alternate --iterations 2 -o cels.css

      # Preview with real images
      cel-animation 2 2 -o preview.html -i walk-1.png -i walk-2.png
    """
    if verbose:
        _configure_logging()

    try:
        if images and not (out and Path(out).suffix.lower() == ".html"):
            raise CLIError("--image requires an .html --output")
        if images and len(images) != len(cels):
            raise CLIError(
                f"Got {len(images)} images for {len(cels)} cels. Pass one --image per cel."
            )

        style = _generate_style(cels, frame_rate, alternate, _parse_iterations(iterations))

        # Keep stdout clean for the stylesheet when no output file is given
        printer = CelAnimationConsolePrinter(console if out else err_console)
        printer.display_stats(style)
        printer.display_timeline(style)

        if out:
            cel_images = _load_images(images) if images else ()
            _write_output(style, out, selector, cel_images)
        else:
            typer.echo(CssOutputProvider(selector=selector).encode(style).decode("utf-8"), nl=False)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging() -> None:
    logger = logging.getLogger("cel_animation")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _parse_iterations(value: str) -> IterationCount:
    """Parse an iteration count option: a positive integer or the infinite symbol."""
    text = value.strip().lower()
    if text == INFINITE:
        return INFINITE
    try:
        return int(text)
    except ValueError:
        raise CLIError(f"Iterations must be a positive integer or '{INFINITE}' (got '{value}')")


def _generate_style(
    cels: list[int],
    frame_rate: float,
    alternate: bool,
    iterations: IterationCount,
) -> StyleOutput:
    try:
        return generate(cels, frame_rate=frame_rate, alternate=alternate, iterations=iterations)
    except CelAnimationError as e:
        raise CLIError(str(e))


def _load_images(paths: list[str]) -> tuple[CelImage, ...]:
    console.print(f"[bold blue]Loading {len(paths)} cel images...[/bold blue]")
    try:
        return load_cel_images(paths)
    except CelAnimationError as e:
        raise CLIError(str(e))


def _write_output(
    style: StyleOutput,
    output_path: str,
    selector: str,
    images: tuple[CelImage, ...],
) -> None:
    """Encode and write the animation in the format given by the output path."""
    options = {"images": images} if images else {}
    try:
        provider = resolve_output_provider(output_path, selector, **options)
        encoded = provider.encode(style)
    except ValueError as e:
        raise CLIError(str(e))

    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        provider.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
# Negative cels reach validation instead of being parsed as options
app.command(context_settings={"ignore_unknown_options": True})(main)

if __name__ == "__main__":
    app()
