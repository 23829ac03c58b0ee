"""Command-line interface for Wildmark."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from wildmark import __version__
from wildmark.config import get_settings
from wildmark.formats import HANDLER_MAP, INPUT_EXTENSIONS, get_handler
from wildmark.formatting.parser import MessageParser
from wildmark.log import get_logger, setup_logging

app = typer.Typer(
    name="wildmark",
    help="Format wildlife assistant chat messages into HTML, text, markdown or JSON.",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)

OUTPUT_SUFFIX = "-formatted"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Wildmark v{__version__}")
        raise typer.Exit()


def generate_output_path(
    input_path: Path,
    output_format: str,
    output_dir: Optional[Path] = None,
) -> Path:
    """Generate output path with -formatted suffix and the format's extension."""
    output_name = f"{input_path.stem}{OUTPUT_SUFFIX}.{output_format.lstrip('.')}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    output_format: str,
    class_name: str,
    strict_links: bool,
    verbose: bool,
) -> bool:
    """Format a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    if output_path is None:
        output_path = generate_output_path(input_path, output_format)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        handler = get_handler(output_path.suffix)()
        parser = MessageParser(trim_link_punctuation=strict_links)
        text = input_path.read_text(encoding="utf-8")
        message = parser.parse(text, class_name=class_name)
        handler.write(message, output_path)
        logger.info("Wrote %d block(s) to %s", len(message), output_path)
        console.print(f"[green]Success:[/green] {output_path}")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    output_format: str,
    class_name: str,
    strict_links: bool,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Format all message files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in INPUT_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip our own earlier output
    files = sorted(f for f in files if not f.stem.endswith(OUTPUT_SUFFIX))

    if not files:
        console.print(
            f"[yellow]No message files found in {folder_path}[/yellow]\n"
            f"Supported inputs: {', '.join(INPUT_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Formatting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Formatting {file_path.name}...")
            if process_file(
                file_path, None, output_format, class_name, strict_links, verbose
            ):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


def process_stdin(output_format: str, class_name: str, strict_links: bool) -> None:
    """Format stdin and print the result to stdout."""
    handler = get_handler(output_format)()
    message = MessageParser(trim_link_punctuation=strict_links).parse(
        sys.stdin.read(), class_name=class_name
    )
    typer.echo(handler.render(message))


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Message file, folder of message files, or '-' for stdin",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only); its extension picks the format",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: html, txt, md or json (default: html)",
    ),
    class_name: Optional[str] = typer.Option(
        None,
        "--class-name",
        "-c",
        help="CSS class for the wrapping element in HTML output",
    ),
    strict_links: bool = typer.Option(
        False,
        "--strict-links",
        "-s",
        help="Trim trailing punctuation such as a final period from links",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Format assistant chat messages.

    Examples:

        wildmark reply.txt

        wildmark reply.txt --format json

        wildmark /path/to/folder --format md

        cat reply.txt | wildmark - --strict-links
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    use_format = (output_format or settings.output_format).lstrip(".").lower()
    use_class = settings.class_name if class_name is None else class_name
    use_strict = strict_links or settings.strict_links

    try:
        get_handler(use_format)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if str(path) == "-":
        process_stdin(use_format, use_class, use_strict)
        raise typer.Exit(0)

    if not path.exists():
        console.print(f"[red]Error:[/red] Path not found: {path}")
        raise typer.Exit(1)

    if path.is_file():
        if (
            output is not None
            and output_format is not None
            and HANDLER_MAP.get(output.suffix.lower()) is not get_handler(use_format)
        ):
            console.print(
                f"[yellow]Warning:[/yellow] --format {use_format} is ignored; "
                f"the output extension {output.suffix or '(none)'} picks the format."
            )
        success = process_file(path, output, use_format, use_class, use_strict, verbose)
        raise typer.Exit(0 if success else 1)
    else:
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                f"Files will be saved alongside originals with {OUTPUT_SUFFIX} suffix."
            )

        success, fail = process_folder(path, use_format, use_class, use_strict, verbose)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
