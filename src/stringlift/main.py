from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from stringlift.exceptions import ConfigError, EmptyInputError, UsageError
from stringlift.logging_config import logger, setup_logging
from stringlift.pipeline import refactor_strings
from stringlift.settings import load_settings

USAGE = "Usage: stringlift <input_path> <output_const_file> <output_source_file>"

app = typer.Typer(add_completion=False)
console = Console(stderr=True, highlight=False)


def parse_arguments(paths: Optional[List[Path]]) -> List[Path]:
    """
    Check the positional arguments.

    Raises:
        UsageError: Unless exactly three paths were given.
    """
    if not paths or len(paths) != 3:
        count = len(paths) if paths else 0
        raise UsageError(f"Expected 3 arguments, got {count}", usage=USAGE)
    return list(paths)


@app.command()
def main(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        metavar="INPUT_PATH OUTPUT_CONST_FILE OUTPUT_SOURCE_FILE",
        help="Source file or directory, constants module to write, reserved path",
        show_default=False,
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix of generated constant names"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum constant name length"),
    ignore_call: Optional[List[str]] = typer.Option(
        None, "--ignore-call", help="Extra call name whose arguments stay inline (repeatable)"
    ),
    ignore_constructor: Optional[List[str]] = typer.Option(
        None, "--ignore-constructor", help="Extra exception constructor to leave alone (repeatable)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON settings file"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report what would change without writing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Lift string literals into a generated constants module and rewrite the
    sources to reference it.
    """
    try:
        input_path, output_const_file, output_source_file = parse_arguments(paths)
    except UsageError as e:
        console.print(escape(e.usage))
        raise typer.Exit(code=1)

    setup_logging(level="DEBUG" if verbose else "INFO", force=True)

    try:
        settings = load_settings(
            config_file=config,
            extra_ignored_functions=ignore_call,
            extra_ignored_constructors=ignore_constructor,
            prefix=prefix,
            max_length=max_length,
        )
        result = refactor_strings(
            input_path,
            output_const_file,
            output_source_file,
            settings=settings,
            dry_run=dry_run,
        )
    except EmptyInputError as e:
        typer.echo(str(e))
        return
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except OSError as e:
        logger.error(f"Run aborted: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    typer.echo(f"Processed {len(result.files)} files.")
    if result.dry_run:
        typer.echo(
            f"Dry run: {result.safe_count} safe and {result.manual_count} manual constants, "
            f"{result.replacements} replacements in {len(result.modified_files)} files. Nothing written."
        )
        return

    typer.echo(f"Const strings written to {result.output_const_file}")
    typer.echo("Modified source files updated.")


if __name__ == "__main__":
    app()
