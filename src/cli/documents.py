"""CLI commands for decoding Location documents.

This module provides Typer-based CLI commands that decode Location JSON
documents, show the decoded record, and report codes that fell outside
their code lists.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from src.cli.display import (
    console,
    create_location_panel,
    create_unknown_codes_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from src.codec import dumps_location, find_unknown_codes, load_location_file
from src.core.config import CodecConfig
from src.core.errors import DecodeError

logger = logging.getLogger(__name__)

# Create Typer app for document commands
app = typer.Typer(
    name="document",
    help="Decode and check Location documents.",
    no_args_is_help=True,
)


def _load_config() -> CodecConfig:
    try:
        return CodecConfig.from_env()
    except ValueError as e:
        print_error(f"Configuration error: {e}")
        raise typer.Exit(code=1) from None


@app.command("decode")
def decode_command(
    file_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a Location JSON document",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ],
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Print the canonical re-encoding instead of a summary",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show contact points, opening hours and aliases",
        ),
    ] = False,
) -> None:
    """Decode a Location document.

    Unrecognized codes are kept as-is and listed after the summary. Any
    structural problem (missing field, wrong type, unknown day of week)
    fails the decode.

    Example:
        locations document decode examples/ward.json
    """
    config = _load_config()

    try:
        location = load_location_file(file_path, config=config)
    except DecodeError as e:
        print_error(str(e))
        if e.record:
            print_info(f"Record: {e.record}, field: {e.path or e.field or '-'}")
        raise typer.Exit(code=1) from None
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if output_json:
        console.print_json(dumps_location(location))
        return

    console.print()
    console.print(create_location_panel(location, verbose=verbose))

    unknown = find_unknown_codes(location)
    if unknown:
        console.print()
        console.print(create_unknown_codes_table(unknown))
        print_warning(f"{len(unknown)} unrecognized code(s) kept as received")
    else:
        print_success("All codes recognized")


@app.command("check")
def check_command(
    file_paths: Annotated[
        list[Path],
        typer.Argument(
            help="Location JSON documents to check",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Check that Location documents decode.

    Exits with code 1 if any document fails to decode.

    Example:
        locations document check data/locations/*.json
    """
    config = _load_config()

    table = Table(title="Location Documents", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Result", justify="center")
    table.add_column("Detail", style="white")

    failures = 0
    for file_path in file_paths:
        try:
            location = load_location_file(file_path, config=config)
        except (DecodeError, FileNotFoundError) as e:
            failures += 1
            logger.info("Document %s failed to decode: %s", file_path, e)
            table.add_row(escape(file_path.name), "[red]FAIL[/red]", escape(str(e)))
            continue

        unknown = find_unknown_codes(location)
        detail = f"{len(unknown)} unrecognized code(s)" if unknown else ""
        table.add_row(escape(file_path.name), "[green]OK[/green]", detail)

    console.print(table)

    if failures:
        print_error(f"{failures} of {len(file_paths)} document(s) failed to decode")
        raise typer.Exit(code=1)
    print_success(f"{len(file_paths)} document(s) decoded")
