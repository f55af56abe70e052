"""Main CLI entry point for Location documents."""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from src.cli.codes import app as codes_app
from src.cli.display import console, print_error
from src.cli.documents import app as document_app
from src.cli.roles import app as roles_app
from src.core.config import CodecConfig

# Create main Typer app
app = typer.Typer(
    name="locations",
    help="Decode FHIR Location documents and browse their code lists.",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(document_app, name="document")
app.add_typer(codes_app, name="codes")
app.add_typer(roles_app, name="roles")


@app.callback()
def configure(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-l",
            help="Log level (default: LOCATION_LOG_LEVEL or WARNING)",
        ),
    ] = None,
) -> None:
    """Decode FHIR Location documents and browse their code lists."""
    if log_level is None:
        try:
            log_level = CodecConfig.from_env().log_level
        except ValueError as e:
            print_error(f"Configuration error: {e}")
            raise typer.Exit(code=1) from None

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        print_error(f"Unknown log level: {log_level}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    logging.getLogger("src").setLevel(level)


def main() -> None:
    """Entry point for the locations CLI."""
    app()


if __name__ == "__main__":
    main()
