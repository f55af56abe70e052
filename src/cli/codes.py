"""CLI commands for browsing the code lists."""

from typing import Annotated

import typer

from src.cli.display import (
    console,
    create_code_system_table,
    create_code_systems_table,
    format_code,
    print_error,
    print_info,
    print_warning,
)
from src.core.errors import UnrecognizedCodeError
from src.models.coding import ClosedEnum, CodeEnum, UnknownCode
from src.models.registry import CODE_SYSTEMS, get_code_system

app = typer.Typer(
    name="codes",
    help="Browse the code lists used by Location documents.",
    no_args_is_help=True,
)


def _require_code_system(name: str) -> type[CodeEnum]:
    enum_cls = get_code_system(name)
    if enum_cls is None:
        print_error(f"Unknown code system: {name}")
        print_info(f"Available: {', '.join(CODE_SYSTEMS)}")
        raise typer.Exit(code=1)
    return enum_cls


@app.command("list")
def list_command(
    name: Annotated[
        str | None,
        typer.Argument(help="Code system to list (e.g., LocationStatus)"),
    ] = None,
) -> None:
    """List the code systems, or the codes of one code system.

    Example:
        locations codes list
        locations codes list LocationOperationalStatus
    """
    if name is None:
        console.print(create_code_systems_table(dict(CODE_SYSTEMS)))
        return

    console.print(create_code_system_table(_require_code_system(name)))


@app.command("lookup")
def lookup_command(
    name: Annotated[str, typer.Argument(help="Code system name")],
    code: Annotated[str, typer.Argument(help="Code to decode")],
) -> None:
    """Decode a single code the way a document field would.

    Extensible code lists match ignoring case and keep unknown codes;
    closed code lists only accept their exact codes.

    Example:
        locations codes lookup LocationStatus ACTIVE
    """
    enum_cls = _require_code_system(name)

    try:
        value = enum_cls.decode(code)  # type: ignore[attr-defined]
    except UnrecognizedCodeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    line = format_code(value)
    if isinstance(value, UnknownCode):
        console.print(line)
        print_warning(f"{code!r} is not a known {enum_cls.__name__} code")
        return

    line.append(f"  {value.name}", style="white")
    console.print(line)
    if not issubclass(enum_cls, ClosedEnum) and value.value != code:
        print_info(f"Matched {code!r} to canonical code {value.value!r}")
