"""Rich display utilities for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.models.coding import ClosedEnum, CodeEnum, UnknownCode
from src.models.location import Location
from src.terminology.models import RoleTypeConcept

console = Console()


def format_code(value: CodeEnum | UnknownCode) -> Text:
    """Format a coded value, highlighting codes outside their code list.

    Args:
        value: Decoded coded value.

    Returns:
        Colored text representation.
    """
    if isinstance(value, UnknownCode):
        return Text(f"{value.value} (unknown)", style="yellow")
    return Text(value.value, style="green")


def format_codes(values: tuple[CodeEnum | UnknownCode, ...]) -> Text:
    """Format a sequence of coded values as a comma-separated line."""
    text = Text()
    for index, value in enumerate(values):
        if index:
            text.append(", ")
        text.append_text(format_code(value))
    return text


def create_location_panel(location: Location, verbose: bool = False) -> Panel:
    """Create a panel displaying a decoded location.

    Args:
        location: Location to display.
        verbose: Whether to include contact and opening-hours details.

    Returns:
        Rich Panel object.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Name", escape(location.name))
    table.add_row("Status", format_code(location.status))
    table.add_row("Operational status", format_code(location.operational_status))
    table.add_row("Mode", format_code(location.mode))
    table.add_row("Physical type", format_code(location.physical_type))
    table.add_row("Types", format_codes(location.types) if location.types else "-")
    table.add_row(
        "City", escape(f"{location.address.city}, {location.address.country}")
    )
    table.add_row("Managed by", escape(location.managing_organization.name))

    ancestors = location.ancestors()
    if ancestors:
        path = " > ".join(a.name for a in reversed(ancestors))
        table.add_row("Part of", escape(path))

    if verbose:
        table.add_row("Aliases", escape(", ".join(location.aliases)) or "-")
        for telecom in location.telecoms:
            line = Text()
            line.append_text(format_code(telecom.system))
            line.append(f" {telecom.value} ")
            line.append_text(format_code(telecom.use))
            table.add_row("Telecom", line)
        hours = location.hours_of_operation
        table.add_row(
            "Hours",
            f"{hours.days_of_week.value} "
            + (
                "all day"
                if hours.all_day
                else f"{hours.opening_time:%H:%M}-{hours.closing_time:%H:%M}"
            ),
        )
        if location.availability_exceptions:
            table.add_row("Exceptions", escape(location.availability_exceptions))

    return Panel(
        table,
        title=f"[bold]Location: {escape(location.name)}[/bold]",
        border_style="blue",
    )


def create_unknown_codes_table(unknown: list[tuple[str, UnknownCode]]) -> Table:
    """Create a table listing codes that fell outside their code lists.

    Args:
        unknown: (field path, unknown code) pairs.

    Returns:
        Rich Table object.
    """
    table = Table(title="Unrecognized Codes", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Code System", style="white")
    table.add_column("Code", style="yellow")

    for path, code in unknown:
        table.add_row(escape(path), code.code_system.__name__, escape(code.value))

    return table


def create_code_systems_table(systems: dict[str, type[CodeEnum]]) -> Table:
    """Create a table summarizing the available code lists."""
    table = Table(title="Code Systems", show_header=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Kind", style="white")
    table.add_column("Codes", justify="right")

    for name, enum_cls in systems.items():
        kind = "closed" if issubclass(enum_cls, ClosedEnum) else "extensible"
        table.add_row(name, kind, str(len(enum_cls)))

    return table


def create_code_system_table(enum_cls: type[CodeEnum]) -> Table:
    """Create a table listing the members of a code list."""
    table = Table(title=enum_cls.__name__, show_header=True)
    table.add_column("Code", style="green", no_wrap=True)
    table.add_column("Name", style="white")

    for member in enum_cls:
        table.add_row(member.value, member.name)

    return table


def create_concepts_table(concepts: list[RoleTypeConcept], title: str) -> Table:
    """Create a table listing role type concepts."""
    table = Table(title=title, show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Display", style="white")
    table.add_column("Category", style="dim")

    for concept in concepts:
        table.add_row(concept.code, concept.display, concept.category.value)

    return table


def create_concept_panel(
    concept: RoleTypeConcept,
    full_path: str | None,
    children: list[RoleTypeConcept],
) -> Panel:
    """Create a panel displaying a role type concept and its neighbours."""
    lines = [
        f"[bold]Code:[/bold] {concept.code}",
        f"[bold]Display:[/bold] {concept.display}",
        f"[bold]Category:[/bold] {concept.category.value}",
        f"[bold]Level:[/bold] {concept.level}",
    ]
    if full_path:
        lines.append(f"[bold]Path:[/bold] {full_path}")
    if children:
        lines.extend(["", "[bold cyan]Children[/bold cyan]"])
        lines.extend(f"  {child.code}: {child.display}" for child in children)

    return Panel(
        "\n".join(lines),
        title=f"[bold]Role type: {concept.code}[/bold]",
        border_style="blue",
    )


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: Error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message to display.
    """
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: Warning message to display.
    """
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message to display.
    """
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
