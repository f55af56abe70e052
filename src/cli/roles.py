"""CLI commands for the ServiceDeliveryLocationRoleType hierarchy."""

from typing import Annotated

import typer

from src.cli.display import (
    console,
    create_concept_panel,
    create_concepts_table,
    print_error,
    print_warning,
)
from src.terminology import (
    RoleTypeCategory,
    get_children,
    get_concept,
    get_full_path,
    search_concepts,
)

app = typer.Typer(
    name="roles",
    help="Look up location role types.",
    no_args_is_help=True,
)


@app.command("show")
def show_command(
    code: Annotated[str, typer.Argument(help="Role type code (e.g., ICU)")],
) -> None:
    """Show a role type with its place in the hierarchy.

    Example:
        locations roles show PEDICU
    """
    concept = get_concept(code)
    if concept is None:
        print_error(f"Unknown role type code: {code}")
        raise typer.Exit(code=1)

    console.print(
        create_concept_panel(concept, get_full_path(concept.code), get_children(code))
    )


@app.command("search")
def search_command(
    query: Annotated[str, typer.Argument(help="Text to search for")],
    category: Annotated[
        RoleTypeCategory | None,
        typer.Option("--category", "-c", help="Only search one category"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", min=1, help="Maximum number of results"),
    ] = 20,
) -> None:
    """Search role types by code or display name.

    Example:
        locations roles search "intensive care"
    """
    results = search_concepts(query, category=category, limit=limit)
    if not results:
        print_warning(f"No role types match {query!r}")
        return

    console.print(create_concepts_table(results, title=f"Role types: {query}"))
