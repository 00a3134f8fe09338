from typing import Optional

import click


@click.command("schema")
@click.argument("schema_path", type=click.Path(path_type=str, dir_okay=False, exists=True))
@click.option("--type", "type_name", help="Only show this object type.")
@click.option(
    "--scalars",
    "scalars_path",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    help="YAML mapping of custom scalar tags to accepted value categories.",
)
def schema(schema_path: str, type_name: Optional[str], scalars_path: Optional[str]) -> None:
    """Show the object types of a schema document and their fields."""
    import sys

    from rich.console import Console
    from rich.markup import escape
    from rich.tree import Tree
    from shapecheck_core.data.scalars import DEFAULT_SCALARS, load_scalar_mapping
    from shapecheck_core.data.schema_loader import load_schema

    console = Console()

    try:
        scalars = load_scalar_mapping(scalars_path) if scalars_path else DEFAULT_SCALARS
        loaded = load_schema(schema_path, scalars=scalars)
        definitions = [loaded.object(type_name)] if type_name else loaded.objects()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading schema: {escape(str(e))}[/red]")
        sys.exit(2)

    root = Tree(f"[bold cyan]{escape(schema_path)}[/bold cyan]")
    for definition in definitions:
        branch = root.add(f"[bold]{escape(definition.name)}[/bold]")
        for field in definition.fields:
            label = f"{escape(field.name)}: [green]{escape(field.type.to_type_string())}[/green]"
            if field.accessor != field.name:
                label += f" [dim](accessor {escape(field.accessor)})[/dim]"
            branch.add(label)
    console.print(root)
