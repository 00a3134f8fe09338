from typing import Optional

import click


@click.command("validate")
@click.argument("schema_path", type=click.Path(path_type=str, dir_okay=False, exists=True))
@click.argument("data_path", type=click.Path(path_type=str, dir_okay=False, exists=True))
@click.option(
    "--type",
    "type_ref",
    required=True,
    help="Type reference to check the data against, e.g. 'User!' or '[User!]!'.",
)
@click.option(
    "--strict/--loose",
    default=None,
    help="Report None in nullable fields (strict) or accept it (loose). Default from config.",
)
@click.option(
    "--deep/--shallow",
    default=None,
    help="Recurse into nested object fields. Default from config.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Number of messages kept in the failure summary.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str, dir_okay=False, exists=False),
    default="shapecheck.yaml",
    show_default=True,
    help="Options YAML (strict, deep, summary_limit). Ignored when missing.",
)
@click.option(
    "--scalars",
    "scalars_path",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    help="YAML mapping of custom scalar tags to accepted value categories.",
)
@click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    help="Export validation errors to YAML file.",
)
@click.option("--verbose", is_flag=True, help="Log validation progress.")
def validate(
    schema_path: str,
    data_path: str,
    type_ref: str,
    strict: Optional[bool],
    deep: Optional[bool],
    limit: Optional[int],
    config_path: str,
    scalars_path: Optional[str],
    export: Optional[str],
    verbose: bool,
) -> None:
    """Check a YAML/JSON value document against a type from a schema document."""
    import logging
    import sys

    import yaml
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text
    from shapecheck_core.codebase.debug import configure_logging
    from shapecheck_core.config import load_options
    from shapecheck_core.data.loader import read_yaml
    from shapecheck_core.data.scalars import DEFAULT_SCALARS, load_scalar_mapping
    from shapecheck_core.data.schema_loader import load_schema
    from shapecheck_core.validation import format_errors, summarize
    from shapecheck_core.validation import validate as validate_value

    console = Console()
    if verbose:
        configure_logging(logging.DEBUG)

    try:
        options = load_options(config_path)
        overrides = {"strict": strict, "deep": deep, "summary_limit": limit}
        options = options.model_copy(update={k: v for k, v in overrides.items() if v is not None})

        scalars = load_scalar_mapping(scalars_path) if scalars_path else DEFAULT_SCALARS
        schema = load_schema(schema_path, scalars=scalars)
        type_node = schema.type(type_ref)
        data = read_yaml(data_path)

        console.print(f"\n[bold cyan]Schema Validation[/bold cyan] {escape(data_path)} against {escape(str(type_node))}")
        errors = validate_value(data, type_node, options.context(), scalars=schema.scalars)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error during validation: {escape(str(e))}[/red]")
        sys.exit(2)

    messages = format_errors(errors)

    if export:
        with open(export, "w") as f:
            yaml.dump(
                {
                    "type": str(type_node),
                    "strict": options.strict,
                    "deep": options.deep,
                    "errors": [error.model_dump(mode="json") for error in errors],
                    "messages": messages,
                },
                f,
                default_flow_style=False,
                sort_keys=True,
            )
        console.print(f"[green]✓[/green] Errors exported to {escape(export)}")

    if not errors:
        console.print(f"\n[green]✓[/green] {escape(data_path)} conforms to {escape(str(type_node))}")
        sys.exit(0)

    table = Table(title="Conformance Errors")
    table.add_column("Path", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Message")
    for error, message in zip(errors, messages):
        table.add_row(Text(error.path), error.kind.value, Text(message))
    console.print(table)

    console.print(f"\n[red]✗[/red] Validation failed with {len(errors)} errors:")
    console.print(summarize(messages, limit=options.summary_limit), markup=False, highlight=False)
    sys.exit(1)
