import click
from shapecheck_cli.check.schema import schema
from shapecheck_cli.check.validate import validate


@click.group()
def cli():
    """Check runtime values against schema types."""
    pass


# add cli commands here

cli.add_command(validate)
cli.add_command(schema)
