"""Shape command implementations."""

import click

from obake.cli.errors import exit_on_error
from obake.services import ConfigResolver, ShapeCatalog


@click.group(name="shape")
def shape_group():
    """Manage shapes."""
    pass


@shape_group.command(name="list")
@exit_on_error
def list_shapes():
    """List shape images in the images directory."""
    catalog = ShapeCatalog(ConfigResolver().resolve())
    click.echo(f"Shape images in {catalog.images_dir}:\n")
    for image in catalog.list_images():
        click.echo(f"  {image.name}")
