"""CLI entry point for openapi-splitter."""

from pathlib import Path

import click

from openapi_splitter.codec import FORMATS
from openapi_splitter.errors import SplitterError
from openapi_splitter.logging_setup import configure_logging
from openapi_splitter.pipeline import DEFAULT_OUTPUT, split_openapi


@click.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option("-o", "--output", default=DEFAULT_OUTPUT, show_default=True, envvar="OPENAPI_SPLITTER_OUTPUT", type=click.Path(file_okay=False, path_type=Path), help="Output directory. Existing contents are removed.")
@click.option("-f", "--format", "fmt", default=None, envvar="OPENAPI_SPLITTER_FORMAT", type=click.Choice(FORMATS), help="Output format. Defaults to the input file's format.")
@click.option("-d", "--debug", is_flag=True, default=False, envvar="OPENAPI_SPLITTER_DEBUG", help="Enable debug logging.")
@click.version_option(package_name="openapi-splitter")
def main(file: Path, output: Path, fmt: str | None, debug: bool):
    """Split an OpenAPI specification FILE into multiple files."""
    configure_logging(debug)

    click.echo(f"Reading OpenAPI specification from {file}...")
    try:
        result = split_openapi(file, output=output, fmt=fmt)
    except SplitterError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Wrote {len(result.files)} files.")
    click.echo(f"OpenAPI specification successfully split into {result.output_dir}")
