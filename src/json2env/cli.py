"""Command-line interface for json2env."""

import logging
import sys
import click
from pathlib import Path
from . import __version__
from .converter import EnvConverter
from .error_handler import ErrorHandler
from .types import ConversionError, FlattenConfig, OutputFormat


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="json2env")
@click.option('--input', '-i', 'input_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Input JSON file (default: standard input)')
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file (default: standard output)')
@click.option('--key-separator', '-s', default='__', show_default=True, metavar='STRING',
              help='Separator for nested keys')
@click.option('--array-separator', '-S', default=',', show_default=True, metavar='STRING',
              help='Separator for array elements')
@click.option('--enumerate-array', '-e', is_flag=True,
              help='Separate array elements in multiple environment variables')
@click.option('--format', '-f', 'output_format', default=OutputFormat.ENV.value, show_default=True,
              type=click.Choice([f.value for f in OutputFormat]),
              help='Line format: plain KEY=VALUE or quoted .env values')
@click.option('--strict', is_flag=True, help='Fail when flattened keys collide')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(input_file, output_file, key_separator: str, array_separator: str,
         enumerate_array: bool, output_format: str, strict: bool, verbose: bool):
    """Convert a JSON document into environment variables, one KEY=VALUE per line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )
    logger = logging.getLogger("json2env")

    error_handler = ErrorHandler(logger)
    validation = error_handler.validate_config(key_separator, array_separator)
    if not validation.is_valid:
        raise click.UsageError("; ".join(error.message for error in validation.errors))

    config = FlattenConfig(
        key_separator=key_separator,
        array_separator=array_separator,
        enumerate_array=enumerate_array
    )
    converter = EnvConverter(
        config,
        output_format=OutputFormat(output_format),
        strict=strict,
        logger=logger
    )

    try:
        result = converter.convert_file(input_file, output_file)
    except ConversionError as e:
        click.echo(f"❌ Error: {error_handler.handle_error(e)}", err=True)
        sys.exit(1)

    if not result.success:
        for error in result.errors or []:
            click.echo(f"❌ Error: {error}", err=True)
        sys.exit(1)

    if result.collisions:
        logger.info(f"{len(result.collisions)} key collisions resolved by overwriting")


if __name__ == '__main__':
    main()
