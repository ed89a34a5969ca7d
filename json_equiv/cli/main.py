"""
JSON Equiv Command Line Interface

Provides commands for comparing JSON documents and printing their canonical form.
"""

import logging
import sys

import click

from json_equiv.core.canonicalization import DecodeError, format_array_json, format_json
from json_equiv.core.equivalence import is_equivalent, is_equivalent_array

# Exit statuses
EXIT_EQUIVALENT = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Configure click
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

logger = logging.getLogger(__name__)


# Helper functions
def read_document(file_path: str) -> bytes:
    """Read a JSON document from disk as raw bytes."""
    try:
        with open(file_path, 'rb') as f:
            return f.read()
    except OSError as e:
        click.echo(f"Error reading {file_path}: {e}", err=True)
        sys.exit(EXIT_ERROR)


# Command groups
@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, envvar='JSON_EQUIV_LOG_LEVEL',
              help='Logging verbosity')
def cli(log_level: str):
    """JSON Equiv - Logical equality of JSON documents."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


@cli.command()
@click.argument('expected_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('actual_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--array', '-a', is_flag=True, help='Compare JSON arrays of objects')
def compare(expected_file: str, actual_file: str, array: bool):
    """Compare two JSON documents, ignoring key order and formatting."""
    expected = read_document(expected_file)
    actual = read_document(actual_file)

    check = is_equivalent_array if array else is_equivalent
    logger.info("Comparing %s against %s", actual_file, expected_file)
    result = check(expected, actual)

    if result.error is not None:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(EXIT_ERROR)

    if result.equal:
        click.echo("✅ Documents are equivalent")
        sys.exit(EXIT_EQUIVALENT)

    click.echo("❌ Documents differ")
    if result.expected or result.actual:
        click.echo("\nExpected:")
        click.echo(result.expected)
        click.echo("\nActual:")
        click.echo(result.actual)
    else:
        click.echo("Arrays have different lengths")
    sys.exit(EXIT_DIFFERENT)


@cli.command(name='format')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--array', '-a', is_flag=True, help='Read a JSON array of objects')
def format_command(file: str, array: bool):
    """Print the canonical form of a JSON document."""
    src = read_document(file)
    try:
        _, formatted = format_array_json(src) if array else format_json(src)
    except DecodeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    click.echo(formatted.decode('utf-8'))


# Main entry point
if __name__ == '__main__':
    cli()
