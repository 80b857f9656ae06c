"""Main CLI interface"""

import click

from ..config.format_settings import FormatSettings, DEFAULT_FORMAT_SETTINGS
from ..core.exceptions import UnitConverterError
from ..core.units.converter import UnitConverter
from ..infrastructure.logging.converter_logger import setup_logging


@click.group()
@click.version_option(package_name='unit-converter')
def cli():
    """Unit Converter - length, weight, temperature and volume"""
    pass


@cli.command()
def categories():
    """List measurement categories"""
    for name in UnitConverter().list_categories():
        click.echo(name)


@cli.command()
@click.argument('category')
def units(category):
    """List the units of CATEGORY"""
    try:
        unit_names = UnitConverter().units_for(category)
    except UnitConverterError as e:
        raise click.ClickException(str(e))

    for name in unit_names:
        click.echo(name)


@cli.command()
@click.argument('category')
@click.argument('value')
@click.argument('from_unit', required=False)
@click.argument('to_unit', required=False)
@click.option('--swap', '-s', is_flag=True, help='Exchange source and target units')
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Formatting configuration file')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Write log records to this file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging to stderr')
def convert(category, value, from_unit, to_unit, swap, config, log_file, verbose):
    """Convert VALUE from FROM_UNIT to TO_UNIT within CATEGORY

    Units default to the first two units of the category.
    """

    # Errors reach the user through click; log lines only on request
    setup_logging(log_file, verbose=verbose, console=verbose)

    try:
        settings = FormatSettings.from_file(config) if config else DEFAULT_FORMAT_SETTINGS
        converter = UnitConverter(settings=settings)

        default_from, default_to = converter.registry.default_pair(category)
        from_unit = from_unit or default_from
        to_unit = to_unit or default_to
        if swap:
            from_unit, to_unit = converter.swap(from_unit, to_unit)

        result = converter.convert(category, value, from_unit, to_unit)
    except UnitConverterError as e:
        raise click.ClickException(str(e))

    click.echo(result)


if __name__ == '__main__':
    cli()
