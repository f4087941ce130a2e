import click
import json
import logging
import traceback
import functools
import yaml
from pathlib import Path

from .config import Config
from .version import VersionParser, Version, compare, sort_versions, latest
from .codecs import VersionDumper, VersionJSONEncoder
from .utils import setup_logger, parse_module_levels
from .exceptions import (
    VerlaxError,
    ConfigurationError,
    CodecError,
)
from . import __version__
from . import constants

RELATION_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None, config: Config = None):
    """Setup logger with debug and module-level configuration, CLI flags win over the config file"""
    module_levels = None
    if config is not None and config.log_levels:
        module_levels = dict(config.log_levels)
    if log_levels:
        module_levels = {**(module_levels or {}), **parse_module_levels(log_levels)}
    if config is not None:
        debug = debug or config.debug
        log_file = log_file or config.log_file

    setup_logger(debug=debug, module_levels=module_levels, log_file=log_file)


def handle_errors(func):
    """Decorator to handle common exceptions"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except VerlaxError as e:
            if isinstance(e, ConfigurationError):
                logging.error(f"Configuration error: {e}")
            elif isinstance(e, CodecError):
                logging.error(f"Codec error: {e}")
            else:
                logging.error(f"An unexpected application error occurred: {e}")
            ctx = click.get_current_context()
            if ctx.obj and ctx.obj.get('debug'):
                traceback.print_exc()
            raise click.Abort()
    return wrapper


def _parser(ctx) -> VersionParser:
    return ctx.obj['config'].parser()


def _read_versions(ctx, versions: tuple) -> list:
    """Versions from arguments, or whitespace-separated from stdin when none are given"""
    if versions:
        texts = list(versions)
    else:
        texts = click.get_text_stream('stdin').read().split()
    parser = _parser(ctx)
    return [parser.parse(text) for text in texts]


def describe(version: Version) -> dict:
    return {
        'version': version,
        'release': list(version.release),
        'date': version.date,
        'qualifiers': [{'name': q.name, 'number': q.number} for q in version.pre_list],
    }


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', help="Comma-separated per-module log levels (e.g., 'parser=DEBUG,codecs=INFO')")
@click.option('-f', '--log-file', help='Path to log file')
@click.option('-c', '--config', 'config_file', type=click.Path(dir_okay=False), help='Path to a config file (default: ./verlax.yml if present)')
@click.version_option(version=__version__, prog_name='verlax')
@click.pass_context
def cli(ctx, debug, log_levels, log_file, config_file):
    """Verlax - Parse, compare and sort loosely formatted version strings

    \b
    Examples:
      verlax compare 1.0-rc1 1.0        Print -1, 0 or 1
      verlax sort 1.10 1.9 1.0-beta     Sort oldest first
      verlax parse 2.3.20230115-m2      Show how a version was read
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    if config_file is None and Path(constants.DEFAULT_CONFIG_FILENAME).is_file():
        config_file = constants.DEFAULT_CONFIG_FILENAME
    try:
        config = Config(config_file)
    except ConfigurationError as e:
        setup_logging(debug, log_levels, log_file)
        logging.error(f"Configuration error: {e}")
        raise click.Abort()
    ctx.obj['config'] = config
    ctx.obj['debug'] = debug or config.debug
    setup_logging(debug, log_levels, log_file, config)


@cli.command()
@click.argument('versions', nargs=-1, required=True)
@click.option('--format', 'fmt', type=click.Choice(['yaml', 'json']), default='yaml', show_default=True,
              help='Output format')
@click.pass_context
@handle_errors
def parse(ctx, versions, fmt):
    """Show the release numbers, date and qualifiers read from each version"""
    parser = _parser(ctx)
    records = [describe(parser.parse(text)) for text in versions]
    if fmt == 'json':
        click.echo(json.dumps(records, indent=2, cls=VersionJSONEncoder))
    else:
        click.echo(yaml.dump(records, Dumper=VersionDumper, sort_keys=False), nl=False)


@cli.command('compare')
@click.argument('first')
@click.argument('second')
@click.option('--relation', is_flag=True, help="Print 'A <op> B' instead of -1/0/1")
@click.pass_context
@handle_errors
def compare_cmd(ctx, first, second, relation):
    """Compare two versions"""
    parser = _parser(ctx)
    a, b = parser.parse(first), parser.parse(second)
    result = compare(a, b)
    logging.debug(f"compare({a!r}, {b!r}) = {result}")
    if relation:
        click.echo(f"{first} {RELATION_SYMBOLS[result]} {second}")
    else:
        click.echo(str(result))


@cli.command()
@click.argument('versions', nargs=-1)
@click.option('-r', '--reverse', is_flag=True, help='Newest first')
@click.pass_context
@handle_errors
def sort(ctx, versions, reverse):
    """Print versions one per line, oldest first

    \b
    Examples:
      verlax sort 1.0 1.0-rc1 0.9       Versions from arguments
      git tag | verlax sort -r          Versions from stdin
    """
    for version in sort_versions(_read_versions(ctx, versions), reverse=reverse):
        click.echo(version.original_text)


@cli.command('latest')
@click.argument('versions', nargs=-1)
@click.pass_context
@handle_errors
def latest_cmd(ctx, versions):
    """Print the newest version"""
    newest = latest(_read_versions(ctx, versions))
    if newest is None:
        logging.error("No versions to choose from.")
        raise click.Abort()
    click.echo(newest.original_text)
