"""
Command-line interface for scene_release
"""

import logging
from typing import Optional

import click

from .config import Config
from .errors import SceneReleaseError
from .models import ParsedRelease
from .parser import ReleaseParser
from .utils import line_separator, to_json


def _echo_release(release: ParsedRelease, indent: str = ""):
    """Print the populated fields of a parsed release"""
    for name, value in release.to_dict().items():
        if value in (None, "", [], {}):
            continue
        click.echo(f"{indent}{name:<20} {value}")


@click.group()
@click.option('--tokens', '-k', help='YAML file with extra providers/languages/flags')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, tokens: Optional[str], verbose: bool):
    """scene-release - Extract structured metadata from scene release names and paths"""
    ctx.ensure_object(dict)

    # Load configuration
    config = Config.from_env()
    if tokens:
        config.parser.tokens_file = tokens
    ctx.obj['config'] = config

    # Setup logging
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        ctx.obj['tokens'] = config.tokens()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


def _parser(ctx, release_type: Optional[str]) -> ReleaseParser:
    config = ctx.obj['config']
    return ReleaseParser(release_type or config.parser.default_type, ctx.obj['tokens'])


@cli.command()
@click.argument('release_name')
@click.option('--type', '-t', 'release_type', help='Release type: tv, movie, series, ...')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def parse(ctx, release_name: str, release_type: Optional[str], as_json: bool):
    """Parse a scene release name"""
    result = _parser(ctx, release_type).parse(release_name)

    if as_json:
        click.echo(to_json(result))
        return

    click.echo(line_separator("Release"))
    _echo_release(result)


@cli.command()
@click.argument('file_path')
@click.option('--type', '-t', 'release_type', help='Release type: tv, movie, series, ...')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def path(ctx, file_path: str, release_type: Optional[str], as_json: bool):
    """Parse a file path into directory, season and file information"""
    result = _parser(ctx, release_type).parse_path(file_path)

    if as_json:
        click.echo(to_json(result))
        return

    click.echo(line_separator("Path"))
    click.echo(f"{'full_path':<20} {result.full_path}")
    click.echo(f"{'season':<20} {result.season if result.season is not None else '-'}")
    click.echo(line_separator("Directory"))
    if result.directory:
        _echo_release(result.directory, indent="  ")
    else:
        click.echo("  (none)")
    click.echo(line_separator("File"))
    _echo_release(result.file, indent="  ")


@cli.command('series-dir')
@click.argument('directory_name')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def series_dir(ctx, directory_name: str, as_json: bool):
    """Parse a series directory name"""
    result = _parser(ctx, "series").parse_series_directory(directory_name)
    if as_json:
        click.echo(to_json(result))
    else:
        _echo_release(result)


@cli.command('movie-dir')
@click.argument('directory_name')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.pass_context
def movie_dir(ctx, directory_name: str, as_json: bool):
    """Parse a movie directory name"""
    result = _parser(ctx, "movie").parse_movie_directory(directory_name)
    if as_json:
        click.echo(to_json(result))
    else:
        _echo_release(result)


@cli.command('season-dir')
@click.argument('directory_name')
@click.pass_context
def season_dir(ctx, directory_name: str):
    """Parse a season directory name, exits non-zero when there is no season"""
    try:
        season = _parser(ctx, "tv").require_season_directory(directory_name)
    except SceneReleaseError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(season)


@cli.command()
@click.pass_context
def info(ctx):
    """Show configuration information"""
    config = ctx.obj['config']
    tokens = ctx.obj['tokens']

    click.echo(line_separator("scene-release Configuration"))
    click.echo(f"Default Type: {config.parser.default_type}")
    click.echo(f"Tokens File: {config.parser.tokens_file or 'Not set'}")
    for section in ('providers', 'languages', 'flags'):
        click.echo(f"Extra {section.capitalize()}: {len(tokens.get(section, {}))}")
    click.echo(f"Log Level: {config.logging.level}")


if __name__ == '__main__':
    cli()
