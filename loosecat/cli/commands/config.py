"""Config command - manage repository and global settings."""

import click

from loosecat.core.config import Config
from loosecat.core.repository import Repository
from loosecat.cli.output import success, error, info


def split_key(key):
    """Split 'section.key'; a bare key belongs to the decode section."""
    return tuple(key.split('.', 1)) if '.' in key else ('decode', key)


def load_config(is_global):
    """Config bound to the current repository, unless only global is wanted."""
    if is_global:
        return Config()
    repo = Repository.find_repository()
    return Config(repo.config_file if repo else None)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        loosecat config set decode.mode_types true
        loosecat config set --global color.ui false
    """
    config = load_config(is_global)
    if not is_global and not config.repo_config_path:
        click.echo(error("Not a git repository (use --global for global config)"))
        raise click.Abort()

    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {section}.{option} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Environment variables (LOOSECAT_<SECTION>_<KEY>) override both files.

    Examples:
        loosecat config get decode.mode_types
        loosecat config get color.ui
    """
    section, option = split_key(key)
    value = load_config(is_global).get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {section}.{option}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        loosecat config unset decode.strict_size
    """
    section, option = split_key(key)
    if not load_config(is_global).unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {section}.{option}"))
        raise click.Abort()
    click.echo(success(f"Unset {section}.{option}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        loosecat config list
        loosecat config list --global
    """
    values = load_config(is_global).list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section in sorted(values):
        for key, value in values[section].items():
            click.echo(f"{section}.{key}={value}")
