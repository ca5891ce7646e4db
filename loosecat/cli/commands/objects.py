"""Object inspection commands - cat-file, ls-tree, count-objects."""

import click
from colorama import Fore

from loosecat.core.config import get_config
from loosecat.core.errors import LooseObjectError
from loosecat.core.objects import Tree
from loosecat.core.repository import Repository
from loosecat.cli.output import (echo, error, format_content, format_entry,
                                 highlight, report_size_warnings)


def open_repository(no_color: bool = False):
    """
    Find the enclosing repository and load its settings.

    Returns:
        Tuple of (repository, decode options, use_color)
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a git repository"))
        raise click.Abort()

    config = get_config(repo)
    try:
        return repo, config.decode_options(), config.use_color and not no_color
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.command('cat-file')
@click.option('-t', '--type', 'show_type', is_flag=True, help='Show object type')
@click.option('-s', '--size', 'show_size', is_flag=True, help='Show object size')
@click.option('-p', '--pretty', is_flag=True, help='Pretty-print object content')
@click.option('--mode-types/--raw-modes', default=None,
              help='Map tree entry modes to object types')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('object_id')
def cat_file_cmd(show_type, show_size, pretty, mode_types, no_color, object_id):
    """
    Show object type, size, or content.

    OBJECT_ID is a full object id or an unambiguous prefix.

    Examples:
        loosecat cat-file -t abc123     # Show object type
        loosecat cat-file -s abc123     # Show declared object size
        loosecat cat-file -p abc123     # Pretty-print object content
    """
    if sum((show_type, show_size, pretty)) != 1:
        click.echo(error("Use exactly one of -t, -s or -p"))
        raise click.Abort()

    repo, options, use_color = open_repository(no_color)
    if mode_types is not None:
        options['mode_types'] = mode_types

    try:
        with report_size_warnings(use_color):
            obj = repo.read_object(object_id, **options)
    except LooseObjectError as e:
        echo(error(f"cat-file failed: {e}"), use_color)
        raise click.Abort()

    if show_type:
        echo(obj.object_type, use_color)
    elif show_size:
        echo(str(obj.length), use_color)
    elif isinstance(obj, Tree):
        for entry in obj.entries:
            echo(format_entry(entry), use_color)
    else:
        echo(format_content(obj.content), use_color)


@click.command('ls-tree')
@click.option('--name-only', is_flag=True, help='Show only entry names')
@click.option('--abbrev', type=int, default=0, help='Abbreviate ids to N characters')
@click.option('--mode-types/--raw-modes', default=None,
              help='Map tree entry modes to object types')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('tree_id')
def ls_tree_cmd(name_only, abbrev, mode_types, no_color, tree_id):
    """
    List the entries of a tree object.

    Only the given tree is listed; sub-trees are not read.

    Examples:
        loosecat ls-tree abc123
        loosecat ls-tree --name-only abc123
        loosecat ls-tree --abbrev 7 --mode-types abc123
    """
    repo, options, use_color = open_repository(no_color)
    if mode_types is not None:
        options['mode_types'] = mode_types

    try:
        with report_size_warnings(use_color):
            obj = repo.read_object(tree_id, **options)
    except LooseObjectError as e:
        echo(error(f"ls-tree failed: {e}"), use_color)
        raise click.Abort()

    if not isinstance(obj, Tree):
        echo(error(f"Not a tree object: {tree_id} is a {obj.object_type}"), use_color)
        raise click.Abort()

    for entry in obj.entries:
        echo(format_entry(entry, abbrev, name_only), use_color)


@click.command('count-objects')
@click.option('-v', '--verbose', is_flag=True, help='Show counts by object type')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def count_objects_cmd(verbose, no_color):
    """
    Count loose objects in the repository.

    Examples:
        loosecat count-objects          # Show object count
        loosecat count-objects -v       # Show breakdown by type
    """
    repo, options, use_color = open_repository(no_color)

    total_objects = 0
    total_size = 0
    type_counts = {}
    unreadable = 0

    for oid in repo.iter_object_ids():
        total_objects += 1
        total_size += repo.object_path(oid).stat().st_size

        if verbose:
            try:
                with report_size_warnings(use_color):
                    obj = repo.read_object(oid, **options)
            except LooseObjectError:
                unreadable += 1
                continue
            type_counts[obj.object_type] = type_counts.get(obj.object_type, 0) + 1

    if verbose:
        echo(highlight("Object Statistics:", Fore.CYAN), use_color)
        for obj_type in sorted(type_counts):
            echo(f"  {obj_type + ':':<8} {highlight(str(type_counts[obj_type]))}", use_color)
        if unreadable:
            echo(f"  {'invalid:':<8} {unreadable}", use_color)
        echo(use_color=use_color)

    size_kb = total_size / 1024
    echo(f"{total_objects} objects, {size_kb:.2f} KB", use_color)
