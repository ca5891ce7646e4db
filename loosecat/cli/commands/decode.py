"""Decode object command - decode a loose object file by path."""

import click

from loosecat.core.config import get_config
from loosecat.core.errors import LooseObjectError
from loosecat.core.inflate import inflate
from loosecat.core.objects import Tree, decode_object
from loosecat.core.repository import Repository, resolve_path
from loosecat.cli.output import (echo, error, format_content, format_entry,
                                 highlight, report_size_warnings)


def show_object(obj, use_color: bool, abbrev: int = 0) -> None:
    """Print a decoded object: type and length, then entries or content."""
    echo(f"type:   {highlight(obj.object_type)}", use_color)
    echo(f"length: {obj.length}", use_color)
    echo(use_color=use_color)
    if isinstance(obj, Tree):
        for entry in obj.entries:
            echo(format_entry(entry, abbrev), use_color)
    else:
        echo(format_content(obj.content), use_color)


@click.command('decode-object')
@click.option('--mode-types/--raw-modes', default=None,
              help='Map tree entry modes to object types (default: decode.mode_types)')
@click.option('--strict-size/--lenient-size', default=None,
              help='Fail when the content length differs from the header (default: decode.strict_size)')
@click.option('--bytes', 'dump_bytes', is_flag=True,
              help='Also print the decompressed bytes as decimal values')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('object_path')
def decode_object_cmd(mode_types, strict_size, dump_bytes, no_color, object_path):
    """
    Decode a loose object file.

    OBJECT_PATH is the path of a compressed object file, relative to the
    current directory or absolute.

    Examples:
        loosecat decode-object .git/objects/ab/cdef0123...
        loosecat decode-object --mode-types /tmp/tree-object
        loosecat decode-object --bytes some-object
    """
    config = get_config(Repository.find_repository())
    try:
        options = config.decode_options()
        use_color = config.use_color and not no_color
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if mode_types is not None:
        options['mode_types'] = mode_types
    if strict_size is not None:
        options['strict_size'] = strict_size

    path = resolve_path(object_path)
    try:
        compressed = path.read_bytes()
    except OSError as e:
        echo(error(f"Cannot read {path}: {e.strerror}"), use_color)
        raise click.Abort()

    try:
        data = inflate(compressed)
        if dump_bytes:
            echo(','.join(str(b) for b in data), use_color)
        with report_size_warnings(use_color):
            obj = decode_object(data, **options)
    except LooseObjectError as e:
        echo(error(f"decode-object failed: {e}"), use_color)
        raise click.Abort()

    show_object(obj, use_color)
