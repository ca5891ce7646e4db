"""CLI commands for loosecat."""

from loosecat.cli.commands.decode import decode_object_cmd
from loosecat.cli.commands.objects import cat_file_cmd, ls_tree_cmd, count_objects_cmd
from loosecat.cli.commands.config import config_cmd

__all__ = ['decode_object_cmd', 'cat_file_cmd', 'ls_tree_cmd', 'count_objects_cmd',
           'config_cmd']
