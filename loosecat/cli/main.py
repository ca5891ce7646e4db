"""Main CLI entry point for loosecat."""

import click
from colorama import init

from loosecat import __version__
from loosecat.cli.output import BANNER
from loosecat.cli.commands import (decode_object_cmd, cat_file_cmd, ls_tree_cmd,
                                   count_objects_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class LoosecatGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=LoosecatGroup)
@click.version_option(version=__version__)
def cli():
    """Decode git loose objects."""
    pass


# Register commands
cli.add_command(decode_object_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(ls_tree_cmd)
cli.add_command(count_objects_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
