"""CLI output utilities and formatting."""

import warnings
from contextlib import contextmanager

import click
from colorama import Fore, Style

from loosecat.core.errors import ObjectSizeWarning

BANNER = f"""
{Fore.YELLOW}+--------------------------------------------+{Style.RESET_ALL}
{Fore.YELLOW}|{Style.RESET_ALL}  {Fore.CYAN}{Style.BRIGHT}loosecat{Style.RESET_ALL}                                  {Fore.YELLOW}|{Style.RESET_ALL}
{Fore.YELLOW}|{Style.RESET_ALL}  {Fore.WHITE}Decode git loose objects{Style.RESET_ALL}                  {Fore.YELLOW}|{Style.RESET_ALL}
{Fore.YELLOW}+--------------------------------------------+{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def highlight(text: str, color: str = Fore.YELLOW) -> str:
    """Wrap text in a color."""
    return f"{color}{text}{Style.RESET_ALL}"


def echo(message: str = '', use_color: bool = True, err: bool = False) -> None:
    """Echo a message, stripping colors when they are turned off."""
    click.echo(message, err=err, color=None if use_color else False)


@contextmanager
def report_size_warnings(use_color: bool = True):
    """Print object size warnings raised inside the block."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always', ObjectSizeWarning)
        yield
    for w in caught:
        if issubclass(w.category, ObjectSizeWarning):
            echo(warning(str(w.message)), use_color, err=True)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)


def format_entry(entry, abbrev: int = 0, name_only: bool = False) -> str:
    """Format a tree entry as '<mode> <type> <oid>\\t<path>'."""
    if name_only:
        return entry.path
    oid = entry.oid[:abbrev] if abbrev else entry.oid
    return f"{entry.mode} {entry.type} {highlight(oid)}\t{entry.path}"


def format_content(content: bytes) -> str:
    """Text for object content, or a placeholder for binary data."""
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError:
        return f"<binary data: {len(content)} bytes>"
