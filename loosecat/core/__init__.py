"""Core functionality for loosecat.

This module contains:
- The inflator (zlib)
- The object decoder and tree entry parser
- The error taxonomy
- Loose object lookup inside a repository
- Configuration management

The command line interface lives in loosecat.cli
"""

from loosecat.core.errors import (
    LooseObjectError,
    ObjectDecodeError,
    DecompressionError,
    MalformedHeaderError,
    TruncatedEntryError,
    MalformedEntryError,
    UnsafeFilepathError,
    ObjectSizeError,
    ObjectSizeWarning,
    ObjectNotFoundError,
    AmbiguousObjectError,
    InvalidObjectIdError,
)
from loosecat.core.inflate import inflate
from loosecat.core.objects import (
    RawObject,
    Tree,
    TreeEntry,
    parse_header,
    parse_tree_entry,
    iter_tree_entries,
    decode_object,
    decode_loose_object,
    mode_to_type,
)
from loosecat.core.repository import Repository, resolve_path
from loosecat.core.config import Config, get_config

__all__ = [
    'LooseObjectError',
    'ObjectDecodeError',
    'DecompressionError',
    'MalformedHeaderError',
    'TruncatedEntryError',
    'MalformedEntryError',
    'UnsafeFilepathError',
    'ObjectSizeError',
    'ObjectSizeWarning',
    'ObjectNotFoundError',
    'AmbiguousObjectError',
    'InvalidObjectIdError',
    'inflate',
    'RawObject',
    'Tree',
    'TreeEntry',
    'parse_header',
    'parse_tree_entry',
    'iter_tree_entries',
    'decode_object',
    'decode_loose_object',
    'mode_to_type',
    'Repository',
    'resolve_path',
    'Config',
    'get_config',
]
