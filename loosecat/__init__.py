"""loosecat - decode git loose objects."""

__version__ = '0.1.0'

from loosecat.core.objects import RawObject, Tree, TreeEntry, decode_object, decode_loose_object
from loosecat.core.repository import Repository

__all__ = [
    'RawObject',
    'Tree',
    'TreeEntry',
    'Repository',
    'decode_object',
    'decode_loose_object',
]
