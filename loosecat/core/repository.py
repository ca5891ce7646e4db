"""Locate loose objects inside a git repository."""

import os
import string
from pathlib import Path
from typing import Iterator, Optional, Union

from .errors import AmbiguousObjectError, InvalidObjectIdError, ObjectNotFoundError
from .objects import RawObject, Tree, decode_loose_object

MIN_PREFIX_LENGTH = 4
HEX_DIGITS = set(string.hexdigits.lower())


def resolve_path(path: str, base: Optional[str] = None) -> Path:
    """
    Resolve a user supplied path.

    Absolute paths are returned unchanged; relative paths are resolved
    against base, or the current working directory.
    """
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return (Path(base) if base else Path(os.getcwd())).joinpath(candidate).resolve()


class Repository:
    """
    Read-only view of a repository's loose object store.

    Only loose objects are visible; packfiles are ignored.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to the work tree root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.git_dir = self.work_tree / '.git'
        self.objects_dir = self.git_dir / 'objects'
        self.config_file = self.git_dir / 'loosecat.ini'

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .git directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / '.git').is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def object_path(self, oid: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the id, with the remaining 38 characters as the filename.
        """
        return self.objects_dir / oid[:2] / oid[2:]

    def iter_object_ids(self) -> Iterator[str]:
        """Yield the id of every loose object, in directory order."""
        if not self.objects_dir.is_dir():
            return
        for subdir in sorted(self.objects_dir.iterdir()):
            if not subdir.is_dir() or len(subdir.name) != 2:
                continue
            for obj_file in sorted(subdir.iterdir()):
                oid = subdir.name + obj_file.name
                if len(oid) == 40 and set(oid) <= HEX_DIGITS:
                    yield oid

    def resolve_oid(self, prefix: str) -> str:
        """
        Resolve a full or abbreviated object id.

        Args:
            prefix: 40-character id, or a unique prefix of at least 4 characters

        Returns:
            str: Full 40-character id

        Raises:
            InvalidObjectIdError: If prefix is not hex or too short/long
            ObjectNotFoundError: If no loose object matches
            AmbiguousObjectError: If several loose objects match
        """
        oid = prefix.lower()
        if not set(oid) <= HEX_DIGITS or not MIN_PREFIX_LENGTH <= len(oid) <= 40:
            raise InvalidObjectIdError(f"Not a valid object id: {prefix}")

        if len(oid) == 40:
            if not self.object_path(oid).is_file():
                raise ObjectNotFoundError(f"Object {oid} not found")
            return oid

        subdir = self.objects_dir / oid[:2]
        matches = []
        if subdir.is_dir():
            for obj_file in subdir.iterdir():
                full = oid[:2] + obj_file.name
                if full.startswith(oid):
                    matches.append(full)

        if not matches:
            raise ObjectNotFoundError(f"Object {prefix} not found")
        if len(matches) > 1:
            raise AmbiguousObjectError(prefix, matches)
        return matches[0]

    def read_raw(self, oid: str) -> bytes:
        """Return the compressed bytes of a loose object."""
        return self.object_path(self.resolve_oid(oid)).read_bytes()

    def read_object(self, oid: str, mode_types: bool = False,
                    strict_size: bool = False) -> Union[RawObject, Tree]:
        """
        Read and decode a loose object.

        Args:
            oid: Full or abbreviated object id
            mode_types: Map tree entry modes to object types
            strict_size: Raise on content length mismatch

        Returns:
            Tree or RawObject
        """
        return decode_loose_object(self.read_raw(oid), mode_types=mode_types,
                                   strict_size=strict_size)

    def object_exists(self, oid: str) -> bool:
        """Check if a loose object with this full id exists."""
        return self.object_path(oid).is_file()

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
