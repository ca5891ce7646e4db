"""Git loose object decoding."""

import warnings
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from .errors import (
    MalformedEntryError,
    MalformedHeaderError,
    ObjectSizeError,
    ObjectSizeWarning,
    TruncatedEntryError,
    UnsafeFilepathError,
)
from .inflate import inflate

OID_SIZE = 20

# Mode -> object type, used only when mode mapping is enabled
MODE_TYPES = {
    '040000': 'tree',
    '40000': 'tree',
    '100644': 'blob',
    '100755': 'blob',
    '100664': 'blob',
    '120000': 'symlink',
    '160000': 'commit',
}


def normalize_mode(mode: str) -> str:
    """Zero-pad the directory mode so it lines up with the six-digit modes."""
    if mode == '40000':
        return '040000'
    return mode


def mode_to_type(mode: str) -> str:
    """
    Map a tree entry mode to an object type.

    Unknown modes are returned unchanged.
    """
    return MODE_TYPES.get(mode, mode)


@dataclass(frozen=True)
class TreeEntry:
    """
    A single entry of a tree object.

    Attributes:
        mode: File mode, with '40000' normalized to '040000'
        path: Entry name (never contains '/' or '\\')
        oid_bytes: 20-byte object id
        type: Object type, or the mode itself when no mapping applies
        raw_mode: Mode exactly as stored in the tree
    """
    mode: str
    path: str
    oid_bytes: bytes
    type: str
    raw_mode: str = field(default='', repr=False)

    @property
    def oid(self) -> str:
        """40-character lowercase hex object id."""
        return self.oid_bytes.hex()

    def serialize(self) -> bytes:
        """
        Encode entry in tree format.

        Format: <mode> <path>\\0<20-byte oid>
        """
        mode = self.raw_mode or self.mode
        return mode.encode('ascii') + b' ' + self.path.encode('utf-8') + b'\0' + self.oid_bytes

    def __str__(self) -> str:
        return f"{self.mode} {self.type} {self.oid}\t{self.path}"


@dataclass(frozen=True, repr=False)
class RawObject:
    """
    A decoded loose object.

    Content is kept as raw bytes; blob content may be arbitrary binary.
    """
    object_type: str
    length: int
    content: bytes = field(repr=False)

    @property
    def size_matches(self) -> bool:
        """True if the content is as long as the header declares."""
        return len(self.content) == self.length

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.object_type}, length={self.length})"


@dataclass(frozen=True, repr=False)
class Tree(RawObject):
    """A decoded tree object with its entries in stored order."""
    entries: Tuple[TreeEntry, ...] = ()

    def serialize(self) -> bytes:
        """Re-encode entries; equals content for any decoded tree."""
        return b''.join(entry.serialize() for entry in self.entries)

    def __iter__(self) -> Iterator[TreeEntry]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"Tree(length={self.length}, entries={len(self.entries)})"


def parse_tree_entry(data: bytes, cursor: int,
                     mode_types: bool = False) -> Tuple[TreeEntry, int]:
    """
    Parse one tree entry starting at cursor.

    The space and NUL searches both start at cursor.

    Args:
        data: Tree content
        cursor: Offset of the entry's first byte
        mode_types: Map modes to object types instead of echoing the mode

    Returns:
        Tuple of (entry, offset of the next entry)

    Raises:
        TruncatedEntryError: Missing separator, terminator or full oid
        MalformedEntryError: Mode is not ASCII or path is not UTF-8
        UnsafeFilepathError: Path contains '/' or '\\'
    """
    space = data.find(b' ', cursor)
    if space == -1:
        raise TruncatedEntryError("Could not find the next space character", cursor)

    null = data.find(b'\0', cursor)
    if null == -1:
        raise TruncatedEntryError("Could not find the next null character", cursor)

    raw_path = data[space + 1:null]

    # Stop malicious trees from writing to "../foo" or "..\foo" later on
    if b'/' in raw_path or b'\\' in raw_path:
        raise UnsafeFilepathError(raw_path.decode('utf-8', 'replace'), cursor)

    try:
        raw_mode = data[cursor:space].decode('ascii')
        path = raw_path.decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedEntryError(f"Cannot decode tree entry: {e.reason}", cursor) from e

    oid_bytes = data[null + 1:null + 1 + OID_SIZE]
    if len(oid_bytes) != OID_SIZE:
        raise TruncatedEntryError(
            f"Incomplete object id: expected {OID_SIZE} bytes, got {len(oid_bytes)}",
            null + 1,
        )

    mode = normalize_mode(raw_mode)
    entry = TreeEntry(
        mode=mode,
        path=path,
        oid_bytes=oid_bytes,
        type=mode_to_type(mode) if mode_types else mode,
        raw_mode=raw_mode,
    )
    return entry, null + 1 + OID_SIZE


def iter_tree_entries(data: bytes, mode_types: bool = False) -> Iterator[TreeEntry]:
    """
    Lazily parse tree content into entries, in stored order.

    Args:
        data: Tree content (after the object header)
        mode_types: Map modes to object types

    Yields:
        TreeEntry for each entry
    """
    cursor = 0
    while cursor < len(data):
        entry, cursor = parse_tree_entry(data, cursor, mode_types)
        yield entry


def parse_header(data: bytes) -> Tuple[str, int, int]:
    """
    Parse the '<type> <length>\\0' header of a decompressed object.

    Returns:
        Tuple of (object type, declared length, offset of the content)

    Raises:
        MalformedHeaderError: If the header is missing or invalid
    """
    null = data.find(b'\0')
    if null == -1:
        raise MalformedHeaderError("Object header is not NUL-terminated")

    try:
        header = data[:null].decode('utf-8')
    except UnicodeDecodeError as e:
        raise MalformedHeaderError(f"Object header is not valid UTF-8: {e.reason}") from e

    obj_type, sep, size_str = header.partition(' ')
    if not sep:
        raise MalformedHeaderError(f"Invalid object header: {header!r}")
    if not size_str.isdigit() or not size_str.isascii():
        raise MalformedHeaderError(f"Invalid object length: {size_str!r}")

    return obj_type, int(size_str), null + 1


def decode_object(data: bytes, mode_types: bool = False,
                  strict_size: bool = False) -> Union[RawObject, Tree]:
    """
    Decode a decompressed loose object.

    Args:
        data: Decompressed object bytes
        mode_types: Map tree entry modes to object types
        strict_size: Raise instead of warning when the content length
            differs from the header

    Returns:
        Tree for tree objects, RawObject for everything else
    """
    obj_type, length, offset = parse_header(data)
    content = data[offset:]

    if len(content) != length:
        if strict_size:
            raise ObjectSizeError(length, len(content))
        warnings.warn(
            f"{obj_type} object declares {length} bytes but has {len(content)}",
            ObjectSizeWarning,
            stacklevel=2,
        )

    if obj_type == 'tree':
        entries = tuple(iter_tree_entries(content, mode_types))
        return Tree(obj_type, length, content, entries)

    return RawObject(obj_type, length, content)


def decode_loose_object(compressed: bytes, mode_types: bool = False,
                        strict_size: bool = False) -> Union[RawObject, Tree]:
    """
    Inflate and decode a loose object file's bytes.

    Args:
        compressed: Raw bytes of the loose object file
        mode_types: Map tree entry modes to object types
        strict_size: Raise on content length mismatch

    Returns:
        Tree or RawObject
    """
    return decode_object(inflate(compressed), mode_types=mode_types,
                         strict_size=strict_size)
