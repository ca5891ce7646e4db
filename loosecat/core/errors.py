"""Exceptions and warnings raised while locating and decoding objects."""

from typing import Optional


class LooseObjectError(Exception):
    """Base class for all loosecat errors."""


class ObjectDecodeError(LooseObjectError):
    """
    An object could not be decoded.
    
    Attributes:
        offset: Byte offset in the buffer being parsed when decoding failed
    """
    
    def __init__(self, message: str, offset: Optional[int] = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)


class DecompressionError(ObjectDecodeError):
    """Input is not a valid zlib stream."""
    
    def __init__(self, message: str):
        super().__init__(message, offset=0)


class MalformedHeaderError(ObjectDecodeError):
    """Decompressed bytes do not start with '<type> <length>\\0'."""
    
    def __init__(self, message: str, offset: int = 0):
        super().__init__(message, offset)


class TruncatedEntryError(ObjectDecodeError):
    """Tree content ends before a complete entry."""


class MalformedEntryError(ObjectDecodeError):
    """Tree entry mode or path bytes cannot be decoded."""


class UnsafeFilepathError(ObjectDecodeError):
    """Tree entry path contains a directory separator."""
    
    def __init__(self, path: str, offset: int):
        self.path = path
        super().__init__(f"Unsafe path in tree entry: {path!r}", offset)


class ObjectSizeError(ObjectDecodeError):
    """Content length differs from the length declared in the header."""
    
    def __init__(self, declared: int, actual: int):
        self.declared = declared
        self.actual = actual
        super().__init__(f"Object size mismatch: expected {declared}, got {actual}")


class ObjectSizeWarning(UserWarning):
    """Content length differs from the declared length (non-strict mode)."""


class ObjectNotFoundError(LooseObjectError):
    """No loose object matches the requested id."""


class AmbiguousObjectError(LooseObjectError):
    """An abbreviated id matches more than one loose object."""
    
    def __init__(self, prefix: str, candidates: list):
        self.prefix = prefix
        self.candidates = sorted(candidates)
        super().__init__(
            f"Short object id {prefix} is ambiguous "
            f"({len(self.candidates)} candidates)"
        )


class InvalidObjectIdError(LooseObjectError):
    """Object id is not a hexadecimal string of usable length."""
