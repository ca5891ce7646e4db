"""Inflate zlib-compressed loose object data."""

import zlib

from .errors import DecompressionError


def inflate(data: bytes) -> bytes:
    """
    Decompress a loose object.
    
    Loose objects are stored as a single zlib stream. The whole stream is
    inflated at once; there is no partial result.
    
    Args:
        data: Compressed bytes as read from the object file
        
    Returns:
        bytes: Decompressed object (header and content)
        
    Raises:
        DecompressionError: If data is not a complete, valid zlib stream
    """
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise DecompressionError(f"Cannot inflate object: {e}") from e
