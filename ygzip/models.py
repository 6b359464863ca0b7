"""Archive header model and the errors raised for malformed archives."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MAGIC = b"YG"

# magic[2], table size (u16), 4 alignment bytes, original size (u64),
# compressed size (u64), padding bits (u8), 7 trailing alignment bytes.
_LAYOUT = struct.Struct("<2sH4xQQB7x")
HEADER_SIZE = _LAYOUT.size


class HuffmanFormatError(ValueError):
    """Raised when archive data cannot be parsed or written."""


@dataclass(frozen=True)
class HuffmanHeader:
    """Fixed-size metadata block at the start of every archive."""

    table_size: int = 0
    original_size: int = 0
    compressed_size: int = 0
    padding_bits: int = 0
    magic: bytes = MAGIC

    def pack(self) -> bytes:
        """Serialise the header to its on-disk form."""
        try:
            return _LAYOUT.pack(
                self.magic,
                self.table_size,
                self.original_size,
                self.compressed_size,
                self.padding_bits,
            )
        except struct.error as exc:
            raise HuffmanFormatError(f"Cannot pack header: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> HuffmanHeader:
        """Parse a header from the start of *data*."""
        if len(data) < HEADER_SIZE:
            raise HuffmanFormatError("Error while reading header")
        magic, table_size, original_size, compressed_size, padding_bits = (
            _LAYOUT.unpack_from(data)
        )
        if magic != MAGIC:
            raise HuffmanFormatError("Invalid type of file")
        return cls(
            table_size=table_size,
            original_size=original_size,
            compressed_size=compressed_size,
            padding_bits=padding_bits,
            magic=magic,
        )