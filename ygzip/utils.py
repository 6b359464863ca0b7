"""Helpers shared by the encoder and decoder."""

from __future__ import annotations

import hashlib
import os
from collections.abc import Mapping

_CHUNK_SIZE = 8192


def _signed_byte(value: int) -> int:
    """Order key that sorts bytes as signed chars (0x80..0xFF first)."""
    return value - 256 if value > 127 else value


def sorted_codes(codes: Mapping[int, str]) -> dict[int, str]:
    """Return the code table ordered by symbol, treating bytes as signed."""
    return {symbol: codes[symbol] for symbol in sorted(codes, key=_signed_byte)}


def sha256_file(path: str | os.PathLike[str]) -> str:
    """Return the hex SHA-256 digest of the file at *path*."""
    digest = hashlib.sha256()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()