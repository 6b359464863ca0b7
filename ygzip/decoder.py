"""Decompression of YG archives."""

from __future__ import annotations

import os

from ygzip.models import HEADER_SIZE, HuffmanFormatError, HuffmanHeader


def read_archive(data: bytes) -> tuple[HuffmanHeader, dict[str, int], bytes]:
    """Split an archive into its header, code table (code -> byte) and payload."""
    header = HuffmanHeader.unpack(data)
    position = HEADER_SIZE
    codes: dict[str, int] = {}
    for _ in range(header.table_size):
        if position + 2 > len(data):
            raise HuffmanFormatError("Error while reading huffman code table")
        symbol, length = data[position], data[position + 1]
        position += 2
        raw = data[position : position + length]
        if len(raw) < length:
            raise HuffmanFormatError("Error while reading huffman code table")
        position += length
        try:
            codes[raw.decode("ascii")] = symbol
        except UnicodeDecodeError as exc:
            raise HuffmanFormatError("Error while reading huffman code table") from exc

    payload = data[position : position + header.compressed_size]
    if len(payload) < header.compressed_size:
        raise HuffmanFormatError("Error while reading compressed data")
    return header, codes, bytes(payload)


def _decompress(data: bytes) -> tuple[HuffmanHeader, bytes]:
    header, codes, payload = read_archive(data)
    total_bits = max(header.compressed_size * 8 - header.padding_bits, 0)
    bits = "".join(f"{byte:08b}" for byte in payload)[:total_bits]

    result = bytearray()
    pending = ""
    for bit in bits:
        pending += bit
        symbol = codes.get(pending)
        if symbol is not None:
            result.append(symbol)
            pending = ""
    return header, bytes(result)


def decode_bytes(data: bytes) -> bytes:
    """Decompress a complete archive and return the original bytes."""
    return _decompress(data)[1]


class HuffmanDecoder:
    """Restores files from YG archives."""

    def decode(
        self, input_path: str | os.PathLike[str], output_path: str | os.PathLike[str]
    ) -> HuffmanHeader:
        """Decompress *input_path* into *output_path*; return the archive header."""
        with open(input_path, "rb") as source:
            data = source.read()
        header, result = _decompress(data)
        with open(output_path, "wb") as target:
            target.write(result)
        return header