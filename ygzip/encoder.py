"""Huffman compression into the YG archive format."""

from __future__ import annotations

import heapq
import itertools
import os
from collections import Counter

from ygzip.models import HuffmanHeader
from ygzip.node import HuffmanNode
from ygzip.utils import _signed_byte, sorted_codes

_MAX_CODE_LENGTH = 255


def count_weights(data: bytes) -> dict[int, int]:
    """Count each byte of *data*, ordered by symbol as a signed byte."""
    if not data:
        raise ValueError("input is empty")
    counts = Counter(data)
    return {symbol: counts[symbol] for symbol in sorted(counts, key=_signed_byte)}


def build_tree(data: bytes) -> HuffmanNode:
    """Build the Huffman tree for *data* and return its root."""
    order = itertools.count()
    heap = [
        (weight, next(order), HuffmanNode(weight, symbol))
        for symbol, weight in count_weights(data).items()
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, first = heapq.heappop(heap)
        _, _, second = heapq.heappop(heap)
        parent = HuffmanNode(first.weight + second.weight, left=first, right=second)
        first.parent = parent
        second.parent = parent
        heapq.heappush(heap, (parent.weight, next(order), parent))
    return heap[0][2]


def generate_codes(root: HuffmanNode) -> dict[int, str]:
    """Map every leaf symbol to its bit string ('0' left, '1' right)."""
    codes: dict[int, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            codes[node.value] = prefix
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


def _compress(data: bytes) -> tuple[HuffmanHeader, bytes]:
    codes = sorted_codes(generate_codes(build_tree(data)))

    table = bytearray()
    for symbol, code in codes.items():
        if len(code) > _MAX_CODE_LENGTH:
            raise ValueError(f"code for byte {symbol} is longer than {_MAX_CODE_LENGTH} bits")
        table.append(symbol)
        table.append(len(code))
        table += code.encode("ascii")

    bits = "".join(codes[byte] for byte in data)
    padding = -len(bits) % 8
    if bits:
        payload = int(bits + "0" * padding, 2).to_bytes((len(bits) + padding) // 8, "big")
    else:
        payload = b""

    header = HuffmanHeader(
        table_size=len(codes),
        original_size=len(data),
        compressed_size=len(payload),
        padding_bits=padding,
    )
    return header, header.pack() + bytes(table) + payload


def encode_bytes(data: bytes) -> bytes:
    """Compress *data* and return the complete archive."""
    return _compress(data)[1]


class HuffmanEncoder:
    """Compresses files into YG archives."""

    def encode(
        self, input_path: str | os.PathLike[str], output_path: str | os.PathLike[str]
    ) -> HuffmanHeader:
        """Compress the file at *input_path* into *output_path*; return its header."""
        with open(input_path, "rb") as source:
            data = source.read()
        header, archive = _compress(data)
        with open(output_path, "wb") as target:
            target.write(archive)
        return header