"""Binary tree node used to build Huffman codes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class HuffmanNode:
    """A tree node; leaves carry a byte value, inner nodes the sum of weights."""

    weight: int
    value: int = 0
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None
    parent: HuffmanNode | None = field(default=None, repr=False)

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None