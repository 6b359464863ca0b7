"""Huffman-coding file compression with SHA-256 verification."""

__version__ = "0.1.0"
__all__ = ["models", "node", "utils", "encoder", "decoder", "workers", "app"]