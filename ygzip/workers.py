"""Background threads that run compression, decompression and checksum jobs."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable

from ygzip.decoder import HuffmanDecoder
from ygzip.encoder import HuffmanEncoder
from ygzip.utils import sha256_file

ErrorCallback = Callable[[str], None]


class _Worker(threading.Thread):
    """A daemon thread bound to an input path, an output path and a lock."""

    def __init__(
        self,
        input_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
        *,
        lock: threading.Lock | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        super().__init__(daemon=True)
        self.input_path = os.fspath(input_path)
        self.output_path = os.fspath(output_path)
        self.lock = lock if lock is not None else threading.Lock()
        self._on_error = on_error

    def _fail(self, exc: Exception) -> None:
        if self._on_error is not None:
            self._on_error(str(exc))


class CompressWorker(_Worker):
    """Compresses the input file into the output path."""

    def __init__(
        self,
        input_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
        *,
        lock: threading.Lock | None = None,
        on_finished: Callable[[], None] | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        super().__init__(input_path, output_path, lock=lock, on_error=on_error)
        self._on_finished = on_finished

    def run(self) -> None:
        """Compress while holding the lock, then report the outcome."""
        with self.lock:
            try:
                HuffmanEncoder().encode(self.input_path, self.output_path)
            except Exception as exc:  # reported to the caller, never raised
                self._fail(exc)
                return
            if self._on_finished is not None:
                self._on_finished()


class DecompressWorker(_Worker):
    """Restores the input archive into the output path."""

    def __init__(
        self,
        input_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
        *,
        lock: threading.Lock | None = None,
        on_finished: Callable[[bool], None] | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        super().__init__(input_path, output_path, lock=lock, on_error=on_error)
        self._on_finished = on_finished

    def run(self) -> None:
        """Decompress while holding the lock, then report the outcome."""
        with self.lock:
            try:
                HuffmanDecoder().decode(self.input_path, self.output_path)
            except Exception as exc:
                self._fail(exc)
                return
            if self._on_finished is not None:
                self._on_finished(True)


class ChecksumWorker(_Worker):
    """Compares the SHA-256 digests of the two files."""

    def __init__(
        self,
        input_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
        *,
        lock: threading.Lock | None = None,
        on_success: Callable[[str], None] | None = None,
        on_failed: Callable[[str, str], None] | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        super().__init__(input_path, output_path, lock=lock, on_error=on_error)
        self._on_success = on_success
        self._on_failed = on_failed

    def run(self) -> None:
        """Hash both files; report one digest on a match, both otherwise."""
        with self.lock:
            try:
                first = sha256_file(self.input_path)
                second = sha256_file(self.output_path)
            except Exception as exc:
                self._fail(exc)
                return
            if first == second:
                if self._on_success is not None:
                    self._on_success(first)
            elif self._on_failed is not None:
                self._on_failed(first, second)