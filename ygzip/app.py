"""Session state for the compressor front end, and its command line."""

from __future__ import annotations

import argparse
import os
import sys
import threading
from collections.abc import Callable

from ygzip.workers import ChecksumWorker, CompressWorker, DecompressWorker

STARTUP_MESSAGE = "Ready. Select an input file and an output path."


def format_file_size(size: int) -> str:
    """Describe a file size in bytes, adding kilobytes above 1024 bytes."""
    text = f"{size} bytes"
    if size > 1024:
        text += f" ({size / 1024:.2f} KB)"
    return text


class Session:
    """Selected paths, the activity log and the jobs started from them."""

    def __init__(self, on_error: Callable[[str], None] | None = None) -> None:
        self.input_path = ""
        self.output_path = ""
        self.file_size_text = ""
        self.log: list[str] = [STARTUP_MESSAGE]
        self.errors: list[str] = []
        self.checksum_matched: bool | None = None
        self._on_error = on_error
        self._compress_lock = threading.Lock()
        self._checksum_lock = threading.Lock()

    @property
    def ready(self) -> bool:
        """True when both an input file and an output path are selected."""
        return bool(self.input_path and self.output_path)

    def _write(self, line: str) -> None:
        self.log.append(line)

    def _report_error(self, message: str) -> None:
        self.errors.append(message)
        if self._on_error is not None:
            self._on_error(message)

    def _require_paths(self) -> None:
        if not self.ready:
            raise ValueError("input file and output path must both be selected")

    def select_input(self, path: str | os.PathLike[str]) -> None:
        """Select the input file; an empty path leaves the selection unchanged."""
        path = os.fspath(path)
        if not path:
            return
        try:
            size = os.path.getsize(path)
        except OSError:
            size = 0
        self.input_path = path
        self.file_size_text = format_file_size(size)
        self._write(f"Selected file: {path}")

    def select_output(self, path: str | os.PathLike[str]) -> None:
        """Select the output path."""
        path = os.fspath(path)
        self.output_path = path
        self._write(f"Selected output path: {path}")

    def clear(self) -> None:
        """Forget both selected paths."""
        self.input_path = ""
        self.output_path = ""
        self.file_size_text = ""
        self._write("Paths cleared")

    def compress(self) -> CompressWorker:
        """Start compressing the input into the output; return the running worker."""
        self._require_paths()
        output = self.output_path
        worker = CompressWorker(
            self.input_path,
            output,
            lock=self._compress_lock,
            on_finished=lambda: self._write(f"Compression finished, written to: {output}"),
            on_error=self._report_error,
        )
        worker.start()
        return worker

    def decompress(self) -> DecompressWorker:
        """Start decompressing the input into the output; return the running worker."""
        self._require_paths()
        output = self.output_path
        worker = DecompressWorker(
            self.input_path,
            output,
            lock=self._compress_lock,
            on_finished=lambda _ok: self._write(
                f"Decompression finished, written to: {output}"
            ),
            on_error=self._report_error,
        )
        worker.start()
        return worker

    def _checksum_success(self, digest: str) -> None:
        self.checksum_matched = True
        self._write("SHA256 check passed, identical digest:")
        self._write(digest)

    def _checksum_failed(self, first: str, second: str) -> None:
        self.checksum_matched = False
        self._write("SHA256 check failed, different digests:")
        self._write(f"File one SHA256: {first}")
        self._write(f"File two SHA256: {second}")

    def check_sha256(self) -> ChecksumWorker:
        """Start comparing the SHA-256 digests of both files; return the worker."""
        self._require_paths()
        self.checksum_matched = None
        worker = ChecksumWorker(
            self.input_path,
            self.output_path,
            lock=self._checksum_lock,
            on_success=self._checksum_success,
            on_failed=self._checksum_failed,
            on_error=self._report_error,
        )
        worker.start()
        return worker


def main(argv: list[str] | None = None) -> int:
    """Run one job from the command line and print the session log."""
    parser = argparse.ArgumentParser(
        prog="ygzip", description="Huffman file compressor using the YG archive format."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, text in (
        ("compress", "compress INPUT into the archive OUTPUT"),
        ("decompress", "restore the archive INPUT into OUTPUT"),
        ("check", "compare the SHA-256 digests of INPUT and OUTPUT"),
    ):
        command = commands.add_parser(name, help=text)
        command.add_argument("input")
        command.add_argument("output")
    args = parser.parse_args(argv)

    session = Session()
    session.select_input(args.input)
    session.select_output(args.output)
    actions = {
        "compress": session.compress,
        "decompress": session.decompress,
        "check": session.check_sha256,
    }
    try:
        worker = actions[args.command]()
    except ValueError as exc:
        parser.error(str(exc))
    worker.join()

    for line in session.log:
        print(line)
    for message in session.errors:
        print(f"error: {message}", file=sys.stderr)

    if session.errors:
        return 1
    if args.command == "check" and not session.checksum_matched:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())