import threading

from ygzip.decoder import decode_bytes
from ygzip.utils import sha256_file
from ygzip.workers import ChecksumWorker, CompressWorker, DecompressWorker

DATA = b"hello huffman world\n" * 10


def test_compress_then_decompress_round_trip(tmp_path):
    src = tmp_path / "input.txt"
    archive = tmp_path / "archive.yg"
    restored = tmp_path / "restored.txt"
    src.write_bytes(DATA)

    events = []
    errors = []
    CompressWorker(
        src, archive, on_finished=lambda: events.append("done"), on_error=errors.append
    ).run()
    assert events == ["done"]
    assert errors == []
    assert decode_bytes(archive.read_bytes()) == DATA

    results = []
    DecompressWorker(archive, restored, on_finished=results.append, on_error=errors.append).run()
    assert results == [True]
    assert errors == []
    assert restored.read_bytes() == DATA


def test_compress_missing_input_reports_error(tmp_path):
    events = []
    errors = []
    CompressWorker(
        tmp_path / "missing.txt",
        tmp_path / "out.yg",
        on_finished=lambda: events.append("done"),
        on_error=errors.append,
    ).run()
    assert events == []
    assert len(errors) == 1


def test_compress_empty_input_reports_error(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    errors = []
    CompressWorker(src, tmp_path / "out.yg", on_error=errors.append).run()
    assert len(errors) == 1
    assert "empty" in errors[0]


def test_decompress_invalid_archive_reports_error(tmp_path):
    bogus = tmp_path / "bogus.yg"
    bogus.write_bytes(b"XX" + b"\0" * 30)
    results = []
    errors = []
    DecompressWorker(
        bogus, tmp_path / "out.txt", on_finished=results.append, on_error=errors.append
    ).run()
    assert results == []
    assert errors == ["Invalid type of file"]


def test_checksum_identical_files(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(DATA)
    second.write_bytes(DATA)
    successes = []
    failures = []
    ChecksumWorker(
        first,
        second,
        on_success=successes.append,
        on_failed=lambda a, b: failures.append((a, b)),
    ).run()
    assert successes == [sha256_file(first)]
    assert failures == []


def test_checksum_different_files(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(DATA)
    second.write_bytes(DATA + b"!")
    successes = []
    failures = []
    ChecksumWorker(
        first,
        second,
        on_success=successes.append,
        on_failed=lambda a, b: failures.append((a, b)),
    ).run()
    assert successes == []
    assert failures == [(sha256_file(first), sha256_file(second))]


def test_checksum_missing_file_reports_error(tmp_path):
    first = tmp_path / "a.bin"
    first.write_bytes(DATA)
    errors = []
    successes = []
    ChecksumWorker(
        first, tmp_path / "missing.bin", on_success=successes.append, on_error=errors.append
    ).run()
    assert successes == []
    assert len(errors) == 1


def test_worker_waits_for_shared_lock(tmp_path):
    src = tmp_path / "input.txt"
    src.write_bytes(DATA)
    lock = threading.Lock()
    events = []
    worker = CompressWorker(
        src, tmp_path / "out.yg", lock=lock, on_finished=lambda: events.append("done")
    )
    lock.acquire()
    try:
        worker.start()
        worker.join(0.2)
        assert worker.is_alive()
        assert events == []
    finally:
        lock.release()
    worker.join(5)
    assert not worker.is_alive()
    assert events == ["done"]


def test_started_worker_runs_in_background(tmp_path):
    src = tmp_path / "input.txt"
    archive = tmp_path / "out.yg"
    src.write_bytes(DATA)
    events = []
    worker = CompressWorker(src, archive, on_finished=lambda: events.append("done"))
    worker.start()
    worker.join(5)
    assert events == ["done"]
    assert decode_bytes(archive.read_bytes()) == DATA