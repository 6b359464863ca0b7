# ygzip

ygzip compresses files with Huffman coding and restores them again. It writes
a small archive that starts with the magic bytes `YG`. The archive holds the
code table, followed by the packed bit stream. ygzip can also compare two files
by their SHA-256 digests, so you can check that a round trip gave back the
original unchanged.

## Installation

```
pip install .
```

ygzip needs only the Python standard library and runs on Python 3.10 or later.
The tests use pytest. Install it with `pip install .[test]`.

## Command line

Installing the package provides the `ygzip` command. It has three
subcommands, and each one takes an input path and an output path:

```
ygzip compress notes.txt notes.yg
ygzip decompress notes.yg notes.out.txt
ygzip check notes.txt notes.out.txt
```

- `compress INPUT OUTPUT` compresses INPUT into the archive OUTPUT.
- `decompress INPUT OUTPUT` restores the archive INPUT into OUTPUT.
- `check INPUT OUTPUT` compares the SHA-256 digests of the two files. When
  they match it prints the shared digest. When they differ it prints both.

Run `ygzip --help` or `ygzip <subcommand> --help` for usage.

Each run prints a log of what it did, including the selected file, its size
and the result. Errors are printed to standard error, prefixed with `error:`.
The exit status is 0 on success. It is 1 when the job failed, and also when
`check` finds that the digests differ.

## Library use

Work directly with bytes:

```python
from ygzip.encoder import encode_bytes
from ygzip.decoder import decode_bytes

archive = encode_bytes(b"abracadabra")
assert decode_bytes(archive) == b"abracadabra"
```

Or work with files:

```python
from ygzip.encoder import HuffmanEncoder
from ygzip.decoder import HuffmanDecoder
from ygzip.utils import sha256_file

header = HuffmanEncoder().encode("notes.txt", "notes.yg")
print(header.original_size, header.compressed_size)
HuffmanDecoder().decode("notes.yg", "notes.out.txt")
assert sha256_file("notes.txt") == sha256_file("notes.out.txt")
```

`HuffmanEncoder.encode` and `HuffmanDecoder.decode` return the archive's
`HuffmanHeader`. The header records the table size, the original size, the
compressed size and the number of padding bits.

### Lower-level helpers

- `ygzip.encoder.count_weights(data)` counts how often each byte occurs.
- `ygzip.encoder.build_tree(data)` builds the Huffman tree of
  `ygzip.node.HuffmanNode` objects and returns its root.
- `ygzip.encoder.generate_codes(root)` maps each leaf byte to its bit string,
  using `0` for left and `1` for right.
- `ygzip.decoder.read_archive(data)` splits an archive into three parts: its
  header, a code table that maps bit strings to bytes, and the payload.
- `ygzip.models.HuffmanHeader` has `pack()` and `HuffmanHeader.unpack(data)`
  to write and read the fixed-size header.
- `ygzip.utils.sorted_codes(codes)` orders a code table the way the archive
  stores it.
- `ygzip.utils.sha256_file(path)` returns a file's hex SHA-256 digest.

### Background jobs

`ygzip.workers` provides thread classes that run one job each:
`CompressWorker`, `DecompressWorker` and `ChecksumWorker`. Each takes an input
path and an output path, plus an optional lock and callbacks. The worker
reports its outcome through these callbacks and does not raise.

`ygzip.app.Session` keeps the selected paths and a log, and starts these
workers:

- `select_input(path)` and `select_output(path)` set the paths.
- `clear()` forgets both paths.
- `compress()`, `decompress()` and `check_sha256()` each start a job and
  return the running worker.

If either path is missing, `compress()`, `decompress()` and `check_sha256()`
raise `ValueError`. Error messages from the jobs are collected in
`Session.errors`.

`ygzip.app.format_file_size(size)` formats a size, for example
`"2048 bytes (2.00 KB)"`.

### Errors

- A malformed archive raises `ygzip.models.HuffmanFormatError`, which is a
  subclass of `ValueError`. This covers a wrong magic number, a truncated
  header, a truncated code table or payload, and code text that is not ASCII.
- Compressing empty input raises `ValueError`, because there is nothing to
  build a code table from.
- Input with a code longer than 255 bits also raises `ValueError` when it is
  compressed.

## Archive layout

All multi-byte integers are little-endian. The header is 32 bytes long:

| Field             | Size                              |
|-------------------|-----------------------------------|
| magic `YG`        | 2 bytes                           |
| table size        | 2 bytes (unsigned)                |
| (zero padding)    | 4 bytes                           |
| original size     | 8 bytes (unsigned)                |
| compressed size   | 8 bytes (unsigned)                |
| padding bits      | 1 byte                            |
| (zero padding)    | 7 bytes                           |

The code table follows the header. It has `table size` entries, and each entry
holds three fields:

- the symbol, 1 byte;
- the code length, 1 byte;
- the code text, written as the ASCII characters `0` and `1`.

Entries are sorted by symbol, with bytes compared as signed values, so
`0x80`–`0xFF` come before `0x00`–`0x7F`.

The payload comes last and is `compressed size` bytes long. Bits are packed
from the most significant bit down. The last byte is filled with
`padding bits` zero bits.

## What ygzip does not do

ygzip has no graphical window. It runs only as the `ygzip` command or as a
library.