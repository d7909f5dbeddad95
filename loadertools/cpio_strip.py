"""Remove build-host metadata from a newc CPIO archive.

The i-node number, owner, group and modification time of every entry are
replaced so that otherwise identical builds produce identical archives.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

MAGIC = b"070701"
HEADER_SIZE = 110
ALIGNMENT = 4
TRAILER_NAME = "TRAILER!!!"

_FIELD = 8
_INO = slice(6, 14)
_UID = slice(22, 30)
_GID = slice(30, 38)
_MTIME = slice(46, 54)
_FILESIZE = slice(54, 62)
_NAMESIZE = slice(94, 102)


class CpioError(ValueError):
    """The data is not a well-formed newc CPIO archive."""


@dataclass(frozen=True)
class CpioEntry:
    """One file entry of an archive, located by its offsets."""

    name: str
    header_offset: int
    data_offset: int
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def _align(value: int) -> int:
    return value + (-value % ALIGNMENT)


def _hex_field(header: bytes, field: slice, what: str, offset: int) -> int:
    raw = header[field]
    try:
        return int(raw.decode("ascii"), 16)
    except (UnicodeDecodeError, ValueError):
        raise CpioError(f"invalid {what} field {raw!r} in header at offset {offset}") from None


def iter_entries(data: bytes) -> Iterator[CpioEntry]:
    """Yield the file entries of an archive in order, stopping at the trailer."""
    view = memoryview(data)
    offset = 0
    while True:
        if offset + HEADER_SIZE > len(view):
            raise CpioError(f"truncated header at offset {offset}")
        header = bytes(view[offset:offset + HEADER_SIZE])
        if header[:6] != MAGIC:
            raise CpioError(f"bad magic {header[:6]!r} at offset {offset}")
        namesize = _hex_field(header, _NAMESIZE, "namesize", offset)
        filesize = _hex_field(header, _FILESIZE, "filesize", offset)
        if namesize < 1:
            raise CpioError(f"empty file name in header at offset {offset}")
        name_start = offset + HEADER_SIZE
        name_end = name_start + namesize
        if name_end > len(view):
            raise CpioError(f"truncated file name at offset {name_start}")
        name = bytes(view[name_start:name_end - 1]).decode("utf-8", "surrogateescape")
        if name == TRAILER_NAME:
            return
        data_offset = _align(name_end)
        data_end = data_offset + filesize
        if data_end > len(view):
            raise CpioError(f"truncated file data for {name!r}")
        yield CpioEntry(name, offset, data_offset, bytes(view[data_offset:data_end]))
        offset = _align(data_end)


def strip_metadata(data: bytes) -> bytes:
    """Return a copy of the archive with i-node, owner, group and mtime replaced.

    Entry *i* gets i-node number ``11 + i`` written as ``%08x`` into an
    eight-byte field that also holds the string terminator, so only its
    first seven digits survive followed by a NUL byte. Owner, group and
    modification time are filled with NUL bytes.
    """
    out = bytearray(data)
    for index, entry in enumerate(iter_entries(data)):
        base = entry.header_offset
        inode = f"{11 + index:08x}".encode("ascii")[: _FIELD - 1] + b"\x00"
        out[base + _INO.start:base + _INO.stop] = inode
        for field in (_UID, _GID, _MTIME):
            out[base + field.start:base + field.stop] = bytes(_FIELD)
    return bytes(out)


def strip_file(path: str) -> None:
    """Strip metadata from the archive at *path*, rewriting it in place."""
    with open(path, "r+b") as archive:
        stripped = strip_metadata(archive.read())
        archive.seek(0)
        archive.write(stripped)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: strip one archive given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "cpio-strip"
        print(f"Usage: {prog} file\n Strip meta data from a CPIO file", file=sys.stderr)
        return -1
    try:
        strip_file(args[0])
    except OSError as exc:
        print(f"failed to open archive: {exc}", file=sys.stderr)
        return -1
    except CpioError as exc:
        print(f"failed to read CPIO info: {exc}", file=sys.stderr)
        return -1
    return 0