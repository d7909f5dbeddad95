import pytest
from hypothesis import given, strategies as st

from loadertools.cpio_strip import (
    CpioError,
    iter_entries,
    main,
    strip_file,
    strip_metadata,
)


def _header(ino, uid, gid, mtime, filesize, namesize):
    fields = [ino, 0o100644, uid, gid, 1, mtime, filesize, 0, 0, 0, 0, namesize, 0]
    return b"070701" + b"".join(b"%08x" % f for f in fields)


def _pad(buf):
    buf += b"\x00" * (-len(buf) % 4)


def build(entries):
    out = bytearray()
    for i, (name, data) in enumerate(entries):
        raw = name.encode() + b"\x00"
        out += _header(1000 + i, 1234, 5678, 1600000000 + i, len(data), len(raw))
        out += raw
        _pad(out)
        out += data
        _pad(out)
    out += _header(0, 0, 0, 0, 0, 11) + b"TRAILER!!!\x00"
    _pad(out)
    return bytes(out)


SAMPLE = [("kernel.elf", b"\x7fELF" + b"k" * 13), ("rootserver", b"abc"), ("x", b"")]


def test_iter_entries_reads_names_and_data():
    entries = list(iter_entries(build(SAMPLE)))
    assert [(e.name, e.data) for e in entries] == SAMPLE
    assert [e.size for e in entries] == [17, 3, 0]
    assert entries[0].header_offset == 0
    assert all(e.data_offset % 4 == 0 for e in entries)


def test_strip_sets_inode_with_terminator():
    stripped = strip_metadata(build(SAMPLE))
    entries = list(iter_entries(stripped))
    assert stripped[entries[0].header_offset + 6:entries[0].header_offset + 14] == b"0000000\x00"


def test_strip_later_inode_keeps_seven_digits():
    archive = build([(f"f{i}", b"d") for i in range(6)])
    stripped = strip_metadata(archive)
    sixth = list(iter_entries(stripped))[5].header_offset
    assert stripped[sixth + 6:sixth + 14] == b"0000001\x00"


def test_strip_clears_owner_group_mtime():
    stripped = strip_metadata(build(SAMPLE))
    for entry in iter_entries(stripped):
        base = entry.header_offset
        assert stripped[base + 22:base + 38] == bytes(16)
        assert stripped[base + 46:base + 54] == bytes(8)


def test_strip_leaves_other_bytes_alone():
    archive = build(SAMPLE)
    stripped = strip_metadata(archive)
    assert len(stripped) == len(archive)
    touched = set()
    for entry in iter_entries(archive):
        base = entry.header_offset
        for lo, hi in ((6, 14), (22, 38), (46, 54)):
            touched.update(range(base + lo, base + hi))
    assert all(archive[i] == stripped[i] for i in range(len(archive)) if i not in touched)
    assert [(e.name, e.data) for e in iter_entries(stripped)] == SAMPLE


def test_strip_is_idempotent():
    once = strip_metadata(build(SAMPLE))
    assert strip_metadata(once) == once


def test_bad_magic_raises():
    archive = bytearray(build(SAMPLE))
    archive[0:6] = b"070707"
    with pytest.raises(CpioError):
        list(iter_entries(bytes(archive)))


def test_truncated_archive_raises():
    archive = build(SAMPLE)
    with pytest.raises(CpioError):
        strip_metadata(archive[:120])


def test_empty_archive_raises():
    with pytest.raises(CpioError):
        strip_metadata(b"")


@given(
    st.lists(
        st.tuples(
            st.text(alphabet="abcdefghij./_", min_size=1, max_size=20),
            st.binary(max_size=40),
        ),
        max_size=6,
    )
)
def test_entries_survive_stripping(entries):
    archive = build(entries)
    stripped = strip_metadata(archive)
    assert [(e.name, e.data) for e in iter_entries(stripped)] == entries
    assert len(stripped) == len(archive)


def test_strip_file_in_place(tmp_path):
    path = tmp_path / "archive.cpio"
    archive = build(SAMPLE)
    path.write_bytes(archive)
    strip_file(str(path))
    assert path.read_bytes() == strip_metadata(archive)


def test_main_success(tmp_path):
    path = tmp_path / "archive.cpio"
    archive = build(SAMPLE)
    path.write_bytes(archive)
    assert main([str(path)]) == 0
    assert path.read_bytes() == strip_metadata(archive)


def test_main_usage(capsys):
    assert main([]) == -1
    assert "Strip meta data from a CPIO file" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cpio")]) == -1
    assert "failed to open archive" in capsys.readouterr().err


def test_main_invalid_archive(tmp_path, capsys):
    path = tmp_path / "bad.cpio"
    path.write_bytes(b"not an archive at all")
    assert main([str(path)]) == -1
    assert path.read_bytes() == b"not an archive at all"
    assert "failed to read CPIO info" in capsys.readouterr().err