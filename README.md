# loadertools

Small helpers for building reproducible boot images:

- `loadertools.md5.Md5` and `loadertools.sha256.Sha256`: self-contained
  MD5 and SHA-256 hashers in pure Python. Their interface follows
  `hashlib`: the constructor takes optional initial data, and they have
  `update(data)`, `digest()`, `hexdigest()` and `copy()`. `digest()` does
  not consume the state, so you can keep feeding data after calling it.
- `loadertools.cpio_strip`: removes host-specific metadata from a newc
  (`070701`) CPIO archive so that otherwise identical builds give
  byte-identical archives.

## Installation

```
pip install .
```

## Command line

```
cpio-strip archive.cpio
```

This rewrites the archive in place. For every entry before the
`TRAILER!!!` record:

- the i-node field gets a synthetic number, `11 + index`, formatted as
  `%08x`. The field also holds a terminating NUL byte, so only the first
  seven hex digits are kept.
- the UID, GID and modification-time fields are filled with NUL bytes.

If it is not given exactly one argument, the command prints a usage
message. It fails with a non-zero exit status when the file cannot be
opened or is not a well-formed CPIO archive.

## Library use

```python
from loadertools.md5 import Md5
from loadertools.sha256 import Sha256
from loadertools.cpio_strip import CpioError, iter_entries, strip_metadata, strip_file

h = Sha256(b"kernel image ")
h.update(b"bytes")
print(h.hexdigest())
print(Md5(b"kernel image bytes").digest().hex())

with open("archive.cpio", "rb") as fh:
    raw = fh.read()
for entry in iter_entries(raw):
    print(entry.name, entry.size, entry.header_offset, entry.data_offset)

cleaned = strip_metadata(raw)   # returns new bytes of the same length
strip_file("archive.cpio")      # or edit a file in place
```

`iter_entries` yields a frozen `CpioEntry` for each file, in archive
order. Each entry has `name`, `header_offset`, `data_offset` and `data`,
plus a `size` property. Malformed input raises `CpioError`, which is a
subclass of `ValueError`. That covers a truncated header, name or data,
bad magic, a non-hex size field and an empty name.

## What it does not do

The package has no helper that picks a hash algorithm by name or type,
and no function that prints digests. Create an `Md5` or `Sha256` and call
`hexdigest()` yourself. The CPIO support only reads and strips existing
newc archives. It does not create archives and does not extract them to
disk.

## Tests

```
pip install .[test]
pytest
```