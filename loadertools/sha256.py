"""SHA-256 message digest (FIPS 180-3)."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _ror(n: int, k: int) -> int:
    return ((n >> k) | (n << (32 - k))) & _MASK


def _process_block(h: list[int], block: bytes) -> None:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x15, x2 = w[i - 15], w[i - 2]
        r0 = _ror(x15, 7) ^ _ror(x15, 18) ^ (x15 >> 3)
        r1 = _ror(x2, 17) ^ _ror(x2, 19) ^ (x2 >> 10)
        w.append((r1 + w[i - 7] + r0 + w[i - 16]) & _MASK)

    a, b, c, d, e, f, g, hh = h
    for k, word in zip(_K, w):
        s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (hh + s1 + ch + k + word) & _MASK
        s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) | (c & (a | b))
        t2 = (s0 + maj) & _MASK
        hh, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK

    for i, v in enumerate((a, b, c, d, e, f, g, hh)):
        h[i] = (h[i] + v) & _MASK


class Sha256:
    """Incremental SHA-256 hasher."""

    digest_size = 32
    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._h = list(_INITIAL)
        self._buf = bytearray()
        self._len = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._len += len(data)
        self._buf += data
        whole = len(self._buf) - len(self._buf) % 64
        for start in range(0, whole, 64):
            _process_block(self._h, bytes(self._buf[start:start + 64]))
        del self._buf[:whole]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state intact."""
        h = list(self._h)
        tail = bytes(self._buf) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += struct.pack(">Q", (self._len * 8) & 0xFFFFFFFFFFFFFFFF)
        for start in range(0, len(tail), 64):
            _process_block(h, tail[start:start + 64])
        return struct.pack(">8I", *h)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()

    def copy(self) -> Sha256:
        """Return an independent copy of the current state."""
        other = Sha256()
        other._h = list(self._h)
        other._buf = bytearray(self._buf)
        other._len = self._len
        return other