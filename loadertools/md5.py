"""MD5 message digest (RFC 1321)."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF

_TAB = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _rol(n: int, k: int) -> int:
    return ((n << k) | (n >> (32 - k))) & _MASK


def _process_block(h: list[int], block: bytes) -> None:
    words = struct.unpack("<16I", block)
    a, b, c, d = h
    for i in range(64):
        stage = i // 16
        if stage == 0:
            f = d ^ (b & (c ^ d))
            g = i
        elif stage == 1:
            f = c ^ (d & (c ^ b))
            g = (5 * i + 1) % 16
        elif stage == 2:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * i) % 16
        shift = _SHIFTS[stage][i % 4]
        rotated = _rol((a + f + words[g] + _TAB[i]) & _MASK, shift)
        a, b, c, d = d, (b + rotated) & _MASK, b, c
    h[0] = (h[0] + a) & _MASK
    h[1] = (h[1] + b) & _MASK
    h[2] = (h[2] + c) & _MASK
    h[3] = (h[3] + d) & _MASK


class Md5:
    """Incremental MD5 hasher."""

    digest_size = 16
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
        tail += struct.pack("<Q", (self._len * 8) & 0xFFFFFFFFFFFFFFFF)
        for start in range(0, len(tail), 64):
            _process_block(h, tail[start:start + 64])
        return struct.pack("<4I", *h)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()

    def copy(self) -> Md5:
        """Return an independent copy of the current state."""
        other = Md5()
        other._h = list(self._h)
        other._buf = bytearray(self._buf)
        other._len = self._len
        return other