"""DES block cipher with the key bit order used by VNC authentication.

VNC feeds each key byte least-significant bit first, so the most significant
bit of every key byte is the one that is ignored, not the least significant.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

__all__ = ["Mode", "DesCipher", "deskey", "des"]

_MASK32 = 0xFFFFFFFF

_BYTEBIT = (0o1, 0o2, 0o4, 0o10, 0o20, 0o40, 0o100, 0o200)

_BIGBYTE = tuple(1 << (23 - j) for j in range(24))

_PC1 = (
    56, 48, 40, 32, 24, 16, 8, 0, 57, 49, 41, 33, 25, 17,
    9, 1, 58, 50, 42, 34, 26, 18, 10, 2, 59, 51, 43, 35,
    62, 54, 46, 38, 30, 22, 14, 6, 61, 53, 45, 37, 29, 21,
    13, 5, 60, 52, 44, 36, 28, 20, 12, 4, 27, 19, 11, 3,
)

_TOTROT = (1, 2, 4, 6, 8, 10, 12, 14, 15, 17, 19, 21, 23, 25, 27, 28)

_PC2 = (
    13, 16, 10, 23, 0, 4, 2, 27, 14, 5, 20, 9,
    22, 18, 11, 3, 25, 7, 15, 6, 26, 19, 12, 1,
    40, 51, 30, 36, 46, 54, 29, 39, 50, 44, 32, 47,
    43, 48, 38, 55, 33, 52, 45, 41, 49, 35, 28, 31,
)

_SP1 = (
    0x01010400, 0x00000000, 0x00010000, 0x01010404,
    0x01010004, 0x00010404, 0x00000004, 0x00010000,
    0x00000400, 0x01010400, 0x01010404, 0x00000400,
    0x01000404, 0x01010004, 0x01000000, 0x00000004,
    0x00000404, 0x01000400, 0x01000400, 0x00010400,
    0x00010400, 0x01010000, 0x01010000, 0x01000404,
    0x00010004, 0x01000004, 0x01000004, 0x00010004,
    0x00000000, 0x00000404, 0x00010404, 0x01000000,
    0x00010000, 0x01010404, 0x00000004, 0x01010000,
    0x01010400, 0x01000000, 0x01000000, 0x00000400,
    0x01010004, 0x00010000, 0x00010400, 0x01000004,
    0x00000400, 0x00000004, 0x01000404, 0x00010404,
    0x01010404, 0x00010004, 0x01010000, 0x01000404,
    0x01000004, 0x00000404, 0x00010404, 0x01010400,
    0x00000404, 0x01000400, 0x01000400, 0x00000000,
    0x00010004, 0x00010400, 0x00000000, 0x01010004,
)

_SP2 = (
    0x80108020, 0x80008000, 0x00008000, 0x00108020,
    0x00100000, 0x00000020, 0x80100020, 0x80008020,
    0x80000020, 0x80108020, 0x80108000, 0x80000000,
    0x80008000, 0x00100000, 0x00000020, 0x80100020,
    0x00108000, 0x00100020, 0x80008020, 0x00000000,
    0x80000000, 0x00008000, 0x00108020, 0x80100000,
    0x00100020, 0x80000020, 0x00000000, 0x00108000,
    0x00008020, 0x80108000, 0x80100000, 0x00008020,
    0x00000000, 0x00108020, 0x80100020, 0x00100000,
    0x80008020, 0x80100000, 0x80108000, 0x00008000,
    0x80100000, 0x80008000, 0x00000020, 0x80108020,
    0x00108020, 0x00000020, 0x00008000, 0x80000000,
    0x00008020, 0x80108000, 0x00100000, 0x80000020,
    0x00100020, 0x80008020, 0x80000020, 0x00100020,
    0x00108000, 0x00000000, 0x80008000, 0x00008020,
    0x80000000, 0x80100020, 0x80108020, 0x00108000,
)

_SP3 = (
    0x00000208, 0x08020200, 0x00000000, 0x08020008,
    0x08000200, 0x00000000, 0x00020208, 0x08000200,
    0x00020008, 0x08000008, 0x08000008, 0x00020000,
    0x08020208, 0x00020008, 0x08020000, 0x00000208,
    0x08000000, 0x00000008, 0x08020200, 0x00000200,
    0x00020200, 0x08020000, 0x08020008, 0x00020208,
    0x08000208, 0x00020200, 0x00020000, 0x08000208,
    0x00000008, 0x08020208, 0x00000200, 0x08000000,
    0x08020200, 0x08000000, 0x00020008, 0x00000208,
    0x00020000, 0x08020200, 0x08000200, 0x00000000,
    0x00000200, 0x00020008, 0x08020208, 0x08000200,
    0x08000008, 0x00000200, 0x00000000, 0x08020008,
    0x08000208, 0x00020000, 0x08000000, 0x08020208,
    0x00000008, 0x00020208, 0x00020200, 0x08000008,
    0x08020000, 0x08000208, 0x00000208, 0x08020000,
    0x00020208, 0x00000008, 0x08020008, 0x00020200,
)

_SP4 = (
    0x00802001, 0x00002081, 0x00002081, 0x00000080,
    0x00802080, 0x00800081, 0x00800001, 0x00002001,
    0x00000000, 0x00802000, 0x00802000, 0x00802081,
    0x00000081, 0x00000000, 0x00800080, 0x00800001,
    0x00000001, 0x00002000, 0x00800000, 0x00802001,
    0x00000080, 0x00800000, 0x00002001, 0x00002080,
    0x00800081, 0x00000001, 0x00002080, 0x00800080,
    0x00002000, 0x00802080, 0x00802081, 0x00000081,
    0x00800080, 0x00800001, 0x00802000, 0x00802081,
    0x00000081, 0x00000000, 0x00000000, 0x00802000,
    0x00002080, 0x00800080, 0x00800081, 0x00000001,
    0x00802001, 0x00002081, 0x00002081, 0x00000080,
    0x00802081, 0x00000081, 0x00000001, 0x00002000,
    0x00800001, 0x00002001, 0x00802080, 0x00800081,
    0x00002001, 0x00002080, 0x00800000, 0x00802001,
    0x00000080, 0x00800000, 0x00002000, 0x00802080,
)

_SP5 = (
    0x00000100, 0x02080100, 0x02080000, 0x42000100,
    0x00080000, 0x00000100, 0x40000000, 0x02080000,
    0x40080100, 0x00080000, 0x02000100, 0x40080100,
    0x42000100, 0x42080000, 0x00080100, 0x40000000,
    0x02000000, 0x40080000, 0x40080000, 0x00000000,
    0x40000100, 0x42080100, 0x42080100, 0x02000100,
    0x42080000, 0x40000100, 0x00000000, 0x42000000,
    0x02080100, 0x02000000, 0x42000000, 0x00080100,
    0x00080000, 0x42000100, 0x00000100, 0x02000000,
    0x40000000, 0x02080000, 0x42000100, 0x40080100,
    0x02000100, 0x40000000, 0x42080000, 0x02080100,
    0x40080100, 0x00000100, 0x02000000, 0x42080000,
    0x42080100, 0x00080100, 0x42000000, 0x42080100,
    0x02080000, 0x00000000, 0x40080000, 0x42000000,
    0x00080100, 0x02000100, 0x40000100, 0x00080000,
    0x00000000, 0x40080000, 0x02080100, 0x40000100,
)

_SP6 = (
    0x20000010, 0x20400000, 0x00004000, 0x20404010,
    0x20400000, 0x00000010, 0x20404010, 0x00400000,
    0x20004000, 0x00404010, 0x00400000, 0x20000010,
    0x00400010, 0x20004000, 0x20000000, 0x00004010,
    0x00000000, 0x00400010, 0x20004010, 0x00004000,
    0x00404000, 0x20004010, 0x00000010, 0x20400010,
    0x20400010, 0x00000000, 0x00404010, 0x20404000,
    0x00004010, 0x00404000, 0x20404000, 0x20000000,
    0x20004000, 0x00000010, 0x20400010, 0x00404000,
    0x20404010, 0x00400000, 0x00004010, 0x20000010,
    0x00400000, 0x20004000, 0x20000000, 0x00004010,
    0x20000010, 0x20404010, 0x00404000, 0x20400000,
    0x00404010, 0x20404000, 0x00000000, 0x20400010,
    0x00000010, 0x00004000, 0x20400000, 0x00404010,
    0x00004000, 0x00400010, 0x20004010, 0x00000000,
    0x20404000, 0x20000000, 0x00400010, 0x20004010,
)

_SP7 = (
    0x00200000, 0x04200002, 0x04000802, 0x00000000,
    0x00000800, 0x04000802, 0x00200802, 0x04200800,
    0x04200802, 0x00200000, 0x00000000, 0x04000002,
    0x00000002, 0x04000000, 0x04200002, 0x00000802,
    0x04000800, 0x00200802, 0x00200002, 0x04000800,
    0x04000002, 0x04200000, 0x04200800, 0x00200002,
    0x04200000, 0x00000800, 0x00000802, 0x04200802,
    0x00200800, 0x00000002, 0x04000000, 0x00200800,
    0x04000000, 0x00200800, 0x00200000, 0x04000802,
    0x04000802, 0x04200002, 0x04200002, 0x00000002,
    0x00200002, 0x04000000, 0x04000800, 0x00200000,
    0x04200800, 0x00000802, 0x00200802, 0x04200800,
    0x00000802, 0x04000002, 0x04200802, 0x04200000,
    0x00200800, 0x00000000, 0x00000002, 0x04200802,
    0x00000000, 0x00200802, 0x04200000, 0x00000800,
    0x04000002, 0x04000800, 0x00000800, 0x00200002,
)

_SP8 = (
    0x10001040, 0x00001000, 0x00040000, 0x10041040,
    0x10000000, 0x10001040, 0x00000040, 0x10000000,
    0x00040040, 0x10040000, 0x10041040, 0x00041000,
    0x10041000, 0x00041040, 0x00001000, 0x00000040,
    0x10040000, 0x10000040, 0x10001000, 0x00001040,
    0x00041000, 0x00040040, 0x10040040, 0x10041000,
    0x00001040, 0x00000000, 0x00000000, 0x10040040,
    0x10000040, 0x10001000, 0x00041040, 0x00040000,
    0x00041040, 0x00040000, 0x10041000, 0x00001000,
    0x00000040, 0x10040040, 0x00001000, 0x00041040,
    0x10001000, 0x00000040, 0x10000040, 0x10040000,
    0x10040040, 0x10000000, 0x00040000, 0x10001040,
    0x00000000, 0x10041040, 0x00040040, 0x10000040,
    0x10040000, 0x10001000, 0x10001040, 0x00000000,
    0x10041040, 0x00041000, 0x00041000, 0x00001040,
    0x00001040, 0x00040040, 0x10000000, 0x10041000,
)


class Mode(IntEnum):
    """Direction of a key schedule."""

    ENCRYPT = 0
    DECRYPT = 1


def _cook(raw: Sequence[int]) -> tuple[int, ...]:
    """Rearrange the 16 raw subkey pairs into the layout the rounds expect."""
    cooked: list[int] = []
    for raw0, raw1 in zip(raw[0::2], raw[1::2]):
        cooked.append(
            ((raw0 & 0x00FC0000) << 6)
            | ((raw0 & 0x00000FC0) << 10)
            | ((raw1 & 0x00FC0000) >> 10)
            | ((raw1 & 0x00000FC0) >> 6)
        )
        cooked.append(
            ((raw0 & 0x0003F000) << 12)
            | ((raw0 & 0x0000003F) << 16)
            | ((raw1 & 0x0003F000) >> 4)
            | (raw1 & 0x0000003F)
        )
    return tuple(cooked)


def deskey(key: bytes, mode: Mode | int) -> tuple[int, ...]:
    """Build the 32-word key schedule for an 8-byte key in the given mode."""
    key = bytes(key)
    if len(key) != 8:
        raise ValueError(f"DES key must be 8 bytes, got {len(key)}")
    mode = Mode(mode)

    pc1m = [1 if key[l >> 3] & _BYTEBIT[l & 7] else 0 for l in _PC1]
    raw = [0] * 32
    for i, rot in enumerate(_TOTROT):
        m = (15 - i) << 1 if mode is Mode.DECRYPT else i << 1
        n = m + 1
        pcr = [pc1m[(j + rot) % 28] for j in range(28)]
        pcr += [pc1m[28 + (j + rot) % 28] for j in range(28)]
        left = right = 0
        for bit, (a, b) in zip(_BIGBYTE, zip(_PC2[:24], _PC2[24:])):
            if pcr[a]:
                left |= bit
            if pcr[b]:
                right |= bit
        raw[m], raw[n] = left, right
    return _cook(raw)


def _rounds(leftt: int, right: int, keys: Sequence[int]) -> tuple[int, int]:
    work = ((leftt >> 4) ^ right) & 0x0F0F0F0F
    right ^= work
    leftt ^= work << 4
    work = ((leftt >> 16) ^ right) & 0x0000FFFF
    right ^= work
    leftt ^= work << 16
    work = ((right >> 2) ^ leftt) & 0x33333333
    leftt ^= work
    right ^= work << 2
    work = ((right >> 8) ^ leftt) & 0x00FF00FF
    leftt ^= work
    right ^= work << 8
    right = ((right << 1) | (right >> 31)) & _MASK32
    work = (leftt ^ right) & 0xAAAAAAAA
    leftt ^= work
    right ^= work
    leftt = ((leftt << 1) | (leftt >> 31)) & _MASK32

    def f(half: int, k0: int, k1: int) -> int:
        w = (((half << 28) | (half >> 4)) & _MASK32) ^ k0
        val = (
            _SP7[w & 0x3F]
            | _SP5[(w >> 8) & 0x3F]
            | _SP3[(w >> 16) & 0x3F]
            | _SP1[(w >> 24) & 0x3F]
        )
        w = half ^ k1
        return (
            val
            | _SP8[w & 0x3F]
            | _SP6[(w >> 8) & 0x3F]
            | _SP4[(w >> 16) & 0x3F]
            | _SP2[(w >> 24) & 0x3F]
        )

    for r in range(8):
        k = keys[4 * r : 4 * r + 4]
        leftt ^= f(right, k[0], k[1])
        right ^= f(leftt, k[2], k[3])

    right = ((right << 31) | (right >> 1)) & _MASK32
    work = (leftt ^ right) & 0xAAAAAAAA
    leftt ^= work
    right ^= work
    leftt = ((leftt << 31) | (leftt >> 1)) & _MASK32
    work = ((leftt >> 8) ^ right) & 0x00FF00FF
    right ^= work
    leftt ^= work << 8
    work = ((leftt >> 2) ^ right) & 0x33333333
    right ^= work
    leftt ^= work << 2
    work = ((right >> 16) ^ leftt) & 0x0000FFFF
    leftt ^= work
    right ^= work << 16
    work = ((right >> 4) ^ leftt) & 0x0F0F0F0F
    leftt ^= work
    right ^= work << 4
    return right, leftt


def des(block: bytes, schedule: Sequence[int]) -> bytes:
    """Encrypt or decrypt one 8-byte block with a schedule from :func:`deskey`."""
    block = bytes(block)
    if len(block) != 8:
        raise ValueError(f"DES block must be 8 bytes, got {len(block)}")
    if len(schedule) != 32:
        raise ValueError(f"key schedule must hold 32 words, got {len(schedule)}")
    leftt = int.from_bytes(block[:4], "big")
    right = int.from_bytes(block[4:], "big")
    out_left, out_right = _rounds(leftt, right, schedule)
    return out_left.to_bytes(4, "big") + out_right.to_bytes(4, "big")


class DesCipher:
    """A DES key prepared for one direction."""

    def __init__(self, key: bytes, mode: Mode | int = Mode.ENCRYPT) -> None:
        self.mode = Mode(mode)
        self.schedule = deskey(key, self.mode)

    def crypt(self, block: bytes) -> bytes:
        """Process data whose length is a multiple of 8, block by block."""
        data = bytes(block)
        if not data or len(data) % 8:
            raise ValueError(
                f"data length must be a positive multiple of 8, got {len(data)}"
            )
        return b"".join(
            des(data[i : i + 8], self.schedule) for i in range(0, len(data), 8)
        )