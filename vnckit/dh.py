"""Diffie-Hellman key agreement as used by VNC authentication schemes.

The server publishes ``X = g ^ x mod p``, the client answers with
``Y = g ^ y mod p``. Both sides then derive the shared key, the client as
``X ^ y mod p``.
"""

from __future__ import annotations

import secrets

__all__ = ["DiffieHellman", "mpi_to_bytes", "bytes_to_mpi"]

MAX_BITS = 31
_SECRET_BITS = (MAX_BITS // 8) * 8


class DiffieHellman:
    """One side of a Diffie-Hellman exchange over a generator and modulus."""

    def __init__(self, gen: int, mod: int) -> None:
        if mod <= 1:
            raise ValueError(f"modulus must be greater than 1, got {mod}")
        if gen < 0:
            raise ValueError(f"generator must not be negative, got {gen}")
        self.gen = gen
        self.mod = mod
        self.priv: int | None = None
        self.pub: int | None = None
        self.key: int | None = None

    def gen_secret(self) -> int:
        """Pick a fresh non-zero private value and return the public value."""
        priv = 0
        while priv == 0:
            priv = secrets.randbits(_SECRET_BITS)
        self.priv = priv
        self.pub = pow(self.gen, priv, self.mod)
        return self.pub

    def gen_key(self, inter: int) -> int:
        """Derive the shared key from the other side's public value."""
        if self.priv is None:
            raise RuntimeError("gen_secret() must be called before gen_key()")
        if inter < 0:
            raise ValueError(f"public value must not be negative, got {inter}")
        self.key = pow(inter, self.priv, self.mod)
        return self.key


def mpi_to_bytes(value: int, size: int) -> bytes:
    """Encode an unsigned integer big-endian, right-adjusted in ``size`` bytes."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    try:
        return value.to_bytes(size, "big")
    except OverflowError as exc:
        raise ValueError(f"value needs more than {size} bytes") from exc


def bytes_to_mpi(value: bytes) -> int:
    """Decode big-endian unsigned bytes into an integer."""
    return int.from_bytes(bytes(value), "big")