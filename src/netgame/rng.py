# src/netgame/rng.py
"""
Seedable random source. A SHA-1 counter stream keyed by an arbitrary byte
string, so a textual seed reproduces a board on any platform and Python build.
"""

import hashlib
import secrets
from dataclasses import dataclass
from typing import Union

Seed = Union[str, bytes]

DIGEST_LEN = 20  # SHA-1


def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def seed_bytes(seed: Seed) -> bytes:
    return seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)


def _increment(counter: bytearray) -> None:
    # Little-endian increment over the first digest-length bytes.
    for i in range(DIGEST_LEN):
        if counter[i] != 0xFF:
            counter[i] += 1
            return
        counter[i] = 0


@dataclass
class RandomSource:
    seedbuf: bytearray
    databuf: bytes = b""
    pos: int = DIGEST_LEN

    @classmethod
    def from_seed(cls, seed: Seed) -> "RandomSource":
        first = sha1(seed_bytes(seed))
        buf = bytearray(first + sha1(first))
        return cls(seedbuf=buf, databuf=sha1(bytes(buf)), pos=0)

    def bits(self, n: int) -> int:
        """Return n uniformly random bits (n <= 32) as a non-negative int."""
        assert 0 < n <= 32
        ret = 0
        for _ in range(0, n, 8):
            if self.pos >= DIGEST_LEN:
                _increment(self.seedbuf)
                self.databuf = sha1(bytes(self.seedbuf))
                self.pos = 0
            ret = (ret << 8) | self.databuf[self.pos]
            self.pos += 1
        return ret & ((1 << n) - 1)

    def upto(self, limit: int) -> int:
        """
        Uniform integer in [0, limit). Draws limit.bit_length()+3 bits and
        rejects the tail that would bias the division, so every value is
        exactly equally likely.
        """
        assert limit > 0
        nbits = limit.bit_length() + 3
        assert nbits <= 32
        divisor = (1 << nbits) // limit
        while True:
            data = self.bits(nbits)
            if data < limit * divisor:
                break
        return data // divisor


def new_seed_string() -> str:
    """Fresh decimal seed string from system entropy."""
    return str(secrets.randbits(31))
