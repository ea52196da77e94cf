"""
Random bit sources for ID generation.

SystemRandomSource reads the OS CSPRNG and fails hard when it is missing.
WeakRandomSource is the explicit, non-cryptographic fallback; callers can
always tell which one they hold through the ``secure`` attribute.
"""

import os
import random

from core.errors import SecureRandomUnavailable


class SystemRandomSource:
    """Uniform random bits from os.urandom."""

    secure = True
    name = "os.urandom"

    def randbits(self, n):
        if n <= 0:
            raise ValueError(f"bit count must be positive, got {n}")
        try:
            raw = os.urandom((n + 7) // 8)
        except NotImplementedError as exc:
            raise SecureRandomUnavailable("no secure random source available",
                                          source=self.name, cause=exc) from exc
        return int.from_bytes(raw, byteorder="big") & ((1 << n) - 1)


class WeakRandomSource:
    """Mersenne Twister bits. Not suitable where unpredictability matters."""

    secure = False
    name = "random.Random"

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def randbits(self, n):
        if n <= 0:
            raise ValueError(f"bit count must be positive, got {n}")
        return self._random.getrandbits(n)
