"""ID generation: clock + random field + optional timestamp hiding."""

import threading

from codec.bits import encode_bits
from core.errors import SecureRandomUnavailable
from ident.layout import MAX_TIMESTAMP, RANDOM_BITS, TOTAL_BITS, pack
from ident.mixer import apply_mask
from internal.logging import get_logger
from utils.entropy import SystemRandomSource, WeakRandomSource
from utils.timestamp import now_millis

_default = None
_tracker = None
_lock = threading.Lock()


class Generator:
    """
    Issues 11-character IDs.

    clock returns epoch milliseconds; random_source provides randbits(n) and a
    ``secure`` flag. Both are injectable for deterministic tests.

    With allow_insecure_random=True a missing CSPRNG downgrades to
    WeakRandomSource instead of raising. The downgrade is logged and visible
    through ``degraded``. It lasts for the lifetime of the generator;
    build a new one to retry the secure source.
    """

    def __init__(self, clock=None, random_source=None, allow_insecure_random=False):
        self.clock = clock or now_millis
        self.random_source = random_source or SystemRandomSource()
        self.allow_insecure_random = allow_insecure_random
        self._log = get_logger()
        self._fallback_lock = threading.Lock()

    @property
    def degraded(self):
        return not self.random_source.secure

    def _random_field(self):
        source = self.random_source
        try:
            return source.randbits(RANDOM_BITS)
        except SecureRandomUnavailable as exc:
            if not self.allow_insecure_random:
                raise
            with self._fallback_lock:
                if self.random_source is source:
                    self._log.warn("secure random unavailable, falling back to weak source",
                                   error=exc, source=source.name)
                    self.random_source = WeakRandomSource()
            return self.random_source.randbits(RANDOM_BITS)

    def generate(self, hidden=False):
        timestamp = self.clock() & MAX_TIMESTAMP
        random = self._random_field()
        if hidden:
            timestamp = apply_mask(timestamp, random)
        return encode_bits(pack(timestamp, hidden, random), TOTAL_BITS)

    def check(self):
        """Probe the random source, applying the same fallback policy as generate()."""
        self._random_field()
        return not self.degraded


def configure(generator):
    """Replace the process-wide default generator."""
    global _default
    with _lock:
        _default = generator


def get_generator():
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = Generator()
    return _default


def generate(hidden=False):
    """Generate an ID with the default generator."""
    return get_generator().generate(hidden)


def tracking_id():
    """ID for error and crash bookkeeping. Works without a CSPRNG."""
    global _tracker
    if _tracker is None:
        with _lock:
            if _tracker is None:
                _tracker = Generator(random_source=WeakRandomSource())
    return _tracker.generate()
