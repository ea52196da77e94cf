"""
Keyless timestamp mixer for hidden IDs.

stretch() spreads the 23-bit random field over 42 bits with an xorshift /
multiply finalizer. The mask is derived only from data carried in the ID
itself, so hiding is obfuscation against casual inspection, not encryption.
Anyone holding an ID can undo it.
"""

from ident.layout import MAX_RANDOM, MAX_TIMESTAMP

_ROUNDS = ((13, 0x9E3779B97F4A7C15), (12, 0xBF58476D1CE4E5B9))
_FINAL_SHIFT = 15


def stretch(random23):
    """Derive a 42-bit mask from a 23-bit random value."""
    v = random23 & MAX_RANDOM
    for shift, multiplier in _ROUNDS:
        v ^= v >> shift
        v *= multiplier
    v ^= v >> _FINAL_SHIFT
    return v & MAX_TIMESTAMP


def apply_mask(timestamp, random23):
    """XOR the timestamp with stretch(random23). Applying it twice is a no-op."""
    return (timestamp ^ stretch(random23)) & MAX_TIMESTAMP
