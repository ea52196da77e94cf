"""Bit layout of a raw ID: timestamp(42) | flag(1) | random(23), MSB first."""

TIMESTAMP_BITS = 42
FLAG_BITS = 1
RANDOM_BITS = 23
TOTAL_BITS = TIMESTAMP_BITS + FLAG_BITS + RANDOM_BITS

ID_LENGTH = 11
RANDOM_LENGTH = 4

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_RANDOM = (1 << RANDOM_BITS) - 1

FLAG_SHIFT = RANDOM_BITS
TIMESTAMP_SHIFT = RANDOM_BITS + FLAG_BITS


def pack(timestamp, hidden, random):
    """Pack the three fields into a 66-bit integer."""
    flag = 1 if hidden else 0
    return ((timestamp & MAX_TIMESTAMP) << TIMESTAMP_SHIFT) | (flag << FLAG_SHIFT) | (random & MAX_RANDOM)


def unpack(packed):
    """Split a 66-bit integer into (timestamp, hidden, random)."""
    random = packed & MAX_RANDOM
    flag = (packed >> FLAG_SHIFT) & 1
    timestamp = (packed >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP
    return timestamp, flag == 1, random
