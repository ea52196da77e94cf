"""ID parsing: decode, unpack, reveal hidden timestamps."""

from codec.bits import decode_bits, encode_bits
from core.errors import BaseIdError, InvalidLength
from ident.layout import ID_LENGTH, RANDOM_BITS, RANDOM_LENGTH, TOTAL_BITS, unpack
from ident.mixer import apply_mask
from utils.timestamp import datetime_to_millis, format_timestamp, millis_to_datetime


class ParsedID:
    """Fields recovered from an ID. timestamp is an aware UTC datetime."""

    __slots__ = ("timestamp", "hidden", "random", "millis")

    def __init__(self, timestamp, hidden, random, millis=None):
        self.timestamp = timestamp
        self.hidden = hidden
        self.random = random
        self.millis = millis if millis is not None else datetime_to_millis(timestamp)

    def __eq__(self, other):
        if not isinstance(other, ParsedID):
            return NotImplemented
        return (self.timestamp, self.hidden, self.random) == (other.timestamp, other.hidden, other.random)

    def __repr__(self):
        return f"ParsedID(timestamp={self.timestamp.isoformat()}, hidden={self.hidden}, random={self.random!r})"

    def to_dict(self):
        return {
            "timestamp": format_timestamp(self.millis),
            "millis": self.millis,
            "hidden": self.hidden,
            "random": self.random,
        }


def _check_length(text, expected):
    if not isinstance(text, str) or len(text) != expected:
        actual = len(text) if isinstance(text, str) else None
        raise InvalidLength(f"expected {expected} characters, got {actual}",
                            expected=expected, actual=actual)


def parse(id):
    """Parse an 11-character ID. Raises InvalidLength or InvalidCharacter."""
    _check_length(id, ID_LENGTH)
    timestamp, hidden, random = unpack(decode_bits(id, TOTAL_BITS))
    if hidden:
        timestamp = apply_mask(timestamp, random)
    return ParsedID(
        timestamp=millis_to_datetime(timestamp),
        hidden=hidden,
        random=encode_bits(random, RANDOM_BITS),
        millis=timestamp,
    )


def decode_random(fragment):
    """Decode a 4-character random fragment back to its 23-bit value."""
    _check_length(fragment, RANDOM_LENGTH)
    return decode_bits(fragment, RANDOM_BITS)


def is_valid(id):
    try:
        parse(id)
    except BaseIdError:
        return False
    return True
