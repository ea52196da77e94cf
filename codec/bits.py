"""
Fixed-width bit packing over the 64-symbol alphabet.

Values are written most-significant group first, 6 bits per character.
When the bit count is not a multiple of 6, the last group is shifted into
the high end of its character and the low end is zero padding.
"""

from codec.alphabet import ALPHABET, ALPHABET_INDEX, BITS_PER_CHAR
from core.errors import InvalidCharacter, InvalidLength


def chars_for_bits(bit_count):
    """Number of characters needed to hold bit_count bits."""
    return -(-bit_count // BITS_PER_CHAR)


def encode_bits(value, bit_count):
    """Encode the low bit_count bits of value, MSB first."""
    if bit_count <= 0:
        raise ValueError(f"bit_count must be positive, got {bit_count}")
    if value < 0:
        raise ValueError("value must be non-negative")

    chars = []
    remaining = bit_count
    while remaining > 0:
        width = min(BITS_PER_CHAR, remaining)
        index = (value >> (remaining - width)) & ((1 << width) - 1)
        if width < BITS_PER_CHAR:
            index <<= BITS_PER_CHAR - width
        chars.append(ALPHABET[index])
        remaining -= width

    return "".join(chars)


def decode_bits(text, expected_bit_count):
    """Decode text written by encode_bits back into an integer."""
    if expected_bit_count <= 0:
        raise ValueError(f"expected_bit_count must be positive, got {expected_bit_count}")

    expected_len = chars_for_bits(expected_bit_count)
    if len(text) != expected_len:
        raise InvalidLength(
            f"expected {expected_len} characters for {expected_bit_count} bits, got {len(text)}",
            expected=expected_len,
            actual=len(text),
        )

    value = 0
    remaining = expected_bit_count
    for position, char in enumerate(text):
        index = ALPHABET_INDEX.get(char)
        if index is None:
            raise InvalidCharacter(
                f"invalid character {char!r} at position {position}",
                character=char,
                position=position,
            )
        width = min(BITS_PER_CHAR, remaining)
        if width < BITS_PER_CHAR:
            index >>= BITS_PER_CHAR - width
        value = (value << width) | index
        remaining -= width

    return value
