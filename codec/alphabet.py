"""URL-safe 64-symbol alphabet. The order is part of the wire format."""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
ALPHABET_INDEX = {char: index for index, char in enumerate(ALPHABET)}

BITS_PER_CHAR = 6
