from codec.alphabet import ALPHABET, ALPHABET_INDEX
from codec.bits import chars_for_bits, decode_bits, encode_bits

__all__ = [
    "ALPHABET",
    "ALPHABET_INDEX",
    "chars_for_bits",
    "decode_bits",
    "encode_bits",
]
