"""
Compact time-ordered IDs.

An ID is 66 bits, timestamp(42) | hidden flag(1) | random(23), written as
11 URL-safe characters. Hidden IDs XOR the timestamp with a mask derived
from the random field. That stops casual reading of creation times and
nothing more.
"""

from ident.generator import Generator, configure, generate, get_generator, tracking_id
from ident.mixer import apply_mask, stretch
from ident.parser import ParsedID, decode_random, is_valid, parse

__all__ = [
    "Generator",
    "ParsedID",
    "apply_mask",
    "configure",
    "decode_random",
    "generate",
    "get_generator",
    "is_valid",
    "parse",
    "stretch",
    "tracking_id",
]
