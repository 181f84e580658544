"""
SHA-1 over graded integers (FIPS 180-4, section 6.1).

Every step uses GradedInteger operators only, so a classical message
yields the standard digest and a message with graded bits yields a
graded digest.
"""

from __future__ import annotations
from typing import Sequence
import logging

from ..constants import WORD_WIDTH
from ..graded_int import GradedInteger
from .common import blocks, combine_state, pad_message

logger = logging.getLogger(__name__)

DIGEST_WIDTH = 160

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def _word(n: int) -> GradedInteger:
    return GradedInteger.from_classical(WORD_WIDTH, n)


def _round_function(i: int, b: GradedInteger, c: GradedInteger,
                    d: GradedInteger) -> GradedInteger:
    if i < 20:
        return (b & c) | (~b & d)
    if i < 40 or i >= 60:
        return b ^ c ^ d
    return (b & c) | (b & d) | (c & d)


def sha1(message: Sequence[GradedInteger]) -> GradedInteger:
    """
    Hash a sequence of 8-bit GradedIntegers.

    Returns:
        160-bit GradedInteger digest (h0 most significant)
    """
    h = [_word(n) for n in INITIAL_STATE]
    k = [_word(n) for n in ROUND_CONSTANTS]
    padded = blocks(pad_message(message))
    logger.debug(f"SHA-1: {len(message)} message bytes, {len(padded)} blocks")

    for chunk in padded:
        w = list(chunk)
        for i in range(16, 80):
            w.append((w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16]).rotate_left(1))

        a, b, c, d, e = h
        for i in range(80):
            f = _round_function(i, b, c, d)
            temp = a.rotate_left(5) + f + e + k[i // 20] + w[i]
            a, b, c, d, e = temp, a, b.rotate_left(30), c, d

        h = [x + y for x, y in zip(h, (a, b, c, d, e))]

    return combine_state(h)
