"""
SHA-256 over graded integers (FIPS 180-4, section 6.2).
"""

from __future__ import annotations
from typing import Sequence
import logging

from ..constants import WORD_WIDTH
from ..graded_int import GradedInteger
from .common import blocks, combine_state, pad_message

logger = logging.getLogger(__name__)

DIGEST_WIDTH = 256

INITIAL_STATE = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

ROUND_CONSTANTS = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


def _word(n: int) -> GradedInteger:
    return GradedInteger.from_classical(WORD_WIDTH, n)


def _small_sigma0(x: GradedInteger) -> GradedInteger:
    return x.rotate_right(7) ^ x.rotate_right(18) ^ (x >> 3)


def _small_sigma1(x: GradedInteger) -> GradedInteger:
    return x.rotate_right(17) ^ x.rotate_right(19) ^ (x >> 10)


def _big_sigma0(x: GradedInteger) -> GradedInteger:
    return x.rotate_right(2) ^ x.rotate_right(13) ^ x.rotate_right(22)


def _big_sigma1(x: GradedInteger) -> GradedInteger:
    return x.rotate_right(6) ^ x.rotate_right(11) ^ x.rotate_right(25)


def sha256(message: Sequence[GradedInteger]) -> GradedInteger:
    """
    Hash a sequence of 8-bit GradedIntegers.

    Returns:
        256-bit GradedInteger digest (h0 most significant)
    """
    h = [_word(n) for n in INITIAL_STATE]
    k = [_word(n) for n in ROUND_CONSTANTS]
    padded = blocks(pad_message(message))
    logger.debug(f"SHA-256: {len(message)} message bytes, {len(padded)} blocks")

    for chunk in padded:
        w = list(chunk)
        for i in range(16, 64):
            w.append(w[i - 16] + _small_sigma0(w[i - 15]) + w[i - 7] + _small_sigma1(w[i - 2]))

        a, b, c, d, e, f, g, hh = h
        for i in range(64):
            choice = (e & f) ^ (~e & g)
            majority = (a & b) ^ (a & c) ^ (b & c)
            t1 = hh + _big_sigma1(e) + choice + k[i] + w[i]
            t2 = _big_sigma0(a) + majority
            a, b, c, d, e, f, g, hh = t1 + t2, a, b, c, d + t1, e, f, g

        h = [x + y for x, y in zip(h, (a, b, c, d, e, f, g, hh))]

    return combine_state(h)
