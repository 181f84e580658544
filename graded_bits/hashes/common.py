"""
Message preparation and digest rendering shared by the hash consumers.

Message Format:
    A message is a sequence of 8-bit GradedIntegers. Each byte may be
    fully classical or carry graded bits.

Padding (Merkle-Damgard, 512-bit blocks):
    message || 0x80 || 0x00 ... (to 56 mod 64 bytes) || bit length (8 bytes, big-endian)

Words:
    Padded bytes are grouped four at a time into 32-bit big-endian words.
"""

from __future__ import annotations
from typing import List, Sequence, Union

from ..constants import (
    BLOCK_BYTES,
    BYTE_WIDTH,
    LENGTH_BYTES,
    WORD_WIDTH,
)
from ..graded_bit import GradedBit
from ..graded_int import GradedInteger, InvalidWidthError

WORDS_PER_BLOCK = BLOCK_BYTES * BYTE_WIDTH // WORD_WIDTH


def message_from_bytes(data: Union[bytes, str]) -> List[GradedInteger]:
    """Classical message bytes (str is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return [GradedInteger.from_classical(BYTE_WIDTH, byte) for byte in data]


def tap_bit(message: Sequence[GradedInteger], byte_index: int, bit_index: int,
            probability: float) -> List[GradedInteger]:
    """
    Copy of `message` with one bit replaced by an independent leaf that is
    true with the given probability.
    """
    message = list(message)
    target = message[byte_index]
    leaf = GradedBit.from_probability(probability)
    message[byte_index] = GradedInteger.build(
        target.width, lambda i: leaf if i == bit_index else target[i]
    )
    return message


def pad_message(message: Sequence[GradedInteger]) -> List[GradedInteger]:
    """
    Pad a byte message into 32-bit big-endian words.

    Returns:
        List of 32-bit words, length a multiple of 16
    """
    padded = list(message)
    for byte in padded:
        if byte.width != BYTE_WIDTH:
            raise InvalidWidthError(
                f"Message elements must be {BYTE_WIDTH} bits wide, got {byte.width}"
            )

    bit_length = len(padded) * BYTE_WIDTH
    padded.append(GradedInteger.from_classical(BYTE_WIDTH, 0x80))
    while len(padded) % BLOCK_BYTES != BLOCK_BYTES - LENGTH_BYTES:
        padded.append(GradedInteger.zero(BYTE_WIDTH))
    for i in range(LENGTH_BYTES):
        shift = BYTE_WIDTH * (LENGTH_BYTES - 1 - i)
        padded.append(GradedInteger.from_classical(BYTE_WIDTH, bit_length >> shift))

    # combine() puts its first part lowest, so feed each 4-byte group reversed
    return [
        GradedInteger.combine(padded[i:i + 4][::-1])
        for i in range(0, len(padded), 4)
    ]


def blocks(words: Sequence[GradedInteger]) -> List[List[GradedInteger]]:
    """Group padded words into 16-word blocks."""
    return [
        list(words[i:i + WORDS_PER_BLOCK])
        for i in range(0, len(words), WORDS_PER_BLOCK)
    ]


def combine_state(state: Sequence[GradedInteger]) -> GradedInteger:
    """Digest integer with state[0] as the most significant word."""
    return GradedInteger.combine(list(state)[::-1])


def hex_digest(digest: GradedInteger) -> str:
    """
    Lowercase hex of a digest, collapsing each 32-bit chunk on its own,
    most significant chunk first.
    """
    chunks = digest.split(WORD_WIDTH)
    return "".join(f"{chunk.collapse():08x}" for chunk in reversed(chunks))
