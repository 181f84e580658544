# graded_bits/constants.py
"""
Graded Bits Constants

This module defines constants used throughout the graded bit system:

LAYER 1: Fingerprint Constants (Identity Layer)
- FINGERPRINT_BITS: Width of the structural identity tag
- FINGERPRINT_SEED: Optional seed for the leaf fingerprint source
- WORD_BITS: Width of one storage word inside a fingerprint

LAYER 2: Collapse Constants (Graded → Classical)
- COLLAPSE_THRESHOLD: A bit collapses to 1 iff p > threshold
- COLLAPSE_MAX_BITS: Integer collapse reads at most this many bits

LAYER 3: Integer Constants (Hash Consumers)
- BYTE_WIDTH / WORD_WIDTH: Message element and hash word widths
- RENDER_CHUNK_SIZE: Bits per group in the debug rendering

Fingerprint width and seed can be overridden at import time through
GRADED_BITS_FINGERPRINT_BITS and GRADED_BITS_SEED.
"""
import os


# =============================================================================
# LAYER 1: Fingerprint Constants (Identity Layer)
# =============================================================================

WORD_BITS = 64


def _fingerprint_bits(value: str) -> int:
    bits = int(value)
    if bits <= 0 or bits % WORD_BITS != 0:
        raise ValueError(
            f"GRADED_BITS_FINGERPRINT_BITS must be a positive multiple of "
            f"{WORD_BITS}, got {value!r}"
        )
    return bits


FINGERPRINT_BITS = _fingerprint_bits(os.environ.get("GRADED_BITS_FINGERPRINT_BITS", "8192"))
_seed = os.environ.get("GRADED_BITS_SEED")
FINGERPRINT_SEED = int(_seed) if _seed else None

# Digest size (bytes) of the cached hash over the tag
DIGEST_BYTES = 8


# =============================================================================
# LAYER 2: Collapse Constants (Graded → Classical)
# =============================================================================

COLLAPSE_THRESHOLD = 0.5
COLLAPSE_MAX_BITS = 64


# =============================================================================
# LAYER 3: Integer Constants (Hash Consumers)
# =============================================================================

BYTE_WIDTH = 8
WORD_WIDTH = 32
RENDER_CHUNK_SIZE = 4

# Padding: messages are padded to 56 mod 64 bytes, then an 8-byte length
BLOCK_BYTES = 64
LENGTH_BYTES = 8
