"""
Hash consumers built on GradedInteger.

    >>> from graded_bits.hashes import sha1, hex_digest, message_from_bytes
    >>> hex_digest(sha1(message_from_bytes("abc")))
    'a9993e364706816aba3e25717850c26c9cd0d89d'
"""

from .common import (
    hex_digest,
    message_from_bytes,
    pad_message,
    tap_bit,
)
from .sha1 import DIGEST_WIDTH as SHA1_DIGEST_WIDTH, sha1
from .sha256 import DIGEST_WIDTH as SHA256_DIGEST_WIDTH, sha256

__all__ = [
    "sha1",
    "sha256",
    "hex_digest",
    "message_from_bytes",
    "pad_message",
    "tap_bit",
    "SHA1_DIGEST_WIDTH",
    "SHA256_DIGEST_WIDTH",
]
