"""
Example: Hashing a Partially Known Message

Hashes the message "test\\0" with SHA-1 and SHA-256, first classically and
then with bit 0 of the last byte replaced by a graded bit that is true
with probability TAP. Prints each digest, its per-bit probabilities, and
the size of the interning store after each run.

    python examples/tapped_hash_demo.py [TAP]
"""

import logging
import sys

from graded_bits import store_size
from graded_bits.hashes import hex_digest, message_from_bytes, sha1, sha256, tap_bit


BASE_MESSAGE = b"test\x00"


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def run(name, hash_fn, message):
    print_section(name)
    digest = hash_fn(message)
    print(f"hex:   {hex_digest(digest)}")
    print(digest)
    print(f"interning store size: {store_size()}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    tap = float(sys.argv[1]) if len(sys.argv) > 1 else 0.5

    base = message_from_bytes(BASE_MESSAGE)
    tapped = tap_bit(base, len(base) - 1, 0, tap)

    run("SHA1 - BASE", sha1, base)
    run(f"SHA1 - TAPPED (p={tap})", sha1, tapped)
    run("SHA256 - BASE", sha256, base)
    run(f"SHA256 - TAPPED (p={tap})", sha256, tapped)


if __name__ == "__main__":
    main()
