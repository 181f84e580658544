"""
Graded Bits - Probabilistic Boolean algebra over fixed-width integers

A graded bit carries a probability of being true instead of a crisp 0/1.
Graded integers are vectors of graded bits with the full bitwise,
arithmetic and rotation operation set, so circuits such as SHA-1 and
SHA-256 can be evaluated under partial knowledge of their inputs while
staying bit-exact when every input is crisp.
"""

__version__ = "0.1.0"

from .fingerprint import (
    Fingerprint,
    FingerprintConfig,
    DEFAULT_FINGERPRINT_CONFIG,
    get_default_config,
    set_default_config,
    seed_fingerprints,
)
from .interning import InterningStore
from .graded_bit import GradedBit, TRUE, FALSE, interning_store, store_size
from .graded_int import GradedInteger, InvalidWidthError

__all__ = [
    "Fingerprint",
    "FingerprintConfig",
    "DEFAULT_FINGERPRINT_CONFIG",
    "get_default_config",
    "set_default_config",
    "seed_fingerprints",
    "InterningStore",
    "GradedBit",
    "TRUE",
    "FALSE",
    "interning_store",
    "store_size",
    "GradedInteger",
    "InvalidWidthError",
]
