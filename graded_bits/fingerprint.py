"""
Fingerprint - Structural identity tags for graded bits

Design principles:
- A Fingerprint is a wide random bit tag (8192 bits by default)
- Fingerprints are fully immutable (read-only numpy word arrays)
- Binary operators are LITERAL bitwise operators over the tag
- A cached 64-bit digest makes hashing and inequality checks cheap

Boolean Ring Pattern:
    a = Fingerprint.random()
    b = Fingerprint.random()

    (a & b) == (b & a)                  # commutativity
    ~(a | b) == (~a & ~b)               # De Morgan
    ~~a == a                            # involution

Because every operator acts independently on each tag position, any two
expressions that are equal in the Boolean ring produce equal tags, while
independently drawn leaves coincide only with negligible probability.

Reproducibility:
    Leaf tags are drawn from a numpy Generator. By default it is seeded
    from OS entropy, so tags differ run to run. Call seed_fingerprints()
    (or set GRADED_BITS_SEED) to substitute a seeded source.
"""

from __future__ import annotations
from typing import Optional
from dataclasses import dataclass
import hashlib
import logging
import threading

import numpy as np

from .constants import (
    DIGEST_BYTES,
    FINGERPRINT_BITS,
    FINGERPRINT_SEED,
    WORD_BITS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TAG FORMAT SPECIFICATION
# =============================================================================
# A tag is a 1-D numpy array of uint64 words, bit j of the tag being bit
# (j % 64) of word (j // 64). Word order carries no meaning.
#
# Operations:
#   - AND: words_a & words_b
#   - OR:  words_a | words_b
#   - XOR: words_a ^ words_b
#   - NOT: ~words_a
# =============================================================================

WORD_DTYPE = np.uint64


@dataclass(frozen=True)
class FingerprintConfig:
    """
    Fingerprint configuration.

    Attributes:
        bits: Tag width in bits (positive multiple of 64)
        seed: Seed for the leaf tag source (None = OS entropy)
    """
    bits: int = FINGERPRINT_BITS
    seed: Optional[int] = FINGERPRINT_SEED

    def __post_init__(self):
        if self.bits <= 0 or self.bits % WORD_BITS != 0:
            raise ValueError(
                f"Fingerprint width must be a positive multiple of {WORD_BITS}, "
                f"got {self.bits}"
            )

    @property
    def num_words(self) -> int:
        """Number of uint64 words in a tag."""
        return self.bits // WORD_BITS


DEFAULT_FINGERPRINT_CONFIG = FingerprintConfig()

_default_config = DEFAULT_FINGERPRINT_CONFIG
_rng = np.random.default_rng(_default_config.seed)
_rng_lock = threading.Lock()


def get_default_config() -> FingerprintConfig:
    """Get the configuration used for new tags."""
    return _default_config


def set_default_config(config: FingerprintConfig) -> None:
    """
    Set the configuration used for new tags and rebuild the leaf source.

    The tag width is fixed at import (TRUE, FALSE and every interned bit
    already carry tags of that width), so `config.bits` must match it; set
    GRADED_BITS_FINGERPRINT_BITS to choose another width.
    """
    global _default_config, _rng
    if config.bits != _default_config.bits:
        raise ValueError(
            f"Cannot change fingerprint width from {_default_config.bits} "
            f"to {config.bits} after import"
        )
    with _rng_lock:
        _default_config = config
        _rng = np.random.default_rng(config.seed)
    logger.info(f"Leaf fingerprint source reseeded (seed={config.seed})")


def seed_fingerprints(seed: Optional[int]) -> None:
    """
    Replace the leaf tag source with a generator seeded by `seed`.

    Only tags drawn after the call are affected; existing bits and the
    interning store keep their tags.
    """
    set_default_config(FingerprintConfig(bits=_default_config.bits, seed=seed))


def compute_digest(words: np.ndarray) -> int:
    """Compute the 64-bit digest of a tag."""
    digest = hashlib.blake2b(words.tobytes(), digest_size=DIGEST_BYTES).digest()
    return int.from_bytes(digest, "little")


class Fingerprint:
    """
    Wide bit tag with literal bitwise operators.

    Treat instances as immutable. Operators return new instances.
    """

    __slots__ = ("_words", "_digest")

    def __init__(self, words: np.ndarray):
        words = np.asarray(words, dtype=WORD_DTYPE)
        expected = _default_config.num_words
        if words.shape != (expected,):
            raise ValueError(
                f"Expected {expected} tag words, got shape {words.shape}"
            )
        if words.flags.writeable:
            words = words.copy()
            words.setflags(write=False)
        self._words = words
        self._digest = compute_digest(words)

    @classmethod
    def _from_result(cls, words: np.ndarray) -> Fingerprint:
        # `words` is a fresh operator result owned by nobody else
        words.setflags(write=False)
        instance = cls.__new__(cls)
        instance._words = words
        instance._digest = compute_digest(words)
        return instance

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def random(cls) -> Fingerprint:
        """Draw a fresh uniformly random tag (leaf identity)."""
        with _rng_lock:
            raw = _rng.bytes(_default_config.num_words * (WORD_BITS // 8))
        return cls(np.frombuffer(raw, dtype=WORD_DTYPE))

    @classmethod
    def zeros(cls) -> Fingerprint:
        """The all-zero tag (canonical FALSE)."""
        return _ZEROS

    @classmethod
    def ones(cls) -> Fingerprint:
        """The all-one tag (canonical TRUE)."""
        return _ONES

    # -------------------------------------------------------------------------
    # Bitwise operators
    # -------------------------------------------------------------------------

    def __and__(self, other: Fingerprint) -> Fingerprint:
        return Fingerprint._from_result(np.bitwise_and(self._words, other._words))

    def __or__(self, other: Fingerprint) -> Fingerprint:
        return Fingerprint._from_result(np.bitwise_or(self._words, other._words))

    def __xor__(self, other: Fingerprint) -> Fingerprint:
        return Fingerprint._from_result(np.bitwise_xor(self._words, other._words))

    def __invert__(self) -> Fingerprint:
        return Fingerprint._from_result(np.invert(self._words))

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def digest(self) -> int:
        """Cached 64-bit digest of the tag."""
        return self._digest

    @property
    def bits(self) -> int:
        """Tag width in bits."""
        return self._words.size * WORD_BITS

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return self._digest == other._digest and np.array_equal(self._words, other._words)

    def __hash__(self) -> int:
        return self._digest

    def __repr__(self) -> str:
        return f"Fingerprint({self._digest:016x})"


def _constant(fill: int) -> Fingerprint:
    words = np.full(_default_config.num_words, fill, dtype=WORD_DTYPE)
    return Fingerprint(words)


_ZEROS = _constant(0)
_ONES = _constant(np.iinfo(WORD_DTYPE).max)
