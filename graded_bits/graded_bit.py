"""
GradedBit - a truth value generalized to a probability of being true

A GradedBit pairs a probability p in [0, 1] with a Fingerprint. The
probability is the numeric value; the fingerprint is the identity.

================================================================================
IDENTITY
================================================================================

Equality and hashing use the fingerprint ONLY, never p:

    x = GradedBit.from_probability(0.5)
    y = GradedBit.from_probability(0.5)
    x == y                 # False: different leaves
    (x & y) is (x & y)     # True: same derivation, one canonical instance

Leaves (from_probability) draw a random fingerprint and are NOT interned.
Every operator result is passed through the process-wide interning store.

================================================================================
OPERATORS (operands treated as independent)
================================================================================

    ~a      p' = 1 - p              fp' = ~fp
    a & b   p' = p*q                fp' = fp & fq
    a | b   p' = p + q - p*q        fp' = fp | fq
    a ^ b   p' = p + q - 2*p*q      fp' = fp ^ fq

With crisp operands (p in {0, 1}) every formula is exact, and the results
are the canonical TRUE / FALSE constants.

Probabilities are never clamped; long derivation chains may drift by a
few ulps outside [0, 1].

Interning keys on the fingerprint alone, so the first derivation stored
for a tag fixes the probability every later derivation with that tag
gets back. With correlated operands that first value is only an
approximation, and the result depends on evaluation order:

    x = GradedBit.from_probability(0.5)
    (x & x).probability        # 0.25 (independence assumed), stored for x's tag
    (x | FALSE).probability    # 0.25 as well: same tag, stored instance wins
"""

from __future__ import annotations
from typing import Tuple

from .constants import COLLAPSE_THRESHOLD
from .fingerprint import Fingerprint
from .interning import InterningStore


class GradedBit:
    """
    Probability-of-true paired with a structural fingerprint.

    Instances are immutable.
    """

    __slots__ = ("_p", "_fingerprint")

    TRUE: GradedBit
    FALSE: GradedBit

    def __init__(self, p: float, fingerprint: Fingerprint):
        self._p = float(p)
        self._fingerprint = fingerprint

    # -------------------------------------------------------------------------
    # Leaf constructors (not interned)
    # -------------------------------------------------------------------------

    @classmethod
    def from_probability(cls, p: float) -> GradedBit:
        """Create an independent leaf bit that is true with probability p."""
        return cls(p, Fingerprint.random())

    @staticmethod
    def from_classical(value: bool) -> GradedBit:
        """Canonical TRUE or FALSE."""
        return TRUE if value else FALSE

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def probability(self) -> float:
        return self._p

    @property
    def fingerprint(self) -> Fingerprint:
        return self._fingerprint

    def collapse(self) -> bool:
        """Classical value: True iff p > 0.5."""
        return self._p > COLLAPSE_THRESHOLD

    # -------------------------------------------------------------------------
    # Gates
    # -------------------------------------------------------------------------

    def __invert__(self) -> GradedBit:
        return _derive(1.0 - self._p, ~self._fingerprint)

    def __and__(self, other: GradedBit) -> GradedBit:
        if not isinstance(other, GradedBit):
            return NotImplemented
        return _derive(self._p * other._p, self._fingerprint & other._fingerprint)

    def __or__(self, other: GradedBit) -> GradedBit:
        if not isinstance(other, GradedBit):
            return NotImplemented
        p, q = self._p, other._p
        return _derive(p + q - p * q, self._fingerprint | other._fingerprint)

    def __xor__(self, other: GradedBit) -> GradedBit:
        if not isinstance(other, GradedBit):
            return NotImplemented
        p, q = self._p, other._p
        return _derive(p + q - 2.0 * p * q, self._fingerprint ^ other._fingerprint)

    def piecewise(self, if_true: GradedBit, if_false: GradedBit) -> GradedBit:
        """
        Graded select: blend two bits by this bit's probability.

        p' = c*t + (1 - c)*f, fingerprint (fc & ft) | (~fc & ff).
        Reduces to an ordinary multiplexer when this bit is crisp.
        """
        c = self._p
        fc = self._fingerprint
        return _derive(
            c * if_true._p + (1.0 - c) * if_false._p,
            (fc & if_true._fingerprint) | (~fc & if_false._fingerprint),
        )

    @staticmethod
    def add_with_carry(a: GradedBit, b: GradedBit,
                       carry: GradedBit) -> Tuple[GradedBit, GradedBit]:
        """
        One full-adder step.

        Returns:
            (sum, carry_out) where sum = a ^ b ^ carry and
            carry_out = carry.piecewise(a | b, a & b), which is exactly
            majority(a, b, carry) whenever carry is crisp.
        """
        total = a ^ b ^ carry
        return total, carry.piecewise(a | b, a & b)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, GradedBit):
            return NotImplemented
        return self._fingerprint == other._fingerprint

    def __hash__(self) -> int:
        return hash(self._fingerprint)

    def __repr__(self) -> str:
        return f"({self._p})"


TRUE = GradedBit(1.0, Fingerprint.ones())
FALSE = GradedBit(0.0, Fingerprint.zeros())
GradedBit.TRUE = TRUE
GradedBit.FALSE = FALSE

# Process-wide store, created on import. TRUE and FALSE are registered
# first so that any derivation reaching an all-one / all-zero tag returns
# the constants themselves.
_STORE = InterningStore(canonical=(FALSE, TRUE))


def interning_store() -> InterningStore:
    """The process-wide interning store."""
    return _STORE


def store_size() -> int:
    """Number of canonical bits held by the process-wide store."""
    return len(_STORE)


def _derive(p: float, fingerprint: Fingerprint) -> GradedBit:
    return _STORE.intern(GradedBit(p, fingerprint))
