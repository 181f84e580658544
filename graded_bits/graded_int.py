"""
GradedInteger - fixed-width vectors of graded bits

A GradedInteger of width L is an immutable sequence of exactly L
GradedBit, index 0 being the least significant bit. Reading any index
outside [0, L) yields the canonical FALSE bit; shifts and resizes are
defined through that rule and never sign-extend.

Every operator is a per-index application of GradedBit gates:

    a = GradedInteger.from_classical(8, 20)
    b = GradedInteger.from_classical(8, 10)
    (a + b).collapse()     # 30
    (a * b).collapse()     # 200
    a.rotate_left(3)       # 8-bit rotation

Width is an explicit field. Operators combining two integers require
equal widths and raise InvalidWidthError otherwise.
"""

from __future__ import annotations
from typing import Callable, Iterator, List, Sequence, Union

from .constants import COLLAPSE_MAX_BITS, RENDER_CHUNK_SIZE
from .graded_bit import FALSE, TRUE, GradedBit


class InvalidWidthError(ValueError):
    """Raised when integer widths are incompatible or meaningless."""


class GradedInteger:
    """
    Fixed-width two's-complement integer of graded bits.

    Treat instances as immutable. Operators return new instances.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Sequence[GradedBit]):
        bits = tuple(bits)
        for bit in bits:
            if not isinstance(bit, GradedBit):
                raise TypeError(f"Expected GradedBit, got {type(bit).__name__}")
        self._bits = bits

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(cls, width: int, builder: Callable[[int], GradedBit]) -> GradedInteger:
        """Element i = builder(i) for i in [0, width)."""
        _check_width(width)
        return cls._wrap(tuple(builder(i) for i in range(width)))

    @classmethod
    def zero(cls, width: int) -> GradedInteger:
        _check_width(width)
        return cls._wrap((FALSE,) * width)

    @classmethod
    def from_classical(cls, width: int, n: int) -> GradedInteger:
        """
        Exact (crisp) integer of the given width.

        Bits above `width` are dropped; negative n is taken in two's
        complement, so -1 gives all ones.
        """
        _check_width(width)
        return cls._wrap(tuple(TRUE if (n >> i) & 1 else FALSE for i in range(width)))

    @classmethod
    def from_bits(cls, bits: Sequence[GradedBit]) -> GradedInteger:
        """Integer whose element i is bits[i] (least significant first)."""
        return cls(bits)

    @classmethod
    def _wrap(cls, bits: tuple) -> GradedInteger:
        instance = cls.__new__(cls)
        instance._bits = bits
        return instance

    def resize(self, width: int) -> GradedInteger:
        """Truncate, or extend with FALSE, to `width` bits."""
        return GradedInteger.build(width, self.__getitem__)

    @classmethod
    def combine(cls, parts: Sequence[GradedInteger]) -> GradedInteger:
        """
        Concatenate equal-width integers, parts[0] least significant.

        Element i of the result is parts[i // w][i % w].
        """
        parts = list(parts)
        if not parts:
            raise InvalidWidthError("Cannot combine an empty sequence")
        width = parts[0].width
        for part in parts:
            if part.width != width:
                raise InvalidWidthError(
                    f"Cannot combine integers of widths {width} and {part.width}"
                )
        return cls._wrap(tuple(bit for part in parts for bit in part._bits))

    def split(self, width: int) -> List[GradedInteger]:
        """
        Cut into ceil(L / width) chunks of `width` bits, least significant
        chunk first. Inverse of combine(); a short last chunk reads FALSE
        beyond this integer's width.
        """
        if width <= 0:
            raise InvalidWidthError(f"Chunk width must be positive, got {width}")
        count = -(-self.width // width)
        return [
            GradedInteger.build(width, lambda i, base=width * e: self[base + i])
            for e in range(count)
        ]

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self._bits)

    @property
    def bits(self) -> tuple:
        return self._bits

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[GradedBit]:
        return iter(self._bits)

    def __getitem__(self, index: int) -> GradedBit:
        """Bit at `index`; FALSE for any index outside [0, width)."""
        if 0 <= index < len(self._bits):
            return self._bits[index]
        return FALSE

    def collapse(self) -> int:
        """
        Classical unsigned value: bit i set iff element i has p > 0.5.

        Only the lowest 64 bits are read.
        """
        result = 0
        for i in range(min(self.width, COLLAPSE_MAX_BITS)):
            if self._bits[i].collapse():
                result |= 1 << i
        return result

    def probabilities(self) -> List[float]:
        return [bit.probability for bit in self._bits]

    # -------------------------------------------------------------------------
    # Bitwise
    # -------------------------------------------------------------------------

    def _zip(self, other: GradedInteger, op: Callable) -> GradedInteger:
        if not isinstance(other, GradedInteger):
            return NotImplemented
        if other.width != self.width:
            raise InvalidWidthError(
                f"Width mismatch: {self.width} vs {other.width}"
            )
        return GradedInteger._wrap(tuple(map(op, self._bits, other._bits)))

    def __and__(self, other: GradedInteger) -> GradedInteger:
        return self._zip(other, GradedBit.__and__)

    def __or__(self, other: GradedInteger) -> GradedInteger:
        return self._zip(other, GradedBit.__or__)

    def __xor__(self, other: GradedInteger) -> GradedInteger:
        return self._zip(other, GradedBit.__xor__)

    def __invert__(self) -> GradedInteger:
        return GradedInteger._wrap(tuple(~bit for bit in self._bits))

    # -------------------------------------------------------------------------
    # Shifts and rotations
    # -------------------------------------------------------------------------

    def __lshift__(self, shift: int) -> GradedInteger:
        if shift < 0:
            raise ValueError("negative shift count")
        return GradedInteger.build(self.width, lambda i: self[i - shift])

    def __rshift__(self, shift: int) -> GradedInteger:
        if shift < 0:
            raise ValueError("negative shift count")
        return GradedInteger.build(self.width, lambda i: self[i + shift])

    def rotate_left(self, shift: int) -> GradedInteger:
        if not self.width:
            return self
        shift %= self.width
        return (self << shift) | (self >> (self.width - shift))

    def rotate_right(self, shift: int) -> GradedInteger:
        if not self.width:
            return self
        shift %= self.width
        return (self >> shift) | (self << (self.width - shift))

    # -------------------------------------------------------------------------
    # Arithmetic (two's complement, wraps at width)
    # -------------------------------------------------------------------------

    def __add__(self, other: GradedInteger) -> GradedInteger:
        if not isinstance(other, GradedInteger):
            return NotImplemented
        if other.width != self.width:
            raise InvalidWidthError(
                f"Width mismatch: {self.width} vs {other.width}"
            )
        carry = FALSE
        bits = []
        for a, b in zip(self._bits, other._bits):
            total, carry = GradedBit.add_with_carry(a, b, carry)
            bits.append(total)
        return GradedInteger._wrap(tuple(bits))

    def __neg__(self) -> GradedInteger:
        return ~self + GradedInteger.from_classical(self.width, 1)

    def __sub__(self, other: GradedInteger) -> GradedInteger:
        if not isinstance(other, GradedInteger):
            return NotImplemented
        return self + (-other)

    def multiply_by_bit(self, bit: GradedBit) -> GradedInteger:
        """AND every element with `bit`."""
        return GradedInteger._wrap(tuple(b & bit for b in self._bits))

    def __mul__(self, other: Union[GradedInteger, GradedBit]) -> GradedInteger:
        if isinstance(other, GradedBit):
            return self.multiply_by_bit(other)
        if not isinstance(other, GradedInteger):
            return NotImplemented
        if other.width != self.width:
            raise InvalidWidthError(
                f"Width mismatch: {self.width} vs {other.width}"
            )
        # Shift-add over the bits of `other`
        result = GradedInteger.zero(self.width)
        for i in range(self.width):
            result = result + (self << i).multiply_by_bit(other[i])
        return result

    def __rmul__(self, other: GradedBit) -> GradedInteger:
        if isinstance(other, GradedBit):
            return self.multiply_by_bit(other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Graded select
    # -------------------------------------------------------------------------

    @staticmethod
    def select(cond: GradedBit, if_true: GradedInteger,
               if_false: GradedInteger) -> GradedInteger:
        """Per-index cond.piecewise(if_true[i], if_false[i])."""
        if if_true.width != if_false.width:
            raise InvalidWidthError(
                f"Width mismatch: {if_true.width} vs {if_false.width}"
            )
        return GradedInteger.build(
            if_true.width, lambda i: cond.piecewise(if_true[i], if_false[i])
        )

    # -------------------------------------------------------------------------
    # Identity and rendering
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, GradedInteger):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        lines = [f"GradedInteger{self.width} ["]
        for start in range(0, self.width, RENDER_CHUNK_SIZE):
            chunk = self._bits[start:start + RENDER_CHUNK_SIZE]
            rendered = "".join(f"{bit!r}, " for bit in chunk)
            lines.append(f"\t{start}..{start + RENDER_CHUNK_SIZE - 1}: {rendered}")
        lines.append("]")
        return "\n".join(lines)


def _check_width(width: int) -> None:
    if width < 0:
        raise InvalidWidthError(f"Width must be non-negative, got {width}")
