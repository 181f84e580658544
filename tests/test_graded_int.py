"""
Tests for GradedInteger
"""

import pytest

from graded_bits import (
    FALSE,
    TRUE,
    GradedBit,
    GradedInteger,
    InvalidWidthError,
)


def crisp(width, n):
    return GradedInteger.from_classical(width, n)


def rotl(n, k, width):
    k %= width
    mask = (1 << width) - 1
    return ((n << k) | (n >> (width - k))) & mask


class TestConstruction:
    @pytest.mark.parametrize("width", [1, 8, 13, 32, 64])
    def test_classical_round_trip(self, width):
        for n in (0, 1, (1 << width) - 1, 0x5A5A5A5A5A5A5A5A & ((1 << width) - 1)):
            assert crisp(width, n).collapse() == n

    def test_zero(self):
        z = GradedInteger.zero(16)
        assert z.width == 16
        assert all(bit is FALSE for bit in z)
        assert z.collapse() == 0

    def test_build(self):
        x = GradedInteger.build(8, lambda i: TRUE if i % 2 else FALSE)
        assert x.collapse() == 0b10101010

    def test_from_bits(self):
        x = GradedInteger.from_bits([TRUE, FALSE, TRUE])
        assert x.width == 3
        assert x.collapse() == 0b101

    def test_from_bits_rejects_other_types(self):
        with pytest.raises(TypeError):
            GradedInteger.from_bits([TRUE, 1])

    def test_negative_classical(self):
        assert crisp(8, -1).collapse() == 0xFF

    def test_negative_width(self):
        with pytest.raises(InvalidWidthError):
            GradedInteger.zero(-1)


class TestIndexing:
    def test_out_of_range_reads_false(self):
        x = crisp(8, 0xFF)
        assert x[7] is TRUE
        assert x[8] is FALSE
        assert x[1000] is FALSE
        assert x[-1] is FALSE


class TestResize:
    def test_extend_and_truncate(self):
        a = crisp(8, 42)
        assert a.resize(32).collapse() == 42
        assert a.resize(32).resize(8) == a

        c = crisp(32, 123456)
        assert c.resize(8).collapse() == 123456 & 0xFF

    def test_collapse_reads_64_bits(self):
        wide = GradedInteger.build(72, lambda i: TRUE if i in (0, 70) else FALSE)
        assert wide.collapse() == 1


class TestCombineSplit:
    def test_combine_order(self):
        parts = [crisp(8, 0x11), crisp(8, 0x22), crisp(8, 0x33)]
        combined = GradedInteger.combine(parts)
        assert combined.width == 24
        assert combined.collapse() == 0x332211

    def test_split_inverts_combine(self):
        parts = [crisp(8, n) for n in (0xDE, 0xAD, 0xBE, 0xEF)]
        assert GradedInteger.combine(parts).split(8) == parts

    def test_split_uneven(self):
        chunks = crisp(12, 0xABC).split(8)
        assert len(chunks) == 2
        assert chunks[0].collapse() == 0xBC
        assert chunks[1].collapse() == 0x0A
        assert chunks[1].width == 8

    def test_combine_rejects_mixed_widths(self):
        with pytest.raises(InvalidWidthError):
            GradedInteger.combine([crisp(8, 1), crisp(16, 1)])

    def test_combine_rejects_empty(self):
        with pytest.raises(InvalidWidthError):
            GradedInteger.combine([])

    def test_split_rejects_zero_width(self):
        with pytest.raises(InvalidWidthError):
            crisp(8, 1).split(0)


class TestBitwise:
    def test_ops(self):
        a = crisp(8, 0b11001100)
        b = crisp(8, 0b10101010)

        assert (a & b).collapse() == 0b10001000
        assert (a | b).collapse() == 0b11101110
        assert (a ^ b).collapse() == 0b01100110
        assert (~a).collapse() == 0b00110011

    def test_width_mismatch(self):
        with pytest.raises(InvalidWidthError):
            crisp(8, 1) & crisp(16, 1)
        with pytest.raises(InvalidWidthError):
            crisp(8, 1) + crisp(16, 1)


class TestArithmetic:
    def test_small(self):
        a = crisp(8, 20)
        b = crisp(8, 10)

        assert (a + b).collapse() == 30
        assert (a - b).collapse() == 10
        assert (a * b).collapse() == 200

    def test_word(self):
        c = crisp(32, 2000)
        d = crisp(32, 1000)

        assert (c + d).collapse() == 3000
        assert (c - d).collapse() == 1000
        assert (c * d).collapse() == 2000000

    def test_wraps_at_width(self):
        assert (crisp(8, 255) + crisp(8, 1)).collapse() == 0
        assert (crisp(8, 3) - crisp(8, 5)).collapse() == 254
        assert (crisp(8, 16) * crisp(8, 32)).collapse() == 0

    def test_negate(self):
        assert (-crisp(8, 1)).collapse() == 0xFF
        assert (-crisp(8, 0)).collapse() == 0

    def test_multiply_by_bit(self):
        x = crisp(8, 0x5A)
        assert (x * TRUE) == x
        assert (x * FALSE).collapse() == 0
        assert (TRUE * x) == x

    def test_graded_sum(self):
        tap = GradedBit.from_probability(0.5)
        x = GradedInteger.build(4, lambda i: tap if i == 0 else FALSE)
        total = x + crisp(4, 1)

        assert total[0].probability == pytest.approx(0.5)
        assert total[1].probability == pytest.approx(0.5)
        assert total[2].probability == pytest.approx(0.0)


class TestShifts:
    def test_logical_shifts(self):
        x = crisp(8, 0b10010110)
        assert (x << 3).collapse() == (0b10010110 << 3) & 0xFF
        assert (x >> 3).collapse() == 0b10010110 >> 3
        assert (x << 8).collapse() == 0
        assert (crisp(8, 0x80) >> 1).collapse() == 0x40

    def test_negative_shift(self):
        with pytest.raises(ValueError):
            crisp(8, 1) << -1

    @pytest.mark.parametrize("k", [0, 1, 5, 31, 32, 33, 100])
    def test_rotations(self, k):
        n = 0x12345678
        x = crisp(32, n)
        assert x.rotate_left(k).collapse() == rotl(n, k, 32)
        assert x.rotate_right(k).collapse() == rotl(n, 32 - (k % 32), 32)


class TestSelect:
    def test_crisp_selector(self):
        a = crisp(8, 0xAA)
        b = crisp(8, 0x55)
        assert GradedInteger.select(TRUE, a, b) == a
        assert GradedInteger.select(FALSE, a, b) == b

    def test_graded_selector(self):
        cond = GradedBit.from_probability(0.25)
        blended = GradedInteger.select(cond, crisp(4, 0xF), crisp(4, 0x0))
        assert blended.probabilities() == pytest.approx([0.25] * 4)


class TestRendering:
    def test_repr_groups_by_four(self):
        text = repr(crisp(8, 1))
        assert text.startswith("GradedInteger8 [")
        assert "\t0..3: (1.0), (0.0), (0.0), (0.0), " in text
        assert "\t4..7: " in text
        assert text.endswith("]")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
