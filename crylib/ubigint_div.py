"""Widening multiplication, widening shifts and long division for :class:`UBigInt`."""

from __future__ import annotations

from .carry import DIGIT_BITS, DIGIT_MASK
from .ubigint import UBigInt

_DOUBLE_MASK = (1 << (2 * DIGIT_BITS)) - 1


def _check_same_size(lhs: UBigInt, rhs: UBigInt) -> None:
    if lhs.size != rhs.size:
        raise ValueError(f"size mismatch: {lhs.size} and {rhs.size} digits")


def partial_div(m0: int, m1: int, d1: int, d0: int) -> int:
    """Estimate one quotient digit of ``m0:m1`` divided by the normalized ``d0:d1``.

    The estimate saturates at ``2**64 - 1``.
    """
    remainder = (m0 << DIGIT_BITS) | m1
    divisor = (d0 << DIGIT_BITS) | d1
    quotient = 0
    for _ in range(DIGIT_BITS):
        quotient <<= 1
        if remainder >= divisor:
            quotient |= 1
            remainder -= divisor
        divisor >>= 1

    mask = DIGIT_MASK if quotient >> (DIGIT_BITS - 1) else 0
    quotient = ((quotient << 1) & DIGIT_MASK) | int(remainder >= divisor)
    return quotient | mask


def widening_mul(lhs: UBigInt, rhs: UBigInt) -> UBigInt:
    """Multiply two equally sized integers into one of twice the size, never overflowing."""
    _check_same_size(lhs, rhs)
    return UBigInt.from_int(lhs.value * rhs.value, lhs.size * 2)


def widening_shift_left(value: UBigInt, shift: int) -> UBigInt:
    """Shift left by ``shift % 64`` bits into an integer one digit wider."""
    if shift < 0:
        raise ValueError("shift must be non-negative")
    return UBigInt.from_int(value.value << (shift % DIGIT_BITS), value.size + 1)


def div(numerator: UBigInt, denominator: UBigInt) -> tuple[UBigInt, UBigInt]:
    """Return the quotient and remainder of ``numerator / denominator``.

    Raises :class:`ZeroDivisionError` if ``denominator`` is zero.
    """
    _check_same_size(numerator, denominator)
    size = numerator.size
    if denominator.value == 0:
        raise ZeroDivisionError("division by zero")

    num_len = numerator.count_digits() + 1
    div_len = denominator.count_digits()

    sdiv, norm_shift = denominator.left_align()
    sdiv_value = sdiv.value
    snum = widening_shift_left(numerator, norm_shift).value

    d0 = sdiv.digits[div_len - 1]
    d1 = sdiv.digits[div_len - 2] if div_len > 1 else 0

    num_loops = max(num_len - div_len, 0)
    window_bits = DIGIT_BITS * (div_len + 1)
    window_mask = (1 << window_bits) - 1

    def digit_at(index: int) -> int:
        return (snum >> (DIGIT_BITS * index)) & DIGIT_MASK

    quotient = 0
    for win_bot in reversed(range(num_loops)):
        win_top = win_bot + div_len
        partial_quotient = partial_div(digit_at(win_top), digit_at(win_top - 1), d1, d0)

        bot_shift = DIGIT_BITS * win_bot
        window = (snum >> bot_shift) & window_mask
        diff = window - sdiv_value * partial_quotient
        borrowed = diff < 0
        if borrowed:
            partial_quotient = (partial_quotient - 1) & DIGIT_MASK
            diff += sdiv_value
        window = diff & window_mask

        snum = (snum & ~(window_mask << bot_shift)) | (window << bot_shift)
        quotient |= partial_quotient << bot_shift

    remainder = UBigInt.from_int(snum, size + 1).shift_right(norm_shift).resize(size)
    return UBigInt.from_int(quotient, size), remainder