"""Single-digit carry arithmetic on 64-bit words and the conversion errors for big integers."""

from __future__ import annotations

DIGIT_BITS = 64
DIGIT_MASK = (1 << DIGIT_BITS) - 1


class InputTooLargeError(ValueError):
    """Raised when a value does not fit into the requested integer width."""

    def __init__(self, message: str = "input is too large for output type") -> None:
        super().__init__(message)


class FromNegError(ValueError):
    """Raised when a negative value is converted into an unsigned integer."""

    def __init__(self, message: str = "input is negative") -> None:
        super().__init__(message)


def _check_digit(name: str, value: int) -> None:
    if not 0 <= value <= DIGIT_MASK:
        raise ValueError(f"{name} must be a 64-bit unsigned value, got {value!r}")


def carry_add(x: int, y: int, carry: bool) -> tuple[int, bool]:
    """Return ``x + y + carry`` modulo 2**64 and whether the sum overflowed."""
    _check_digit("x", x)
    _check_digit("y", y)
    total = x + y + int(bool(carry))
    return total & DIGIT_MASK, total > DIGIT_MASK


def carry_sub(x: int, y: int, carry: bool) -> tuple[int, bool]:
    """Return ``x - y - carry`` modulo 2**64 and whether the subtraction borrowed."""
    _check_digit("x", x)
    _check_digit("y", y)
    diff = x - y - int(bool(carry))
    return diff & DIGIT_MASK, diff < 0


def carry_mul(x: int, y: int, carry: int) -> tuple[int, int]:
    """Return the low and high 64-bit words of ``x * y + carry``."""
    _check_digit("x", x)
    _check_digit("y", y)
    _check_digit("carry", carry)
    product = x * y + carry
    return product & DIGIT_MASK, product >> DIGIT_BITS