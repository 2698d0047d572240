"""Fixed-width unsigned big integers made of little-endian 64-bit digits."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from .carry import DIGIT_BITS, DIGIT_MASK, FromNegError, InputTooLargeError

_BYTES_PER_DIGIT = DIGIT_BITS // 8


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"size must be at least 1 digit, got {size}")


@functools.total_ordering
@dataclass(frozen=True)
class UBigInt:
    """An unsigned integer of ``len(digits) * 64`` bits; arithmetic wraps at that width."""

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if not digits:
            raise ValueError("a UBigInt needs at least one digit")
        for digit in digits:
            if not isinstance(digit, int) or not 0 <= digit <= DIGIT_MASK:
                raise ValueError(f"digit out of range: {digit!r}")
        object.__setattr__(self, "digits", digits)

    # construction

    @classmethod
    def _wrap(cls, value: int, size: int) -> UBigInt:
        return cls(tuple((value >> (DIGIT_BITS * i)) & DIGIT_MASK for i in range(size)))

    @classmethod
    def zero(cls, size: int) -> UBigInt:
        """The value 0 with ``size`` digits."""
        _check_size(size)
        return cls((0,) * size)

    @classmethod
    def one(cls, size: int) -> UBigInt:
        """The value 1 with ``size`` digits."""
        _check_size(size)
        return cls((1,) + (0,) * (size - 1))

    @classmethod
    def max(cls, size: int) -> UBigInt:
        """The largest value representable with ``size`` digits."""
        _check_size(size)
        return cls((DIGIT_MASK,) * size)

    @classmethod
    def from_int(cls, value: int, size: int) -> UBigInt:
        """Build a ``size``-digit integer from a non-negative Python int."""
        _check_size(size)
        if value < 0:
            raise FromNegError()
        if value.bit_length() > DIGIT_BITS * size:
            raise InputTooLargeError()
        return cls._wrap(value, size)

    @classmethod
    def _from_bytes(cls, data: bytes, byteorder: str) -> UBigInt:
        data = bytes(data)
        if not data or len(data) % _BYTES_PER_DIGIT:
            raise ValueError("byte length must be a non-zero multiple of 8")
        return cls._wrap(int.from_bytes(data, byteorder), len(data) // _BYTES_PER_DIGIT)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> UBigInt:
        """Read a big-endian byte string whose length is a multiple of 8."""
        return cls._from_bytes(data, "big")

    @classmethod
    def from_le_bytes(cls, data: bytes) -> UBigInt:
        """Read a little-endian byte string whose length is a multiple of 8."""
        return cls._from_bytes(data, "little")

    def to_be_bytes(self) -> bytes:
        return self.value.to_bytes(self.size * _BYTES_PER_DIGIT, "big")

    def to_le_bytes(self) -> bytes:
        return self.value.to_bytes(self.size * _BYTES_PER_DIGIT, "little")

    # basic properties

    @property
    def size(self) -> int:
        """Number of 64-bit digits this integer can hold."""
        return len(self.digits)

    @property
    def bits(self) -> int:
        return self.size * DIGIT_BITS

    @property
    def _modulus(self) -> int:
        return 1 << self.bits

    @property
    def value(self) -> int:
        return sum(digit << (DIGIT_BITS * i) for i, digit in enumerate(self.digits))

    def __len__(self) -> int:
        return self.size

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def _same_size(self, other: UBigInt) -> None:
        if not isinstance(other, UBigInt):
            raise TypeError(f"expected UBigInt, got {type(other).__name__}")
        if other.size != self.size:
            raise ValueError(f"size mismatch: {self.size} and {other.size} digits")

    def _new(self, value: int) -> UBigInt:
        return self._wrap(value % self._modulus, self.size)

    # comparison and formatting

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UBigInt):
            return NotImplemented
        self._same_size(other)
        return self.value < other.value

    def __str__(self) -> str:
        return format(self, "x")

    def __format__(self, spec: str) -> str:
        if spec in ("", "x"):
            return "0x" + "".join(f"{digit:016x}" for digit in reversed(self.digits))
        if spec == "X":
            return "0x" + "".join(f"{digit:016X}" for digit in reversed(self.digits))
        raise ValueError(f"unsupported format spec for UBigInt: {spec!r}")

    def __repr__(self) -> str:
        inner = ", ".join(f"0x{digit:016x}" for digit in self.digits)
        return f"UBigInt(({inner},))"

    # arithmetic

    def overflowing_add(self, rhs: UBigInt) -> tuple[UBigInt, bool]:
        """Return the wrapped sum and whether it overflowed."""
        self._same_size(rhs)
        total = self.value + rhs.value
        return self._new(total), total >= self._modulus

    def overflowing_sub(self, rhs: UBigInt) -> tuple[UBigInt, bool]:
        """Return the wrapped difference and whether it borrowed."""
        self._same_size(rhs)
        diff = self.value - rhs.value
        return self._new(diff), diff < 0

    def add(self, rhs: UBigInt) -> UBigInt:
        return self.overflowing_add(rhs)[0]

    def sub(self, rhs: UBigInt) -> UBigInt:
        return self.overflowing_sub(rhs)[0]

    def double(self) -> UBigInt:
        return self.add(self)

    def overflowing_mul_digit(self, digit: int) -> tuple[UBigInt, int]:
        """Return the wrapped product with one digit and the carried-out digit."""
        if not 0 <= digit <= DIGIT_MASK:
            raise ValueError(f"digit out of range: {digit!r}")
        product = self.value * digit
        return self._new(product), product >> self.bits

    def mul_digit(self, digit: int) -> UBigInt:
        return self.overflowing_mul_digit(digit)[0]

    # counting

    def count_digits(self) -> int:
        """Number of digits up to and including the most significant non-zero one."""
        return -(-self.value.bit_length() // DIGIT_BITS)

    def count_digits_fast(self) -> int:
        """Like :meth:`count_digits`, stopping at the first non-zero digit from the top."""
        for count, digit in enumerate(reversed(self.digits)):
            if digit:
                return self.size - count
        return 0

    def count_bits(self) -> int:
        """Number of significant bits."""
        return self.value.bit_length()

    # bit manipulation

    def and_bool(self, flag: bool) -> UBigInt:
        """Return ``self`` if ``flag`` is true, otherwise zero."""
        return self if flag else self.zero(self.size)

    def left_align(self) -> tuple[UBigInt, int]:
        """Shift left until the top non-zero digit has its high bit set.

        Returns the shifted value and the shift amount.
        """
        num_digits = self.count_digits()
        if num_digits == 0:
            raise ValueError("cannot align zero")
        shift = DIGIT_BITS - self.digits[num_digits - 1].bit_length()
        return self.shift_left(shift), shift

    def shift_left(self, shift: int) -> UBigInt:
        """Shift left by ``shift % 64`` bits, discarding bits shifted out."""
        if shift < 0:
            raise ValueError("shift must be non-negative")
        return self._new(self.value << (shift % DIGIT_BITS))

    def shift_right(self, shift: int) -> UBigInt:
        """Shift right by ``shift % 64`` bits."""
        if shift < 0:
            raise ValueError("shift must be non-negative")
        return self._new(self.value >> (shift % DIGIT_BITS))

    def invert(self) -> UBigInt:
        """One's complement."""
        return self._new(self.value ^ (self._modulus - 1))

    def xor(self, rhs: UBigInt) -> UBigInt:
        self._same_size(rhs)
        return self._new(self.value ^ rhs.value)

    def and_(self, rhs: UBigInt) -> UBigInt:
        self._same_size(rhs)
        return self._new(self.value & rhs.value)

    def or_(self, rhs: UBigInt) -> UBigInt:
        self._same_size(rhs)
        return self._new(self.value | rhs.value)

    def nor(self, rhs: UBigInt) -> UBigInt:
        return self.or_(rhs).invert()

    def xnor(self, rhs: UBigInt) -> UBigInt:
        return self.xor(rhs).invert()

    def nand(self, rhs: UBigInt) -> UBigInt:
        return self.and_(rhs).invert()

    def resize(self, size: int) -> UBigInt:
        """Convert to ``size`` digits, dropping the most significant ones if needed."""
        _check_size(size)
        return self._wrap(self.value, size)

    def get_bit(self, bit: int) -> bool:
        if not 0 <= bit < self.bits:
            raise IndexError(f"bit {bit} out of range for {self.bits}-bit integer")
        return bool((self.value >> bit) & 1)

    def set_bit(self, bit: int, value: bool) -> UBigInt:
        """Return a copy with ``bit`` set to ``value``."""
        if not 0 <= bit < self.bits:
            raise IndexError(f"bit {bit} out of range for {self.bits}-bit integer")
        cleared = self.value & ~(1 << bit)
        return self._new(cleared | (int(bool(value)) << bit))

    def set_byte(self, byte: int, value: int) -> UBigInt:
        """Return a copy with little-endian byte ``byte`` replaced by ``value``."""
        if not 0 <= byte < self.size * _BYTES_PER_DIGIT:
            raise IndexError(f"byte {byte} out of range for {self.size}-digit integer")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value!r}")
        shift = byte * 8
        cleared = self.value & ~(0xFF << shift)
        return self._new(cleared | (value << shift))