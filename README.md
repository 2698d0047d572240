# crylib

Cryptographic building blocks written in plain Python with no third-party
dependencies:

- `crylib.carry` – single-word (64-bit) add, subtract and multiply with
  carries, plus the errors `InputTooLargeError` and `FromNegError`.
- `crylib.ubigint.UBigInt` – immutable fixed-width unsigned integers built
  from little-endian 64-bit digits, with wrapping arithmetic, bitwise
  operations, bit and byte access and byte conversions.
- `crylib.ubigint_div` – widening multiplication, widening left shift and
  long division for `UBigInt`.
- `crylib.chacha20` – the ChaCha20 stream cipher.

These modules are meant for learning and experimenting. They are slow and
have not been audited, so do not rely on them to protect real data.

## Installation

```
pip install .
```

## Big integers

```python
from crylib.ubigint import UBigInt
from crylib.ubigint_div import div, widening_mul

x = UBigInt.max(4)                          # 4 digits = 256 bits
assert x.add(UBigInt.one(4)) == UBigInt.zero(4)   # arithmetic wraps

total, overflowed = x.overflowing_add(UBigInt.one(4))
assert overflowed

a = UBigInt.from_int(100, 4)
b = UBigInt.from_int(7, 4)
quotient, remainder = div(a, b)
assert int(quotient) == 14 and int(remainder) == 2

product = widening_mul(x, x)                # 8 digits, never overflows
assert product.size == 8

print(format(a, "x"))                       # 0x followed by 64 hex digits
assert UBigInt.from_le_bytes(a.to_le_bytes()) == a
```

`UBigInt` values are immutable: methods such as `set_bit`, `set_byte` and
`left_align` return new values. Both operands of an arithmetic or bitwise
operation must have the same number of digits, or `ValueError` is raised.
`UBigInt.from_int` raises `FromNegError` for negative values and
`InputTooLargeError` for values that do not fit; `div` raises
`ZeroDivisionError` for a zero divisor. Shifts move by `shift % 64` bits.

## ChaCha20

```python
from crylib import chacha20

key = bytes(32)          # a made-up all-zero key
nonce = bytes(12)        # never reuse a nonce with the same key

cipher_text = chacha20.encrypt(b"hello", key, nonce, 1)
assert chacha20.encrypt(cipher_text, key, nonce, 1) == b"hello"

buf = bytearray(b"hello")
chacha20.encrypt_inline(buf, key, nonce, 1)   # XORs the buffer in place
assert bytes(buf) == cipher_text

stream = chacha20.block(key, nonce, 0)        # one 64-byte key stream block
```

`encrypt_inline` raises `OverflowError` if the 32-bit block counter would run
past `2**32 - 1`, and `ValueError` for a key or nonce of the wrong length.

## What this package does not do

ChaCha20 on its own gives confidentiality only. The package has no message
authentication, no authenticated encryption, and no block cipher such as
AES: nothing here detects a cipher text that has been altered. There is no
command-line tool.

## Running the tests

```
pip install .[test]
pytest
```