"""The ChaCha20 stream cipher."""

from __future__ import annotations

import struct

KEY_SIZE = 32
NONCE_SIZE = 12
BLOCK_SIZE = 64

_MASK32 = 0xFFFFFFFF
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)

# Column rounds followed by diagonal rounds.
_ROUND_INDICES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _check_word(name: str, value: int) -> None:
    if not 0 <= value <= _MASK32:
        raise ValueError(f"{name} must be a 32-bit unsigned value, got {value!r}")


def quarter_round(a: int, b: int, c: int, d: int) -> tuple[int, int, int, int]:
    """Apply the ChaCha quarter round to four 32-bit words."""
    for name, word in zip("abcd", (a, b, c, d)):
        _check_word(name, word)
    a = (a + b) & _MASK32
    d = _rotl(d ^ a, 16)
    c = (c + d) & _MASK32
    b = _rotl(b ^ c, 12)
    a = (a + b) & _MASK32
    d = _rotl(d ^ a, 8)
    c = (c + d) & _MASK32
    b = _rotl(b ^ c, 7)
    return a, b, c, d


def _inner_block(state: list[int]) -> None:
    for i, j, k, m in _ROUND_INDICES:
        state[i], state[j], state[k], state[m] = quarter_round(
            state[i], state[j], state[k], state[m]
        )


def _check_key_nonce(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")


def _initial_state(key: bytes, nonce: bytes, counter: int) -> list[int]:
    return [
        *_CONSTANTS,
        *struct.unpack("<8I", bytes(key)),
        counter,
        *struct.unpack("<3I", bytes(nonce)),
    ]


def block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """Return the 64-byte key stream block for ``key``, ``nonce`` and ``counter``."""
    _check_key_nonce(key, nonce)
    _check_word("counter", counter)
    state = _initial_state(key, nonce, counter)
    working = list(state)
    for _ in range(10):
        _inner_block(working)
    return struct.pack(
        "<16I", *((s + w) & _MASK32 for s, w in zip(state, working))
    )


def encrypt_inline(msg: bytearray, key: bytes, nonce: bytes, counter: int) -> None:
    """XOR ``msg`` in place with the key stream starting at block ``counter``.

    The same nonce must never be used twice with the same key.
    Raises :class:`OverflowError` if the block counter would pass ``2**32 - 1``.
    """
    _check_key_nonce(key, nonce)
    _check_word("counter", counter)
    num_blocks = -(-len(msg) // BLOCK_SIZE)
    if num_blocks and counter + num_blocks - 1 > _MASK32:
        raise OverflowError("block counter overflowed 32 bits")
    for index, offset in enumerate(range(0, len(msg), BLOCK_SIZE)):
        chunk = bytes(msg[offset:offset + BLOCK_SIZE])
        stream = block(key, nonce, counter + index)
        msg[offset:offset + len(chunk)] = bytes(
            data_byte ^ stream_byte for data_byte, stream_byte in zip(chunk, stream)
        )


def encrypt(msg: bytes, key: bytes, nonce: bytes, counter: int) -> bytes:
    """Return ``msg`` XORed with the key stream; the same call decrypts."""
    buf = bytearray(msg)
    encrypt_inline(buf, key, nonce, counter)
    return bytes(buf)