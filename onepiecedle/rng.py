"""Deterministic PRNG and string seeds.

mulberry32 is a 32-bit Weyl-sequence generator: the state advances by a
fixed odd increment per draw and is then mixed through two multiply /
xor-shift rounds. Output matches the classic reference implementation bit
for bit, so a given date selects the same character on every platform.
"""

from __future__ import annotations

from typing import Callable

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296

RandomFn = Callable[[], float]


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a * b (both treated as uint32)."""
    return (a * b) & _MASK32


def mulberry32(seed: int) -> RandomFn:
    """Return a generator of floats in [0, 1) seeded with a uint32."""
    state = seed & _MASK32

    def next_float() -> float:
        nonlocal state
        state = (state + _INCREMENT) & _MASK32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    return next_float


def seed_from_string(text: str) -> int:
    """Polynomial string hash (accum * 31 + code) truncated to signed 32 bits.

    Returns the absolute value, so seeds are never negative. Collisions are
    possible and harmless (two days would share a target).
    """
    accum = 0
    for ch in text:
        accum = (accum * 31 + ord(ch)) & _MASK32
    if accum >= 0x80000000:
        accum -= _TWO_POW_32
    return abs(accum)


# Named entry points used at the call sites for each mode
date_to_seed = seed_from_string
round_id_to_seed = seed_from_string


def next_seed(seed: int) -> int:
    """Derive a follow-up seed from the first draw of `seed`."""
    return int(mulberry32(seed)() * 2147483647)
