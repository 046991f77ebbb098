"""
Seeded pseudo-random stream for texsmith.

A counter-based mulberry32 generator: the 32-bit state advances by a fixed
Weyl increment on every draw and each new state is passed through a
multiply-xor-shift mixer. Draw ``k`` is therefore a pure function of the seed
and ``k``, which lets :func:`draw_block` produce millions of consecutive draws
with numpy uint32 arithmetic while staying bit-identical to repeated calls of
:func:`next_value`.

This module is the only randomness source used by the noise field generator.
:func:`random_seed` is the one non-deterministic entry point and is only used
to resolve an omitted seed before generation starts.

Author: B.G.
"""

import secrets

import numpy as np

from .. import constants as cte

_U32 = np.uint32
_MASK = cte.UINT32_MASK


def init_state(seed: int) -> int:
    """
    Reduce a seed to the 32-bit starting state of a stream.

    Negative and oversized integers wrap to 32 bits. A zero seed is replaced
    by a fixed non-zero constant so it cannot start a degenerate stream.

    Args:
        seed: Any integer

    Returns:
        int: Starting state in [1, 2**32)
    """
    state = int(seed) & _MASK
    if state == 0:
        state = cte.ZERO_SEED_REPLACEMENT
    return state


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def next_value(state: int):
    """
    Draw one value from the stream.

    Args:
        state: Current 32-bit stream state

    Returns:
        tuple: (value in [0, 1), new state)
    """
    t = (state + cte.WEYL_INCREMENT) & _MASK
    r = _imul(t ^ (t >> 15), t | 1)
    r ^= (r + _imul(r ^ (r >> 7), r | 61)) & _MASK
    r ^= r >> 14
    return r / cte.TWO_POW_32, t


def _mix(states: np.ndarray) -> np.ndarray:
    """Vectorised mulberry32 mixer over a uint32 array of Weyl states."""
    r = states >> _U32(15)
    r ^= states
    r *= states | _U32(1)
    t = r >> _U32(7)
    t ^= r
    t *= r | _U32(61)
    t += r
    r ^= t
    r ^= r >> _U32(14)
    return r


def draw_block(state: int, count: int):
    """
    Draw ``count`` consecutive values from the stream at once.

    Equivalent to calling :func:`next_value` ``count`` times and collecting
    the values, but computed in one pass with wrapping uint32 arithmetic.

    Args:
        state: Current 32-bit stream state
        count: Number of draws (>= 0)

    Returns:
        tuple: (float64 array of shape (count,) in [0, 1), new state)
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    state = int(state) & _MASK
    states = np.arange(1, count + 1, dtype=np.uint32)
    states *= _U32(cte.WEYL_INCREMENT)
    states += _U32(state)
    values = _mix(states).astype(np.float64)
    values /= cte.TWO_POW_32
    new_state = (state + cte.WEYL_INCREMENT * count) & _MASK
    return values, new_state


class SeededStream:
    """
    Stateful convenience wrapper around the functional stream.

    Keeps the running state and the number of draws taken so far. The
    wrapper is meant to live inside one generation pass and is never shared.

    Example:
        stream = SeededStream(42)
        first = stream.next()
        block = stream.take(1024)
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self.state = init_state(seed)
        self.drawn = 0

    def next(self) -> float:
        value, self.state = next_value(self.state)
        self.drawn += 1
        return value

    def take(self, count: int) -> np.ndarray:
        values, self.state = draw_block(self.state, count)
        self.drawn += count
        return values

    def __repr__(self):
        return f"SeededStream(seed={self.seed}, drawn={self.drawn})"


def string_to_seed(text: str) -> int:
    """
    Hash a seed string to a 32-bit seed.

    Uses the classic ``h = h * 31 + code_unit`` string hash over UTF-16 code
    units, so seed strings produce the same numbers as the browser tools.
    A zero hash maps to 1.

    Args:
        text: Seed string, e.g. ``"seed-a1b2c3"``

    Returns:
        int: Seed in [1, 2**32)
    """
    encoded = str(text).encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = ((h << 5) - h + unit) & _MASK
    return h or 1


def random_seed() -> int:
    """Return a non-deterministic 32-bit seed."""
    return secrets.randbits(32)
