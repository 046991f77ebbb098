"""
Seeded random stream module for texsmith.

Provides the reproducible pseudo-random stream shared by every texsmith
generator. The stream is a pure function of (seed, draw index): the same seed
always yields the same sequence, on every platform.

Usage:
    import texsmith as ts

    state = ts.rng.init_state(42)
    value, state = ts.rng.next_value(state)
    values, state = ts.rng.draw_block(state, 4096)

    seed = ts.rng.string_to_seed("seed-a1b2c3")

Author: B.G.
"""

from .seeded_stream import (
    SeededStream,
    draw_block,
    init_state,
    next_value,
    random_seed,
    string_to_seed,
)

__all__ = [
    "SeededStream",
    "draw_block",
    "init_state",
    "next_value",
    "random_seed",
    "string_to_seed",
]
