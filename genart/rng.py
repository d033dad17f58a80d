"""Seeded pseudo-random stream.

``SeededRNG`` is a mulberry32 generator: a single 32-bit state word, advanced
once per draw. Every sampling operation is built on :meth:`SeededRNG.uniform`
so the number of state advances per call is fixed and documented, which keeps
whole compositions replayable from one seed.

Examples
--------
>>> rng = SeededRNG(42)
>>> rng.range(0, 360)  # base hue
>>> rng.pick(["circle", "square"])

The mixing constants are part of the output contract. Changing any of them
changes every sketch generated from a seed.
"""

import logging
import math
from typing import List, Sequence, TypeVar

from genart.errors import InvalidArgumentError
from genart.seeds import derive_seed
from genart.types import Seed
from genart.utils.math import UINT32_MASK, UINT32_RANGE, imul, to_int32, to_uint32

logger = logging.getLogger(__name__)

T = TypeVar("T")

MULBERRY32_INCREMENT = 0x6D2B79F5

# Smallest positive value uniform() can return; used to keep log() finite.
_MIN_UNIFORM = 1.0 / UINT32_RANGE


def mulberry32_step(state: int) -> tuple[int, int]:
    """Advance a mulberry32 state word.

    Args:
        state (int): Current state (any int, only the low 32 bits matter).

    Returns:
        tuple[int, int]: ``(new_state, output)``, both unsigned 32-bit.
    """
    s = (state + MULBERRY32_INCREMENT) & UINT32_MASK
    t = imul(s ^ (s >> 15), 1 | s)
    t = ((t + imul(t ^ (t >> 7), 61 | t)) & UINT32_MASK) ^ t
    return s, (t ^ (t >> 14)) & UINT32_MASK


class SeededRNG:
    """Local deterministic RNG. No global random state touched.

    Owned by a single caller; do not share an instance across threads. Use
    :meth:`fork` to hand independent streams to workers.
    """

    def __init__(self, seed: Seed) -> None:
        self._seed: Seed = to_int32(int(seed))
        self._state: int = to_uint32(self._seed)
        logger.debug("SeededRNG created with seed %d", self._seed)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed}, state=0x{self._state:08x})"

    @property
    def seed(self) -> Seed:
        """The construction seed, coerced to signed 32 bits."""
        return self._seed

    @property
    def state(self) -> int:
        """Current unsigned 32-bit state word."""
        return self._state

    def advance(self) -> int:
        """Advance the stream once and return the raw 32-bit output."""
        self._state, out = mulberry32_step(self._state)
        return out

    def uniform(self) -> float:
        """Return a float in [0, 1)."""
        return self.advance() / UINT32_RANGE

    def range(self, low: float, high: float) -> float:
        """Return a float in [low, high); ``low == high`` returns ``low``."""
        if high < low:
            raise InvalidArgumentError(f"range() requires low <= high, got {low}, {high}")
        return low + self.uniform() * (high - low)

    def integer(self, low: int, high: int) -> int:
        """Return an integer in [low, high] inclusive."""
        if high < low:
            raise InvalidArgumentError(
                f"integer() requires low <= high, got {low}, {high}"
            )
        return math.floor(low + self.uniform() * (high - low + 1))

    def pick(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""
        if len(seq) == 0:
            raise InvalidArgumentError("pick() from an empty sequence")
        return seq[math.floor(self.uniform() * len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Return a shuffled copy (Fisher-Yates); ``seq`` is left untouched."""
        out = list(seq)
        for i in range(len(out) - 1, 0, -1):
            j = math.floor(self.uniform() * (i + 1))
            out[i], out[j] = out[j], out[i]
        return out

    def gaussian(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """Normally distributed float via Box-Muller (always two draws)."""
        u1 = max(self.uniform(), _MIN_UNIFORM)
        u2 = self.uniform()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + z * stddev

    def chance(self, p: float = 0.5) -> bool:
        """Return True with probability ``p``."""
        return self.uniform() < p

    def fork(self, *labels: object) -> "SeededRNG":
        """Return an independent engine seeded from this one's seed and ``labels``.

        The parent stream is not advanced, so forking is order-independent.
        """
        child = SeededRNG(derive_seed(self._seed, *labels))
        logger.debug("Forked seed %d -> %d (%r)", self._seed, child.seed, labels)
        return child
