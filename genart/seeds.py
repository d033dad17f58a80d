"""Deterministic seed derivation.

Do NOT use Python's built-in ``hash()`` here: it is salted per process and
would break replay across runs. Seeds are derived from SHA-256 so the same
parent seed and labels give the same child seed on every platform.
"""

import hashlib

from genart.types import Seed
from genart.utils.math import to_int32


def stable_u32(*parts: object) -> int:
    """
    Generate a stable 32-bit unsigned integer from arbitrary parts.

    Example:
        stable_u32("layer", 42) -> same value on every run
    """
    s = "|".join(str(p) for p in parts).encode("utf-8")
    return int.from_bytes(hashlib.sha256(s).digest()[:4], "big")


def derive_seed(seed: Seed, *labels: object) -> Seed:
    """Derive an independent signed 32-bit child seed.

    Use one child per worker or per composition layer so parallel generation
    stays reproducible without sharing an engine between threads.

    Args:
        seed: Parent seed; coerced to signed 32 bits first.
        *labels: Anything with a stable ``str()`` (worker index, layer name).

    Returns:
        Seed: Child seed in the signed 32-bit range.
    """
    return to_int32(stable_u32("derive", to_int32(int(seed)), *labels))
