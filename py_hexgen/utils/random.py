"""
Random number generation utilities.

Every generator takes its PRNG as an argument; there is no module-level
generator. These helpers only decide which seed a new AleaPRNG starts from.
"""

import secrets
from typing import Any, Optional

import structlog

from ..config import settings
from ..core.alea_prng import AleaPRNG

logger = structlog.get_logger()


def random_seed() -> str:
    """A fresh, non-reproducible seed string."""
    return str(secrets.randbelow(10**9))


def create_prng(seed: Optional[Any] = None) -> AleaPRNG:
    """
    Create an Alea PRNG.

    Args:
        seed: Seed to use. Falls back to HEXGEN_DEFAULT_SEED, then to a
            random seed.

    Returns:
        AleaPRNG instance; its ``seed`` attribute records the seed used
    """
    if seed is None:
        seed = settings.default_seed
    if seed is None:
        seed = random_seed()
        logger.debug("Using random seed", seed=seed)
    return AleaPRNG(seed)
