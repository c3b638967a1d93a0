"""
Cryptographically secure random sampling.

The sampler draws 32-bit words from a pluggable random source and uses
rejection sampling so every value in ``[0, n)`` is equally likely.
"""

import logging
import secrets
from typing import Optional

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_U32 = 0xFFFFFFFF  # 2^32 - 1


class RandomSource:
    """Source of secure random bytes.

    Subclasses only need to implement ``fill``, which lets the sampler run on
    top of any platform CSPRNG (or a scripted source in tests).
    """

    def fill(self, buffer: bytearray) -> None:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    """Random source backed by the operating system CSPRNG."""

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = secrets.token_bytes(len(buffer))


_default_source = SystemRandomSource()


def get_default_source() -> RandomSource:
    """Return the shared system random source."""
    return _default_source


def random_u32(source: Optional[RandomSource] = None) -> int:
    """Draw one uniformly distributed unsigned 32-bit integer."""
    buffer = bytearray(4)
    (source or _default_source).fill(buffer)
    return int.from_bytes(buffer, "little")


def sample_below(n: int, source: Optional[RandomSource] = None) -> int:
    """
    Return a uniform random integer in ``[0, n)``.

    Args:
        n: Exclusive upper bound, a positive integer no larger than 2^32 - 1
        source: Random source to draw from (system CSPRNG by default)

    Returns:
        Integer in ``[0, n)``

    Raises:
        InvalidArgumentError: If n is not a positive integer in range
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidArgumentError(f"sample_below: n must be a positive integer, got {n!r}")
    if n > MAX_U32:
        raise InvalidArgumentError(f"sample_below: n must not exceed {MAX_U32}, got {n}")

    # Highest unbiased value; anything at or above it would favour low results
    limit = MAX_U32 - (MAX_U32 % n)

    while True:
        x = random_u32(source)
        if x < limit:
            return x % n
        logger.debug(f"Rejected sample above limit {limit} for n={n}")
