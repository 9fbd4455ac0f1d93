import numbers
from collections.abc import Sequence
from functools import lru_cache

from charify.errors import ConfigurationError

LEVELS = 256


def _check_charset(charset: Sequence[str]) -> None:
    if len(charset) == 0:
        raise ConfigurationError("Character set must contain at least one character")


def select(charset: Sequence[str], brightness: int) -> str:
    """Return the character whose bucket contains ``brightness``.

    The brightness domain is split into ``len(charset)`` equal-width buckets,
    bucket ``i`` mapping to ``charset[i]``.
    """
    _check_charset(charset)
    if isinstance(brightness, bool) or not isinstance(brightness, numbers.Integral):
        raise ValueError(f"Brightness must be an integer, got {brightness!r}")
    brightness = int(brightness)
    if not 0 <= brightness < LEVELS:
        raise ValueError(f"Brightness out of range 0-255: {brightness}")
    return charset[len(charset) * brightness // LEVELS]


@lru_cache(maxsize=32)
def _lookup(charset: tuple[str, ...]) -> tuple[str, ...]:
    n = len(charset)
    return tuple(charset[n * b // LEVELS] for b in range(LEVELS))


def build_lookup(charset: Sequence[str]) -> tuple[str, ...]:
    """Precompute ``select`` for every brightness value. Memoised per character set."""
    _check_charset(charset)
    return _lookup(tuple(charset))
