import numpy as np
import pytest

from charify.charsets import DEFAULT_CHARSET, build_charset
from charify.errors import ConfigurationError
from charify.quantize import build_lookup, select


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 10, 64, 255, 256])
def test_every_bucket_reachable(n):
    charset = tuple(chr(0x4E00 + i) for i in range(n))
    indices = {charset.index(select(charset, b)) for b in range(256)}
    assert indices == set(range(n))


def test_select_is_monotonic():
    charset = build_charset("abcdefg")
    indices = [charset.index(select(charset, b)) for b in range(256)]
    assert indices == sorted(indices)


def test_default_charset_endpoints():
    charset = build_charset()
    assert select(charset, 0) == " "
    assert select(charset, 255) == "█"
    assert select(charset, 128) == "▒"


def test_bucket_boundaries():
    # 5 buckets of width 51.2
    charset = DEFAULT_CHARSET
    assert select(charset, 51) == " "
    assert select(charset, 52) == "░"
    assert select(charset, 204) == "▓"
    assert select(charset, 205) == "█"


def test_single_character_set():
    assert {select("#", b) for b in range(256)} == {"#"}


def test_more_characters_than_levels():
    charset = [chr(0x100 + i) for i in range(300)]
    assert select(charset, 0) == charset[0]
    assert select(charset, 255) == charset[298]


def test_duplicates_are_kept():
    assert select("aab", 100) == "a"
    assert select("aab", 200) == "b"


def test_empty_charset_rejected():
    with pytest.raises(ConfigurationError):
        select("", 10)
    with pytest.raises(ConfigurationError):
        build_lookup(())


@pytest.mark.parametrize("value", [-1, 256, 1.5, True])
def test_invalid_brightness_rejected(value):
    with pytest.raises(ValueError):
        select(DEFAULT_CHARSET, value)


def test_numpy_brightness_does_not_overflow():
    assert select(DEFAULT_CHARSET, np.uint8(255)) == "█"


def test_lookup_matches_select():
    charset = build_charset(" .:-=+*#%@")
    table = build_lookup(charset)
    assert len(table) == 256
    assert all(table[b] == select(charset, b) for b in range(256))


def test_lookup_is_memoised():
    assert build_lookup(list("xyz")) is build_lookup("xyz")
