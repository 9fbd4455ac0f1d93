from charify.errors import ConfigurationError

# Ordered dark -> bright; index 0 is the emptiest-looking glyph
DEFAULT_CHARSET = " ░▒▓█"

# Light, medium and dark shade without the full block
SHADES = " ░▒▓"

ASCII_SIMPLE = " .:-=+*#%@"

# 70-level ramp, sparse to dense
ASCII_DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

PRESETS = {
    "blocks": DEFAULT_CHARSET,
    "shades": SHADES,
    "ascii": ASCII_SIMPLE,
    "detailed": ASCII_DETAILED,
}


def build_charset(raw: str | None = None) -> tuple[str, ...]:
    """Split a string into an ordered character set, one entry per code point.

    ``None`` gives the default set. Duplicates are kept, order matters.
    """
    if raw is None:
        raw = DEFAULT_CHARSET
    charset = tuple(raw)
    if not charset:
        raise ConfigurationError("Character set must contain at least one character")
    return charset
