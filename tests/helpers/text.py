"""Text normalization for comparing CLDR-formatted output.

Babel emits CLDR spacing characters (U+00A0 no-break space, U+202F narrow
no-break space) and locale-specific glyphs such as the fullwidth yen sign.
These helpers fold them so assertions can use plain ASCII spacing.
"""

from __future__ import annotations

NO_BREAK_SPACE = "\u00a0"
NARROW_NO_BREAK_SPACE = "\u202f"
FULLWIDTH_YEN = "\uffe5"
YEN = "\u00a5"


def normalize_spaces(text: str) -> str:
    """Replace no-break and narrow no-break spaces with plain spaces."""
    return text.replace(NO_BREAK_SPACE, " ").replace(NARROW_NO_BREAK_SPACE, " ")


def normalize_yen(text: str) -> str:
    """Fold the fullwidth yen sign into the regular yen sign."""
    return text.replace(FULLWIDTH_YEN, YEN)
