"""Glyph sets recognized by the message parser.

Extend these sets to accept more bullets or header markers; the parsing
rules build their patterns from them at import time.
"""

import re

# Leading glyphs that start a list item
BULLET_GLYPHS: frozenset[str] = frozenset({"-", "\u2022"})  # hyphen, bullet

# Pictographs that introduce an emoji header when followed by a bold run
MARKER_GLYPHS: frozenset[str] = frozenset({
    "\U0001F30D",  # globe
    "\U0001F43E",  # paw prints
    "\u274C",      # cross mark
    "\u2705",      # check mark
    "\U0001F4CD",  # round pushpin
    "\U0001F98B",  # butterfly
    "\U0001F50D",  # magnifying glass
})

# Characters stripped from the end of a link in strict mode
LINK_TRAILING_PUNCTUATION: str = ".,;:!?)]}'\""

# Closing brackets trimmed only when unbalanced, mapped to their openers
LINK_BRACKET_PAIRS: dict[str, str] = {")": "(", "]": "[", "}": "{"}

# Delimiter pair around a bold run
BOLD_MARKER = "**"


def glyph_alternation(glyphs: frozenset[str]) -> str:
    """Build a regex alternation matching any glyph in the set.

    Longer glyphs come first so multi-codepoint symbols win over
    their own prefixes.
    """
    ordered = sorted(glyphs, key=lambda g: (-len(g), g))
    return "|".join(re.escape(glyph) for glyph in ordered)
