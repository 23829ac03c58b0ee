"""Inline formatter: split one line of text into text, bold and link segments."""

import re

from wildmark.formatting.ir import Bold, InlineSegment, Link, Text
from wildmark.formatting.symbols import (
    BOLD_MARKER,
    LINK_BRACKET_PAIRS,
    LINK_TRAILING_PUNCTUATION,
)

_MARKER = re.escape(BOLD_MARKER)

# Content of a bold run: at least one character, never a marker sequence
BOLD_BODY = rf"(?:(?!{_MARKER}).)+?"

BOLD_RUN = rf"{_MARKER}{BOLD_BODY}{_MARKER}"
# Same run with the content captured as a group
BOLD_CAPTURE = rf"{_MARKER}({BOLD_BODY}){_MARKER}"
BARE_URL = r"https?://\S+"

# Bold is tried before URL at each position; matches never overlap
INLINE_PATTERN = re.compile(rf"({BOLD_RUN}|{BARE_URL})")
BOLD_PATTERN = re.compile(BOLD_CAPTURE)
URL_PATTERN = re.compile(BARE_URL)


def split_link_punctuation(url: str) -> tuple[str, str]:
    """Split trailing sentence punctuation off a captured URL.

    A closing bracket is only trimmed while the URL holds more of it than
    of its opener, so ``https://en.wikipedia.org/wiki/Bat_(animal)`` keeps
    its final parenthesis.

    Returns:
        Tuple of (url, trailing). If trimming would leave nothing but
        the scheme, the url is returned whole with an empty trailing.
    """
    trimmed = url
    while trimmed and trimmed[-1] in LINK_TRAILING_PUNCTUATION:
        last = trimmed[-1]
        opener = LINK_BRACKET_PAIRS.get(last)
        if opener and trimmed.count(last) <= trimmed.count(opener):
            break
        trimmed = trimmed[:-1]

    if trimmed == url or not URL_PATTERN.fullmatch(trimmed):
        return url, ""
    return trimmed, url[len(trimmed):]


def format_inline(
    text: str,
    *,
    trim_link_punctuation: bool = False,
) -> list[InlineSegment]:
    """Split text into ordered inline segments.

    The result reconstructs the input exactly when each segment's
    ``surface`` is joined back together. Unbalanced or stray asterisks
    never form a bold run and stay in the surrounding text.

    Args:
        text: A single line (or part of one)
        trim_link_punctuation: Move trailing punctuation such as a
            sentence-ending period out of links into the following text

    Returns:
        List of Text, Bold and Link segments in source order
    """
    segments: list[InlineSegment] = []
    # Punctuation trimmed off a link; split() always yields a text part
    # right after each match, so it is prepended there
    carry = ""

    for part in INLINE_PATTERN.split(text):
        bold = BOLD_PATTERN.fullmatch(part)
        if bold:
            segments.append(Bold(bold.group(1)))
            continue

        if URL_PATTERN.fullmatch(part):
            url = part
            if trim_link_punctuation:
                url, carry = split_link_punctuation(part)
            segments.append(Link(url))
            continue

        part = carry + part
        carry = ""
        if part:
            segments.append(Text(part))

    return segments
