"""Block classifier for converting assistant message text to IR."""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from wildmark.config import get_settings
from wildmark.formatting.inline import BOLD_CAPTURE, format_inline
from wildmark.formatting.ir import (
    Blank,
    Block,
    BoldBullet,
    EmojiHeader,
    FormattedMessage,
    Header,
    InlineSegment,
    Plain,
    SimpleBullet,
)
from wildmark.formatting.symbols import (
    BULLET_GLYPHS,
    MARKER_GLYPHS,
    glyph_alternation,
)
from wildmark.log import get_logger

logger = get_logger(__name__)

InlineFormatter = Callable[[str], list[InlineSegment]]

_BULLET = f"(?:{glyph_alternation(BULLET_GLYPHS)})"
_MARKER = f"({glyph_alternation(MARKER_GLYPHS)})"


@dataclass(frozen=True)
class BlockRule:
    """One entry of the classification table.

    Attributes:
        name: Rule name, used in logs and tests
        pattern: Regex that must match the whole trimmed line
        build: Constructs the block from the match and an inline formatter
    """

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], InlineFormatter], Block]

    def apply(self, line: str, inline: InlineFormatter) -> Optional[Block]:
        match = self.pattern.fullmatch(line)
        if match is None:
            return None
        return self.build(match, inline)


def _bold_bullet(match: re.Match[str], inline: InlineFormatter) -> Block:
    label, rest = match.group(1), match.group(2).strip()
    return BoldBullet(label=label, rest=tuple(inline(rest)) if rest else ())


def _emoji_header(match: re.Match[str], inline: InlineFormatter) -> Block:
    return EmojiHeader(
        emoji=match.group(1),
        text=match.group(2),
        trailing=match.group(3).strip(),
    )


# Order is precedence: first rule whose pattern matches wins.
# A bullet that opens with a bold label must be seen before the header rule.
BLOCK_RULES: tuple[BlockRule, ...] = (
    BlockRule(
        "blank",
        re.compile(r""),
        lambda match, inline: Blank(),
    ),
    BlockRule(
        "bold_bullet",
        re.compile(rf"{_BULLET}\s*{BOLD_CAPTURE}(.*)"),
        _bold_bullet,
    ),
    BlockRule(
        "simple_bullet",
        re.compile(rf"{_BULLET}\s*(.+)"),
        lambda match, inline: SimpleBullet(content=tuple(inline(match.group(1)))),
    ),
    BlockRule(
        "header",
        re.compile(rf"{BOLD_CAPTURE}:?\s*"),
        lambda match, inline: Header(text=match.group(1)),
    ),
    BlockRule(
        "emoji_header",
        re.compile(rf"{_MARKER}\s*{BOLD_CAPTURE}(.*)"),
        _emoji_header,
    ),
    BlockRule(
        "plain",
        re.compile(r".*"),
        lambda match, inline: Plain(content=tuple(inline(match.group(0)))),
    ),
)


class BlockClassifier:
    """Classify lines into blocks using an ordered rule table."""

    def __init__(
        self,
        rules: tuple[BlockRule, ...] = BLOCK_RULES,
        trim_link_punctuation: bool = False,
    ) -> None:
        self.rules = rules
        self.trim_link_punctuation = trim_link_punctuation

    def _inline(self, text: str) -> list[InlineSegment]:
        return format_inline(text, trim_link_punctuation=self.trim_link_punctuation)

    def classify_line(self, line: str) -> Block:
        """Classify a single line. Never fails; unmatched lines become Plain."""
        trimmed = line.strip()
        for rule in self.rules:
            block = rule.apply(trimmed, self._inline)
            if block is not None:
                return block
        # Only reachable with a custom table that lacks a catch-all rule
        return Plain(content=tuple(self._inline(trimmed)))

    def classify(self, text: str) -> list[Block]:
        """Classify every line of text, one block per line, in order."""
        blocks = [self.classify_line(line) for line in text.split("\n")]
        logger.debug("Classified %d line(s)", len(blocks))
        return blocks


def classify(text: str, *, trim_link_punctuation: bool = False) -> list[Block]:
    """Split text into lines and classify each into a block."""
    return BlockClassifier(trim_link_punctuation=trim_link_punctuation).classify(text)


class MessageParser:
    """Parse assistant message text into a FormattedMessage."""

    def __init__(self, trim_link_punctuation: Optional[bool] = None) -> None:
        """Initialize the parser.

        Args:
            trim_link_punctuation: Strip sentence punctuation from the end
                of links. Defaults to the WILDMARK_STRICT_LINKS setting.
        """
        if trim_link_punctuation is None:
            trim_link_punctuation = get_settings().strict_links
        self.classifier = BlockClassifier(trim_link_punctuation=trim_link_punctuation)

    def parse(self, text: str, class_name: Optional[str] = None) -> FormattedMessage:
        """Convert message text to a FormattedMessage.

        Args:
            text: Raw message text, any length, any line endings
            class_name: Styling hint passed through to renderers untouched

        Returns:
            FormattedMessage with one block per input line
        """
        return FormattedMessage(
            blocks=tuple(self.classifier.classify(text)),
            class_name=class_name,
        )


def format_message(
    text: str,
    class_name: Optional[str] = None,
    trim_link_punctuation: Optional[bool] = None,
) -> FormattedMessage:
    """Format one message. Shortcut for ``MessageParser().parse``."""
    return MessageParser(trim_link_punctuation=trim_link_punctuation).parse(
        text, class_name=class_name
    )
