"""Formatting utilities for parsing assistant messages into blocks."""

from wildmark.formatting.ir import (
    Blank,
    Block,
    BlockKind,
    Bold,
    BoldBullet,
    EmojiHeader,
    FormattedMessage,
    Header,
    InlineSegment,
    Link,
    Plain,
    SegmentKind,
    SimpleBullet,
    Text,
)
from wildmark.formatting.inline import format_inline
from wildmark.formatting.parser import (
    BLOCK_RULES,
    BlockClassifier,
    BlockRule,
    MessageParser,
    classify,
    format_message,
)

__all__ = [
    "Blank",
    "Block",
    "BlockKind",
    "Bold",
    "BoldBullet",
    "EmojiHeader",
    "FormattedMessage",
    "Header",
    "InlineSegment",
    "Link",
    "Plain",
    "SegmentKind",
    "SimpleBullet",
    "Text",
    "format_inline",
    "BLOCK_RULES",
    "BlockClassifier",
    "BlockRule",
    "MessageParser",
    "classify",
    "format_message",
]
