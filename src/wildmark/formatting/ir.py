"""Intermediate Representation for formatted chat messages.

This module defines the data structures that bridge raw assistant text
to format-specific rendering. Each input line becomes exactly one block,
and any block that carries free text holds it as a tuple of inline
segments already split into plain text, bold runs and links.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Union

from wildmark.formatting.symbols import BOLD_MARKER


# =============================================================================
# Inline Segments
# =============================================================================

class SegmentKind(str, Enum):
    """Kinds of inline segments inside a line of text."""

    TEXT = "text"
    BOLD = "bold"
    LINK = "link"


@dataclass(frozen=True)
class Text:
    """A run of plain text, kept verbatim."""

    value: str
    kind = SegmentKind.TEXT

    @property
    def surface(self) -> str:
        return self.value

    @property
    def plain_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bold:
    """Content that was wrapped in a ``**`` marker pair.

    Attributes:
        value: The text between the markers, markers stripped
    """

    value: str
    kind = SegmentKind.BOLD

    @property
    def surface(self) -> str:
        """Get the source form with markers restored."""
        return f"{BOLD_MARKER}{self.value}{BOLD_MARKER}"

    @property
    def plain_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Link:
    """A bare http(s) URL."""

    url: str
    kind = SegmentKind.LINK

    @property
    def surface(self) -> str:
        return self.url

    @property
    def plain_text(self) -> str:
        return self.url


InlineSegment = Union[Text, Bold, Link]


def segments_to_dicts(segments: tuple[InlineSegment, ...]) -> list[dict[str, str]]:
    """Serialize inline segments to JSON-friendly dicts."""
    result: list[dict[str, str]] = []
    for segment in segments:
        if isinstance(segment, Link):
            result.append({"kind": segment.kind.value, "url": segment.url})
        else:
            result.append({"kind": segment.kind.value, "value": segment.value})
    return result


def segments_plain_text(segments: tuple[InlineSegment, ...]) -> str:
    """Join segment content without markers."""
    return "".join(segment.plain_text for segment in segments)


def segments_surface(segments: tuple[InlineSegment, ...]) -> str:
    """Join segment content in its original marked-up form."""
    return "".join(segment.surface for segment in segments)


# =============================================================================
# Blocks
# =============================================================================

class BlockKind(str, Enum):
    """Block variants, one per classified line."""

    BLANK = "blank"
    BOLD_BULLET = "bold_bullet"
    SIMPLE_BULLET = "simple_bullet"
    HEADER = "header"
    EMOJI_HEADER = "emoji_header"
    PLAIN = "plain"


@dataclass(frozen=True)
class Blank:
    """An empty or whitespace-only line."""

    kind = BlockKind.BLANK

    @property
    def plain_text(self) -> str:
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class BoldBullet:
    """A list item that opens with a bold label.

    Attributes:
        label: The bold label text, not inline-formatted
        rest: Inline segments for whatever follows the label
    """

    label: str
    rest: tuple[InlineSegment, ...] = ()
    kind = BlockKind.BOLD_BULLET

    @property
    def plain_text(self) -> str:
        rest = segments_plain_text(self.rest)
        return f"{self.label} {rest}" if rest else self.label

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "rest": segments_to_dicts(self.rest),
        }


@dataclass(frozen=True)
class SimpleBullet:
    """A list item with arbitrary inline content."""

    content: tuple[InlineSegment, ...] = ()
    kind = BlockKind.SIMPLE_BULLET

    @property
    def plain_text(self) -> str:
        return segments_plain_text(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "content": segments_to_dicts(self.content)}


@dataclass(frozen=True)
class Header:
    """A line that is a single bold run, optionally followed by a colon."""

    text: str
    kind = BlockKind.HEADER

    @property
    def plain_text(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class EmojiHeader:
    """A header introduced by a marker glyph.

    Attributes:
        emoji: The marker glyph that opened the line
        text: The bold header text, markers stripped
        trailing: Remaining plain text after the bold run (may be empty)
    """

    emoji: str
    text: str
    trailing: str = ""
    kind = BlockKind.EMOJI_HEADER

    @property
    def plain_text(self) -> str:
        parts = [self.emoji, self.text]
        if self.trailing:
            parts.append(self.trailing)
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "emoji": self.emoji,
            "text": self.text,
            "trailing": self.trailing,
        }


@dataclass(frozen=True)
class Plain:
    """Fallback block for any line no other rule claims."""

    content: tuple[InlineSegment, ...] = ()
    kind = BlockKind.PLAIN

    @property
    def plain_text(self) -> str:
        return segments_plain_text(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "content": segments_to_dicts(self.content)}


Block = Union[Blank, BoldBullet, SimpleBullet, Header, EmojiHeader, Plain]


@dataclass(frozen=True)
class FormattedMessage:
    """Complete formatted message ready for rendering.

    Attributes:
        blocks: One block per input line, in input order
        class_name: Opaque styling hint supplied by the caller
    """

    blocks: tuple[Block, ...] = field(default_factory=tuple)
    class_name: Optional[str] = None

    @property
    def plain_text(self) -> str:
        """Get all text content without markup, one line per block."""
        return "\n".join(block.plain_text for block in self.blocks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "class_name": self.class_name,
            "blocks": [block.to_dict() for block in self.blocks],
        }

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
