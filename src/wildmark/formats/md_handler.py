"""Markdown handler that re-emits the chat markup dialect."""

from wildmark.formats.base import FormatHandler
from wildmark.formatting.ir import (
    Blank,
    BoldBullet,
    EmojiHeader,
    FormattedMessage,
    Header,
    SimpleBullet,
    segments_surface,
)
from wildmark.formatting.symbols import BOLD_MARKER


class MarkdownHandler(FormatHandler):
    """Handler for markdown (.md) output.

    Writes each block back in normalized form: bullets as ``- ``,
    headers as a lone bold run. Parsing the output again yields the
    same block kinds.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def render(self, message: FormattedMessage) -> str:
        lines: list[str] = []

        for block in message.blocks:
            if isinstance(block, Blank):
                lines.append("")
            elif isinstance(block, BoldBullet):
                line = f"- {BOLD_MARKER}{block.label}{BOLD_MARKER}"
                if block.rest:
                    line += f" {segments_surface(block.rest)}"
                lines.append(line)
            elif isinstance(block, SimpleBullet):
                lines.append(f"- {segments_surface(block.content)}")
            elif isinstance(block, Header):
                lines.append(f"{BOLD_MARKER}{block.text}{BOLD_MARKER}")
            elif isinstance(block, EmojiHeader):
                line = f"{block.emoji} {BOLD_MARKER}{block.text}{BOLD_MARKER}"
                if block.trailing:
                    line += f" {block.trailing}"
                lines.append(line)
            else:
                lines.append(segments_surface(block.content))

        return "\n".join(lines)
