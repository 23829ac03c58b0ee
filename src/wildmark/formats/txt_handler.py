"""Plain text handler."""

from wildmark.formats.base import FormatHandler
from wildmark.formatting.ir import (
    BoldBullet,
    FormattedMessage,
    SimpleBullet,
)


class TXTHandler(FormatHandler):
    """Handler for plain text (.txt) output.

    Bold markers are dropped, bullets are drawn with a bullet glyph and
    links are written out as their URL.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def render(self, message: FormattedMessage) -> str:
        lines: list[str] = []

        for block in message.blocks:
            if isinstance(block, (BoldBullet, SimpleBullet)):
                lines.append(f"• {block.plain_text}")
            else:
                lines.append(block.plain_text)

        return "\n".join(lines)
