"""HTML handler matching the chat UI's message styling."""

from html import escape

from wildmark.formats.base import FormatHandler
from wildmark.formatting.ir import (
    Blank,
    Block,
    Bold,
    BoldBullet,
    EmojiHeader,
    FormattedMessage,
    Header,
    InlineSegment,
    Link,
    SimpleBullet,
)

BULLET = "•"

LINK_CLASSES = (
    "text-blue-600 hover:text-blue-800 underline hover:no-underline "
    "transition-colors duration-200"
)


class HTMLHandler(FormatHandler):
    """Handler for HTML (.html) output.

    Produces one ``<div>`` per block inside a wrapper carrying the
    caller's class name. Links open in a new browsing context.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def render(self, message: FormattedMessage) -> str:
        """Render a message as an HTML fragment."""
        class_name = escape(message.class_name or "", quote=True)
        html_parts: list[str] = [f'<div class="{class_name}">']
        for block in message.blocks:
            html_parts.append(self._render_block(block))
        html_parts.append("</div>")
        return "\n".join(html_parts)

    def _render_block(self, block: Block) -> str:
        if isinstance(block, Blank):
            return '<div class="h-2"></div>'

        if isinstance(block, BoldBullet):
            rest = ""
            if block.rest:
                # Parsing strips the rest, so the separating space goes back here
                rest = f' <span class="text-green-700">{self._render_inline(block.rest)}</span>'
            return (
                '<div class="flex items-start gap-2 mb-1">'
                f'<span class="text-green-600 font-bold mt-1">{BULLET}</span>'
                '<div class="flex-1">'
                f'<span class="font-bold text-green-800">{escape(block.label)}</span>'
                f"{rest}</div></div>"
            )

        if isinstance(block, SimpleBullet):
            return (
                '<div class="flex items-start gap-2 mb-1">'
                f'<span class="text-green-600 font-bold mt-1">{BULLET}</span>'
                f'<div class="flex-1 text-green-700">{self._render_inline(block.content)}</div>'
                "</div>"
            )

        if isinstance(block, Header):
            return (
                '<div class="font-bold text-green-800 text-lg mb-2 mt-3">'
                f"{escape(block.text)}</div>"
            )

        if isinstance(block, EmojiHeader):
            trailing = ""
            if block.trailing:
                trailing = (
                    '<span class="font-normal text-green-700 ml-2">'
                    f"{escape(block.trailing)}</span>"
                )
            return (
                '<div class="font-bold text-green-800 text-lg mb-2 mt-3">'
                f'<span class="mr-2">{escape(block.emoji)}</span>'
                f"{escape(block.text)}{trailing}</div>"
            )

        # Plain
        return f'<div class="mb-1 text-green-700">{self._render_inline(block.content)}</div>'

    def _render_inline(self, segments: tuple[InlineSegment, ...]) -> str:
        parts: list[str] = []
        for segment in segments:
            if isinstance(segment, Bold):
                parts.append(
                    f'<span class="font-bold text-green-800">{escape(segment.value)}</span>'
                )
            elif isinstance(segment, Link):
                url = escape(segment.url, quote=True)
                parts.append(
                    f'<a href="{url}" target="_blank" rel="noopener noreferrer" '
                    f'class="{LINK_CLASSES}">{url}</a>'
                )
            else:
                parts.append(f"<span>{escape(segment.value)}</span>")
        return "".join(parts)
