"""Output format handlers for Wildmark."""

from wildmark.formats.base import FormatHandler, RenderError
from wildmark.formats.html_handler import HTMLHandler
from wildmark.formats.json_handler import JSONHandler
from wildmark.formats.md_handler import MarkdownHandler
from wildmark.formats.txt_handler import TXTHandler

__all__ = [
    "FormatHandler",
    "RenderError",
    "HTMLHandler",
    "JSONHandler",
    "MarkdownHandler",
    "TXTHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
    ".txt": TXTHandler,
    ".md": MarkdownHandler,
    ".markdown": MarkdownHandler,
    ".json": JSONHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())

# Input files the CLI picks up when given a folder
INPUT_EXTENSIONS = (".txt", ".md")


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension.

    Accepts the extension with or without its leading dot.
    """
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported output format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
