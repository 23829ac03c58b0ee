"""Wildmark - format wildlife assistant chat messages into renderable blocks."""

__version__ = "0.1.0"

from wildmark.formatting import (
    FormattedMessage,
    MessageParser,
    classify,
    format_inline,
    format_message,
)

__all__ = [
    "__version__",
    "FormattedMessage",
    "MessageParser",
    "classify",
    "format_inline",
    "format_message",
]
