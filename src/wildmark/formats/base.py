"""Abstract base class for message renderers."""

from abc import ABC, abstractmethod
from pathlib import Path

from wildmark.formatting.ir import FormattedMessage


class RenderError(Exception):
    """Error writing a rendered message."""

    pass


class FormatHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler maps every block variant and inline segment to its own
    presentation, and can write the result to disk.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.html',))."""
        ...

    @abstractmethod
    def render(self, message: FormattedMessage) -> str:
        """Render a formatted message to a string.

        Args:
            message: The FormattedMessage to render

        Returns:
            The rendered output
        """
        ...

    def write(self, message: FormattedMessage, path: Path) -> None:
        """Render a message and write it to file.

        Args:
            message: The FormattedMessage to render
            path: Path to write the output

        Raises:
            RenderError: If the file cannot be written
        """
        try:
            path.write_text(self.render(message), encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Cannot write {path}: {e}") from e
