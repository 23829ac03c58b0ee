"""JSON handler for handing blocks to an external renderer."""

import json

from wildmark.formats.base import FormatHandler
from wildmark.formatting.ir import FormattedMessage


class JSONHandler(FormatHandler):
    """Handler for JSON (.json) output."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def render(self, message: FormattedMessage) -> str:
        return json.dumps(message.to_dict(), indent=self.indent, ensure_ascii=False)
