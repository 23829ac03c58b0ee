"""Pytest fixtures for Wildmark tests."""

import pytest
from pathlib import Path

from wildmark.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from WILDMARK_* variables and cached settings."""
    for name in (
        "WILDMARK_STRICT_LINKS",
        "WILDMARK_CLASS_NAME",
        "WILDMARK_OUTPUT_FORMAT",
        "WILDMARK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_message() -> str:
    """Assistant reply using every construct of the chat markup."""
    return (
        "\U0001F30D **Wildlife near Austin, TX** (within 50 km)\n"
        "\n"
        "**Endangered species:**\n"
        "- **Golden-cheeked Warbler** - Endangered, nests in juniper woodland\n"
        "- **Houston Toad** listed since 1970\n"
        "- Check https://www.inaturalist.org/observations for recent sightings.\n"
        "\u2022 Look for **monarch** butterflies in autumn\n"
        "\n"
        "\u2705 **Conservation groups** ready to help\n"
        "Visit https://www.fws.gov to learn more."
    )


@pytest.fixture
def tmp_message_file(tmp_path: Path, sample_message: str) -> Path:
    """Create a temporary message file for testing."""
    file_path = tmp_path / "reply.txt"
    file_path.write_text(sample_message, encoding="utf-8")
    return file_path
