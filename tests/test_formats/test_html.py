"""Tests for HTML handler."""

import pytest
from bs4 import BeautifulSoup

from wildmark.formats.html_handler import HTMLHandler
from wildmark.formatting.parser import format_message


def render_soup(text: str, class_name: str = "") -> BeautifulSoup:
    html = HTMLHandler().render(format_message(text, class_name=class_name))
    return BeautifulSoup(html, "html.parser")


class TestHTMLHandler:
    """Tests for the HTML format handler."""

    def test_supported_extensions(self):
        """Test that handler supports .html extension."""
        assert ".html" in HTMLHandler().supported_extensions

    def test_wrapper_carries_class_name(self):
        """Test the wrapping div uses the caller's class."""
        soup = render_soup("hello", class_name="max-w-none p-4")
        wrapper = soup.find("div")

        assert wrapper["class"] == ["max-w-none", "p-4"]
        assert len(wrapper.find_all("div", recursive=False)) == 1

    def test_one_div_per_block(self, sample_message: str):
        """Test every input line gets its own element."""
        soup = render_soup(sample_message)
        children = soup.find("div").find_all("div", recursive=False)

        assert len(children) == len(sample_message.split("\n"))

    def test_blank_line_spacer(self):
        """Test blank lines render as spacer divs."""
        soup = render_soup("a\n\nb")
        children = soup.find("div").find_all("div", recursive=False)

        assert children[1]["class"] == ["h-2"]
        assert children[1].get_text() == ""

    def test_link_opens_new_context(self):
        """Test links carry target and rel attributes."""
        soup = render_soup("See https://example.com/x for info")
        link = soup.find("a")

        assert link["href"] == "https://example.com/x"
        assert link["target"] == "_blank"
        assert link["rel"] == ["noopener", "noreferrer"]
        assert link.get_text() == "https://example.com/x"

    def test_bold_bullet(self):
        """Test a bold bullet renders glyph, label and rest."""
        soup = render_soup("- **Fox** is red")
        spans = soup.find_all("span")

        assert spans[0].get_text() == "•"
        assert spans[1].get_text() == "Fox"
        assert "font-bold" in spans[1]["class"]
        assert soup.find("div").find("div").get_text() == "•Fox is red"

    def test_bold_bullet_without_rest_has_no_trailing_space(self):
        """Test a label alone is not followed by a separator."""
        soup = render_soup("- **Fox**")

        assert soup.find("div").find("div").get_text() == "•Fox"

    def test_emoji_header(self):
        """Test the emoji and trailing text get their own spans."""
        soup = render_soup("\U0001F30D **Wildlife** near you")
        header = soup.find("div").find("div")

        assert "text-lg" in header["class"]
        assert header.find("span", class_="mr-2").get_text() == "\U0001F30D"
        assert header.find("span", class_="font-normal").get_text() == "near you"

    @pytest.mark.parametrize(
        "text",
        [
            "<script>alert(1)</script>",
            "- <b>x</b>",
            "**<i>Head</i>**",
            "- **<u>label</u>** rest",
        ],
    )
    def test_text_is_escaped(self, text: str):
        """Test markup in message text never becomes HTML elements."""
        soup = render_soup(text)

        assert soup.find(["script", "b", "i", "u"]) is None

    def test_write(self, tmp_path, sample_message: str):
        """Test writing HTML to a file."""
        output_path = tmp_path / "out.html"
        HTMLHandler().write(format_message(sample_message), output_path)

        content = output_path.read_text(encoding="utf-8")
        assert content.startswith('<div class="">')
        assert "https://www.fws.gov" in content
