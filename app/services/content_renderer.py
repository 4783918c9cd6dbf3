import logging

import markdown
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Fenced code, tables and list handling closer to commonmark than the bare renderer
DEFAULT_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


class ContentRenderer:
    """Turns a post's markdown body into HTML and pulls a listing excerpt from it."""

    def __init__(self, extensions: list[str] | None = None):
        self.extensions = (
            list(DEFAULT_EXTENSIONS) if extensions is None else list(extensions)
        )

    def render(self, body: str) -> str:
        """Render markdown to HTML."""
        return markdown.markdown(body, extensions=self.extensions)

    def excerpt(self, html: str) -> str:
        """Inner HTML of the first paragraph, or an empty string if there is none."""
        soup = BeautifulSoup(html, "html.parser")
        first_paragraph = soup.find("p")
        if first_paragraph is None:
            logger.debug("No paragraph found for excerpt")
            return ""
        return first_paragraph.decode_contents().strip()
