# mvp_creator/utils.py
import re
from pathlib import Path
from bs4 import BeautifulSoup
from mvp_creator.errors import ResponseParseError

DOCTYPE = "<!DOCTYPE html>"
DOWNLOAD_FILENAME = "landing-page.html"
DOWNLOAD_MEDIA_TYPE = "text/html"

# First ```html fenced block only; the fence must sit on its own lines.
CODE_BLOCK_PATTERN = re.compile(r"```html\n(.*?)\n```", re.DOTALL)


def parse_generated_code(raw_response: str | None) -> str:
    """
    Pulls the HTML document out of the model's reply.

    Models do not always honor the requested fencing, so a reply that is already a
    bare document is accepted too. Anything else is rejected rather than returning
    a partial page.
    """
    raw_response = raw_response or ""

    match = CODE_BLOCK_PATTERN.search(raw_response)
    if match and match.group(1):
        document = match.group(1).strip()
        if document:
            return document

    # Fallback if the wrapping isn't perfect
    stripped = raw_response.strip()
    if stripped.startswith(DOCTYPE):
        return stripped

    raise ResponseParseError()


def document_title(html_document: str) -> str:
    """Text of the document's <title>, or an empty string when it has none."""
    if not html_document:
        return ""
    soup = BeautifulSoup(html_document, "lxml")
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return ""


def save_document(html_document: str, directory: str | Path) -> Path:
    """Writes the document to <directory>/landing-page.html and returns the path."""
    path = Path(directory) / DOWNLOAD_FILENAME
    path.write_text(html_document, encoding="utf-8")
    return path
