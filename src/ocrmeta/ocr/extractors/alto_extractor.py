"""ALTO XML reader with namespace-agnostic page and line lookup."""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from ocrmeta.ocr.models import AltoDocument, AltoPage
from ocrmeta.step.errors import AltoParseError

# ALTO v2, v3 and v4 use different namespaces; match on local names only.
_PAGE_XPATH = "//*[local-name()='Layout']/*[local-name()='Page']"
_LINE_XPATH = ".//*[local-name()='TextBlock']/*[local-name()='TextLine']"
_TOKEN_XPATH = "./*[local-name()='String' or local-name()='HYP']"


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _line_text(line: etree._Element) -> str:
    words: list[str] = []
    for token in line.xpath(_TOKEN_XPATH):
        content = token.get("CONTENT") or ""
        if not content:
            continue
        if _local_name(token) == "HYP" and words:
            words[-1] += content
        else:
            words.append(content)
    return " ".join(words)


def _page_text(page: etree._Element) -> str:
    lines = (_line_text(line) for line in page.xpath(_LINE_XPATH))
    return "\n".join(line for line in lines if line)


def parse_alto(path: Path) -> AltoDocument:
    """Parse one ALTO file into its ordered pages.

    Raises ``AltoParseError`` for unreadable files, malformed XML and
    documents whose root is not an ``alto`` element.
    """

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise AltoParseError(f"Failed to read ALTO file: {exc}", path) from exc

    parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)
    try:
        root = etree.fromstring(raw, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise AltoParseError(f"Malformed ALTO XML: {exc}", path) from exc

    if _local_name(root) != "alto":
        raise AltoParseError(f"Unexpected root element <{_local_name(root)}>, expected <alto>", path)

    pages = [AltoPage(page_id=page.get("ID"), text=_page_text(page)) for page in root.xpath(_PAGE_XPATH)]
    return AltoDocument(source_path=str(path), pages=pages)


class AltoExtractor:
    """Extract newline-joined page text from ALTO files."""

    def extract(self, path: Path) -> str:
        return parse_alto(path).text
