"""PDF link discovery, deduplication and URL validation."""

import logging
from typing import Iterable, List, Optional
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .logger import LOGGER_NAME

PDF_MARKER = ".pdf"


def parse_html(html: str, logger: Optional[logging.Logger] = None) -> Optional[BeautifulSoup]:
    """Parse markup into a tree, or return None (logged) if the parser rejects it."""
    log = logger or logging.getLogger(LOGGER_NAME)
    try:
        return BeautifulSoup(html, "html.parser")
    except (ParserRejectedMarkup, TypeError) as e:
        log.error(f"Failed to parse HTML: {e}")
        return None


def extract_pdf_links(document: Optional[BeautifulSoup]) -> List[str]:
    """Collect trimmed ``<a href>`` values that mention ``.pdf``.

    Links come back in document order, duplicates included. Matching is
    case-insensitive but the returned value keeps its original case.
    """
    if document is None:
        return []

    links = []
    for anchor in document.find_all("a"):
        href = anchor.get("href")
        if not isinstance(href, str):
            continue
        href = href.strip()
        if PDF_MARKER in href.lower():
            links.append(href)
    return links


def extract_pdf_urls(html: str, base_url: str = "",
                     logger: Optional[logging.Logger] = None) -> List[str]:
    """Parse ``html`` and return its PDF links, resolved against ``base_url`` if given."""
    links = extract_pdf_links(parse_html(html, logger))
    if base_url:
        links = [urljoin(base_url, href) for href in links]
    return links


def remove_duplicates(values: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)
