"""Read the heading sequence and page kind from a generated page."""

from __future__ import annotations

import html
import re

from article_affix.config import (
    ARTICLE_CONTENT_ID,
    CONCEPTUAL_CLASS,
    CONTENT_COLUMN_CLASS,
    XREF_CLASS,
)
from article_affix.schemas import HeadingRank, HeadingRecord

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^h[1-4]$")


def extract_headings(soup: BeautifulSoup) -> list[HeadingRecord]:
    """Collect the article's h1-h4 headings in document order.

    Only direct children of ``<article id="_content">`` count; headings nested
    in tabs, notes or code samples are not part of the outline.
    """
    article = soup.find("article", id=ARTICLE_CONTENT_ID)
    if article is None:
        return []

    records: list[HeadingRecord] = []
    for heading in article.find_all(_HEADING_RE, recursive=False):
        heading_id = heading.get("id") or ""
        records.append(
            HeadingRecord(
                level=HeadingRank.from_tag(heading.name),
                id=heading_id,
                text=html.escape(heading.get_text(), quote=False),
                href=_xref_target(heading) or f"#{heading_id}",
            )
        )
    return records


def _xref_target(heading: Tag) -> str | None:
    """Return the href of a trailing cross-reference link, if the heading ends with one."""
    if len(heading.contents) <= 1:
        return None
    last = heading.contents[-1]
    if not isinstance(last, Tag):
        return None
    if XREF_CLASS not in " ".join(last.get("class", [])):
        return None
    return last.get("href", "")


def is_conceptual_page(soup: BeautifulSoup) -> bool:
    """Check whether the page's content column is marked as conceptual."""
    column = soup.find("div", class_=CONTENT_COLUMN_CLASS)
    if column is None:
        return False
    return CONCEPTUAL_CLASS in column.get("class", [])
