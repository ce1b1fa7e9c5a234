"""Splice the rendered affix into a generated page."""

from __future__ import annotations

import logging
from typing import Iterable

from article_affix.config import (
    AFFIX_PLACEHOLDER_ID,
    DEFAULT_LIST_CLASSES,
    EMPTY_AFFIX_CLASS,
    EMPTY_AFFIX_STYLE,
)
from article_affix.exceptions import ParseError, PlaceholderNotFoundError
from article_affix.headings import extract_headings, is_conceptual_page
from article_affix.outline import build_outline
from article_affix.renderer import render_affix

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def find_placeholder(soup: BeautifulSoup) -> Tag:
    placeholder = soup.find("div", id=AFFIX_PLACEHOLDER_ID)
    if placeholder is None:
        raise PlaceholderNotFoundError(
            f'Page has no <div id="{AFFIX_PLACEHOLDER_ID}"> placeholder'
        )
    return placeholder


def apply_affix(soup: BeautifulSoup, affix: Tag | None) -> None:
    """Replace the placeholder contents with ``affix``, or hide it when None."""
    placeholder = find_placeholder(soup)
    if affix is None:
        classes = list(placeholder.get("class", []))
        if EMPTY_AFFIX_CLASS not in classes:
            classes.append(EMPTY_AFFIX_CLASS)
        placeholder["class"] = classes
        placeholder["style"] = EMPTY_AFFIX_STYLE
        return

    placeholder.clear()
    placeholder.append(affix)


def process_page_html(
    html: str, *, classes: Iterable[str] = DEFAULT_LIST_CLASSES
) -> str:
    """Build the affix for one page and return the updated page markup.

    Raises:
        ParseError: If the markup cannot be parsed.
        PlaceholderNotFoundError: If the page has no affix placeholder.
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Could not parse page: {exc}") from exc

    records = extract_headings(soup)
    forest = build_outline(records, conceptual=is_conceptual_page(soup))
    affix = render_affix(forest, classes, soup=soup)
    logger.debug(
        "Found %d headings, %d listed in affix",
        len(records),
        0 if affix is None else len(affix.find_all("li")),
    )
    apply_affix(soup, affix)
    return str(soup)
