"""Render a heading outline as nested list markup."""

from __future__ import annotations

from typing import Iterable, Sequence

from article_affix.config import DEFAULT_LIST_CLASSES
from article_affix.schemas import HeadingNode, HeadingRank

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


def render_affix(
    forest: Sequence[HeadingNode],
    classes: Iterable[str] = DEFAULT_LIST_CLASSES,
    *,
    scope_id: str = "",
    soup: BeautifulSoup | None = None,
) -> Tag | None:
    """Render the forest as a ``<ul>`` tree.

    Args:
        forest: Top-level outline nodes, in document order.
        classes: Base classes added to every list.
        scope_id: Optional extra class for the top-level list only.
        soup: Document that will own the created tags. A detached one is
            used when omitted.

    Returns:
        The top-level ``<ul>``, or None when there is nothing to list.
    """
    wrapper = HeadingNode(rank=HeadingRank.H0, id=scope_id, children=list(forest))
    owner = soup if soup is not None else BeautifulSoup("", "html.parser")
    return _render_list(owner, wrapper, tuple(classes), depth=1, scope=True)


def render_affix_html(
    forest: Sequence[HeadingNode],
    classes: Iterable[str] = DEFAULT_LIST_CLASSES,
    *,
    scope_id: str = "",
) -> str | None:
    """Render the forest and serialize it, or return None when empty."""
    ul = render_affix(forest, classes, scope_id=scope_id)
    return str(ul) if ul is not None else None


def _render_list(
    soup: BeautifulSoup,
    node: HeadingNode,
    classes: tuple[str, ...],
    *,
    depth: int,
    scope: bool = False,
) -> Tag | None:
    if not node.children:
        return None

    tokens = [f"level{depth}", *classes]
    if scope:
        tokens.append(node.id)
    ul = soup.new_tag("ul")
    ul["class"] = [token for token in tokens if token]

    for child in node.children:
        if not child.text.strip():
            continue
        li = soup.new_tag("li")
        if child.href:
            anchor = soup.new_tag("a", href=child.href)
            _append_markup(anchor, child.text.strip())
            li.append(anchor)
        else:
            _append_markup(li, child.text)

        nested = _render_list(soup, child, classes, depth=depth + 1)
        if nested is not None:
            li.append(nested)
        ul.append(li)

    return ul


def _append_markup(tag: Tag, markup: str) -> None:
    """Append display markup to ``tag`` as parsed content, without escaping it."""
    fragment = BeautifulSoup(markup, "html.parser")
    for child in list(fragment.contents):
        tag.append(child.extract())
