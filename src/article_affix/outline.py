"""Reconstruct the heading outline of a page from its flat heading sequence."""

from __future__ import annotations

from typing import Iterable, Iterator

from article_affix.schemas import HeadingNode, HeadingRank, HeadingRecord


def build_heading_tree(records: Iterable[HeadingRecord]) -> HeadingNode:
    """Nest headings by rank under a synthetic ``H0`` root.

    ``path`` holds the nodes from the root down to the most recently inserted
    heading; ``path[-1]`` is the current node and ``path[-2]`` its parent.
    """
    root = HeadingNode(rank=HeadingRank.H0)
    path: list[HeadingNode] = [root]

    for record in records:
        node = HeadingNode.from_record(record)
        current = path[-1]

        if node.rank == current.rank:
            path.pop()
        elif node.rank < current.rank:
            path.pop()
            # The root is H0, so an ancestor strictly coarser always exists.
            while path[-1].rank >= node.rank:
                path.pop()

        path[-1].children.append(node)
        path.append(node)

    return root


def select_forest(root: HeadingNode, *, conceptual: bool) -> list[HeadingNode]:
    """Return the headings to list in the affix.

    Reference pages drop their first top-level heading (the page title) and
    list its subtree instead. Conceptual pages keep every top-level heading.
    """
    if root.children and not conceptual:
        return root.children[0].children
    return root.children


def build_outline(
    records: Iterable[HeadingRecord], *, conceptual: bool
) -> list[HeadingNode]:
    """Build the heading tree and select the forest shown for the page."""
    return select_forest(build_heading_tree(records), conceptual=conceptual)


def iter_nodes(nodes: Iterable[HeadingNode]) -> Iterator[HeadingNode]:
    """Walk a forest depth-first in document order."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def count_nodes(nodes: Iterable[HeadingNode]) -> int:
    return sum(1 for _ in iter_nodes(nodes))
