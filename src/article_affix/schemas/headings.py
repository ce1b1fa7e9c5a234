"""Heading records and outline tree models."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator


class HeadingRank(IntEnum):
    """Heading level, coarsest first.

    ``H0`` never appears in a page; it is the rank of the synthetic outline root.
    """

    H0 = 0
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4

    @classmethod
    def from_tag(cls, name: str) -> HeadingRank:
        """Normalize a tag name such as ``"h2"`` or ``"H2"`` to a rank."""
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Not a heading tag: {name!r}") from exc


class HeadingRecord(BaseModel):
    """A heading as it appears in the page, in document order.

    Attributes:
        level: Rank of the heading element.
        id: The heading's id attribute, empty when absent.
        text: Display markup of the heading (entity-escaped inner text).
        href: Link target: an explicit cross-reference or ``#<id>``.
    """

    level: HeadingRank
    id: str = ""
    text: str = ""
    href: str = ""

    @field_validator("level")
    @classmethod
    def _reject_root_rank(cls, value: HeadingRank) -> HeadingRank:
        if value == HeadingRank.H0:
            raise ValueError("H0 is reserved for the outline root")
        return value


class HeadingNode(BaseModel):
    """A node of the reconstructed heading outline."""

    rank: HeadingRank
    id: str = ""
    text: str = ""
    href: str = ""
    children: list["HeadingNode"] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: HeadingRecord) -> HeadingNode:
        return cls(rank=record.level, id=record.id, text=record.text, href=record.href)
