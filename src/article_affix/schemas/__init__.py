"""Shared schemas for article_affix."""

from article_affix.schemas.headings import HeadingNode, HeadingRank, HeadingRecord
from article_affix.schemas.manifest import Manifest, ManifestItem, OutputFileInfo

__all__ = [
    "HeadingNode",
    "HeadingRank",
    "HeadingRecord",
    "Manifest",
    "ManifestItem",
    "OutputFileInfo",
]
