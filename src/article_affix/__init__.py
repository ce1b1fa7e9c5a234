"""article_affix: build in-page heading navigation for generated article pages."""

from article_affix.exceptions import (
    ArticleAffixError,
    ManifestError,
    PageError,
    PageLoadError,
    ParseError,
    PlaceholderNotFoundError,
)
from article_affix.outline import build_heading_tree, build_outline, select_forest
from article_affix.page import apply_affix, process_page_html
from article_affix.processor import AffixOptions, ProcessReport, process_site
from article_affix.renderer import render_affix, render_affix_html
from article_affix.schemas import HeadingNode, HeadingRank, HeadingRecord

__all__ = [
    "AffixOptions",
    "ArticleAffixError",
    "HeadingNode",
    "HeadingRank",
    "HeadingRecord",
    "ManifestError",
    "PageError",
    "PageLoadError",
    "ParseError",
    "PlaceholderNotFoundError",
    "ProcessReport",
    "apply_affix",
    "build_heading_tree",
    "build_outline",
    "process_page_html",
    "process_site",
    "render_affix",
    "render_affix_html",
    "select_forest",
]
