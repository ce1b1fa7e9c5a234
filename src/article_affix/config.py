"""Local configuration for article_affix."""

from __future__ import annotations

import os


DEFAULT_LIST_CLASSES = ("nav", "bs-docs-sidenav")
DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_MANIFEST_NAME = "manifest.json"

# Page structure produced by the site generator templates.
AFFIX_PLACEHOLDER_ID = "affix"
ARTICLE_CONTENT_ID = "_content"
CONTENT_COLUMN_CLASS = "content-column"
CONCEPTUAL_CLASS = "Conceptual"
XREF_CLASS = "xref"
TOC_DOCUMENT_TYPE = "Toc"
HTML_EXTENSION = ".html"
EMPTY_AFFIX_CLASS = "empty"
EMPTY_AFFIX_STYLE = "display: none;"

ARTICLE_AFFIX_DISABLE = os.getenv("ARTICLE_AFFIX_DISABLE", "false").lower() in {"1", "true", "yes"}
ARTICLE_AFFIX_LIST_CLASSES = tuple(
    os.getenv("ARTICLE_AFFIX_LIST_CLASSES", " ".join(DEFAULT_LIST_CLASSES)).split()
)
ARTICLE_AFFIX_MAX_CONCURRENCY = int(
    os.getenv("ARTICLE_AFFIX_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY))
)
