"""Custom exceptions for article_affix."""


class ArticleAffixError(Exception):
    """Base exception for article_affix operations."""


class ManifestError(ArticleAffixError):
    """Build manifest is missing or cannot be understood."""


class PageError(ArticleAffixError):
    """Error while processing a single output page."""


class PageLoadError(PageError):
    """Page file could not be read or written."""


class ParseError(PageError):
    """Error during page parsing."""


class PlaceholderNotFoundError(PageError):
    """Page has no affix placeholder to splice into."""
