"""Load the site build manifest and pick the pages to post-process."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from article_affix.config import HTML_EXTENSION, TOC_DOCUMENT_TYPE
from article_affix.exceptions import ManifestError
from article_affix.schemas import Manifest


def load_manifest(path: Path) -> Manifest:
    """Read and validate a ``manifest.json`` file.

    Raises:
        ManifestError: If the file is unreadable or is not a valid manifest.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Can't read manifest {path}: {exc}") from exc

    try:
        return Manifest.model_validate_json(text)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc


def iter_html_outputs(manifest: Manifest) -> list[str]:
    """Return relative paths of generated HTML pages, table-of-contents pages excluded."""
    paths: list[str] = []
    for item in manifest.files:
        if item.type == TOC_DOCUMENT_TYPE:
            continue
        for extension, info in item.output.items():
            if extension.lower() == HTML_EXTENSION:
                paths.append(info.relative_path)
    return paths
