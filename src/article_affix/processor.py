"""Post-process every generated page listed in a build manifest."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Literal, Mapping

from article_affix.config import (
    ARTICLE_AFFIX_DISABLE,
    ARTICLE_AFFIX_LIST_CLASSES,
    ARTICLE_AFFIX_MAX_CONCURRENCY,
)
from article_affix.exceptions import PageError, PageLoadError
from article_affix.file_utils import read_text_async, write_text_async
from article_affix.manifest import iter_html_outputs
from article_affix.page import process_page_html
from article_affix.schemas import Manifest

logger = logging.getLogger(__name__)

_DISABLE_METADATA_KEY = "_disableAffix"

PageStatus = Literal["updated", "skipped", "failed"]


@dataclass
class AffixOptions:
    """Options for affix generation.

    Attributes:
        disable_affix: If True, leave every page untouched.
        list_classes: Base classes added to every generated list.
        max_concurrency: Upper bound on pages processed at the same time.
    """

    disable_affix: bool = ARTICLE_AFFIX_DISABLE
    list_classes: tuple[str, ...] = ARTICLE_AFFIX_LIST_CLASSES
    max_concurrency: int = ARTICLE_AFFIX_MAX_CONCURRENCY


@dataclass
class ProcessReport:
    """Outcome of a batch run, as paths relative to the output folder."""

    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.updated) + len(self.skipped) + len(self.failed)


def options_from_metadata(
    metadata: Mapping[str, Any], *, base: AffixOptions | None = None
) -> AffixOptions:
    """Apply global build metadata (``_disableAffix``) on top of ``base``."""
    opts = base or AffixOptions()
    if _DISABLE_METADATA_KEY in metadata:
        return replace(opts, disable_affix=bool(metadata[_DISABLE_METADATA_KEY]))
    return opts


async def process_site(
    output_folder: Path,
    manifest: Manifest,
    options: AffixOptions | None = None,
) -> ProcessReport:
    """Insert the heading affix into every HTML page of a built site.

    Pages are independent, so they are processed concurrently. A page that
    is missing, unreadable, unparsable or lacks the placeholder is logged and
    reported; it never aborts the rest of the batch.

    Args:
        output_folder: Root folder the manifest's relative paths point into.
        manifest: The site build manifest.
        options: Processing options. Uses defaults if None.

    Returns:
        A report of updated, skipped and failed pages.
    """
    opts = options or AffixOptions()
    report = ProcessReport()

    if opts.disable_affix:
        logger.debug("Affix generation disabled for %s", output_folder)
        return report

    pages = iter_html_outputs(manifest)
    if not pages:
        return report

    semaphore = asyncio.Semaphore(max(1, opts.max_concurrency))

    async def run(relative_path: str) -> tuple[PageStatus, str | None]:
        async with semaphore:
            return await _process_page(output_folder, relative_path, opts)

    results = await asyncio.gather(*(run(path) for path in pages))

    for relative_path, (status, message) in zip(pages, results):
        if status == "updated":
            report.updated.append(relative_path)
        elif status == "skipped":
            report.skipped.append(relative_path)
        else:
            report.failed[relative_path] = message or ""
    return report


def process_site_sync(
    output_folder: Path,
    manifest: Manifest,
    options: AffixOptions | None = None,
) -> ProcessReport:
    """Blocking wrapper around :func:`process_site`."""
    return asyncio.run(process_site(output_folder, manifest, options))


async def _process_page(
    output_folder: Path, relative_path: str, opts: AffixOptions
) -> tuple[PageStatus, str | None]:
    file_path = output_folder / relative_path
    if not file_path.is_file():
        logger.warning("Page %s does not exist, skipping", file_path)
        return "skipped", None

    try:
        try:
            html = await read_text_async(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise PageLoadError(str(exc)) from exc

        updated = await asyncio.to_thread(
            process_page_html, html, classes=opts.list_classes
        )

        try:
            await write_text_async(file_path, updated)
        except OSError as exc:
            raise PageLoadError(str(exc)) from exc
    except PageError as exc:
        logger.warning("Can't load content from %s: %s", file_path, exc)
        return "failed", str(exc)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Can't load content from %s: %s", file_path, exc)
        return "failed", str(exc) or type(exc).__name__

    logger.debug("Successfully saved affix data to %s", file_path)
    return "updated", None
