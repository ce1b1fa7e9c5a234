"""Command-line entry point for article_affix."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from article_affix.config import DEFAULT_MANIFEST_NAME
from article_affix.exceptions import ManifestError
from article_affix.manifest import load_manifest
from article_affix.processor import AffixOptions, options_from_metadata, process_site_sync

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = AffixOptions()
    parser = argparse.ArgumentParser(
        prog="article-affix",
        description="Insert an in-page heading navigation list into generated article pages.",
    )
    parser.add_argument("output_folder", type=Path, help="Built site folder")
    parser.add_argument(
        "--manifest",
        type=Path,
        help=f"Build manifest (default: OUTPUT_FOLDER/{DEFAULT_MANIFEST_NAME})",
    )
    parser.add_argument(
        "--global-metadata",
        type=Path,
        help="JSON file with global build metadata (honours _disableAffix)",
    )
    parser.add_argument(
        "--classes",
        nargs="*",
        default=list(defaults.list_classes),
        help="Base classes for every generated list",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        default=defaults.max_concurrency,
        help="Pages processed at the same time",
    )
    parser.add_argument("--disable", action="store_true", help="Leave pages untouched")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every saved page")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = AffixOptions(
        disable_affix=args.disable or AffixOptions().disable_affix,
        list_classes=tuple(args.classes),
        max_concurrency=args.max_concurrency,
    )
    if args.global_metadata:
        try:
            metadata = json.loads(args.global_metadata.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            parser.error(f"Can't read global metadata {args.global_metadata}: {exc}")
        options = options_from_metadata(metadata, base=options)

    manifest_path = args.manifest or args.output_folder / DEFAULT_MANIFEST_NAME
    try:
        manifest = load_manifest(manifest_path)
    except ManifestError as exc:
        logger.error("%s", exc)
        return 1

    report = process_site_sync(args.output_folder, manifest, options)
    print(
        f"Affix: {len(report.updated)} updated, "
        f"{len(report.skipped)} skipped, {len(report.failed)} failed"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
