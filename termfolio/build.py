#!/usr/bin/env python3
"""
Build script for the portfolio.

Pre-renders the resume into the page template so crawlers that don't run
JavaScript still see the content, then copies the static assets next to it.

Usage:
  termfolio [--base resume.json] [--overlay resume.overlay.json] [--output dist]
            [--update-sitemap]
"""
from __future__ import annotations

import argparse
import logging
import re
import shutil
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from termfolio import config
from termfolio.adapters import normalise, validate_identity
from termfolio.config import BuildSettings, get_settings
from termfolio.loader import load_documents
from termfolio.page import check_page, render_page
from termfolio.resolver import ConfigurationError, SourceDocument, resolve

logger = logging.getLogger(__name__)

_LASTMOD_RE = re.compile(r"<lastmod>\d{4}-\d{2}-\d{2}</lastmod>")


def prerender(settings: BuildSettings) -> str:
    """Load, merge and render the documents into the page template."""
    logger.info("📄 Loading %s", settings.base)
    base, overlay = load_documents(settings.base, settings.overlay)
    if overlay is not None:
        logger.info("📄 Applying overlay %s", settings.overlay)

    effective = resolve(SourceDocument(settings.schema, base),
                        SourceDocument(settings.schema, overlay) if overlay is not None else None)
    doc = validate_identity(normalise(effective))

    if not settings.template.is_file():
        raise ConfigurationError(f"Page template not found: {settings.template}")
    logger.info("🏗️  Generating pre-rendered HTML from %s", settings.template)
    html = render_page(settings.template.read_text(encoding="utf-8"), doc)

    if settings.check:
        problems = check_page(html)
        for problem in problems:
            logger.warning("HTML: %s", problem)
        logger.info("✓ HTML check: %d issue(s)", len(problems))
    return html


def copy_assets(settings: BuildSettings) -> List[Path]:
    copied = []
    for name in settings.asset_dirs:
        src = settings.root / name
        if src.is_dir():
            shutil.copytree(src, settings.output / name, dirs_exist_ok=True)
            logger.info("✓ Copied %s/", name)
            copied.append(settings.output / name)
    for name in settings.root_files:
        src = settings.root / name
        if src.is_file():
            shutil.copy2(src, settings.output / name)
            logger.info("✓ Copied %s", name)
            copied.append(settings.output / name)
    return copied


def update_sitemap(path: Path, today: Optional[date] = None) -> int:
    """Set every <lastmod> in the sitemap to today; returns the number replaced."""
    stamp = (today or date.today()).isoformat()
    text = path.read_text(encoding="utf-8")
    text, count = _LASTMOD_RE.subn(f"<lastmod>{stamp}</lastmod>", text)
    path.write_text(text, encoding="utf-8")
    logger.info("✓ Updated %s with date: %s", path.name, stamp)
    return count


def build(settings: BuildSettings) -> Path:
    logger.info("🔨 Building pre-rendered portfolio...")
    html = prerender(settings)

    settings.output.mkdir(parents=True, exist_ok=True)
    index = settings.output / "index.html"
    index.write_text(html, encoding="utf-8")
    logger.info("✓ Wrote pre-rendered HTML to %s", index)

    if settings.update_sitemap:
        sitemap = settings.root / config.SITEMAP_FILE
        if sitemap.is_file():
            update_sitemap(sitemap)
        else:
            logger.warning("No %s in %s, skipping sitemap update", config.SITEMAP_FILE, settings.root)

    copy_assets(settings)
    logger.info("✨ Build complete! Output: %s", settings.output.resolve())
    return index


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="termfolio", description="Pre-render the portfolio page.")
    ap.add_argument("--base", type=Path, help=f"Base resume document (default: {config.BASE_FILE})")
    ap.add_argument("--overlay", type=Path, help=f"Optional overlay document (default: {config.OVERLAY_FILE})")
    ap.add_argument("--schema", choices=("resume", "flat"), help=f"Input shape (default: {config.SCHEMA})")
    ap.add_argument("--template", type=Path, help="Page template (default: bundled skeleton)")
    ap.add_argument("--root", type=Path, help=f"Site root holding the static assets (default: {config.SITE_ROOT})")
    ap.add_argument("--output", type=Path, help=f"Output directory (default: {config.OUTPUT_DIR})")
    ap.add_argument("--update-sitemap", action="store_true", default=None,
                    help="Update sitemap.xml with the current date")
    ap.add_argument("--check", action="store_true", default=None,
                    help="Report HTML parse errors in the rendered page")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
                        format="%(message)s")
    settings = get_settings(base=args.base, overlay=args.overlay, schema=args.schema,
                            template=args.template, root=args.root, output=args.output,
                            update_sitemap=args.update_sitemap, check=args.check)
    try:
        build(settings)
    except ConfigurationError as e:
        logger.error("✗ Build failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
