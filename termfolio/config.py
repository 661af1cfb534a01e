"""
Configuration settings for the termfolio builder.

Defaults are read from the environment (and a local .env file) once, at
import time. The CLI flags in build.py override them per run.
"""

from __future__ import annotations
from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

# Input documents
BASE_FILE = os.getenv("TERMFOLIO_BASE", "./resume.json")
OVERLAY_FILE = os.getenv("TERMFOLIO_OVERLAY", "./resume.overlay.json")

# "resume" for JSON Resume + ui block, "flat" for the legacy content.json
SCHEMA = os.getenv("TERMFOLIO_SCHEMA", "resume")

# Page template; empty means the skeleton shipped in templates/page.html
TEMPLATE_FILE = os.getenv("TERMFOLIO_TEMPLATE", "")

SITE_ROOT = os.getenv("TERMFOLIO_ROOT", ".")
OUTPUT_DIR = os.getenv("TERMFOLIO_OUTPUT", "./dist")

LOG_LEVEL = os.getenv("TERMFOLIO_LOG_LEVEL", "INFO").upper()

# Copied verbatim next to the pre-rendered index.html
ASSET_DIRS = ("css", "js", "assets", "data")
ROOT_FILES = ("robots.txt", "sitemap.xml", "favicon.ico")
SITEMAP_FILE = "sitemap.xml"

# Rendering fallbacks
DEFAULT_PROJECT_IMAGE = "./assets/images/me.webp"
DEFAULT_GRADIENT = "gradient-k8s"
DEFAULT_PROJECT_ICON = "las la-server"
FALLBACK_ICON = "las la-link"

_BUNDLED_TEMPLATE = Path(__file__).parent / "templates" / "page.html"


@dataclass
class BuildSettings:
    """Resolved settings for one build pass."""
    base: Path
    overlay: Path | None
    schema: str
    template: Path
    root: Path
    output: Path
    update_sitemap: bool = False
    check: bool = False
    asset_dirs: tuple[str, ...] = field(default=ASSET_DIRS)
    root_files: tuple[str, ...] = field(default=ROOT_FILES)

    def with_overrides(self, **overrides) -> "BuildSettings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def get_settings(**overrides) -> BuildSettings:
    """Build settings from the environment defaults, then apply overrides.

    Overrides set to None are ignored so argparse namespaces can be passed
    through unchanged.
    """
    settings = BuildSettings(
        base=Path(BASE_FILE),
        overlay=Path(OVERLAY_FILE) if OVERLAY_FILE else None,
        schema=SCHEMA,
        template=Path(TEMPLATE_FILE) if TEMPLATE_FILE else _BUNDLED_TEMPLATE,
        root=Path(SITE_ROOT),
        output=Path(OUTPUT_DIR),
    )
    return settings.with_overrides(**overrides)
