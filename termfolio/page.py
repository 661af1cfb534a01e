"""
Named-slot page template.

The page is plain HTML owned by the site; this module only knows *where*
each slot lands. Every insertion point is a CSS selector plus a mode:

  html  – children replaced by the rendered fragment
  text  – children replaced by a single text node
  attr  – one attribute set on the matched element

Splicing parses the page once with BeautifulSoup, so the markup around an
insertion point (whitespace, comments, sibling elements) is left alone.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import html5lib
from bs4 import BeautifulSoup

from termfolio.generator import render_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertionPoint:
    selector: str
    slot: str                   # dotted path into the rendered slots, e.g. "about.headline"
    mode: str = "html"
    attr: Optional[str] = None
    keep_if_empty: bool = False  # leave the template's own content when the value is ""


INSERTION_POINTS: tuple[InsertionPoint, ...] = (
    InsertionPoint("title", "meta.title", "text", keep_if_empty=True),
    InsertionPoint(".hero-output", "hero"),
    InsertionPoint("img.profile-image", "about.profileImage", "attr", "src"),
    InsertionPoint("img.profile-image", "about.profileAlt", "attr", "alt"),
    InsertionPoint(".about-text h2", "about.headline", "text"),
    InsertionPoint(".about-text p", "about.bio", "text"),
    InsertionPoint(".system-info-grid", "about.systemInfo"),
    InsertionPoint(".interests-content", "about.interests"),
    InsertionPoint(".quote-text", "about.quote", "text"),
    InsertionPoint(".quote-author", "about.quoteAuthor", "text"),
    InsertionPoint(".experience-tree", "experience"),
    InsertionPoint(".services-grid", "services"),
    InsertionPoint(".skills-tree", "skills.tree"),
    InsertionPoint(".skills-summary", "skills.summary"),
    InsertionPoint(".portfolio-grid", "portfolio"),
    InsertionPoint(".contact-header h2", "contact.heading", "text", keep_if_empty=True),
    InsertionPoint(".contact-header p", "contact.subheading", "text", keep_if_empty=True),
    InsertionPoint("form.contact-form", "contact.formAction", "attr", "action", keep_if_empty=True),
    InsertionPoint(".social-links", "contact.socialLinks"),
    InsertionPoint(".footer-location", "footer.location"),
    InsertionPoint(".terminal-footer > p:nth-of-type(2)", "footer.copyright", "text", keep_if_empty=True),
    InsertionPoint(".help-commands:not(.theme-list)", "commands"),
    InsertionPoint(".theme-list", "themes.list"),
    InsertionPoint(".theme-dropdown", "themes.dropdown"),
)


def slot_value(slots: Mapping[str, Any], path: str) -> Optional[str]:
    """Follow a dotted path through the rendered slots; None when absent."""
    value: Any = slots
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return None if value is None else str(value)


def _fill(el, point: InsertionPoint, value: str) -> None:
    if point.mode == "attr":
        el[point.attr] = value
    elif point.mode == "text":
        el.string = value
    elif point.mode == "html":
        el.clear()
        fragment = BeautifulSoup(value, "html.parser")
        for node in list(fragment.contents):
            el.append(node)
    else:
        raise ValueError(f"Unknown insertion mode {point.mode!r} for {point.selector}")


def splice(page_html: str, slots: Mapping[str, Any],
           points: Iterable[InsertionPoint] = INSERTION_POINTS) -> str:
    soup = BeautifulSoup(page_html, "html.parser")
    for point in points:
        value = slot_value(slots, point.slot)
        if value is None or (point.keep_if_empty and not value):
            logger.debug("Slot %s has no value, leaving %s as is", point.slot, point.selector)
            continue
        el = soup.select_one(point.selector)
        if el is None:
            logger.warning("Insertion point %s (slot %s) not found in page template",
                           point.selector, point.slot)
            continue
        _fill(el, point, value)
    return str(soup)


def render_page(page_html: str, doc: Dict[str, Any]) -> str:
    """Render every slot of ``doc`` into ``page_html``."""
    return splice(page_html, render_slots(doc))


def check_page(page_html: str) -> List[str]:
    """Parse errors html5lib reports for the page (empty list when clean)."""
    parser = html5lib.HTMLParser(strict=False)
    parser.parse(page_html)
    return [f"line {pos[0]}, col {pos[1]}: {code}" for pos, code, _ in parser.errors]
