"""
Schema adapters: any supported input shape ➜ the canonical portfolio document.

Both adapters read the effective document and build a new dict shaped like
PORTFOLIO_SCHEMA, so the slot renderer only ever sees one layout and never
has to guess whether an optional block exists.
"""
from __future__ import annotations
import copy, logging
from typing import Any, Dict, List

from termfolio.resolver import ConfigurationError, EffectiveDocument
from termfolio.schema_portfolio import PORTFOLIO_SCHEMA

logger = logging.getLogger(__name__)

# ───────────────────────────────────────── helpers ──
def _text(value: Any) -> Any:
    return "" if value is None else value

def _list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []

def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}

def _strings(value: Any) -> List[Any]:
    return [x for x in _list(value) if x is not None]

def _blank() -> Dict[str, Any]:
    return copy.deepcopy(PORTFOLIO_SCHEMA)

def _quote(raw: Any) -> Dict[str, Any]:
    q = _dict(raw)
    return {"text": _text(q.get("text")), "author": _text(q.get("author"))}

def _skill(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": _text(item.get("name")),
        "icon": _text(item.get("icon")),
        "level": item.get("level"),
        "levelName": _text(item.get("levelName")),
        "description": _text(item.get("description")),
        "years": _text(item.get("years")),
    }

def _skills(raw: Any) -> Dict[str, Any]:
    skills = _dict(raw)
    categories = []
    for cat in _list(skills.get("categories")):
        cat = _dict(cat)
        categories.append({
            "displayName": _text(cat.get("displayName") or cat.get("name")),
            # declared count is shown as-is, never recomputed from items
            "count": _text(cat.get("count")),
            "items": [_skill(item) for item in map(_dict, _list(cat.get("items")))],
        })
    summary = _dict(skills.get("summary"))
    if summary:
        summary = dict(summary, learning=_strings(summary.get("learning")))
    return {"categories": categories, "summary": summary}

def _project(p: Dict[str, Any], title: Any, tags: Any) -> Dict[str, Any]:
    return {
        "type": _text(p.get("type")),
        "title": _text(title),
        "description": _text(p.get("description")),
        "url": _text(p.get("url")),
        "tags": _strings(tags),
        "gradient": _text(p.get("gradient")),
        "icon": _text(p.get("icon")),
        "image": _text(p.get("image")),
    }

def _location(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    loc = _dict(raw)
    return ", ".join(str(part) for part in (loc.get("city"), loc.get("region")) if part)

# ───────────────────────────────────────── flat (content.json) ──
def from_flat(data: Dict[str, Any]) -> Dict[str, Any]:
    out = _blank()
    hero, about = _dict(data.get("hero")), _dict(data.get("about"))
    contact, footer = _dict(data.get("contact")), _dict(data.get("footer"))

    out["meta"]["title"] = _text(_dict(data.get("meta")).get("title"))
    out["identity"].update({
        "name": _text(hero.get("name")),
        "title": _text(hero.get("title")),
        "tagline": _text(hero.get("tagline")),
        "asciiLogo": _text(hero.get("asciiLogo")),
        "image": _text(about.get("profileImage")),
        "bio": _text(about.get("bio")),
        "email": _text(contact.get("email")),
        "location": _location(footer.get("location")),
        "stats": _list(hero.get("stats")),
    })
    out["about"].update({
        "headline": _text(about.get("headline")),
        "systemInfo": _list(about.get("systemInfo")),
        "interests": _list(about.get("interests")),
        "quote": _quote(about.get("quote")),
    })

    for e in map(_dict, _list(data.get("experience"))):
        out["timeline"].append({
            "date": _text(e.get("date")),
            "start": _text(e.get("startDate")),
            "end": _text(e.get("endDate")),
            "title": _text(e.get("title")),
            "organization": _text(e.get("company")),
            "highlights": _strings(e.get("highlights")),
            "tags": _strings(e.get("tags")),
        })

    out["services"] = _list(data.get("services"))
    out["skills"] = _skills(data.get("skills"))
    out["projects"] = [_project(p, p.get("title"), p.get("tags"))
                       for p in map(_dict, _list(data.get("portfolio")))]

    out["contact"].update({
        "heading": _text(contact.get("heading")),
        "subheading": _text(contact.get("subheading")),
        "formAction": _text(contact.get("formAction")),
        "profiles": [{"network": _text(l.get("platform")), "url": _text(l.get("url")), "icon": _text(l.get("icon"))}
                     for l in map(_dict, _list(contact.get("socialLinks")))],
        "socialIcons": _dict(contact.get("socialIcons")),
    })
    out["footer"] = {"location": _location(footer.get("location")),
                     "copyright": _text(footer.get("copyright"))}
    out["commands"] = _list(data.get("commands"))
    out["themes"] = _list(data.get("themes"))
    return copy.deepcopy(out)

# ───────────────────────────────────────── resume (JSON Resume + ui) ──
def from_resume(data: Dict[str, Any]) -> Dict[str, Any]:
    out = _blank()
    basics = _dict(data.get("basics"))
    ui = _dict(data.get("ui") or data.get("custom"))
    hero, about = _dict(ui.get("hero")), _dict(ui.get("about"))
    contact = _dict(ui.get("contact"))
    location = _location(basics.get("location"))

    out["meta"]["title"] = _text(_dict(ui.get("meta")).get("title"))
    out["identity"].update({
        "name": _text(basics.get("name")),
        "title": _text(basics.get("label")),
        "tagline": _text(hero.get("tagline")),
        "asciiLogo": _text(hero.get("asciiLogo")),
        "image": _text(basics.get("image")),
        "bio": _text(basics.get("summary")),
        "email": _text(basics.get("email")),
        "location": location,
        "stats": _list(hero.get("stats")),
    })
    out["about"].update({
        "headline": _text(about.get("headline")),
        "systemInfo": _list(about.get("systemInfo")),
        "interests": _list(about.get("interests")),
        "quote": _quote(about.get("quote")),
    })

    # work first, then education – display order is input order
    for w in map(_dict, _list(data.get("work"))):
        out["timeline"].append({
            "date": "",
            "start": _text(w.get("startDate")),
            "end": _text(w.get("endDate")),
            "title": _text(w.get("position")),
            "organization": _text(w.get("name") or w.get("company")),
            "highlights": _strings(w.get("highlights")),
            "tags": _strings(w.get("keywords")),
        })
    for e in map(_dict, _list(data.get("education"))):
        out["timeline"].append({
            "date": "",
            "start": _text(e.get("startDate")),
            "end": _text(e.get("endDate")),
            "title": " ".join(str(x) for x in (e.get("studyType"), e.get("area")) if x),
            "organization": _text(e.get("institution")),
            "highlights": _strings(e.get("highlights")),
            "tags": _strings(e.get("keywords")),
        })

    out["services"] = _list(ui.get("services"))
    out["skills"] = _skills(ui.get("skills"))
    out["projects"] = [_project(p, p.get("name"), p.get("highlights") or p.get("keywords"))
                       for p in map(_dict, _list(data.get("projects")))]

    out["contact"].update({
        "heading": _text(contact.get("heading")),
        "subheading": _text(contact.get("subheading")),
        "formAction": _text(contact.get("formAction")),
        "profiles": [{"network": _text(p.get("network")), "url": _text(p.get("url")), "icon": ""}
                     for p in map(_dict, _list(basics.get("profiles")))],
        "socialIcons": _dict(contact.get("socialIcons")),
    })
    out["footer"] = {"location": location,
                     "copyright": _text(_dict(ui.get("footer")).get("copyright"))}
    out["commands"] = _list(ui.get("commands"))
    out["themes"] = _list(ui.get("themes"))
    return copy.deepcopy(out)

# ───────────────────────────────────────── entry points ──
_ADAPTERS = {"flat": from_flat, "resume": from_resume}

def normalise(effective: EffectiveDocument) -> Dict[str, Any]:
    try:
        adapter = _ADAPTERS[effective.schema]
    except KeyError:
        raise ConfigurationError(f"No adapter for schema {effective.schema!r}") from None
    doc = adapter(effective.data)
    logger.debug("Normalised %s document: %d timeline entries, %d projects",
                 effective.schema, len(doc["timeline"]), len(doc["projects"]))
    return doc

def validate_identity(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Name and title are the only fields a page cannot do without."""
    identity = doc.get("identity", {})
    missing = [k for k in ("name", "title") if not identity.get(k)]
    if missing:
        raise ConfigurationError(f"Missing required identity field(s): {', '.join(missing)}")
    return doc
