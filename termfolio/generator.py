"""
Slot renderer: canonical portfolio document ➜ named HTML fragments / records.

Every slot is rendered up front, once per pass. A slot is either a fragment
(one HTML string for one insertion point) or a small record of strings for
slots that feed several insertion points (e.g. contact heading + form action).
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Union

from jinja2 import Environment, FileSystemLoader

from termfolio.config import DEFAULT_GRADIENT, DEFAULT_PROJECT_ICON, DEFAULT_PROJECT_IMAGE
from termfolio.utils import format_date_range, level_marks, social_icon

Slot = Union[str, Dict[str, str]]

SLOT_NAMES = ("meta", "hero", "about", "experience", "services", "skills",
              "portfolio", "contact", "footer", "commands", "themes")

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)
env.filters.update(date_range=format_date_range,
                   level_marks=level_marks,
                   social_icon=social_icon)
env.globals.update(default_gradient=DEFAULT_GRADIENT,
                   default_project_icon=DEFAULT_PROJECT_ICON,
                   default_project_image=DEFAULT_PROJECT_IMAGE)


def _fragment(name: str, **context: Any) -> str:
    return env.get_template(f"slots/{name}.html").render(**context).strip()


def render_hero(doc: Dict[str, Any]) -> str:
    return _fragment("hero", identity=doc["identity"])


def render_about(doc: Dict[str, Any]) -> Dict[str, str]:
    identity, about = doc["identity"], doc["about"]
    quote = about["quote"]
    return {
        "profileImage": identity["image"],
        "profileAlt": identity["name"],
        "headline": about["headline"],
        "bio": identity["bio"],
        "systemInfo": _fragment("system_info", about=about),
        "interests": _fragment("interests", about=about),
        "quote": f'"{quote["text"]}"' if quote["text"] else "",
        "quoteAuthor": f"— {quote['author']}" if quote["author"] else "",
    }


def render_experience(doc: Dict[str, Any]) -> str:
    return _fragment("experience", timeline=doc["timeline"])


def render_services(doc: Dict[str, Any]) -> str:
    return _fragment("services", services=doc["services"])


def render_skills(doc: Dict[str, Any]) -> Dict[str, str]:
    skills = doc["skills"]
    return {
        "tree": _fragment("skills_tree", skills=skills),
        "summary": _fragment("skills_summary", summary=skills["summary"]),
    }


def render_portfolio(doc: Dict[str, Any]) -> str:
    return _fragment("portfolio", projects=doc["projects"])


def render_contact(doc: Dict[str, Any]) -> Dict[str, str]:
    contact = doc["contact"]
    return {
        "heading": contact["heading"],
        "subheading": contact["subheading"],
        "formAction": contact["formAction"],
        "socialLinks": _fragment("social_links", contact=contact, email=doc["identity"]["email"]),
    }


def render_footer(doc: Dict[str, Any]) -> Dict[str, str]:
    footer = doc["footer"]
    return {
        "location": _fragment("footer_location", location=footer["location"]),
        "copyright": f"© {footer['copyright']}" if footer["copyright"] else "",
    }


def render_commands(doc: Dict[str, Any]) -> str:
    return _fragment("commands", commands=doc["commands"])


def render_themes(doc: Dict[str, Any]) -> Dict[str, str]:
    return {
        "list": _fragment("theme_list", themes=doc["themes"]),
        "dropdown": _fragment("theme_dropdown", themes=doc["themes"]),
    }


def render_slots(doc: Dict[str, Any]) -> Dict[str, Slot]:
    """Render every slot of a normalised portfolio document."""
    return {
        "meta": {"title": doc["meta"]["title"]},
        "hero": render_hero(doc),
        "about": render_about(doc),
        "experience": render_experience(doc),
        "services": render_services(doc),
        "skills": render_skills(doc),
        "portfolio": render_portfolio(doc),
        "contact": render_contact(doc),
        "footer": render_footer(doc),
        "commands": render_commands(doc),
        "themes": render_themes(doc),
    }
