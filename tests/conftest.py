"""
Pytest configuration and fixtures
"""
import json
from pathlib import Path

import pytest


@pytest.fixture
def resume_base() -> dict:
    return {
        "basics": {
            "name": "Ada Byron",
            "label": "Platform Engineer",
            "image": "./assets/images/ada.webp",
            "email": "ada@example.org",
            "summary": "I keep clusters boring.",
            "location": {"city": "Vienna", "region": "AT"},
            "profiles": [
                {"network": "GitHub", "url": "https://github.com/ada"},
                {"network": "Mastodon", "url": "https://fosstodon.org/@ada"},
            ],
        },
        "work": [
            {
                "name": "Analytical Engines",
                "position": "SRE",
                "startDate": "2020-03",
                "endDate": "2021-07",
                "highlights": ["Cut pager noise by half"],
                "keywords": ["kubernetes", "terraform"],
            },
            {"name": "Difference Ltd", "position": "Intern", "startDate": "2019"},
        ],
        "education": [
            {"institution": "TU Wien", "area": "Computer Science", "studyType": "BSc",
             "startDate": "2015-10", "endDate": "2019-06"},
        ],
        "projects": [
            {"name": "homelab", "description": "Bare-metal k8s", "url": "https://example.org/lab",
             "highlights": ["k3s", "ansible"], "type": "infrastructure"},
            {"name": "blog", "description": "Static site", "url": "https://example.org",
             "highlights": ["python"]},
        ],
    }


@pytest.fixture
def resume_overlay() -> dict:
    return {
        "ui": {
            "meta": {"title": "Ada Byron | Platform Engineer"},
            "hero": {"tagline": "uptime is a feature",
                     "stats": [{"value": "99.99%", "label": "uptime"}]},
            "about": {"headline": "Hello, world",
                      "systemInfo": [{"label": "OS", "value": "Linux"}],
                      "interests": [{"icon": "🚲", "title": "Cycling", "description": "Alps"}],
                      "quote": {"text": "Keep it simple", "author": "Someone"}},
            "services": [{"icon": "las la-cloud", "title": "Cloud", "description": "Infra",
                          "projectCount": 12}],
            "skills": {
                "categories": [
                    {"displayName": "Infra", "count": 7,
                     "items": [{"name": "Kubernetes", "icon": "k8s.svg", "level": 4,
                                "levelName": "Advanced", "description": "Daily", "years": 5}]},
                    {"displayName": "Languages", "count": 2,
                     "items": [{"name": "Python", "icon": "py.svg", "level": 3,
                                "levelName": "Solid", "description": "Glue", "years": 8}]},
                ],
                "summary": {"totalTechnologies": 9, "categories": 2, "learning": ["Rust", "Nix"]},
            },
            "contact": {"heading": "Get in touch", "subheading": "Say hi",
                        "formAction": "https://forms.example.org/ada",
                        "socialIcons": {"GitHub": "lab la-github", "email": "las la-envelope"}},
            "footer": {"copyright": "2026 Ada Byron"},
            "commands": [{"name": "help", "description": "show commands"}],
            "themes": [{"id": "terminal", "name": "Terminal", "description": "green on black"},
                       {"id": "nord", "name": "Nord", "description": "arctic"}],
        },
    }


@pytest.fixture
def flat_content() -> dict:
    return {
        "hero": {"asciiLogo": "ADA", "name": "Ada Byron", "title": "Platform Engineer",
                 "tagline": "uptime is a feature", "stats": [{"value": "10+", "label": "years"}]},
        "about": {"profileImage": "me.webp", "headline": "Hi", "bio": "Bio text",
                  "systemInfo": [], "interests": [], "quote": {"text": "q", "author": "a"}},
        "experience": [{"date": "2020 - Now", "title": "SRE", "company": "Engines",
                        "highlights": ["one"], "tags": ["k8s"]}],
        "services": [],
        "skills": {"categories": [], "summary": {"totalTechnologies": 0, "categories": 0, "learning": []}},
        "portfolio": [{"type": "web", "title": "Blog", "description": "d", "url": "u",
                       "tags": ["a"], "image": "blog.png"}],
        "contact": {"heading": "Contact", "subheading": "sub", "formAction": "/send",
                    "socialLinks": [{"platform": "GitHub", "url": "https://github.com/ada",
                                     "icon": "lab la-github"}]},
        "footer": {"location": "Vienna, AT", "copyright": "2026 Ada"},
        "commands": [],
        "themes": [],
    }


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return path
    return _write
