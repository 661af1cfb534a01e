# canonical portfolio document (empty values – every slot renders from this shape)
PORTFOLIO_SCHEMA = {
    "meta": {"title": ""},
    "identity": {
        "name": "",
        "title": "",
        "tagline": "",
        "asciiLogo": "",
        "image": "",
        "bio": "",
        "email": "",
        "location": "",
        "stats": [],
    },
    "about": {
        "headline": "",
        "systemInfo": [],
        "interests": [],
        "quote": {"text": "", "author": ""},
    },
    "timeline": [],
    "services": [],
    "skills": {"categories": [], "summary": {}},
    "projects": [],
    "contact": {
        "heading": "",
        "subheading": "",
        "formAction": "",
        "profiles": [],
        "socialIcons": {},
    },
    "footer": {"location": "", "copyright": ""},
    "commands": [],
    "themes": [],
}
