"""
Terminal command interpreter.

Maps what a visitor types into the fake prompt onto navigation and theme
actions. The navigator is any callable taking a section id ("about",
"help", "themes", "refresh", ...); the theme manager is injected too, so the
whole thing runs without a page.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, List

from termfolio.theme import ThemeManager

logger = logging.getLogger(__name__)

Handler = Callable[[], object]

# command → section it navigates to
NAVIGATION = {
    "whoami": "hero",
    "about": "about",
    "cat about.md": "about",
    "experience": "experience",
    "tree": "experience",
    "resume": "experience",
    "services": "services",
    "systemctl": "services",
    "skills": "skills",
    "ls skills": "skills",
    "projects": "portfolio",
    "portfolio": "portfolio",
    "ls": "portfolio",
    "contact": "contact",
    "mail": "contact",
}

# legacy / shorthand names → theme id
THEME_ALIASES = {
    "theme solarized": "solarized-dark",
    "modern": "glassmorphic",
    "terminal": "terminal",
}


class CommandSystem:
    def __init__(self, navigator: Callable[[str], object], themes: ThemeManager):
        self.navigate = navigator
        self.themes = themes
        self.commands: Dict[str, Handler] = {}
        self.register_defaults()

    def register_defaults(self) -> None:
        self.commands = {}
        self.register("help", lambda: self.navigate("help"))
        for name, section in NAVIGATION.items():
            self.register(name, lambda section=section: self.navigate(section))
        self.register("clear", lambda: self.navigate("refresh"))
        self.register("theme", lambda: self.navigate("themes"))
        for theme in self.themes.available():
            self.register(f"theme {theme}", lambda theme=theme: self.themes.set_theme(theme))
        for name, theme in THEME_ALIASES.items():
            if theme in self.themes.available():
                self.register(name, lambda theme=theme: self.themes.set_theme(theme))

    def register(self, name: str, handler: Handler) -> None:
        self.commands[name.lower()] = handler

    def execute(self, text: str) -> bool:
        """Run the matching command; True if something ran."""
        cmd = (text or "").lower().strip()
        if not cmd:
            return False

        if cmd in self.commands:
            self.commands[cmd]()
            return True

        # partial match, first registered wins
        for key, handler in self.commands.items():
            if key in cmd or cmd in key:
                handler()
                return True

        logger.debug("Command not found: %s", cmd)
        return False

    def available(self) -> List[str]:
        return list(self.commands)
