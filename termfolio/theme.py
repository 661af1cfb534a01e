"""
Theme manager.

Headless counterpart of the page's theme switcher: the available themes,
the current one, persistence through any dict-like store, and change
listeners. Nothing here touches a document; callers apply the theme.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_THEMES = ("terminal", "glassmorphic", "minimal", "minimal-dark",
                  "solarized-dark", "solarized-light", "monokai", "dracula", "nord")
STORAGE_KEY = "portfolio-theme"


class ThemeManager:
    def __init__(self,
                 themes: Sequence[str] = DEFAULT_THEMES,
                 storage: Optional[MutableMapping[str, str]] = None,
                 default: str = "terminal",
                 storage_key: str = STORAGE_KEY):
        if not themes:
            raise ValueError("ThemeManager needs at least one theme")
        self.themes: List[str] = list(themes)
        self.storage = storage if storage is not None else {}
        self.storage_key = storage_key
        self.current = default if default in self.themes else self.themes[0]
        self._listeners: List[Callable[[str], Any]] = []

    @classmethod
    def from_document(cls, doc: Dict[str, Any],
                      storage: Optional[MutableMapping[str, str]] = None) -> "ThemeManager":
        """Use the theme ids of a normalised portfolio document, if it lists any."""
        ids = [t.get("id") for t in doc.get("themes", []) if isinstance(t, dict) and t.get("id")]
        return cls(ids or DEFAULT_THEMES, storage)

    def init(self) -> str:
        """Restore the stored theme when it is still a known one."""
        saved = self.storage.get(self.storage_key)
        if saved in self.themes:
            self.current = saved
        return self.current

    def on_change(self, callback: Callable[[str], Any]) -> None:
        self._listeners.append(callback)

    def set_theme(self, theme: str) -> bool:
        if theme not in self.themes:
            logger.warning('Theme "%s" not found. Available themes: %s', theme, ", ".join(self.themes))
            return False
        self.current = theme
        self.storage[self.storage_key] = theme
        for callback in self._listeners:
            callback(theme)
        return True

    def get_theme(self) -> str:
        return self.current

    def cycle(self) -> str:
        nxt = self.themes[(self.themes.index(self.current) + 1) % len(self.themes)]
        self.set_theme(nxt)
        return nxt

    def available(self) -> List[str]:
        return list(self.themes)
