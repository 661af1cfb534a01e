"""
termfolio: pre-render a JSON resume (plus an optional overlay) into a
terminal-style portfolio page.
"""

from termfolio.commands import CommandSystem
from termfolio.resolver import ConfigurationError, resolve
from termfolio.theme import ThemeManager

__version__ = "0.1.0"

__all__ = ["CommandSystem", "ConfigurationError", "ThemeManager", "resolve"]
