import pytest

from termfolio.commands import CommandSystem
from termfolio.theme import DEFAULT_THEMES, STORAGE_KEY, ThemeManager


def test_theme_defaults_and_restore():
    storage = {STORAGE_KEY: "nord"}
    themes = ThemeManager(storage=storage)
    assert themes.get_theme() == "terminal"
    assert themes.init() == "nord"


def test_unknown_stored_theme_is_ignored():
    themes = ThemeManager(storage={STORAGE_KEY: "vaporwave"})
    assert themes.init() == "terminal"


def test_set_theme_persists_and_notifies():
    storage, seen = {}, []
    themes = ThemeManager(storage=storage)
    themes.on_change(seen.append)
    assert themes.set_theme("dracula") is True
    assert storage[STORAGE_KEY] == "dracula"
    assert seen == ["dracula"]
    assert themes.set_theme("vaporwave") is False
    assert themes.get_theme() == "dracula"
    assert seen == ["dracula"]


def test_cycle_wraps_around():
    themes = ThemeManager(themes=["a", "b"], default="b")
    assert themes.cycle() == "a"
    assert themes.cycle() == "b"


def test_available_is_a_copy():
    themes = ThemeManager()
    themes.available().append("x")
    assert themes.available() == list(DEFAULT_THEMES)


def test_from_document():
    themes = ThemeManager.from_document({"themes": [{"id": "nord"}, {"id": "monokai"}]})
    assert themes.available() == ["nord", "monokai"]
    assert themes.get_theme() == "nord"
    assert ThemeManager.from_document({"themes": []}).available() == list(DEFAULT_THEMES)


def test_empty_theme_list_rejected():
    with pytest.raises(ValueError):
        ThemeManager(themes=[])


@pytest.fixture
def shell():
    visited = []
    themes = ThemeManager()
    return CommandSystem(visited.append, themes), visited, themes


def test_exact_commands_navigate(shell):
    commands, visited, _ = shell
    assert commands.execute("  WHOAMI ")
    assert commands.execute("cat about.md")
    assert commands.execute("clear")
    assert commands.execute("help")
    assert visited == ["hero", "about", "refresh", "help"]


def test_theme_commands(shell):
    commands, visited, themes = shell
    assert commands.execute("theme nord")
    assert themes.get_theme() == "nord"
    assert commands.execute("theme solarized")
    assert themes.get_theme() == "solarized-dark"
    assert commands.execute("modern")
    assert themes.get_theme() == "glassmorphic"
    assert commands.execute("theme")
    assert visited == ["themes"]


def test_partial_match(shell):
    commands, visited, _ = shell
    assert commands.execute("exp")
    assert commands.execute("show me skills please")
    assert visited == ["experience", "skills"]


def test_unknown_and_empty_commands(shell):
    commands, visited, _ = shell
    assert commands.execute("") is False
    assert commands.execute("xyzzy") is False
    assert visited == []


def test_register_custom_command(shell):
    commands, visited, _ = shell
    commands.register("Coffee", lambda: visited.append("coffee"))
    assert "coffee" in commands.available()
    assert commands.execute("coffee")
    assert visited == ["coffee"]


def test_package_exports_controllers():
    import termfolio
    assert termfolio.ThemeManager is ThemeManager
    assert termfolio.CommandSystem is CommandSystem
    assert {"ThemeManager", "CommandSystem"} <= set(termfolio.__all__)
