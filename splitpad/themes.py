"""
themes.py

Holds the built-in splitpad themes in a Python dictionary form, and loads extra
themes from the user's theme directory: any .py file there that defines
`theme_name` and `theme_data` is picked up.

Theme values are xterm 256-colour indexes. On terminals with fewer colours each
role falls back to a basic curses colour.
"""
import curses
import importlib.util
import os

from splitpad import logger

# Colour pair numbers, one per role
PAIR_BORDER              = 1
PAIR_CURSOR_LINE         = 2
PAIR_PLACEHOLDER         = 3
PAIR_FOCUSED_PLACEHOLDER = 4
PAIR_LINE_NUMBER         = 5
PAIR_HELP                = 6
PAIR_PROMPT              = 7

BASIC_FALLBACK = {
    "border":              curses.COLOR_WHITE,
    "cursor_line_fg":      curses.COLOR_WHITE,
    "cursor_line_bg":      curses.COLOR_BLUE,
    "placeholder":         curses.COLOR_WHITE,
    "focused_placeholder": curses.COLOR_MAGENTA,
    "line_number":         curses.COLOR_WHITE,
    "help":                curses.COLOR_WHITE,
    "prompt":              curses.COLOR_MAGENTA,
}

def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their colour definitions.
    """
    return {
        "charm": {
            "border": 238,
            "cursor_line_fg": 230,
            "cursor_line_bg": 57,
            "placeholder": 238,
            "focused_placeholder": 99,
            "line_number": 241,
            "help": 241,
            "prompt": 212,
        },
        "boring": {
            "border": 245,
            "cursor_line_fg": 255,
            "cursor_line_bg": 238,
            "placeholder": 240,
            "focused_placeholder": 246,
            "line_number": 242,
            "help": 244,
            "prompt": 252,
        },
        "coral": {
            "border": 216,
            "cursor_line_fg": 231,
            "cursor_line_bg": 95,
            "placeholder": 239,
            "focused_placeholder": 209,
            "line_number": 180,
            "help": 180,
            "prompt": 209,
        },
    }

def load_user_themes(themes_dir: str) -> dict:
    """
    Import every .py file in `themes_dir` that defines `theme_name` and `theme_data`.
    Broken files are logged and skipped.
    """
    found = {}
    if not os.path.isdir(themes_dir):
        return found
    for fname in sorted(os.listdir(themes_dir)):
        if not fname.endswith(".py") or fname == "__init__.py":
            continue
        full_path = os.path.join(themes_dir, fname)
        spec = importlib.util.spec_from_file_location("splitpad_custom_theme", full_path)
        if not spec or not spec.loader:
            continue
        mod = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(mod)
        except Exception as e:
            logger.log(f"theme {fname}: {e}")
            continue
        if hasattr(mod, "theme_name") and hasattr(mod, "theme_data"):
            found[mod.theme_name] = mod.theme_data
    return found

def available_themes(themes_dir: str = None) -> dict:
    """Built-in themes, overridden or extended by user themes."""
    themes = get_builtin_themes()
    if themes_dir:
        themes.update(load_user_themes(themes_dir))
    return themes

def resolve_theme(name: str, themes: dict) -> dict:
    """Return the named theme with missing roles filled from the default theme."""
    data = dict(get_builtin_themes()["charm"])
    if name in themes:
        data.update(themes[name])
    else:
        logger.log(f"unknown theme '{name}', using default")
    return data

def apply_theme(theme_data: dict):
    """Initialise curses colour pairs from a resolved theme."""
    extended = curses.COLORS >= 256

    def color(role):
        return theme_data[role] if extended else BASIC_FALLBACK[role]

    curses.init_pair(PAIR_BORDER, color("border"), -1)
    curses.init_pair(PAIR_CURSOR_LINE, color("cursor_line_fg"), color("cursor_line_bg"))
    curses.init_pair(PAIR_PLACEHOLDER, color("placeholder"), -1)
    curses.init_pair(PAIR_FOCUSED_PLACEHOLDER, color("focused_placeholder"), -1)
    curses.init_pair(PAIR_LINE_NUMBER, color("line_number"), -1)
    curses.init_pair(PAIR_HELP, color("help"), -1)
    curses.init_pair(PAIR_PROMPT, color("prompt"), -1)
