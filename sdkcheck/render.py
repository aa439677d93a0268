"""
SDK Checker Renderer — Turn `<color=...>` spans into terminal output.
"""

import os
import re
import sys
from enum import Enum

_SPAN = re.compile(r"<color=([^>]+)>(.*?)</color>", re.DOTALL)

# ANSI codes for the colors the catalogs use
_ANSI = {
    "red": "91",
    "yellow": "93",
    "green": "92",
    "#90ee90": "92",
    "blue": "94",
    "cyan": "96",
}

RESET = "\033[0m"


class MarkupMode(Enum):
    AUTO = "auto"     # ansi on a terminal, strip otherwise
    ANSI = "ansi"
    STRIP = "strip"
    RAW = "raw"       # leave the spans as they are


def color_enabled() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    return sys.stdout.isatty()


def strip_markup(text: str) -> str:
    return _SPAN.sub(lambda m: m.group(2), text)


def ansi_markup(text: str) -> str:
    def repl(m: re.Match) -> str:
        code = _ANSI.get(m.group(1).strip().lower())
        if code is None:
            return m.group(2)
        return f"\033[{code}m{m.group(2)}{RESET}"

    return _SPAN.sub(repl, text)


def render(text: str, mode: MarkupMode = MarkupMode.AUTO) -> str:
    if mode is MarkupMode.AUTO:
        mode = MarkupMode.ANSI if color_enabled() else MarkupMode.STRIP
    if mode is MarkupMode.ANSI:
        return ansi_markup(text)
    if mode is MarkupMode.STRIP:
        return strip_markup(text)
    return text
