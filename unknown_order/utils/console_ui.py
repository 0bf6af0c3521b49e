"""Console presentation helpers for the ``unknown-order`` CLI.

Result lines (:func:`value`) are never styled so the command output can be
piped into other tools.  Status lines go to stdout, problems to stderr.
"""
from __future__ import annotations

import os
import shutil
import sys

import colorama
from colorama import Fore, Style

__all__ = ["init", "section", "kv", "value", "success", "warning", "error"]

_PLAIN_SYMBOLS = {"success": "[OK]", "warning": "[!]", "error": "[X]"}
_FANCY_SYMBOLS = {"success": "✓", "warning": "!", "error": "✗"}
_STYLES = {
    "success": Fore.GREEN + Style.BRIGHT,
    "warning": Fore.YELLOW + Style.BRIGHT,
    "error": Fore.RED + Style.BRIGHT,
    "key": Fore.CYAN,
    "title": Fore.MAGENTA + Style.BRIGHT,
}

_width = 100
_use_color = False
_symbols = dict(_PLAIN_SYMBOLS)


def init(plain: bool = False) -> None:
    """Pick colour or plain output for the current stdout."""

    global _width, _use_color, _symbols

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100
    isatty = getattr(sys.stdout, "isatty", None)
    is_tty = bool(isatty()) if callable(isatty) else False

    _use_color = not (plain or os.environ.get("NO_COLOR") or not is_tty)
    if _use_color:
        colorama.just_fix_windows_console()
        _symbols = dict(_FANCY_SYMBOLS)
    else:
        _symbols = dict(_PLAIN_SYMBOLS)


def _styled(kind: str, message: str) -> str:
    if not _use_color:
        return message
    return f"{_STYLES[kind]}{message}{Style.RESET_ALL}"


def section(title: str) -> None:
    rule = "=" * max(1, min(_width, 80))
    print(rule)
    print(_styled("title", f" {title.upper()}"))
    print(rule)


def kv(key: str, val: object) -> None:
    print(f"{_styled('key', key)}: {val}")


def value(text: object) -> None:
    print(text)


def success(msg: str) -> None:
    print(_styled("success", f"{_symbols['success']} {msg}"))


def warning(msg: str) -> None:
    print(_styled("warning", f"{_symbols['warning']} {msg}"), file=sys.stderr)


def error(msg: str) -> None:
    print(_styled("error", f"{_symbols['error']} {msg}"), file=sys.stderr)
