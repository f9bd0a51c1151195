"""ANSI colouring of log names and messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "Color",
    "paint",
    "BLACK",
    "RED",
    "GREEN",
    "BROWN",
    "BLUE",
    "PURPLE",
    "CYAN",
    "LIGHT_GRAY",
]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding a space only between two non-string operands."""
    parts: list[str] = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_render(arg))
        previous_is_str = is_str
    return "".join(parts)


@dataclass(frozen=True)
class Color:
    """A terminal colour given by a template with a single ``%s`` slot."""

    template: str

    def apply(self, *args: Any) -> str:
        """Render the arguments as text and wrap them in this colour."""
        return self.template % _sprint(args)

    __call__ = apply


BLACK = Color("\033[1;30m%s\033[0m")
RED = Color("\033[1;31m%s\033[0m")
GREEN = Color("\033[1;32m%s\033[0m")
BROWN = Color("\033[1;33m%s\033[0m")
BLUE = Color("\033[1;34m%s\033[0m")
PURPLE = Color("\033[1;35m%s\033[0m")
CYAN = Color("\033[1;36m%s\033[0m")
LIGHT_GRAY = Color("\033[1;37m%s\033[0m")


def paint(msg: str, color: Color) -> str:
    """Return ``msg`` followed by two spaces, coloured with ``color``."""
    return color.apply(f"{msg}  ")