"""Window placement and behaviour taken from the command line."""

from __future__ import annotations

import enum
import string
from collections.abc import Sequence
from dataclasses import dataclass


class WindowFlag(enum.Flag):
    BORDERLESS = enum.auto()
    ALWAYS_ON_TOP = enum.auto()
    INPUT_GRABBED = enum.auto()
    RESIZABLE = enum.auto()


@dataclass(frozen=True)
class WindowInfo:
    x: int = 50
    y: int = 50
    w: int = 2 * 320
    h: int = 2 * 180
    flags: WindowFlag = WindowFlag.RESIZABLE | WindowFlag.BORDERLESS


def atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, no digits gives 0."""
    stripped = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in string.digits:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def parse_window_args(argv: Sequence[str]) -> WindowInfo:
    """Build window settings from the arguments x y w h, all optional.

    Passing any argument makes a borderless, always-on-top, input-grabbing
    window; with none the window is borderless and resizable.
    """
    defaults = WindowInfo()
    values = [defaults.x, defaults.y, defaults.w, defaults.h]
    for index, arg in enumerate(argv[:4]):
        values[index] = atoi(arg)
    if argv:
        flags = WindowFlag.BORDERLESS | WindowFlag.ALWAYS_ON_TOP | WindowFlag.INPUT_GRABBED
    else:
        flags = WindowFlag.RESIZABLE | WindowFlag.BORDERLESS
    x, y, w, h = values
    return WindowInfo(x, y, w, h, flags)