"""Style tokens concatenated into formatted lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    bullet: str
    bold: str
    accent: str
    reset: str


ANSI = Palette(
    bullet="\x1b[33m",
    bold="\x1b[1m",
    accent="\x1b[36m",
    reset="\x1b[0m",
)

# Used for JSON output and non-terminal contexts.
PLAIN = Palette(bullet="", bold="", accent="", reset="")
