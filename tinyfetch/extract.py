"""Pull single values out of unstructured text with named-group patterns."""

from __future__ import annotations

import re
from typing import Optional

GROUP = "value"


class ExtractionPattern:
    """A verbose regular expression with exactly one named group, ``value``.

    Patterns are built from constants, so a bad one is a programming error and
    raises ``ValueError`` as soon as it is constructed.
    """

    def __init__(self, pattern: str, flags: int = 0) -> None:
        try:
            self._regex = re.compile(pattern, re.VERBOSE | flags)
        except re.error as exc:
            raise ValueError(f"invalid extraction pattern {pattern!r}: {exc}") from exc
        names = list(self._regex.groupindex)
        if names != [GROUP]:
            raise ValueError(
                f"extraction pattern must define exactly one named group {GROUP!r}, found {names}"
            )

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def extract(self, text: str) -> Optional[str]:
        """Return the text captured by the first match, or ``None``."""
        match = self._regex.search(text)
        if match is None:
            return None
        return match.group(GROUP)

    def __repr__(self) -> str:
        return f"ExtractionPattern({self._regex.pattern!r})"
