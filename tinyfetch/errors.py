"""Failures raised by probes when a data source cannot produce a value."""

from __future__ import annotations


class ProbeError(Exception):
    """A probe could not produce its line."""


class SourceUnavailable(ProbeError):
    """The file, environment variable or system call holding the fact is absent."""


class NoMatch(ProbeError):
    """The source was readable but held no value matching the pattern."""


class SourceReadError(ProbeError):
    """The source exists but reading it failed."""
