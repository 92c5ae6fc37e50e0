"""Probes turning one raw host fact each into a formatted display line."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Tuple

from .colors import ANSI, Palette
from .errors import NoMatch, SourceReadError, SourceUnavailable
from .extract import ExtractionPattern
from .formatting import Fact, format_fact
from .system_state import SystemInfoProvider

logger = logging.getLogger(__name__)

LSB_RELEASE = Path("/etc/lsb-release")
OS_RELEASE = Path("/etc/os-release")

LSB_DESCRIPTION = ExtractionPattern(
    r"""
    DISTRIB_DESCRIPTION=
    "?                   # quoted when the description has several words
    (?P<value>[^\n"]+)
    "?
    \n
    """
)

# Anchored on purpose: Ubuntu and Debian list PRETTY_NAME before NAME, and an
# unanchored search would report the PRETTY_NAME value instead.
OS_RELEASE_NAME = ExtractionPattern(
    r"""
    ^NAME=               # line start, so PRETTY_NAME does not match
    "?
    (?P<value>[^\n"]+)
    "?
    \n
    """,
    flags=re.MULTILINE,
)

SHELL_NAME = ExtractionPattern(r"(?P<value>[^/]+)$")


def user_host(system: SystemInfoProvider) -> Tuple[str, str]:
    username = system.env("USER") or ""
    hostname = system.hostname()
    if hostname is None:
        raise SourceUnavailable("failed getting hostname")
    return username, hostname


def identity(system: SystemInfoProvider, palette: Palette = ANSI) -> Tuple[str, str]:
    """Return the styled ``user@host`` line and a dash separator of the same visible width."""
    username, hostname = user_host(system)
    user_host_name = (
        f"{palette.bullet}{palette.bold}{username}{palette.reset}"
        f"{palette.bold}{palette.accent}@{palette.reset}"
        f"{palette.bold}{palette.bullet}{hostname}{palette.reset}"
    )
    user_host_name = re.sub(r"\s+", "", user_host_name)
    separator = f"{palette.accent}{'-' * (len(username) + 1 + len(hostname))}{palette.reset}"
    return user_host_name, separator


def _read_release_file(system: SystemInfoProvider, path: Path) -> str | None:
    try:
        return system.read_text(path)
    except FileNotFoundError:
        logger.debug("%s not present", path)
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"failed reading {path}: {exc}") from exc


def distro_fact(
    system: SystemInfoProvider,
    *,
    lsb_path: Path = LSB_RELEASE,
    os_release_path: Path = OS_RELEASE,
) -> Fact:
    lsb_release = _read_release_file(system, lsb_path)
    if lsb_release is not None:
        name = LSB_DESCRIPTION.extract(lsb_release)
        if name is not None:
            return Fact("os", name)
        logger.debug("no DISTRIB_DESCRIPTION in %s, trying %s", lsb_path, os_release_path)

    os_release = _read_release_file(system, os_release_path)
    if os_release is None:
        raise SourceUnavailable(f"neither {lsb_path} nor {os_release_path} is present")

    name = OS_RELEASE_NAME.extract(os_release)
    if name is None:
        raise NoMatch(f"no distribution name in {lsb_path} or {os_release_path}")
    return Fact("os", name)


def distribution(
    system: SystemInfoProvider,
    palette: Palette = ANSI,
    *,
    lsb_path: Path = LSB_RELEASE,
    os_release_path: Path = OS_RELEASE,
) -> str:
    return format_fact(distro_fact(system, lsb_path=lsb_path, os_release_path=os_release_path), palette)


def kernel_fact(system: SystemInfoProvider, show_kernel_name: bool = False) -> Fact:
    uname = system.uname()
    if show_kernel_name:
        return Fact("kernel", f"{uname.system}/{uname.machine}")
    return Fact("kernel", uname.release)


def kernel(system: SystemInfoProvider, palette: Palette = ANSI, show_kernel_name: bool = False) -> str:
    return format_fact(kernel_fact(system, show_kernel_name), palette)


def shell_fact(system: SystemInfoProvider) -> Fact:
    shell_path = system.env("SHELL")
    if shell_path is None:
        raise SourceUnavailable("SHELL is not set")
    name = SHELL_NAME.extract(shell_path)
    if name is None:
        raise NoMatch(f"cannot find a shell name in {shell_path!r}")
    return Fact("shell", name)


def shell(system: SystemInfoProvider, palette: Palette = ANSI) -> str:
    return format_fact(shell_fact(system), palette)
