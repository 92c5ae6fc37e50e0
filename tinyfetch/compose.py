"""Run every probe and collect the lines that succeeded."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, List, Optional, Tuple

from .colors import ANSI, Palette
from .config import FetchSettings
from .errors import ProbeError, SourceUnavailable
from .formatting import Fact, battery_fact, format_fact, memory_fact, uptime_fact
from .probes import distro_fact, identity, kernel_fact, shell_fact
from .system_state import SystemInfoProvider

logger = logging.getLogger(__name__)


@dataclass
class FetchReport:
    identity: str
    separator: str
    facts: List[Fact] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    omitted: List[str] = field(default_factory=list)

    def render(self) -> str:
        return "\n".join([self.identity, self.separator, *self.lines])


def gather(
    system: SystemInfoProvider,
    settings: Optional[FetchSettings] = None,
    palette: Palette = ANSI,
) -> FetchReport:
    """Collect the summary for ``system``.

    A failing identity probe propagates. Any other probe that fails is left out
    of the report and listed in ``omitted``.
    """
    settings = settings or FetchSettings()
    identity_line, separator = identity(system, palette)
    report = FetchReport(identity=identity_line, separator=separator)

    probes: List[Tuple[str, bool, Callable[[], Fact]]] = [
        (
            "os",
            settings.show_os,
            lambda: distro_fact(
                system,
                lsb_path=settings.lsb_release_path,
                os_release_path=settings.os_release_path,
            ),
        ),
        ("kernel", settings.show_kernel, lambda: kernel_fact(system, settings.show_kernel_name)),
        ("shell", settings.show_shell, lambda: shell_fact(system)),
        ("uptime", settings.show_uptime, lambda: uptime_fact(_stat(system.uptime, "uptime"))),
        ("memory", settings.show_memory, lambda: memory_fact(_stat(system.memory, "memory"))),
        (
            "battery",
            settings.show_battery,
            lambda: battery_fact(_stat(system.battery, "battery"), settings.battery_minutes),
        ),
    ]

    for name, enabled, probe in probes:
        if not enabled:
            continue
        try:
            fact = probe()
        except ProbeError as exc:
            logger.debug("omitting %s: %s", name, exc)
            report.omitted.append(name)
            continue
        report.facts.append(fact)
        report.lines.append(format_fact(fact, palette))

    return report


def _stat(fetch, name: str):
    try:
        value = fetch()
    except OSError as exc:
        raise SourceUnavailable(f"failed reading {name} stats: {exc}") from exc
    if value is None:
        raise SourceUnavailable(f"no {name} information on this host")
    return value
