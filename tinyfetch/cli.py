"""Entry point for the tinyfetch command line tool."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.text import Text

from .colors import ANSI, PLAIN
from .compose import FetchReport, gather
from .config import FetchSettings, get_settings
from .errors import ProbeError
from .formatting import BatteryMinutes
from .system_state import HostSystem, SystemInfoProvider

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None, system: Optional[SystemInfoProvider] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show a short summary of this host: user, distro, kernel, shell, uptime, memory and battery.",
    )
    parser.add_argument("--kernel-name", action="store_true", help="show kernel name and architecture instead of release")
    parser.add_argument("--no-color", action="store_true", help="print without colors")
    parser.add_argument("--json", action="store_true", help="print the collected facts as JSON")
    parser.add_argument(
        "--battery-minutes",
        choices=[rule.value for rule in BatteryMinutes],
        help="how remaining battery minutes are computed",
    )
    parser.add_argument("--verbose", action="store_true", help="log probe failures to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = _apply_args(get_settings(), args)
    palette = ANSI if settings.color and not args.json else PLAIN

    try:
        report = gather(system or HostSystem(), settings, palette)
    except ProbeError as exc:
        logger.debug("cannot identify host: %s", exc)
        print(f"tinyfetch: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(_to_json(report))
    else:
        _render(report, color=settings.color)
    return 0


def _apply_args(settings: FetchSettings, args: argparse.Namespace) -> FetchSettings:
    updates: Dict[str, Any] = {}
    if args.kernel_name:
        updates["show_kernel_name"] = True
    if args.no_color:
        updates["color"] = False
    if args.battery_minutes:
        updates["battery_minutes"] = BatteryMinutes(args.battery_minutes)
    return settings.model_copy(update=updates) if updates else settings


def _to_json(report: FetchReport) -> str:
    payload: Dict[str, Any] = {
        "identity": report.identity,
        "facts": [asdict(fact) for fact in report.facts],
        "omitted": report.omitted,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _render(report: FetchReport, color: bool = True) -> None:
    console = Console(no_color=not color, highlight=False)
    for line in report.render().splitlines():
        console.print(Text.from_ansi(line))


if __name__ == "__main__":
    sys.exit(main())
