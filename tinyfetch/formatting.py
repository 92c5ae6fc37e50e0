"""Console-friendly formatting of facts into styled lines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
import enum
import math

from .colors import ANSI, Palette
from .system_state import BatteryStatus, MemoryStats

LABEL_WIDTH = 7


@dataclass
class Fact:
    label: str
    value: str


class BatteryMinutes(str, enum.Enum):
    """How the minutes part of the remaining battery time is derived.

    ``LEGACY`` takes the total seconds modulo 60, which is what earlier releases
    printed. ``CLOCK`` gives the minutes within the current hour.
    """

    LEGACY = "legacy"
    CLOCK = "clock"


def format_data(label: str, value: str, palette: Palette = ANSI) -> str:
    return (
        f"{palette.bullet}▪{palette.bold} {label:<{LABEL_WIDTH}}{palette.reset} "
        f"{palette.accent}{value}{palette.reset}"
    )


def format_fact(fact: Fact, palette: Palette = ANSI) -> str:
    return format_data(fact.label, fact.value, palette)


def format_bytes(num: float) -> str:
    suffixes = ["B", "KiB", "MiB", "GiB", "TiB"]
    value = float(num)
    for suffix in suffixes:
        if value < 1024 or suffix == suffixes[-1]:
            return f"{value:.1f} {suffix}"
        value /= 1024
    return f"{value:.1f} TiB"


def uptime_fact(duration: timedelta) -> Fact:
    seconds = int(duration.total_seconds())
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return Fact("uptime", f"{hours}h {minutes}m")


def memory_fact(memory: MemoryStats) -> Fact:
    used = max(memory.total - memory.free, 0)
    return Fact("memory", f"{format_bytes(used)} / {format_bytes(memory.total)}")


def battery_fact(battery: BatteryStatus, minutes_rule: BatteryMinutes = BatteryMinutes.LEGACY) -> Fact:
    seconds = int(battery.remaining_time.total_seconds())
    # Rounded first so 0.29 * 100 does not truncate to 28.
    percent = math.trunc(round(battery.remaining_capacity * 100, 9))
    hours = seconds // 3600
    if BatteryMinutes(minutes_rule) is BatteryMinutes.CLOCK:
        minutes = (seconds % 3600) // 60
    else:
        minutes = seconds % 60
    return Fact("battery", f"{percent}%, {hours}h {minutes}m remaining")


def format_uptime(duration: timedelta, palette: Palette = ANSI) -> str:
    return format_fact(uptime_fact(duration), palette)


def format_memory(memory: MemoryStats, palette: Palette = ANSI) -> str:
    return format_fact(memory_fact(memory), palette)


def format_battery(
    battery: BatteryStatus,
    palette: Palette = ANSI,
    minutes_rule: BatteryMinutes = BatteryMinutes.LEGACY,
) -> str:
    return format_fact(battery_fact(battery, minutes_rule), palette)
