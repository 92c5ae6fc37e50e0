"""Raw host facts behind a provider interface so probes can run against a fake."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
import logging
import os
from pathlib import Path
import platform
import socket
import time
from typing import Optional, Protocol

import psutil

logger = logging.getLogger(__name__)


@dataclass
class UnameInfo:
    system: str
    node: str
    release: str
    machine: str


@dataclass
class MemoryStats:
    total: int
    free: int


@dataclass
class BatteryStatus:
    remaining_capacity: float
    remaining_time: timedelta


class SystemInfoProvider(Protocol):
    def env(self, name: str) -> Optional[str]: ...

    def hostname(self) -> Optional[str]: ...

    def uname(self) -> UnameInfo: ...

    def read_text(self, path: Path) -> str: ...

    def uptime(self) -> timedelta: ...

    def memory(self) -> MemoryStats: ...

    def battery(self) -> Optional[BatteryStatus]: ...


class HostSystem:
    """Live provider reading the running machine."""

    def env(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def hostname(self) -> Optional[str]:
        try:
            name = socket.gethostname()
        except OSError as exc:
            logger.debug("gethostname failed: %s", exc)
            return None
        # Surrogate escapes mean the kernel handed back bytes that are not UTF-8.
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("hostname %r is not valid UTF-8", name)
            return None
        return name

    def uname(self) -> UnameInfo:
        info = platform.uname()
        return UnameInfo(system=info.system, node=info.node, release=info.release, machine=info.machine)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def uptime(self) -> timedelta:
        return timedelta(seconds=max(time.time() - psutil.boot_time(), 0))

    def memory(self) -> MemoryStats:
        memory = psutil.virtual_memory()
        return MemoryStats(total=memory.total, free=memory.available)

    def battery(self) -> Optional[BatteryStatus]:
        # Not every platform implements sensors_battery.
        sensors_battery = getattr(psutil, "sensors_battery", None)
        battery = sensors_battery() if sensors_battery else None
        if battery is None:
            return None
        secsleft = battery.secsleft
        # POWER_TIME_UNKNOWN and POWER_TIME_UNLIMITED are negative sentinels.
        if secsleft < 0:
            secsleft = 0
        return BatteryStatus(
            remaining_capacity=battery.percent / 100,
            remaining_time=timedelta(seconds=secsleft),
        )
