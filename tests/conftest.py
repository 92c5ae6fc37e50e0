from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Dict, Optional, Union

import pytest

from tinyfetch.config import reset_settings_cache
from tinyfetch.system_state import BatteryStatus, MemoryStats, UnameInfo

LSB = Path("/etc/lsb-release")
OS_RELEASE = Path("/etc/os-release")


class FakeSystem:
    """Provider returning canned facts; file values may be exceptions to raise."""

    def __init__(
        self,
        *,
        env: Optional[Dict[str, str]] = None,
        hostname: Optional[str] = "box",
        uname: Optional[UnameInfo] = None,
        files: Optional[Dict[Path, Union[str, Exception]]] = None,
        uptime: timedelta = timedelta(seconds=3725),
        memory: Optional[MemoryStats] = None,
        battery: Optional[BatteryStatus] = None,
    ) -> None:
        self._env = {"USER": "alice", "SHELL": "/usr/bin/zsh"} if env is None else env
        self._hostname = hostname
        self._uname = uname or UnameInfo(system="Linux", node="box", release="6.1.0-13-amd64", machine="x86_64")
        self._files = {} if files is None else files
        self._uptime = uptime
        self._memory = memory or MemoryStats(total=1000, free=400)
        self._battery = battery
        self.reads = []

    def env(self, name: str) -> Optional[str]:
        return self._env.get(name)

    def hostname(self) -> Optional[str]:
        return self._hostname

    def uname(self) -> UnameInfo:
        return self._uname

    def read_text(self, path: Path) -> str:
        self.reads.append(Path(path))
        content = self._files.get(Path(path))
        if content is None:
            raise FileNotFoundError(path)
        if isinstance(content, Exception):
            raise content
        return content

    def uptime(self) -> timedelta:
        return self._uptime

    def memory(self) -> MemoryStats:
        return self._memory

    def battery(self) -> Optional[BatteryStatus]:
        return self._battery


@pytest.fixture
def fake_system():
    return FakeSystem(files={LSB: 'DISTRIB_ID=Ubuntu\nDISTRIB_DESCRIPTION="Ubuntu 22.04"\n'})


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("TINYFETCH_COLOR", "TINYFETCH_SHOW_KERNEL_NAME", "TINYFETCH_BATTERY_MINUTES", "TINYFETCH_SHOW_BATTERY"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
