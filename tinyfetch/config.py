"""Settings read from TINYFETCH_* environment variables or a .env file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .formatting import BatteryMinutes


class FetchSettings(BaseSettings):
    show_kernel_name: bool = False
    color: bool = True
    battery_minutes: BatteryMinutes = BatteryMinutes.LEGACY

    lsb_release_path: Path = Path("/etc/lsb-release")
    os_release_path: Path = Path("/etc/os-release")

    # Per-line toggles
    show_os: bool = True
    show_kernel: bool = True
    show_shell: bool = True
    show_uptime: bool = True
    show_memory: bool = True
    show_battery: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TINYFETCH_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> FetchSettings:
    return FetchSettings()


def reset_settings_cache() -> None:
    get_settings.cache_clear()
