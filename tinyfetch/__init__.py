"""
Fetch-style terminal summary of the current host: user, distro, kernel, shell, uptime, memory and battery.
"""

__all__ = ["probes", "formatting", "system_state", "compose", "cli"]
__version__ = "0.1.0"
