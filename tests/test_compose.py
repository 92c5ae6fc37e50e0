from datetime import timedelta

import pytest

from tinyfetch.colors import PLAIN
from tinyfetch.compose import gather
from tinyfetch.config import FetchSettings
from tinyfetch.errors import SourceUnavailable
from tinyfetch.system_state import BatteryStatus

from conftest import FakeSystem


class BrokenMemory(FakeSystem):
    def memory(self):
        raise OSError("no /proc/meminfo")


def test_gather_collects_lines_in_order(fake_system):
    report = gather(fake_system, FetchSettings(), PLAIN)
    assert report.identity == "alice@box"
    assert [fact.label for fact in report.facts] == ["os", "kernel", "shell", "uptime", "memory"]
    assert report.lines[0] == "▪ os      Ubuntu 22.04"
    assert report.lines[3] == "▪ uptime  1h 2m"
    assert report.omitted == ["battery"]


def test_gather_omits_failed_probes():
    system = FakeSystem(env={"USER": "bob"})
    report = gather(system, FetchSettings(), PLAIN)
    assert report.omitted == ["os", "shell", "battery"]
    assert [fact.label for fact in report.facts] == ["kernel", "uptime", "memory"]


def test_gather_omits_stats_that_raise():
    report = gather(BrokenMemory(), FetchSettings(), PLAIN)
    assert "memory" in report.omitted


def test_gather_uses_battery_rule():
    system = FakeSystem(battery=BatteryStatus(remaining_capacity=0.5, remaining_time=timedelta(seconds=3725)))
    legacy = gather(system, FetchSettings(), PLAIN)
    clock = gather(system, FetchSettings(battery_minutes="clock"), PLAIN)
    assert legacy.facts[-1].value == "50%, 1h 5m remaining"
    assert clock.facts[-1].value == "50%, 1h 2m remaining"


def test_gather_respects_toggles(fake_system):
    settings = FetchSettings(show_kernel=False, show_uptime=False, show_battery=False)
    report = gather(fake_system, settings, PLAIN)
    assert [fact.label for fact in report.facts] == ["os", "shell", "memory"]
    assert report.omitted == []


def test_gather_kernel_name(fake_system):
    report = gather(fake_system, FetchSettings(show_kernel_name=True), PLAIN)
    assert "Linux/x86_64" in report.render()


def test_gather_identity_failure_propagates():
    with pytest.raises(SourceUnavailable):
        gather(FakeSystem(hostname=None), FetchSettings(), PLAIN)


def test_render_puts_identity_first(fake_system):
    text = gather(fake_system, FetchSettings(), PLAIN).render()
    assert text.splitlines()[:2] == ["alice@box", "---------"]
