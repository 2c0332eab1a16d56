import io
import logging

import pytest
from rich.console import Console

from sysinfo.collectors.system_collector import SystemCollector
from sysinfo.collectors.system_models import CpuSample, DiskSample, MemorySample
from sysinfo.commands import CommandContext
from sysinfo.config.config import Config
from sysinfo.core.errors import MetricsQueryError
from sysinfo.ui.display_manager import DisplayManager

GB = 1024 ** 3


class FakeCollector(SystemCollector):
    """Collector serving canned samples and recording every query."""

    def __init__(self, config, partitions=None, failing=()):
        super().__init__(config)
        self.calls = []
        self.cpu_values = [12.5, 40.0]
        self.memory = MemorySample(total=16 * GB, used=4 * GB, free=11 * GB, percent=25.0)
        self.partitions = {} if partitions is None else partitions
        self.failing = set(failing)

    def _maybe_fail(self, metric, target=None):
        key = target or metric
        if key in self.failing:
            raise MetricsQueryError(metric, OSError("boom"), target=target)

    def sample_cpu(self, window=None, per_core=False):
        self.calls.append(("cpu", window, per_core))
        self._maybe_fail("CPU usage")
        values = self.cpu_values if per_core else [self.cpu_values[0]]
        return CpuSample(percentages=list(values), window=window or 0.0, per_core=per_core)

    def sample_memory(self):
        self.calls.append(("memory",))
        self._maybe_fail("memory usage")
        return self.memory

    def list_partitions(self, include_pseudo=None):
        self.calls.append(("partitions", include_pseudo))
        self._maybe_fail("disk partitions")
        return list(self.partitions)

    def sample_disk_usage(self, mountpoint):
        self.calls.append(("disk", mountpoint))
        self._maybe_fail("disk usage", target=mountpoint)
        return self.partitions[mountpoint]


def make_disk(mountpoint, total=100 * GB, used=40 * GB, free=60 * GB, percent=40.0):
    return DiskSample(mountpoint=mountpoint, total=total, used=used, free=free, percent=percent)


@pytest.fixture
def config():
    cfg = Config()
    cfg.display.show_colors = False
    return cfg


@pytest.fixture
def console():
    return Console(file=io.StringIO(), no_color=True, highlight=False, width=200)


@pytest.fixture
def display(config, console):
    return DisplayManager(config, console=console)


@pytest.fixture
def output(console):
    return lambda: console.file.getvalue()


@pytest.fixture
def collector(config):
    return FakeCollector(config, partitions={"/": make_disk("/")})


@pytest.fixture
def ctx(config, collector, display):
    return CommandContext(config=config, collector=collector, display=display)


@pytest.fixture(autouse=True)
def reset_package_logger():
    # Handlers bound to a captured stream must not outlive the test
    yield
    package_logger = logging.getLogger("sysinfo")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
