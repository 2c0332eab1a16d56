"""System metrics collector for CPU, memory and disk usage."""
import logging
from typing import Iterator, List, Optional, Union

import psutil

from ..config.config import Config
from ..core.errors import MetricsQueryError
from .system_models import CpuSample, DiskSample, MemorySample

logger = logging.getLogger(__name__)

# psutil raises its own errors for vanished/denied resources and plain
# OSError for everything the kernel refuses.
PROVIDER_ERRORS = (psutil.Error, OSError)


class SystemCollector:
    """Collects system-level metrics like CPU, memory, disk usage."""

    def __init__(self, config: Config):
        """Initialize the system collector."""
        self.config = config

    def sample_cpu(self, window: Optional[float] = None, per_core: bool = False) -> CpuSample:
        """Measure CPU utilization over ``window`` seconds.

        A zero window does not block and reports utilization since the
        previous call.
        """
        if window is None:
            window = self.config.cpu_window
        interval = window if window > 0 else None
        logger.debug("Sampling CPU (window=%s, per_core=%s)", window, per_core)
        try:
            result = psutil.cpu_percent(interval=interval, percpu=per_core)
        except PROVIDER_ERRORS as e:
            raise MetricsQueryError("CPU usage", e) from e

        percentages = [float(v) for v in result] if per_core else [float(result)]
        return CpuSample(percentages=percentages, window=max(window, 0.0), per_core=per_core)

    def sample_memory(self) -> MemorySample:
        """Get virtual memory statistics."""
        logger.debug("Sampling virtual memory")
        try:
            vm = psutil.virtual_memory()
        except PROVIDER_ERRORS as e:
            raise MetricsQueryError("memory usage", e) from e
        return MemorySample(total=vm.total, used=vm.used, free=vm.free, percent=vm.percent)

    def list_partitions(self, include_pseudo: Optional[bool] = None) -> List[str]:
        """Get mount points of all mounted partitions."""
        if include_pseudo is None:
            include_pseudo = self.config.include_pseudo
        try:
            partitions = psutil.disk_partitions(all=include_pseudo)
        except PROVIDER_ERRORS as e:
            raise MetricsQueryError("disk partitions", e) from e
        mountpoints = [p.mountpoint for p in partitions]
        logger.debug("Found %d partitions (include_pseudo=%s)", len(mountpoints), include_pseudo)
        return mountpoints

    def sample_disk_usage(self, mountpoint: str) -> DiskSample:
        """Get usage of the partition mounted at ``mountpoint``."""
        try:
            usage = psutil.disk_usage(mountpoint)
        except PROVIDER_ERRORS as e:
            raise MetricsQueryError("disk usage", e, target=mountpoint) from e
        return DiskSample(
            mountpoint=mountpoint,
            total=usage.total,
            used=usage.used,
            free=usage.free,
            percent=usage.percent,
        )

    def sample_disks(
        self, include_pseudo: Optional[bool] = None
    ) -> Iterator[Union[DiskSample, MetricsQueryError]]:
        """Yield a sample per partition, or the error that replaced it.

        A partition that cannot be read does not stop the others. Failure to
        list partitions at all propagates to the caller.
        """
        for mountpoint in self.list_partitions(include_pseudo):
            try:
                yield self.sample_disk_usage(mountpoint)
            except MetricsQueryError as e:
                logger.warning("%s", e)
                yield e
