import os
import platform
import socket
import sys
from typing import Optional

from pi_monitor.constants import (
    CPUFREQ_FILE,
    DEVICE_TREE_MODEL_FILE,
    DF_ROOT_CMD,
    LOADAVG_FILE,
    MEMINFO_FILE,
    THERMAL_ZONE_FILE,
    UPTIME_FILE,
)
from pi_monitor.core.config import settings
from pi_monitor.schemas.metrics import DiskInfo, LoadAverage, MemoryInfo, MetricsSnapshot
from pi_monitor.schemas.system import HostSpecs
from pi_monitor.services import parsers
from pi_monitor.services.sources import HostSource
from pi_monitor.utils.general import get_current_iso_timestamp

default_source = HostSource(timeout=settings.DF_TIMEOUT)


def get_cpu_temp(source: HostSource = default_source) -> Optional[float]:
    return parsers.parse_cpu_temp(source.read_text(THERMAL_ZONE_FILE))


def get_cpu_freq(source: HostSource = default_source) -> Optional[float]:
    return parsers.parse_cpu_freq(source.read_text(CPUFREQ_FILE))


def get_model(source: HostSource = default_source) -> Optional[str]:
    return parsers.parse_model(source.read_text(DEVICE_TREE_MODEL_FILE))


def get_loadavg(source: HostSource = default_source) -> Optional[LoadAverage]:
    return parsers.parse_loadavg(source.read_text(LOADAVG_FILE))


def get_mem(source: HostSource = default_source) -> Optional[MemoryInfo]:
    return parsers.parse_meminfo(source.read_text(MEMINFO_FILE))


def get_disk_root(source: HostSource = default_source) -> Optional[DiskInfo]:
    """
    Usage of the root filesystem from `df -k -P /`. Absent when df is
    missing or exits non-zero.
    """
    result = source.run(DF_ROOT_CMD)
    if not result.success:
        return None
    return parsers.parse_df(result.stdout)


def get_uptime(source: HostSource = default_source) -> Optional[float]:
    return parsers.parse_uptime(source.read_text(UPTIME_FILE))


def collect_specs(source: HostSource = default_source) -> HostSpecs:
    """
    Returns static information about the host.

    Only the model is read through the source; the rest comes from the
    interpreter's view of the OS.
    """
    return HostSpecs(
        hostname=socket.gethostname(),
        platform=sys.platform,
        arch=platform.machine(),
        model=get_model(source),
        cpu_count=os.cpu_count(),
        node=platform.python_version(),
    )


def collect_metrics(source: HostSource = default_source) -> MetricsSnapshot:
    """
    Returns a fresh snapshot of every metric. Each probe fails on its own:
    an unreadable source leaves that one field as None.
    """
    return MetricsSnapshot(
        time=get_current_iso_timestamp(),
        cpu_temp_c=get_cpu_temp(source),
        cpu_freq_mhz=get_cpu_freq(source),
        loadavg=get_loadavg(source),
        mem=get_mem(source),
        disk_root=get_disk_root(source),
        uptime_sec=get_uptime(source),
    )
