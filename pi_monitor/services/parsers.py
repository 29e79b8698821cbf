"""
Parsers for kernel pseudo-files and command output.

Each parser takes the raw text of one source (None when the source could
not be read) and returns a unit-normalized value, or None when the text is
missing or does not parse. Records are all-or-nothing: a single bad number
discards the whole record.
"""

import re
from typing import Optional

from pi_monitor.constants import KIB_PER_GIB, MILLI
from pi_monitor.models.source_error import SourceUnavailable
from pi_monitor.schemas.metrics import DiskInfo, LoadAverage, MemoryInfo
from pi_monitor.services.helpers import probe, require_text, to_finite

MEMINFO_LINE = re.compile(r"^(\w+):\s+(\d+)", re.MULTILINE)


@probe
def parse_cpu_temp(raw: Optional[str]) -> Optional[float]:
    """Thermal zone reading in milli-degrees Celsius -> degrees Celsius."""
    millidegrees = to_finite(require_text(raw, "cpu_temp"), "cpu_temp")
    return millidegrees / MILLI


@probe
def parse_cpu_freq(raw: Optional[str]) -> Optional[float]:
    """cpufreq scaling_cur_freq in kHz -> MHz."""
    khz = to_finite(require_text(raw, "cpu_freq"), "cpu_freq")
    return khz / MILLI


@probe
def parse_model(raw: Optional[str]) -> Optional[str]:
    """
    Device-tree model string. The file is NUL terminated, so NUL bytes are
    removed before trimming.
    """
    if raw is None:
        raise SourceUnavailable("model", "not available")
    return require_text(raw.replace("\x00", ""), "model")


@probe
def parse_loadavg(raw: Optional[str]) -> Optional[LoadAverage]:
    """First three fields of /proc/loadavg; the rest (runnable/total, last pid) is ignored."""
    fields = require_text(raw, "loadavg").split()
    if len(fields) < 3:
        raise SourceUnavailable("loadavg", f"expected 3 fields, got {len(fields)}")
    one, five, fifteen = (to_finite(field, "loadavg") for field in fields[:3])
    return LoadAverage(load_1m=one, load_5m=five, load_15m=fifteen)


@probe
def parse_meminfo(raw: Optional[str]) -> Optional[MemoryInfo]:
    """
    MemTotal and MemAvailable from /proc/meminfo (kibibytes) -> GiB.

    Used memory is total minus available, so buffers and page cache that
    the kernel can reclaim count as available.
    """
    counters = dict(MEMINFO_LINE.findall(require_text(raw, "meminfo")))
    total_kb = to_finite(counters.get("MemTotal"), "meminfo")
    avail_kb = to_finite(counters.get("MemAvailable"), "meminfo")
    if total_kb <= 0:
        raise SourceUnavailable("meminfo", "MemTotal is zero")

    used_kb = total_kb - avail_kb
    return MemoryInfo(
        total_gb=total_kb / KIB_PER_GIB,
        used_gb=used_kb / KIB_PER_GIB,
        avail_gb=avail_kb / KIB_PER_GIB,
        used_pct=used_kb / total_kb * 100,
    )


@probe
def parse_df(output: Optional[str]) -> Optional[DiskInfo]:
    """
    `df -k` output for a single filesystem: a header line and one data row
    of filesystem, size, used, available, use% and mountpoint.

    The use% column is passed through as df printed it.
    """
    lines = require_text(output, "disk").split("\n")
    if len(lines) < 2:
        raise SourceUnavailable("disk", "no data row")
    fields = lines[1].split()
    if len(fields) < 5:
        raise SourceUnavailable("disk", f"expected 5 fields, got {len(fields)}")

    size_kb, used_kb, avail_kb = (to_finite(field, "disk") for field in fields[1:4])
    return DiskInfo(
        size_gb=size_kb / KIB_PER_GIB,
        used_gb=used_kb / KIB_PER_GIB,
        avail_gb=avail_kb / KIB_PER_GIB,
        use_pct=fields[4],
    )


@probe
def parse_uptime(raw: Optional[str]) -> Optional[float]:
    """First field of /proc/uptime, seconds since boot."""
    return to_finite(require_text(raw, "uptime").split()[0], "uptime")
