from fastapi import APIRouter, Depends, Response

from pi_monitor.api.deps import get_source
from pi_monitor.schemas.metrics import MetricsSnapshot
from pi_monitor.schemas.system import HostSpecs
from pi_monitor.services import system_service
from pi_monitor.services.sources import HostSource

router = APIRouter()


@router.get("/specs", response_model=HostSpecs)
def show_specs(source: HostSource = Depends(get_source)):
    """
    Returns static information about the host.

    Sources:
     - hostname, platform, architecture and core count from the OS.
     - '/proc/device-tree/model' for the hardware model (null when absent).
     - the interpreter version as 'node'.
    """

    return system_service.collect_specs(source)


@router.get("/metrics", response_model=MetricsSnapshot)
def show_metrics(response: Response, source: HostSource = Depends(get_source)):
    """
    Returns a point-in-time metrics snapshot. Any metric whose source is
    missing or unreadable on this host is null.

    Sources:
     - '/sys/class/thermal/thermal_zone0/temp' for CPU temperature.
     - '/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq' for CPU frequency.
     - '/proc/loadavg', '/proc/meminfo' and '/proc/uptime'.
     - 'df -k -P /' for root filesystem usage.
    """

    response.headers["Cache-Control"] = "no-store"
    return system_service.collect_metrics(source)
