from fastapi import Request

from pi_monitor.services.sources import HostSource
from pi_monitor.streaming.metrics_stream import MetricsStreamManager


def get_source(request: Request) -> HostSource:
    """The HostSource the running app collects from."""
    return request.app.state.source


def get_stream_manager(request: Request) -> MetricsStreamManager:
    return request.app.state.stream_manager
