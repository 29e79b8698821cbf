"""
pi-monitor package

This package reports host telemetry (CPU temperature and frequency, load,
memory, disk, uptime and hardware specs) as JSON over HTTP.
"""
