from .metrics import DiskInfo, LoadAverage, MemoryInfo, MetricsSnapshot
