from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoadAverage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    load_1m: float = Field(alias="1m", examples=[0.1])
    load_5m: float = Field(alias="5m", examples=[0.25])
    load_15m: float = Field(alias="15m", examples=[0.3])


class MemoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_gb: float = Field(title="Total memory (GiB)", examples=[3.7])
    used_gb: float = Field(title="Used memory (GiB)", examples=[0.9])
    avail_gb: float = Field(title="Available memory (GiB)", examples=[2.8])
    used_pct: float = Field(title="Used memory percentage", examples=[24.3])


class DiskInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    size_gb: float = Field(title="Filesystem size (GiB)", examples=[28.6])
    used_gb: float = Field(title="Used space (GiB)", examples=[6.1])
    avail_gb: float = Field(title="Available space (GiB)", examples=[21.1])
    use_pct: str = Field(title="Use percentage as reported by df", examples=["23%"])


class MetricsSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: str = Field(title="Collection time", examples=["2025-01-31T12:00:00.000Z"])
    cpu_temp_c: Optional[float] = Field(default=None, examples=[45.678])
    cpu_freq_mhz: Optional[float] = Field(default=None, examples=[1500.0])
    loadavg: Optional[LoadAverage] = None
    mem: Optional[MemoryInfo] = None
    disk_root: Optional[DiskInfo] = None
    uptime_sec: Optional[float] = Field(default=None, examples=[12345.67])

    def to_json(self) -> str:
        """Serializes with field aliases and explicit nulls, as served by the API."""
        return self.model_dump_json(by_alias=True)
