from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HostSpecs(BaseModel):
    model_config = ConfigDict(frozen=True)

    hostname: str = Field(examples=["raspberrypi"])
    platform: str = Field(title="OS platform", examples=["linux"])
    arch: str = Field(title="CPU architecture", examples=["aarch64"])
    model: Optional[str] = Field(
        default=None, title="Hardware model", examples=["Raspberry Pi 4 Model B Rev 1.4"]
    )
    cpu_count: Optional[int] = Field(
        default=None, title="Logical CPU cores", examples=[4]
    )
    node: str = Field(title="Runtime version", examples=["3.11.2"])
