from typing import Dict, Optional

import pytest

from pi_monitor import constants
from pi_monitor.models.command_result import CommandResult
from pi_monitor.services.sources import COMMAND_NOT_FOUND, HostSource

DF_OUTPUT = (
    "Filesystem     1024-blocks   Used Available Capacity Mounted on\n"
    "/dev/root          1048576 524288    524288      50% /\n"
)

MEMINFO = (
    "MemTotal:        3884136 kB\n"
    "MemFree:          925212 kB\n"
    "MemAvailable:    2942256 kB\n"
    "Buffers:          123456 kB\n"
    "Cached:          1834008 kB\n"
    "HugePages_Total:       0\n"
)

RASPBERRY_PI_FILES = {
    constants.THERMAL_ZONE_FILE: "45678\n",
    constants.CPUFREQ_FILE: "1500000\n",
    constants.DEVICE_TREE_MODEL_FILE: "Raspberry Pi 4 Model B Rev 1.4\x00",
    constants.LOADAVG_FILE: "0.10 0.25 0.30 1/200 1234\n",
    constants.MEMINFO_FILE: MEMINFO,
    constants.UPTIME_FILE: "12345.67 45678.90\n",
}


class FakeSource(HostSource):
    """In-memory HostSource: files by path, command results by argument tuple."""

    def __init__(
        self,
        files: Optional[Dict[str, str]] = None,
        commands: Optional[Dict[tuple, CommandResult]] = None,
    ):
        super().__init__()
        self.files = dict(files or {})
        self.commands = dict(commands or {})
        self.reads = []
        self.runs = []

    def read_text(self, path: str) -> Optional[str]:
        self.reads.append(path)
        return self.files.get(path)

    def run(self, args: list) -> CommandResult:
        self.runs.append(tuple(args))
        result = self.commands.get(tuple(args))
        if result is None:
            return CommandResult("", f"{args[0]}: not found", COMMAND_NOT_FOUND)
        return result


@pytest.fixture
def pi_source():
    """A Raspberry Pi with every source readable."""
    return FakeSource(
        RASPBERRY_PI_FILES,
        {tuple(constants.DF_ROOT_CMD): CommandResult(DF_OUTPUT, "", 0)},
    )


@pytest.fixture
def empty_source():
    """A host where nothing can be read and no command exists."""
    return FakeSource()
