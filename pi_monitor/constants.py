# Core config
API_STR: str = "/api"
PROJECT_NAME: str = "pi-monitor"
PROJECT_DESCRIPTION: str = (
    "The pi-monitor API reports point-in-time host telemetry as JSON, with a live stream."
)

# Kernel pseudo-files
THERMAL_ZONE_FILE: str = "/sys/class/thermal/thermal_zone0/temp"
CPUFREQ_FILE: str = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
DEVICE_TREE_MODEL_FILE: str = "/proc/device-tree/model"
LOADAVG_FILE: str = "/proc/loadavg"
MEMINFO_FILE: str = "/proc/meminfo"
UPTIME_FILE: str = "/proc/uptime"

# Linux programs
DF_FILE: str = "df"
DF_ROOT_CMD: list = [DF_FILE, "-k", "-P", "/"]

# Unit conversions
KIB_PER_GIB: int = 1024 * 1024
MILLI: int = 1000

# Streaming
STREAM_INTERVAL: float = 1.0
