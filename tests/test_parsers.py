import json

import pytest

from pi_monitor.services import parsers


@pytest.mark.parametrize(
    "raw", [None, "", "   \n", "abc", "12abc", "nan", "inf", "45_678", "٤٥٦٧٨"]
)
def test_parse_cpu_temp_absent(raw):
    assert parsers.parse_cpu_temp(raw) is None


def test_parse_cpu_temp_millidegrees():
    assert parsers.parse_cpu_temp("45678") == pytest.approx(45.678)
    assert parsers.parse_cpu_temp("51540\n") == pytest.approx(51.54)


def test_parse_cpu_freq_khz_to_mhz():
    assert parsers.parse_cpu_freq("1500000\n") == pytest.approx(1500.0)
    assert parsers.parse_cpu_freq("600000") == pytest.approx(600.0)


@pytest.mark.parametrize("raw", [None, "", "fast", "-inf"])
def test_parse_cpu_freq_absent(raw):
    assert parsers.parse_cpu_freq(raw) is None


def test_parse_model_strips_nul_terminator():
    assert parsers.parse_model("Raspberry Pi 4 Model B\u0000") == "Raspberry Pi 4 Model B"


def test_parse_model_strips_embedded_nul_and_whitespace():
    assert parsers.parse_model("  Raspberry Pi\x00 Zero 2 W\n\x00") == "Raspberry Pi Zero 2 W"


@pytest.mark.parametrize("raw", [None, "", "\x00", " \x00\n "])
def test_parse_model_absent(raw):
    assert parsers.parse_model(raw) is None


def test_parse_loadavg_ignores_trailing_fields():
    loadavg = parsers.parse_loadavg("0.10 0.25 0.30 1/200 1234")

    assert loadavg.load_1m == pytest.approx(0.10)
    assert loadavg.load_5m == pytest.approx(0.25)
    assert loadavg.load_15m == pytest.approx(0.30)


def test_loadavg_serializes_with_window_keys():
    loadavg = parsers.parse_loadavg("1.5 2.5 3.5 2/300 42\n")

    assert json.loads(loadavg.model_dump_json(by_alias=True)) == {
        "1m": 1.5,
        "5m": 2.5,
        "15m": 3.5,
    }


@pytest.mark.parametrize(
    "raw",
    [None, "", "0.10 0.25", "0.10 abc 0.30 1/200 1234", "0.10 0.25 nan", "inf 0 0"],
)
def test_parse_loadavg_is_all_or_nothing(raw):
    assert parsers.parse_loadavg(raw) is None


@pytest.mark.parametrize(
    "total_kb, avail_kb",
    [(3884136, 2942256), (1048576, 0), (1048576, 1048576), (16384000, 123)],
)
def test_parse_meminfo_invariants(total_kb, avail_kb):
    mem = parsers.parse_meminfo(
        f"MemTotal: {total_kb} kB\nMemFree: 1 kB\nMemAvailable: {avail_kb} kB\n"
    )

    assert mem.total_gb == pytest.approx(total_kb / 1048576)
    assert mem.avail_gb == pytest.approx(avail_kb / 1048576)
    assert mem.used_gb == pytest.approx(mem.total_gb - mem.avail_gb)
    assert mem.used_pct == pytest.approx(mem.used_gb / mem.total_gb * 100)


def test_parse_meminfo_one_gib_half_used():
    mem = parsers.parse_meminfo("MemTotal: 1048576 kB\nMemAvailable: 524288 kB\n")

    assert mem.total_gb == pytest.approx(1.0)
    assert mem.used_gb == pytest.approx(0.5)
    assert mem.avail_gb == pytest.approx(0.5)
    assert mem.used_pct == pytest.approx(50.0)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "MemTotal: 1048576 kB\nMemFree: 10 kB\n",
        "MemAvailable: 10 kB\n",
        "MemTotal: lots kB\nMemAvailable: 10 kB\n",
        "MemTotal: 0 kB\nMemAvailable: 0 kB\n",
        "garbage",
    ],
)
def test_parse_meminfo_absent(raw):
    assert parsers.parse_meminfo(raw) is None


def test_parse_df_data_row():
    output = (
        "Filesystem 1K-blocks Used Available Use% Mounted on\n"
        "/dev/root 1048576 524288 524288 50% /\n"
    )

    disk = parsers.parse_df(output)

    assert disk.size_gb == pytest.approx(1.0)
    assert disk.used_gb == pytest.approx(0.5)
    assert disk.avail_gb == pytest.approx(0.5)
    assert disk.use_pct == "50%"


def test_parse_df_passes_use_percent_through():
    output = (
        "Filesystem     1024-blocks    Used Available Capacity Mounted on\n"
        "/dev/mmcblk0p2    29982472 1876004  26841704       7% /\n"
    )

    assert parsers.parse_df(output).use_pct == "7%"


@pytest.mark.parametrize(
    "output",
    [
        None,
        "",
        "Filesystem 1K-blocks Used Available Use% Mounted on\n",
        "Filesystem 1K-blocks Used Available Use% Mounted on\n/dev/root 1048576 524288\n",
        "Filesystem 1K-blocks Used Available Use% Mounted on\n/dev/root big 524288 524288 50% /\n",
    ],
)
def test_parse_df_absent(output):
    assert parsers.parse_df(output) is None


def test_parse_uptime_first_field():
    assert parsers.parse_uptime("12345.67 45678.90\n") == pytest.approx(12345.67)


@pytest.mark.parametrize("raw", [None, "", "  ", "up 5 days", "nan 1.0"])
def test_parse_uptime_absent(raw):
    assert parsers.parse_uptime(raw) is None
