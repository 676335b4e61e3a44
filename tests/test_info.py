from types import SimpleNamespace

import psutil
import pytest

from fullfetch import info
from fullfetch.config import Config


@pytest.mark.parametrize("minutes", [0, 1, 30, 59])
def test_format_uptime_under_an_hour(minutes):
    assert info.format_uptime(minutes * 60 + 5) == f"{minutes} mins"


@pytest.mark.parametrize("hours,minutes", [(1, 5), (3, 59), (23, 1)])
def test_format_uptime_hours_and_minutes(hours, minutes):
    assert info.format_uptime(hours * 3600 + minutes * 60) == f"{hours} hours {minutes} mins"


@pytest.mark.parametrize("hours", [1, 2, 23])
def test_format_uptime_whole_hours(hours):
    assert info.format_uptime(hours * 3600) == f"{hours} hours"


@pytest.mark.parametrize("days,hours,minutes", [(1, 2, 3), (4, 23, 0), (10, 1, 59)])
def test_format_uptime_days(days, hours, minutes):
    seconds = days * 86400 + hours * 3600 + minutes * 60
    assert info.format_uptime(seconds) == f"{days} days {hours} hours {minutes} mins"


@pytest.mark.parametrize("days,minutes", [(1, 0), (2, 17)])
def test_format_uptime_days_on_whole_day(days, minutes):
    assert info.format_uptime(days * 86400 + minutes * 60) == f"{days} days {minutes} mins"


@pytest.mark.parametrize(
    "percent,expected",
    [(0, "\033[32m"), (49, "\033[32m"), (50, "\033[33m"), (89, "\033[33m"), (90, "\033[31m"), (100, "\033[31m")],
)
def test_usage_color(percent, expected):
    assert info.usage_color(percent) == expected


@pytest.mark.parametrize(
    "percent,expected",
    [(100, "\033[32m"), (51, "\033[32m"), (50, "\033[33m"), (21, "\033[33m"), (20, "\033[31m"), (0, "\033[31m")],
)
def test_battery_color(percent, expected):
    assert info.battery_color(percent) == expected


def test_gpu_lines_from_output_picks_graphics_lines():
    output = (
        "00:00.0 Host bridge: Intel Corporation Device\n"
        "01:00.0 VGA compatible controller: NVIDIA Corporation GA104\r\n"
        "02:00.0 Audio device: Realtek\n"
        "  AMD Radeon RX 6600  \n"
    )
    assert info.gpu_lines_from_output(output) == [
        "01:00.0 VGA compatible controller: NVIDIA Corporation GA104",
        "AMD Radeon RX 6600",
    ]


def test_gpu_lines_from_output_empty():
    assert info.gpu_lines_from_output("Host bridge\nUSB controller\n") == []


def test_render_art_uses_selected_art():
    config = Config(art="mine", arts={"mine": ["ab", "cd"]})
    assert info.render_art(config) == "ab\ncd\n\n"


def test_render_art_missing_art_is_blank_line():
    assert info.render_art(Config(art="nothing")) == "\n"


def test_render_title(monkeypatch):
    monkeypatch.setattr(info.getpass, "getuser", lambda: "alice")
    monkeypatch.setattr(info.socket, "gethostname", lambda: "box")
    first, second, tail = info.render_title("", "").split("\n")
    assert first == "alice@box "
    assert second == "-" * len("alice@box")
    assert tail == ""


def test_render_title_underline_counts_escape_codes(monkeypatch):
    monkeypatch.setattr(info.getpass, "getuser", lambda: "bob")
    monkeypatch.setattr(info.socket, "gethostname", lambda: "pc")
    text = info.render_title("\033[31m", "\033[0m")
    header, underline = text.rstrip("\n").split(" \n")
    assert header == "\033[31mbob\033[0m@\033[31mpc\033[0m"
    assert underline == "-" * len(header)


def test_render_locale(monkeypatch):
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    assert info.render_locale("<", ">") == "<Locale:> en_US.UTF-8\n"


def test_render_locale_unset(monkeypatch):
    monkeypatch.delenv("LANG", raising=False)
    assert info.render_locale("<", ">") == ""


def test_render_palette_has_sixteen_swatches():
    text = info.render_palette("", "")
    assert text.startswith("\n\n")
    rows = text[2:].split("\n")
    assert rows[2] == ""
    for row, codes in zip(rows[:2], (range(8), range(8, 16))):
        assert row == "".join(f"\x1b[48;5;{code}m  " for code in codes) + "\x1b[0m"


def test_render_credits_wrapped_in_colors():
    text = info.render_credits("<", ">")
    assert text.startswith("<Developed by: ")
    assert text.endswith(">\n")


def test_render_memory(monkeypatch):
    monkeypatch.setattr(
        psutil, "virtual_memory", lambda: SimpleNamespace(used=3_000_000_000, total=4_000_000_000)
    )
    assert info.render_memory("", "") == "Memory: 3000MB / 4000MB (\033[33m75%)\n"


def test_render_swap(monkeypatch):
    mib = 1024 * 1024
    monkeypatch.setattr(psutil, "swap_memory", lambda: SimpleNamespace(used=10 * mib, total=1000 * mib))
    text = info.render_swap("", "")
    assert text == "Swap: 10MB / 1000MB (\033[32m1%)\n"


def test_render_disk(monkeypatch):
    parts = [SimpleNamespace(mountpoint="/"), SimpleNamespace(mountpoint="/home")]
    usages = {
        "/": SimpleNamespace(used=95_000_000_000, total=100_000_000_000),
        "/home": SimpleNamespace(used=20_000_000_000, total=100_000_000_000),
    }
    monkeypatch.setattr(psutil, "disk_partitions", lambda all=False: parts)
    monkeypatch.setattr(psutil, "disk_usage", lambda path: usages[path])
    lines = info.render_disk("", "").splitlines()
    assert lines == [
        "Disk: / - 95GB / 100GB (\033[31m95%)",
        "Disk: /home - 20GB / 100GB (\033[32m20%)",
    ]


def test_render_disk_stops_on_usage_error(monkeypatch):
    parts = [SimpleNamespace(mountpoint="/a"), SimpleNamespace(mountpoint="/b")]

    def broken(path):
        raise OSError("unreadable")

    monkeypatch.setattr(psutil, "disk_partitions", lambda all=False: parts)
    monkeypatch.setattr(psutil, "disk_usage", broken)
    assert info.render_disk("", "") == "Error retrieving disk usage unreadable\n"


def test_render_battery_low_discharging(monkeypatch):
    monkeypatch.setattr(
        psutil,
        "sensors_battery",
        lambda: SimpleNamespace(percent=15.7, power_plugged=False, secsleft=100),
        raising=False,
    )
    assert info.render_battery("", "") == "Battery: \033[31m15% Discharging\n"


def test_render_battery_absent(monkeypatch):
    monkeypatch.setattr(psutil, "sensors_battery", lambda: None, raising=False)
    assert info.render_battery("", "") == ""


def test_render_procs_counts_pids(monkeypatch):
    monkeypatch.setattr(psutil, "pids", lambda: [1, 2, 3, 4])
    assert info.render_procs("[", "]") == "[Processes:] 4\n"


def test_render_host_falls_back_to_unknown_or_model():
    text = info.render_host("", "")
    assert text.startswith("Host: ")
    assert text.endswith("\n")
    assert len(text.strip()) > len("Host:")