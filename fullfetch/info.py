"""Collectors that turn system facts into the report's text lines."""

from __future__ import annotations

import getpass
import os
import platform
import socket
import subprocess
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import psutil

if TYPE_CHECKING:
    from fullfetch.config import Config

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"

# Matched against the lower-cased line.
_GPU_KEYWORDS = (
    "nvidia",
    "vga compatible controller",
    "radeon",
    "arc",
    "graphics",
)


def _run(args: list[str]) -> str:
    """Run a command and return its standard output as text."""
    completed = subprocess.run(args, capture_output=True, check=True)
    return completed.stdout.decode("utf-8", errors="replace")


def _percent(used: int, total: int) -> int:
    return (used * 100) // total if total else 0


def format_uptime(seconds: int) -> str:
    """Describe an uptime in days, hours and minutes."""
    seconds = int(seconds)
    if seconds < 3600:
        return f"{seconds // 60} mins"
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    days = hours // 24
    if days > 0:
        if hours % 24 == 0:
            return f"{days} days {minutes} mins"
        return f"{days} days {hours % 24} hours {minutes} mins"
    if minutes:
        return f"{hours} hours {minutes} mins"
    return f"{hours} hours"


def usage_color(percent: int) -> str:
    """Colour for a usage figure: green, yellow from 50, red from 90."""
    if percent >= 90:
        return RED
    if percent >= 50:
        return YELLOW
    return GREEN


def battery_color(percent: int) -> str:
    """Colour for a charge level: red up to 20, yellow up to 50, else green."""
    if percent <= 20:
        return RED
    if percent <= 50:
        return YELLOW
    return GREEN


def gpu_lines_from_output(output: str) -> list[str]:
    """Pick the lines of a device listing that describe a graphics adapter."""
    return [
        line.strip()
        for line in output.split("\n")
        if any(keyword in line.lower() for keyword in _GPU_KEYWORDS)
    ]


def render_title(color: str, reset: str) -> str:
    """The user@host header with an underline of matching length."""
    header = f"{color}{getpass.getuser()}{reset}@{color}{socket.gethostname()}{reset}"
    underline = "-" * len(header.encode("utf-8"))
    return f"{header} \n{underline}\n"


def render_art(config: "Config") -> str:
    """The chosen ASCII art followed by a blank line."""
    return "".join(f"{line}\n" for line in config.selected_art()) + "\n"


def _os_release() -> dict[str, str]:
    fields: dict[str, str] = {}
    for candidate in ("/etc/os-release", "/usr/lib/os-release"):
        try:
            text = Path(candidate).read_text(encoding="utf-8")
        except OSError:
            continue
        for line in text.splitlines():
            key, sep, value = line.partition("=")
            if sep:
                fields[key.strip()] = value.strip().strip('"').strip("'")
        break
    return fields


def _platform_and_version() -> tuple[str, str]:
    if sys.platform.startswith("linux"):
        release = _os_release()
        return release.get("ID", ""), release.get("VERSION_ID", "")
    if sys.platform == "darwin":
        return "darwin", platform.mac_ver()[0]
    if sys.platform == "win32":
        return f"Microsoft Windows {platform.release()}", platform.version()
    return platform.system().lower(), platform.release()


def render_os(color: str, reset: str) -> str:
    name, version = _platform_and_version()
    return f"{color}OS:{reset} {name} {version} {platform.machine()}\n"


def render_hostname(color: str, reset: str) -> str:
    return f"{color}Hostname:{reset} {socket.gethostname()}\n"


def _host_model() -> str:
    try:
        if sys.platform.startswith("linux"):
            return Path("/sys/devices/virtual/dmi/id/product_name").read_text().strip()
        if sys.platform == "win32":
            lines = _run(["wmic", "computersystem", "get", "model"]).split("\n")
            return lines[1].strip() if len(lines) > 1 else ""
        if sys.platform == "darwin":
            return _run(["sysctl", "-n", "hw.model"]).strip()
    except (OSError, subprocess.CalledProcessError):
        pass
    return ""


def render_host(color: str, reset: str) -> str:
    model = _host_model() or "Unknown"
    return f"{color}Host:{reset} {model}\n"


def render_procs(color: str, reset: str) -> str:
    return f"{color}Processes:{reset} {len(psutil.pids())}\n"


def render_kernel(color: str, reset: str) -> str:
    return f"{color}Kernel:{reset} {platform.release()}\n"


def render_uptime(color: str, reset: str) -> str:
    uptime = max(0, int(time.time() - psutil.boot_time()))
    return f"{color}Uptime:{reset} {format_uptime(uptime)}\n"


def render_boot_time(color: str, reset: str) -> str:
    booted = datetime.fromtimestamp(int(psutil.boot_time())).astimezone()
    stamp = booted.strftime("%Y-%m-%d %H:%M:%S %z %Z")
    return f"{color}Boot time:{reset} {stamp}\n"


def _cpu_model() -> str:
    try:
        if sys.platform.startswith("linux"):
            for line in Path("/proc/cpuinfo").read_text().splitlines():
                key, sep, value = line.partition(":")
                if sep and key.strip() == "model name":
                    return value.strip()
        elif sys.platform == "darwin":
            return _run(["sysctl", "-n", "machdep.cpu.brand_string"]).strip()
    except (OSError, subprocess.CalledProcessError):
        pass
    return platform.processor()


def render_cpu(color: str, reset: str) -> str:
    cores = psutil.cpu_count(logical=False) or 0
    freq = psutil.cpu_freq()
    mhz = 0.0
    if freq is not None:
        mhz = freq.max or freq.current or 0.0
    return f"{color}CPU:{reset} ({cores}) {_cpu_model()} @ {mhz / 1000:.2f}GHz\n"


def render_gpu(color: str, reset: str) -> str:
    if sys.platform == "win32":
        command = ["wmic", "path", "win32_VideoController", "get", "name"]
    elif sys.platform.startswith("linux"):
        command = ["lspci"]
    elif sys.platform == "darwin":
        command = ["system_profiler", "SPDisplaysDataType"]
    else:
        return "OS not supported\n"
    try:
        output = _run(command)
    except (OSError, subprocess.CalledProcessError) as exc:
        return f"Error retrieving GPU {exc}\n"
    return "".join(
        f"{color}GPU:{reset} {line}\n" for line in gpu_lines_from_output(output)
    )


def render_memory(color: str, reset: str) -> str:
    memory = psutil.virtual_memory()
    used = memory.used // 1_000_000
    total = memory.total // 1_000_000
    percent = _percent(used, total)
    return (
        f"{color}Memory:{reset} {used}MB / {total}MB "
        f"({usage_color(percent)}{percent}%{reset})\n"
    )


def render_swap(color: str, reset: str) -> str:
    swap = psutil.swap_memory()
    used = swap.used // 1024 // 1024
    total = swap.total // 1024 // 1024
    percent = _percent(used, total)
    return (
        f"{color}Swap:{reset} {used}MB / {total}MB "
        f"({usage_color(percent)}{percent}%{reset})\n"
    )


def render_disk(color: str, reset: str) -> str:
    try:
        partitions = psutil.disk_partitions(all=False)
    except OSError as exc:
        return f"Error retrieving disk partitions {exc}\n"
    lines: list[str] = []
    for part in partitions:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except OSError as exc:
            lines.append(f"Error retrieving disk usage {exc}\n")
            break
        percent = _percent(usage.used, usage.total)
        lines.append(
            f"{color}Disk:{reset} {part.mountpoint} - "
            f"{usage.used // 1_000_000_000}GB / {usage.total // 1_000_000_000}GB "
            f"({usage_color(percent)}{percent}%{reset})\n"
        )
    return "".join(lines)


def render_network(color: str, reset: str) -> str:
    """Local IPv4 addresses of this host; name lookup errors propagate."""
    infos = socket.getaddrinfo(socket.gethostname(), None)
    addresses = dict.fromkeys(str(info[4][0]) for info in infos)
    return "".join(
        f"{color}Local IP:{reset} {address}\n"
        for address in addresses
        if address.count(".") == 3
    )


def render_credits(color: str, reset: str) -> str:
    return f"{color}Developed by: the fullfetch contributors :3{reset}\n"


def render_palette(color: str, reset: str) -> str:
    """Two rows of swatches for the 16 basic terminal colours."""
    first = "".join(f"\x1b[48;5;{code}m  " for code in range(8))
    second = "".join(f"\x1b[48;5;{code}m  " for code in range(8, 16))
    return f"\n\n{first}\x1b[0m\n{second}\x1b[0m\n"


def _battery_state(percent: int, plugged: bool | None) -> str:
    if plugged is None:
        return "Unknown"
    if plugged:
        return "Full" if percent >= 100 else "Charging"
    return "Discharging"


def render_battery(color: str, reset: str) -> str:
    sensor = getattr(psutil, "sensors_battery", None)
    if sensor is None:
        return ""
    try:
        battery = sensor()
    except (OSError, NotImplementedError):
        return ""
    if battery is None:
        return ""
    percent = int(battery.percent)
    state = _battery_state(percent, battery.power_plugged)
    return (
        f"{color}Battery:{reset} {battery_color(percent)}{percent}%{reset} {state}\n"
    )


def render_locale(color: str, reset: str) -> str:
    locale = os.environ.get("LANG", "")
    if not locale:
        return ""
    return f"{color}Locale:{reset} {locale}\n"