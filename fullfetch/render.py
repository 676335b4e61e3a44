"""Assembling the report from the configured sections."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, TextIO

from fullfetch import info
from fullfetch.config import Config

_SGR_COLORS = {
    "Reset": 0,
    "Black": 30,
    "Red": 31,
    "Green": 32,
    "Yellow": 33,
    "Blue": 34,
    "Magenta": 35,
    "Cyan": 36,
    "Gray": 37,
    "White": 97,
}

_PALETTE_256 = {
    "Orange": 208,
    "Purple": 129,
    "Pink": 200,
    "Brown": 94,
    "LightGray": 245,
    "DarkGray": 236,
    "LightRed": 196,
    "LightGreen": 46,
    "LightYellow": 226,
    "LightBlue": 33,
    "LightMagenta": 201,
    "LightCyan": 51,
    "LightOrange": 214,
    "LightPurple": 171,
    "LightPink": 213,
    "LightBrown": 130,
    "LightBlack": 16,
    "LightWhite": 255,
}

COLORS: dict[str, str] = {
    **{name: f"\033[{code}m" for name, code in _SGR_COLORS.items()},
    **{name: f"\033[38;5;{index}m" for name, index in _PALETTE_256.items()},
}

_Section = Callable[[str, str], str]

_SECTIONS: dict[str, _Section] = {
    "title": info.render_title,
    "os": info.render_os,
    "host": info.render_host,
    "hostname": info.render_hostname,
    "kernel": info.render_kernel,
    "uptime": info.render_uptime,
    "bootime": info.render_boot_time,
    "procs": info.render_procs,
    "cpu": info.render_cpu,
    "gpu": info.render_gpu,
    "memory": info.render_memory,
    "swap": info.render_swap,
    "disk": info.render_disk,
    "ip": info.render_network,
    "battery": info.render_battery,
    "locale": info.render_locale,
    "colors": info.render_palette,
    "credits": info.render_credits,
}


def color_code(name: str) -> str:
    """The escape sequence for a colour name, empty for an unknown name."""
    return COLORS.get(name, "")


def render_sections(config: Config) -> Iterator[str]:
    """Yield the text of each enabled section in the configured order."""
    colors = config.selected_colors()
    reset = color_code("Reset")
    for name in config.enabled_sections():
        if name == "art":
            yield info.render_art(config)
            continue
        section = _SECTIONS.get(name)
        if section is None:
            continue
        yield section(color_code(colors.get(name, "")), reset)


def print_report(config: Config, stream: TextIO | None = None) -> None:
    """Write every enabled section to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    for text in render_sections(config):
        out.write(text)
        out.flush()