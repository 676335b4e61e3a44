"""Loading and querying the fetch configuration."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from fullfetch.defaults import default_config

CONFIG_NAME = "config.json"
APP_DIR = "fullfetch"


class ConfigError(ValueError):
    """Raised when a configuration cannot be read or has the wrong shape."""


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{where}: expected a string, got {type(value).__name__}")
    return value


def _boolean(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: expected a boolean, got {type(value).__name__}")
    return value


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{where}: expected an object, got {type(value).__name__}")
    return dict(value)


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected an array, got {type(value).__name__}")
    return [_string(item, f"{where}[{pos}]") for pos, item in enumerate(value)]


def _nested(inner: Callable[[Any, str], Any]) -> Callable[[Any, str], dict[str, Any]]:
    def parse(value: Any, where: str) -> dict[str, Any]:
        return {
            name: inner(item, f"{where}.{name}")
            for name, item in _mapping(value, where).items()
        }

    return parse


def _bool_map(value: Any, where: str) -> dict[str, bool]:
    return {name: _boolean(item, f"{where}.{name}") for name, item in _mapping(value, where).items()}


def _string_map(value: Any, where: str) -> dict[str, str]:
    return {name: _string(item, f"{where}.{name}") for name, item in _mapping(value, where).items()}


# JSON key (matched case-insensitively) -> (attribute, parser)
_FIELDS: dict[str, tuple[str, Callable[[Any, str], Any]]] = {
    "scheme": ("scheme", _string),
    "schemes": ("schemes", _nested(_bool_map)),
    "order": ("order", _string),
    "orders": ("orders", _nested(_string_list)),
    "colorscheme": ("color_scheme", _string),
    "colorschemes": ("color_schemes", _nested(_string_map)),
    "art": ("art", _string),
    "arts": ("arts", _nested(_string_list)),
}


@dataclass
class Config:
    """Which sections to show, in what order, with which colours and art."""

    scheme: str = ""
    schemes: dict[str, dict[str, bool]] = field(default_factory=dict)
    order: str = ""
    orders: dict[str, list[str]] = field(default_factory=dict)
    color_scheme: str = ""
    color_schemes: dict[str, dict[str, str]] = field(default_factory=dict)
    art: str = ""
    arts: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> "Config":
        """Build a config from decoded JSON; unknown keys are ignored."""
        values: dict[str, Any] = {}
        for key, raw in _mapping(data, "config").items():
            spec = _FIELDS.get(str(key).lower())
            if spec is None or raw is None:
                continue
            attribute, parse = spec
            values[attribute] = parse(raw, key)
        return cls(**values)

    def selected_scheme(self) -> dict[str, bool]:
        """The section switches of the chosen scheme, empty if it is missing."""
        return self.schemes.get(self.scheme, {})

    def selected_order(self) -> list[str]:
        """The section order of the chosen order, empty if it is missing."""
        return self.orders.get(self.order, [])

    def selected_colors(self) -> dict[str, str]:
        """The colour names of the chosen colour scheme, empty if it is missing."""
        return self.color_schemes.get(self.color_scheme, {})

    def selected_art(self) -> list[str]:
        """The lines of the chosen art, empty if it is missing."""
        return self.arts.get(self.art, [])

    def enabled_sections(self) -> list[str]:
        """Sections of the chosen order that the chosen scheme switches on."""
        switches = self.selected_scheme()
        return [name for name in self.selected_order() if switches.get(name, False)]


def find_config_path() -> Path | None:
    """Locate the config file, or return None when there is none."""
    candidates: list[Path] = []
    if sys.argv and sys.argv[0]:
        candidates.append(Path(sys.argv[0]).resolve().parent / CONFIG_NAME)
    try:
        candidates.append(Path.cwd() / CONFIG_NAME)
    except OSError:
        pass
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            candidates.append(Path(appdata) / APP_DIR / CONFIG_NAME)
    if sys.platform.startswith("linux"):
        try:
            candidates.append(Path.home() / ".config" / APP_DIR / CONFIG_NAME)
        except RuntimeError:
            pass
    return next((path for path in candidates if path.exists()), None)


def load_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read the config at ``path``, or the built-in one when ``path`` is None."""
    if path is None:
        return Config.from_mapping(default_config())
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot open config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc
    return Config.from_mapping(data)