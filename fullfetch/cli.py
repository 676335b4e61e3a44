"""Command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from fullfetch.config import APP_DIR, CONFIG_NAME, ConfigError, find_config_path, load_config
from fullfetch.defaults import default_config_text
from fullfetch.render import print_report

VERSION = "2.1.1"

_HELP = (
    "\nAvailable commands:\n"
    "-h, --help     ->      Shows all available commands\n"
    "-c             ->      Shows config file location\n"
    "-gen           ->      Generate customizable config file\n"
    "-v, --version  ->      Displays the current version\n"
)


def _user_config_dir() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _sudo_user_config_dir(name: str) -> Path | None:
    try:
        import pwd
    except ImportError:
        return None
    try:
        return Path(pwd.getpwnam(name).pw_dir) / ".config"
    except KeyError:
        return None


def target_config_path() -> Path:
    """Where ``-gen`` writes the config; under sudo, the invoking user's home."""
    base: Path | None = None
    sudo_user = os.environ.get("SUDO_USER", "")
    if sudo_user:
        base = _sudo_user_config_dir(sudo_user)
    if base is None:
        base = _user_config_dir()
    return base / APP_DIR / CONFIG_NAME


def generate_config(path: str | os.PathLike[str]) -> Path:
    """Write the built-in config to ``path``, creating its directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(default_config_text() + "\n", encoding="utf-8")
    return target


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fullfetch", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--h", "-help", "--help", dest="help", action="store_true")
    parser.add_argument("-c", "--c", dest="show_config", action="store_true")
    parser.add_argument("-v", "--v", "-version", "--version", dest="version", action="store_true")
    parser.add_argument("-gen", "--gen", dest="generate", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)

    if args.version:
        print("fullfetch version", VERSION)
        return 0

    path = find_config_path()

    if args.generate:
        if path is not None:
            print("Config file already exist, operation aborted :/")
            return 0
        target = target_config_path()
        try:
            generate_config(target)
        except OSError:
            print(
                "Error, the creation of the config file requires sudo privileges. "
                "Run the command again with 'sudo fullfetch -gen'"
            )
            return 1
        print("Config file created successfully, you can now edit it at", target)
        return 0

    if args.show_config:
        if path is not None:
            print("The config file is located at: ", path)
        else:
            print("Config file doesn't exists yet. To create it, run 'fullfetch -gen' to create it")
        return 0

    if args.help:
        print(_HELP)
        return 0

    print("\n \n", end="")
    try:
        config = load_config(path)
    except ConfigError as exc:
        print(f"Error opening config file: {exc}", file=sys.stderr)
        return 1
    print_report(config, sys.stdout)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())