# fullfetch

A terminal tool that prints a summary of your system, optionally under an
ASCII-art logo. It can show the operating system, host model, hostname,
kernel, uptime, boot time, process count, CPU, GPU, memory, swap, disks,
local IPv4 addresses, battery, locale, a colour palette and a credits line.
Which sections appear, in which order and in which colours is driven by a
JSON configuration.

## Installation

```
pip install .
```

## Usage

Print the system summary:

```
fullfetch
```

Options (each also accepted with one or two leading dashes):

```
fullfetch -h, --help      Show the available commands
fullfetch -c              Show where the config file is located
fullfetch -gen            Write a customisable config file
fullfetch -v, --version   Print the version and exit
```

If several options are given, `-v` wins, then `-gen`, then `-c`, then `-h`.
When the config file cannot be read or is not valid JSON of the expected
shape, an error is printed to standard error and the exit status is 1.

## Configuration

Without a config file, fullfetch uses its built-in defaults. The config
file is looked up in this order, and the first one found is used:

1. `config.json` in the directory of the program being run
2. `config.json` in the current working directory
3. `%APPDATA%\fullfetch\config.json` on Windows
4. `~/.config/fullfetch/config.json` on Linux

`fullfetch -gen` writes the built-in defaults as `fullfetch/config.json`
inside your user configuration directory: `%APPDATA%` on Windows,
`~/Library/Application Support` on macOS, otherwise `$XDG_CONFIG_HOME` or
`~/.config`. When run under `sudo`, the invoking user's `~/.config` is used.
If a config file is already found by the lookup above, nothing is written.
Note that a file written to a directory that is not in the lookup list
(for example on macOS, or with a custom `$XDG_CONFIG_HOME`) is not picked
up automatically.

The file selects a named entry from each of several tables (top-level keys
are matched case-insensitively; unknown keys are ignored):

- `scheme` / `schemes`: which sections are switched on (`true`/`false`)
- `order` / `orders`: the order the sections are printed in
- `colorScheme` / `colorSchemes`: a colour name for each section
- `art` / `arts`: the ASCII-art logo, as a list of lines

The built-in defaults offer the schemes `all`, `minimal` and `custom`, the
orders `default` and `custom`, the colour schemes `default`, `custom`,
`dark` and `mono`, and the arts `default`, `biglogo` and `smalllogo`.

The available sections are `art`, `title`, `os`, `host`, `hostname`,
`kernel`, `uptime`, `bootime`, `procs`, `cpu`, `gpu`, `memory`, `swap`,
`disk`, `ip`, `battery`, `locale`, `colors` and `credits`. A section is
printed only when it appears in the selected order and is enabled in the
selected scheme.

Colour names are `Reset`, `Black`, `Red`, `Green`, `Yellow`, `Blue`,
`Magenta`, `Cyan`, `Gray`, `White`, `Orange`, `Purple`, `Pink`, `Brown`,
`DarkGray` and the `Light…` variants `LightGray`, `LightRed`, `LightGreen`,
`LightYellow`, `LightBlue`, `LightMagenta`, `LightCyan`, `LightOrange`,
`LightPurple`, `LightPink`, `LightBrown`, `LightBlack` and `LightWhite`.
An unknown or missing colour name leaves the label uncoloured.

## Using it from Python

```python
import sys

from fullfetch.config import find_config_path, load_config
from fullfetch.render import print_report, render_sections

config = load_config(find_config_path())  # None path -> built-in defaults
print_report(config, sys.stdout)

for text in render_sections(config):      # or collect the section texts
    ...
```

`fullfetch.config.Config` exposes the selected parts of a configuration
through `selected_scheme()`, `selected_order()`, `selected_colors()`,
`selected_art()` and `enabled_sections()`. `fullfetch.defaults` provides
the built-in configuration as data (`default_config()`) or JSON text
(`default_config_text()`). `fullfetch.info` holds one `render_*` function
per section plus helpers such as `format_uptime()`.

## What it does not do

- CPU usage is not measured; the CPU line shows core count, model and
  frequency only.
- The GPU line relies on external tools (`lspci`, `wmic` or
  `system_profiler`); without them an error line is shown instead.
- The `ip` section resolves the machine's own hostname; if that lookup
  fails, the error is not caught.