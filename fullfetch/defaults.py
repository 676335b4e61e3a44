"""Built-in configuration used when no config file is present."""

from __future__ import annotations

import copy
import json
from typing import Any

# Art blocks mark the right edge of every row with "|" so that trailing
# blanks survive editing; the marker is removed when the rows are read.
_DEFAULT_ART_BLOCK = """\
               @%%%%%%@@%                                                       |
           %@@@@#**###%%@@@@%                                                   |
         #@%#***#######%%%%%@@                                                  |
         #@*#%%%%@@@@@@@@@@%%@                                                  |
         #@#%%=-:-======+*@%%@  @@@@@@@@@@@@@@@@@@@@@@#  %@@@@                  |
         #@#%%=:.:======+*@%%@  @-.....:@:.=@@..+#..#%   %=..%                  |
         #@#%%@@@@@@@@@@@@@%%@  @-.-@@@@@:.=@@..+#..#%   %=..%                  |
         #@#%%=:.:======+*@%%@  @-....-@@:.=@@..+#..#%   %=..%                  |
         #@#%%=:.:======+*@%%@  @-.:###@@:.=@@..+#..#@@@@@=..%@@@@@             |
         #@#%%=:.:======+*@%%@  @-.-@%%@@*:....=##.......%=.......@             |
         #@#%@@@@@@@@@@@@@@%%@  @@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@%%%#        |
         #@#%%=:.:======+*@%%@  @-.....=#.....:%......=@%....=%#..@*.-%         |
         #@#%%=:.:======+*@%%@  @-.=@@@@*..@@@@@@@-.+@@%.:%@=.=#..@*.-%         |
         #@#%%++=+******##@%%@  @-....*@*....:@@%@-.+@%%.:%@@@@#.....-%         |
         #@#%%@@@@@@@@@@@@@%%@  @-.=%%%@*..%%%@%%@-.+@%%.:%@+:+#..%+.-%         |
         #@#%%=::-======+*@%%@  @-.=@##%*.....:%%@-.+@%%+....-*#..@*.-%         |
         #@#%%+=-=+++++++*@%%@  @@@@%**#@@@@@@@@%@@@@%##@@@@@@@@@@@@@@%         |
         #@#%@%%@@@@@@@@@@@%%@                                                  |
         #@@%#*#%%%%%%%%%%%%@@                                                  |
           %@@@@@@@@@@@@@@@@%                                                   |
"""

_BIG_LOGO_BLOCK = """\
 FFFFFFFFFFFFFFFFFFFFFF                  lllllll lllllll    ffffffffffffffff                           tttt                             hhhhhhh|
 F::::::::::::::::::::F                  l:::::l l:::::l   f::::::::::::::::f                       ttt:::t                             h:::::h|
 F::::::::::::::::::::F                  l:::::l l:::::l  f::::::::::::::::::f                      t:::::t                             h:::::h |
 FF::::::FFFFFFFFF::::F                  l:::::l l:::::l  f::::::fffffff:::::f                      t:::::t                             h:::::h |
 F:::::F       FFFFFFuuuuuu    uuuuuu   l::::l  l::::l  f:::::f       ffffffeeeeeeeeeeee    ttttttt:::::ttttttt        cccccccccccccccch::::h hhhhh |
 F:::::F             u::::u    u::::u   l::::l  l::::l  f:::::f           ee::::::::::::ee  t:::::::::::::::::t      cc:::::::::::::::ch::::hh:::::hhh|
 F::::::FFFFFFFFFF   u::::u    u::::u   l::::l  l::::l f:::::::ffffff    e::::::eeeee:::::eet:::::::::::::::::t     c:::::::::::::::::ch::::::::::::::hh |
 F:::::::::::::::F   u::::u    u::::u   l::::l  l::::l f::::::::::::f   e::::::e     e:::::etttttt:::::::tttttt    c:::::::cccccc:::::ch:::::::hhh::::::h |
 F:::::::::::::::F   u::::u    u::::u   l::::l  l::::l f::::::::::::f   e:::::::eeeee::::::e      t:::::t          c::::::c     ccccccch::::::h   h::::::h|
 F::::::FFFFFFFFFF   u::::u    u::::u   l::::l  l::::l f:::::::ffffff   e:::::::::::::::::e       t:::::t          c:::::c             h:::::h     h:::::h|
 F:::::F             u::::u    u::::u   l::::l  l::::l  f:::::f         e::::::eeeeeeeeeee        t:::::t          c:::::c             h:::::h     h:::::h|
 F:::::F             u:::::uuuu:::::u   l::::l  l::::l  f:::::f         e:::::::e                 t:::::t    ttttttc::::::c     ccccccch:::::h     h:::::h|
 FF:::::::FF           u:::::::::::::::uul::::::ll::::::lf:::::::f        e::::::::e                t::::::tttt:::::tc:::::::cccccc:::::ch:::::h     h:::::h|
 F::::::::FF            u:::::::::::::::ul::::::ll::::::lf:::::::f         e::::::::eeeeeeee        tt::::::::::::::t c:::::::::::::::::ch:::::h     h:::::h|
 F::::::::FF             uu::::::::uu:::ul::::::ll::::::lf:::::::f          ee:::::::::::::e          tt:::::::::::tt  cc:::::::::::::::ch:::::h     h:::::h|
 FFFFFFFFFFF               uuuuuuuu  uuuullllllllllllllllfffffffff            eeeeeeeeeeeeee            ttttttttttt      cccccccccccccccchhhhhhh     hhhhhhh|
"""

_SMALL_LOGO_BLOCK = """\
FFFFFFF         lll lll  fff        tt           hh |
FF      uu   uu lll lll ff     eee  tt      cccc hh |
FFFF    uu   uu lll lll ffff ee   e tttt  cc     hhhhhh |
FF      uu   uu lll lll ff   eeeee  tt    cc     hh   hh |
FF       uuuu u lll lll ff    eeeee  tttt  ccccc hh   hh|
"""

_SECTIONS = (
    "art title os host hostname kernel uptime bootime procs cpu gpu "
    "memory swap disk ip colors locale battery credits"
).split()

_MINIMAL_ENABLED = frozenset("title os hostname cpu gpu memory swap battery".split())
_CUSTOM_ENABLED = frozenset(
    "title os hostname bootime cpu gpu memory swap disk ip locale battery".split()
)

_DEFAULT_ORDER = (
    "art title os host hostname kernel uptime bootime procs cpu gpu "
    "memory swap disk ip battery locale colors"
).split()
_CUSTOM_ORDER = "os hostname kernel uptime cpu gpu memory disk ip colors".split()

_DEFAULT_PALETTE = {
    "Purple": "title",
    "White": "os host locale",
    "Red": "hostname kernel",
    "Green": "uptime bootime procs battery",
    "Yellow": "cpu",
    "Blue": "gpu",
    "Magenta": "memory swap",
    "Cyan": "disk",
    "Gray": "ip",
}
_CUSTOM_PALETTE = {
    "Red": "os kernel",
    "Reset": "hostname",
    "Green": "uptime",
    "Yellow": "cpu",
    "Blue": "gpu",
    "Magenta": "memory",
    "Cyan": "disk",
    "Gray": "ip",
}
_DARK_PALETTE = {"White": "os"}


def _art(block: str) -> list[str]:
    return [line.removesuffix("|") for line in block.splitlines()]


def _scheme(sections: list[str], enabled: frozenset[str] | None = None) -> dict[str, bool]:
    return {name: enabled is None or name in enabled for name in sections}


def _palette(groups: dict[str, str]) -> dict[str, str]:
    palette = {
        section: color for color, sections in groups.items() for section in sections.split()
    }
    palette["Reset"] = "Reset"
    return palette


def _build() -> dict[str, Any]:
    default_palette = _palette(_DEFAULT_PALETTE)
    mono = {
        section: ("Reset" if section == "Reset" else "Orange")
        for section in default_palette
    }
    return {
        "scheme": "all",
        "schemes": {
            "all": _scheme(_SECTIONS),
            "minimal": _scheme(_SECTIONS, _MINIMAL_ENABLED),
            "custom": _scheme(
                [name for name in _SECTIONS if name != "host"], _CUSTOM_ENABLED
            ),
        },
        "order": "default",
        "orders": {"default": list(_DEFAULT_ORDER), "custom": list(_CUSTOM_ORDER)},
        "colorScheme": "mono",
        "colorSchemes": {
            "default": default_palette,
            "custom": _palette(_CUSTOM_PALETTE),
            "dark": _palette(_DARK_PALETTE),
            "mono": mono,
        },
        "art": "default",
        "arts": {
            "default": _art(_DEFAULT_ART_BLOCK),
            "biglogo": _art(_BIG_LOGO_BLOCK),
            "smalllogo": _art(_SMALL_LOGO_BLOCK),
        },
    }


_DEFAULT: dict[str, Any] = _build()


def default_config() -> dict[str, Any]:
    """Return a fresh copy of the built-in configuration as plain JSON data."""
    return copy.deepcopy(_DEFAULT)


def default_config_text() -> str:
    """Return the built-in configuration as JSON text, as written by ``-gen``."""
    return json.dumps(_DEFAULT, indent=4, ensure_ascii=False)