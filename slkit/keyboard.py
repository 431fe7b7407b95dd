"""Keyboard indicator formatting and XKB layout name parsing."""

from __future__ import annotations

import re

_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:_]")


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps lock ('c') and num lock ('n') indicators.

    A letter followed by '?' appears, case kept, only when its indicator is
    on; otherwise it always appears, upper case when on and lower when off.
    Only the first four characters of ``fmt`` are read.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether a symbols token names a real layout or variant."""
    return not sym.startswith(_INVALID_SYMBOLS)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout token of the given group in an XKB symbols name."""
    layout = None
    grp = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if grp > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        grp += 1
    return layout