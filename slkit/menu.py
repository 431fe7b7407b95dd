"""Menu state: item matching, input editing, selection and paging."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, TextIO

PROG = "dmenu"
VERSION = "5.3"
USAGE = (
    "usage: dmenu [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)

# Size of the input buffer, the terminating position included.
BUFSIZ = 8192
# Characters not considered part of a word when deleting or moving by words.
WORD_DELIMITERS = " "

DEFAULT_FONT = "monospace:size=10"
DEFAULT_COLORS = {
    "norm": ("#bbbbbb", "#222222"),
    "sel": ("#eeeeee", "#005577"),
    "out": ("#000000", "#00ffff"),
}

_ATOI = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised for command lines the program does not accept."""


def cistrstr(haystack: str, needle: str) -> Optional[int]:
    """Find ``needle`` in ``haystack`` ignoring case; return its index or None."""
    index = haystack.lower().find(needle.lower())
    return None if index < 0 else index


def read_items(stream: TextIO) -> list[Item]:
    """Read one item per line, dropping each line's trailing newline."""
    items = []
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        items.append(Item(line))
    return items


def _atoi(value: str) -> int:
    found = _ATOI.match(value)
    return int(found.group(1)) if found else 0


@dataclass
class MenuOptions:
    """Settings taken from the command line."""

    topbar: bool = True
    fast: bool = False
    insensitive: bool = False
    lines: int = 0
    monitor: int = -1
    prompt: Optional[str] = None
    font: str = DEFAULT_FONT
    colors: dict = field(default_factory=lambda: dict(DEFAULT_COLORS))
    embed: Optional[str] = None
    version: bool = False


def parse_args(argv: Iterable[str]) -> MenuOptions:
    """Parse the command line; raise UsageError for anything not accepted."""
    args = list(argv)
    options = MenuOptions()
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "-v":
            options.version = True
            return options
        if arg == "-b":
            options.topbar = False
        elif arg == "-f":
            options.fast = True
        elif arg == "-i":
            options.insensitive = True
        elif index + 1 == len(args):
            raise UsageError(f"option {arg!r} is unknown or lacks its argument")
        else:
            index += 1
            value = args[index]
            if arg == "-l":
                options.lines = _atoi(value)
            elif arg == "-m":
                options.monitor = _atoi(value)
            elif arg == "-p":
                options.prompt = value
            elif arg == "-fn":
                options.font = value
            elif arg in ("-nb", "-nf", "-sb", "-sf"):
                scheme = "norm" if arg[1] == "n" else "sel"
                fg, bg = options.colors[scheme]
                options.colors[scheme] = (value, bg) if arg[2] == "f" else (fg, value)
            elif arg == "-w":
                options.embed = value
            else:
                raise UsageError(f"unknown option {arg!r}")
        index += 1
    return options


@dataclass(eq=False)
class Item:
    """One menu entry; ``out`` marks an entry that has been output."""

    text: str
    out: bool = False


class Menu:
    """The input line, the matching items and which of them are shown."""

    def __init__(
        self,
        items: Iterable[Item],
        *,
        lines: int = 0,
        insensitive: bool = False,
        prompt: Optional[str] = None,
        width: int = 80,
        text_width: Callable[[str], int] = len,
        lrpad: int = 2,
    ) -> None:
        self.items = list(items)
        if lines < 0:
            lines = len(self.items)
        self.lines = min(lines, len(self.items))
        self.insensitive = insensitive
        self.prompt = prompt
        self.width = width
        self._text_width = text_width
        self.lrpad = lrpad
        self.promptw = self._textw(prompt) - lrpad // 4 if prompt else 0
        self.inputw = width // 3
        self.text = ""
        self.cursor = 0
        self.matches: list[Item] = []
        self.sel: Optional[int] = None
        self.page_start: Optional[int] = None
        self.next_page: Optional[int] = None
        self.prev_page: Optional[int] = None
        self.match()

    # -- geometry ---------------------------------------------------------

    def _textw(self, text: str) -> int:
        return self._text_width(text) + self.lrpad

    def _budget(self) -> int:
        if self.lines > 0:
            return self.lines
        return self.width - (
            self.promptw + self.inputw + self._textw("<") + self._textw(">")
        )

    def _cost(self, item: Item, budget: int) -> int:
        if self.lines > 0:
            return 1
        return min(self._textw(item.text), budget)

    def _calcoffsets(self) -> None:
        if self.page_start is None:
            self.next_page = self.prev_page = None
            return
        budget = self._budget()
        used = 0
        self.next_page = None
        for idx, item in enumerate(self.matches[self.page_start:], start=self.page_start):
            used += self._cost(item, budget)
            if used > budget:
                self.next_page = idx
                break
        used = 0
        prev = self.page_start
        for item in reversed(self.matches[: self.page_start]):
            used += self._cost(item, budget)
            if used > budget:
                break
            prev -= 1
        self.prev_page = prev

    @property
    def page(self) -> list[Item]:
        """The matching items currently shown."""
        if self.page_start is None:
            return []
        return self.matches[self.page_start:self.next_page]

    @property
    def selected(self) -> Optional[Item]:
        """The selected item, if any."""
        return None if self.sel is None else self.matches[self.sel]

    # -- matching ---------------------------------------------------------

    def _contains(self, haystack: str, needle: str) -> bool:
        if self.insensitive:
            return cistrstr(haystack, needle) is not None
        return needle in haystack

    def _fold(self, text: str) -> str:
        return text.lower() if self.insensitive else text

    def match(self) -> None:
        """Recompute the matches: exact ones first, then prefixes, then the rest."""
        tokens = [token for token in self.text.split(" ") if token]
        exact: list[Item] = []
        prefix: list[Item] = []
        substring: list[Item] = []
        text = self._fold(self.text)
        first = self._fold(tokens[0]) if tokens else ""
        for item in self.items:
            if not all(self._contains(item.text, token) for token in tokens):
                continue
            candidate = self._fold(item.text)
            if not tokens or candidate == text:
                exact.append(item)
            elif candidate.startswith(first):
                prefix.append(item)
            else:
                substring.append(item)
        self.matches = exact + prefix + substring
        self.sel = self.page_start = 0 if self.matches else None
        self._calcoffsets()

    # -- editing ----------------------------------------------------------

    def insert(self, s: str) -> bool:
        """Insert text at the cursor; return False if it would not fit."""
        if len(self.text.encode()) + len(s.encode()) > BUFSIZ - 1:
            return False
        self.text = self.text[: self.cursor] + s + self.text[self.cursor:]
        self.cursor += len(s)
        self.match()
        return True

    def _delete_before(self, count: int) -> None:
        self.text = self.text[: self.cursor - count] + self.text[self.cursor:]
        self.cursor -= count
        self.match()

    def backspace(self) -> None:
        """Delete the character before the cursor."""
        if self.cursor == 0:
            return
        self._delete_before(1)

    def delete(self) -> None:
        """Delete the character under the cursor."""
        if self.cursor >= len(self.text):
            return
        self.cursor += 1
        self.backspace()

    def kill_right(self) -> None:
        """Delete everything from the cursor to the end."""
        self.text = self.text[: self.cursor]
        self.match()

    def kill_left(self) -> None:
        """Delete everything before the cursor."""
        self._delete_before(self.cursor)

    def kill_word(self) -> None:
        """Delete the word before the cursor and the delimiters after it."""
        while self.cursor > 0 and self.text[self.cursor - 1] in WORD_DELIMITERS:
            self._delete_before(1)
        while self.cursor > 0 and self.text[self.cursor - 1] not in WORD_DELIMITERS:
            self._delete_before(1)

    def move_word_edge(self, direction: int) -> None:
        """Move to the start of the word (direction < 0) or to its end."""
        if direction < 0:
            while self.cursor > 0 and self.text[self.cursor - 1] in WORD_DELIMITERS:
                self.cursor -= 1
            while self.cursor > 0 and self.text[self.cursor - 1] not in WORD_DELIMITERS:
                self.cursor -= 1
        else:
            end = len(self.text)
            while self.cursor < end and self.text[self.cursor] in WORD_DELIMITERS:
                self.cursor += 1
            while self.cursor < end and self.text[self.cursor] not in WORD_DELIMITERS:
                self.cursor += 1

    # -- navigation -------------------------------------------------------

    def cursor_left(self) -> None:
        """Move the cursor left, or in a horizontal menu select the previous item."""
        if self.cursor > 0 and (not self.sel or self.lines > 0):
            self.cursor -= 1
            return
        if self.lines > 0:
            return
        self.select_prev()

    def cursor_right(self) -> None:
        """Move the cursor right, or at the end of a horizontal menu select the next item."""
        if self.cursor < len(self.text):
            self.cursor += 1
            return
        if self.lines > 0:
            return
        self.select_next()

    def select_prev(self) -> None:
        """Select the previous item, turning the page back if needed."""
        if self.sel is None or self.sel == 0:
            return
        self.sel -= 1
        if self.sel + 1 == self.page_start:
            self.page_start = self.prev_page
            self._calcoffsets()

    def select_next(self) -> None:
        """Select the next item, turning the page if needed."""
        if self.sel is None or self.sel + 1 >= len(self.matches):
            return
        self.sel += 1
        if self.sel == self.next_page:
            self.page_start = self.next_page
            self._calcoffsets()

    def home(self) -> None:
        """Select the first item, or if it is selected move the cursor home."""
        first = 0 if self.matches else None
        if self.sel == first:
            self.cursor = 0
            return
        self.sel = self.page_start = 0
        self._calcoffsets()

    def end(self) -> None:
        """Move the cursor to the end, or if it is there select the last item."""
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
            return
        last = len(self.matches) - 1
        if self.next_page is not None:
            self.page_start = last
            self._calcoffsets()
            self.page_start = self.prev_page
            self._calcoffsets()
            while self.next_page is not None and self.page_start < last:
                self.page_start += 1
                self._calcoffsets()
        self.sel = last if self.matches else None

    def complete(self) -> None:
        """Replace the input with the text of the selected item."""
        item = self.selected
        if item is None:
            return
        raw = item.text.encode()[: BUFSIZ - 1]
        self.text = raw.decode(errors="ignore")
        self.cursor = len(self.text)
        self.match()

    def output(self, shift: bool = False) -> str:
        """Return the text to print and mark the selected item as output.

        With ``shift`` the input text is returned even if an item is selected.
        """
        item = self.selected
        result = item.text if item is not None and not shift else self.text
        if item is not None:
            item.out = True
        return result