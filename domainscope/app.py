"""Terminal interface: type a domain, press Enter to look it up, Esc to quit."""

from __future__ import annotations

import argparse
import contextlib
import curses
from collections.abc import Callable
from dataclasses import dataclass, field

from .dns import lookup_domain

_EXIT_KEYS = {"\x1b"}
_ENTER_KEYS = {"\n", "\r", curses.KEY_ENTER}
_BACKSPACE_KEYS = {"\x7f", "\b", curses.KEY_BACKSPACE}


@dataclass
class AppState:
    """The text being typed and the report of the last lookup."""

    input: str = ""
    output_text: str = ""
    lookup: Callable[[str], str] = field(default=lookup_domain, repr=False)

    def type_char(self, char: str) -> None:
        """Append a character to the input."""
        self.input += char

    def backspace(self) -> None:
        """Remove the last character of the input, if any."""
        self.input = self.input[:-1]

    def submit(self) -> str:
        """Look up the input, keep the report and clear the input."""
        self.output_text = self.lookup(self.input)
        self.input = ""
        return self.output_text

    def input_display(self) -> str:
        """Return the input followed by a visual cursor."""
        return f"{self.input}|"


def _input_block(text: str, width: int) -> list[str]:
    if width < 2:
        return ["", text[:width], ""]
    inner = width - 2
    title = "Input"[:inner]
    return [
        "┌" + title + "─" * (inner - len(title)) + "┐",
        "│" + text[:inner].ljust(inner) + "│",
        "└" + "─" * inner + "┘",
    ]


def render(stdscr, state: AppState) -> None:
    """Draw the input box and the output area."""
    height, width = stdscr.getmaxyx()
    stdscr.erase()
    rows = _input_block(state.input_display(), width)
    rows.append("Output")
    rows.extend(state.output_text.splitlines())
    for y, line in enumerate(rows[:height]):
        # Writing the bottom-right cell raises even though it succeeds.
        with contextlib.suppress(curses.error):
            stdscr.addstr(y, 0, line[:width])
    stdscr.refresh()


def run(stdscr) -> AppState:
    """Run the interactive loop until Esc is pressed."""
    state = AppState()
    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    while True:
        render(stdscr, state)
        key = stdscr.get_wch()
        if key in _EXIT_KEYS:
            break
        if key in _ENTER_KEYS:
            state.submit()
        elif key in _BACKSPACE_KEYS:
            state.backspace()
        elif isinstance(key, str) and key.isprintable():
            state.type_char(key)
    return state


def main(argv: list[str] | None = None) -> int:
    """Start the terminal interface."""
    parser = argparse.ArgumentParser(
        prog="domainscope",
        description="Look up a domain and its usual service hosts.",
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0