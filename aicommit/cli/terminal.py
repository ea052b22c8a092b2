"""Terminal input: one classified keypress for the confirm prompt, lines for text."""

import os
import sys
from enum import Enum


class Choice(Enum):
    ACCEPT = "accept"
    EDIT = "edit"
    REJECT = "reject"
    INTERRUPT = "interrupt"


ESCAPE = '\x1b'
CTRL_C = '\x03'
CTRL_D = '\x04'

# Latin and Cyrillic mnemonics (т = так, н = ні, е = редагувати)
_KEYMAP = {
    'y': Choice.ACCEPT, 'т': Choice.ACCEPT,
    '\r': Choice.ACCEPT, '\n': Choice.ACCEPT,
    'e': Choice.EDIT, 'е': Choice.EDIT,
    'n': Choice.REJECT, 'н': Choice.REJECT,
    ESCAPE: Choice.REJECT,
    CTRL_C: Choice.INTERRUPT, CTRL_D: Choice.INTERRUPT,
}

# Whole answers accepted when stdin is piped
_WORDS = {
    'y': Choice.ACCEPT, 'yes': Choice.ACCEPT, 'т': Choice.ACCEPT, 'так': Choice.ACCEPT,
    'e': Choice.EDIT, 'edit': Choice.EDIT, 'е': Choice.EDIT, 'редагувати': Choice.EDIT,
    'n': Choice.REJECT, 'no': Choice.REJECT, 'н': Choice.REJECT, 'ні': Choice.REJECT,
}


def classify_key(key: str) -> Choice | None:
    """Map a single keypress to a Choice. None means ignore it.

    Anything longer than one character (escape sequences, pasted text)
    is ignored, as is an empty read.
    """
    if key in _KEYMAP:
        return _KEYMAP[key]
    if len(key) != 1:
        return None
    return _KEYMAP.get(key.lower())


def classify_line(line: str) -> Choice:
    """Map a typed line to a Choice. Blank is Enter; unknown words cancel."""
    word = line.strip().lower()
    if not word:
        return Choice.ACCEPT
    return _WORDS.get(word, Choice.REJECT)


def _read_key_posix() -> str | None:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_attrs = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        data = os.read(fd, 4)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_attrs)

    if not data:
        return CTRL_D
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return None


def _read_key_windows() -> str | None:
    import msvcrt
    return msvcrt.getwch()


def read_key() -> str | None:
    """Block for one raw keypress. None for bytes that are not a character."""
    if sys.platform == 'win32':
        return _read_key_windows()
    return _read_key_posix()


def read_choice() -> Choice:
    """Block until a recognized key is pressed.

    Falls back to reading a whole line when stdin is not a terminal.
    """
    if not sys.stdin.isatty():
        try:
            line = input()
        except (KeyboardInterrupt, EOFError):
            return Choice.INTERRUPT
        return classify_line(line)

    while True:
        try:
            key = read_key()
        except KeyboardInterrupt:
            return Choice.INTERRUPT
        if key is None:
            continue
        choice = classify_key(key)
        if choice is not None:
            return choice


def ask_line(prompt: str) -> str:
    """Read one line of text. Ctrl+C / EOF propagate as KeyboardInterrupt."""
    try:
        return input(prompt).strip()
    except EOFError:
        raise KeyboardInterrupt
