"""Terminal Output Formatting Package"""

import re
import sys
import os
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
}


class Palette:
    """Stateless styling. enabled=False returns text untouched."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def colorize(self, text: str, *codes: str) -> str:
        if not self.enabled:
            return text
        return f"{''.join(codes)}{text}{Colors.RESET}"

    def success(self, text: str) -> str:
        return self.colorize(text, Colors.GREEN)

    def error(self, text: str) -> str:
        return self.colorize(text, Colors.RED)

    def warning(self, text: str) -> str:
        return self.colorize(text, Colors.YELLOW)

    def info(self, text: str) -> str:
        return self.colorize(text, Colors.CYAN)

    def dim(self, text: str) -> str:
        return self.colorize(text, Colors.DIM)

    def bold(self, text: str) -> str:
        return self.colorize(text, Colors.BOLD)

    def commit_type(self, message: str) -> str:
        """Color the type prefix of a commit subject."""
        if not self.enabled:
            return message
        match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', message)
        if not match:
            return message
        color = COMMIT_TYPE_COLORS.get(match.group(1))
        if not color:
            return message
        prefix = match.group(0)
        return self.colorize(prefix, Colors.BOLD, color) + message[len(prefix):]


UNICODE_ENABLED = _supports_unicode()
PALETTE = Palette(_supports_color())
COLORS_ENABLED = PALETTE.enabled

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'
ARROW = '→' if UNICODE_ENABLED else '->'


def success(text: str) -> str:
    return PALETTE.success(text)


def error(text: str) -> str:
    return PALETTE.error(text)


def warning(text: str) -> str:
    return PALETTE.warning(text)


def info(text: str) -> str:
    return PALETTE.info(text)


def dim(text: str) -> str:
    return PALETTE.dim(text)


def bold(text: str) -> str:
    return PALETTE.bold(text)


def colorize_commit_type(message: str) -> str:
    return PALETTE.commit_type(message)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}")


def print_info(message: str) -> None:
    print(info(message))


def print_debug(message: str) -> None:
    print(dim(f"  {message}"))


class Spinner:
    """Animated spinner for long operations. Use as context manager."""
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self):
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{frame} ', end='', flush=True)
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        if sys.stdout.isatty():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
        if sys.stdout.isatty():
            print('\r\033[K', end='', flush=True)


__all__ = [
    "Colors", "Palette", "PALETTE", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN", "ARROW",
    "success", "error", "warning", "info", "dim", "bold",
    "colorize_commit_type",
    "print_success", "print_error", "print_warning", "print_info", "print_debug",
    "Spinner", "COMMIT_TYPE_COLORS",
]
