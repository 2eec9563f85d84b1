"""Terminal Output Formatting Package

Everything here writes to stderr: stdout is reserved for the commit message.
"""

import os
import sys
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'


def _supports_color(stream=None) -> bool:
    stream = stream or sys.stderr
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-12), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode(stream=None) -> bool:
    stream = stream or sys.stderr
    try:
        '✗⠋'.encode(getattr(stream, 'encoding', None) or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


class Spinner:
    """Animated spinner on stderr for long operations. Use as context manager."""
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, label: str = "", stream=None):
        self.label = label
        self._stream = stream or sys.stderr
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    @property
    def enabled(self) -> bool:
        return hasattr(self._stream, 'isatty') and self._stream.isatty()

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{frame} {dim(self.label)}', end='', flush=True, file=self._stream)
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        if self.enabled:
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        if self.enabled:
            print('\r\033[K', end='', flush=True, file=self._stream)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED", "CROSS",
    "error", "dim", "print_error", "Spinner",
]
