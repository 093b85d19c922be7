"""Terminal input and screen helpers for the launchpad."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

_WINDOWS = sys.platform == "win32"

CHAR_NULL = "\0"
CHAR_MUTE = "M"
CHAR_PLAY_PAUSE = " "
CHAR_QUIT = "Q"
CHAR_STOP = "S"
CHAR_NEXT_GROUP = "N"
CHAR_PREV_GROUP = "P"
CHAR_VOLUME_UP = "+"
CHAR_VOLUME_DOWN = "-"
CHAR_PAN_LEFT = "L"
CHAR_PAN_RIGHT = "R"
CHAR_HELP = "?"

CHAR_ESC = "\033"
CHAR_WIN_ESCAPE = "\xe0"

_POSIX_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_WINDOWS_ARROWS = {"H": "up", "P": "down", "M": "right", "K": "left"}

# Move cursor to home position (top-left of the terminal window)
CURSOR_HOME = "\033[H"
# Move the current last displayed line on top of the terminal window
MOVE_LINE_TOP = "\033[2J"
# Clear all lines below the cursor
CLEAR_BELOW_CURSOR = "\033[J"
SHOW_CURSOR = "\033[?25h"
HIDE_CURSOR = "\033[?25l"


class KeyAction(enum.Enum):
    MUTE = enum.auto()
    PLAY_PAUSE = enum.auto()
    QUIT = enum.auto()
    STOP = enum.auto()
    NEXT_GROUP = enum.auto()
    PREV_GROUP = enum.auto()
    VOLUME_UP = enum.auto()
    VOLUME_DOWN = enum.auto()
    PAN_LEFT = enum.auto()
    PAN_RIGHT = enum.auto()
    HELP = enum.auto()
    PLAY_SOUND = enum.auto()
    OTHER = enum.auto()


_ACTION_CHARS = {
    KeyAction.MUTE: CHAR_MUTE,
    KeyAction.PLAY_PAUSE: CHAR_PLAY_PAUSE,
    KeyAction.QUIT: CHAR_QUIT,
    KeyAction.STOP: CHAR_STOP,
    KeyAction.NEXT_GROUP: CHAR_NEXT_GROUP,
    KeyAction.PREV_GROUP: CHAR_PREV_GROUP,
    KeyAction.VOLUME_UP: CHAR_VOLUME_UP,
    KeyAction.VOLUME_DOWN: CHAR_VOLUME_DOWN,
    KeyAction.PAN_LEFT: CHAR_PAN_LEFT,
    KeyAction.PAN_RIGHT: CHAR_PAN_RIGHT,
    KeyAction.HELP: CHAR_HELP,
}
_CHAR_ACTIONS = {char: action for action, char in _ACTION_CHARS.items()}

_ARROW_ACTIONS = {
    "down": KeyAction.NEXT_GROUP,
    "up": KeyAction.PREV_GROUP,
    "left": KeyAction.PAN_LEFT,
    "right": KeyAction.PAN_RIGHT,
}


def char_of(action: KeyAction) -> str:
    """The command character for action, or NUL if it has none."""
    return _ACTION_CHARS.get(action, CHAR_NULL)


def _is_sound_key(char: str) -> bool:
    # Sound keys are lowercase letters and digits
    return len(char) == 1 and ("a" <= char <= "z" or "0" <= char <= "9")


@dataclass(frozen=True)
class Key:
    """A key press: what it means and the character that produced it."""

    action: KeyAction
    char: str

    @classmethod
    def from_char(cls, char: str) -> Key:
        action = _CHAR_ACTIONS.get(char)
        if action is None:
            action = KeyAction.PLAY_SOUND if _is_sound_key(char) else KeyAction.OTHER
        return cls(action, char)

    @classmethod
    def from_action(cls, action: KeyAction) -> Key:
        return cls(action, char_of(action))


def getch() -> str:
    """Read one character from the keyboard without echo or line buffering.

    Raises EOFError when input has ended.
    """
    if _WINDOWS:
        import msvcrt

        return msvcrt.getwch()

    if not sys.stdin.isatty():
        char = sys.stdin.read(1)
        if not char:
            raise EOFError("end of input")
        return char

    import termios

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    if not data:
        raise EOFError("end of input")
    return data.decode("latin-1")


def get_key(read: Callable[[], str] | None = None) -> Key:
    """Read a key press, turning arrow escape sequences into group/pan keys."""
    read = read or getch
    char = read()

    if _WINDOWS:
        arrows = _WINDOWS_ARROWS
        is_escape = char == CHAR_WIN_ESCAPE
    else:
        arrows = _POSIX_ARROWS
        is_escape = char == CHAR_ESC
        if is_escape and read() != "[":
            return Key.from_action(KeyAction.OTHER)

    if is_escape:
        direction = arrows.get(read())
        if direction is None:
            return Key.from_action(KeyAction.OTHER)
        return Key.from_action(_ARROW_ACTIONS[direction])

    return Key.from_char(char)


def init_screen(out: TextIO | None = None) -> None:
    """Clear the display and move the cursor home."""
    out = out or sys.stdout
    out.write(MOVE_LINE_TOP + CURSOR_HOME)
    out.flush()


def clear_screen(out: TextIO | None = None) -> None:
    """Move the cursor home and clear everything below it."""
    out = out or sys.stdout
    out.write(CURSOR_HOME + CLEAR_BELOW_CURSOR)
    out.flush()


def help_text() -> str:
    """The help screen, starting with a cursor-home sequence."""
    return (
        CURSOR_HOME
        + "============= Available Commands =============\n"
        + "  a-z,0-9    Play a sound                     \n"
        + "  Space      Play/Pause Master channel        \n"
        + f"  {CHAR_NEXT_GROUP}/Down     Select next channel              \n"
        + f"  {CHAR_PREV_GROUP}/Up       Select previous channel          \n"
        + f"  {CHAR_VOLUME_UP}          Raise current channel volume     \n"
        + f"  {CHAR_VOLUME_DOWN}          Lower current channel volume     \n"
        + f"  {CHAR_MUTE}          Mute current channel             \n"
        + f"  {CHAR_STOP}          Stop current channel             \n"
        + f"  {CHAR_PAN_LEFT}/Left     Pan current channel to left      \n"
        + f"  {CHAR_PAN_RIGHT}/Right    Pan current channel to right     \n"
        + f"  {CHAR_QUIT}          Quit                             \n"
        + f"  {CHAR_HELP}          Show this message                \n"
        + "==============================================\n"
        + "    Press any key to go back to Launchpad     "
        + CLEAR_BELOW_CURSOR
    )


def print_help(out: TextIO | None = None, read: Callable[[], str] | None = None) -> None:
    """Show the help screen and wait for any key."""
    out = out or sys.stdout
    read = read or getch
    out.write(help_text())
    out.flush()
    read()