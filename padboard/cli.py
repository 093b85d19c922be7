"""Interactive terminal front end for the launchpad."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from .launchpad import Launchpad
from .mixer import AudioError
from .sound import SoundParams
from .tui import (
    CURSOR_HOME,
    HIDE_CURSOR,
    SHOW_CURSOR,
    Key,
    KeyAction,
    clear_screen,
    get_key,
    init_screen,
    print_help,
)

AUDIO_DIR_NAME = "audio"

SOUNDS: tuple[tuple[str, SoundParams], ...] = (
    ("d", SoundParams("Drums", "drums-loop.wav", loop=True)),
    ("b", SoundParams("Bass drums", "bass-drums-loop.wav", loop=True)),
    ("v", SoundParams("Verse strum", "verse-strum-loop.wav", loop=True)),
    ("c", SoundParams("Chorus strum", "chorus-strum-loop.wav", loop=True)),
    ("i", SoundParams("Drums intro", "drums-intro.wav")),
    ("g", SoundParams("Guitar intro", "guitar-intro.wav")),
    ("1", SoundParams("Fill 1", "fill-1.wav")),
    ("2", SoundParams("Fill 2", "fill-2.wav")),
    ("3", SoundParams("Fill 3", "fill-3.wav")),
    ("y", SoundParams("Chorus fill syncopated", "chorus-fill-syncopated.wav")),
    ("s", SoundParams("Chorus fill straight", "chorus-fill-straight.wav")),
    ("o", SoundParams("Guitar solo", "guitar-solo.wav")),
    ("f", SoundParams("Full mix", "dreams-instrumental.wav", stream=True)),
)

GROUPS: tuple[str, ...] = (
    "Drums",
    "Rythm guitar",
    "Lead guitar",
)

_FOOTER = (
    "==============================================\n"
    "               Press ? for help               "
)


def audio_dir(argv0: str, dir_name: str) -> Path:
    """Find dir_name in the working directory or next to the executable.

    Raises FileNotFoundError naming both paths tried when neither exists.
    """
    local = Path(dir_name)
    if local.is_dir():
        return local

    exe_relative = Path(argv0).absolute().parent / dir_name
    if exe_relative.is_dir():
        return exe_relative

    raise FileNotFoundError(
        f"could not find '{dir_name}/' directory.\n"
        f"Tried paths: './{local}' and '{exe_relative}'"
    )


def render_ui(launchpad: Launchpad) -> str:
    """The full launchpad screen, starting with a cursor-home sequence."""
    return CURSOR_HOME + launchpad.dump() + _FOOTER


def print_launchpad_ui(launchpad: Launchpad, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    out.write(render_ui(launchpad))
    out.flush()


def handle_key(
    launchpad: Launchpad,
    key: Key,
    out: TextIO | None = None,
    read: Callable[[], str] | None = None,
) -> None:
    """Carry out the command bound to key."""
    actions: dict[KeyAction, Callable[[], object]] = {
        KeyAction.MUTE: launchpad.group_toggle_mute,
        KeyAction.PLAY_PAUSE: launchpad.toggle_play_pause,
        KeyAction.STOP: launchpad.group_stop,
        KeyAction.NEXT_GROUP: launchpad.next_group,
        KeyAction.PREV_GROUP: launchpad.previous_group,
        KeyAction.VOLUME_UP: launchpad.group_volume_up,
        KeyAction.VOLUME_DOWN: launchpad.group_volume_down,
        KeyAction.PAN_LEFT: launchpad.group_pan_left,
        KeyAction.PAN_RIGHT: launchpad.group_pan_right,
    }
    if key.action is KeyAction.HELP:
        print_help(out, read)
    elif key.action in actions:
        actions[key.action]()
    else:
        launchpad.play_sound(key.char)


def main_loop(
    launchpad: Launchpad,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Process key presses until quit or end of input, redrawing after each."""
    try:
        while (key := get_key(read)).action is not KeyAction.QUIT:
            handle_key(launchpad, key, out, read)
            print_launchpad_ui(launchpad, out)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="padboard",
        description="Play sounds from the keyboard, mixed into channel groups.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    init_screen(out)
    print("Initializing system...", file=out, flush=True)

    try:
        directory = audio_dir(sys.argv[0], AUDIO_DIR_NAME)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        launchpad = Launchpad(str(directory), SOUNDS, GROUPS)
    except (AudioError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    with launchpad:
        out.write(HIDE_CURSOR)
        try:
            print_launchpad_ui(launchpad, out)
            main_loop(launchpad, out=out)
        finally:
            clear_screen(out)
            out.write(SHOW_CURSOR)
            out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())