# padboard

A small sound launchpad for the terminal. Each key plays a sample: looping
sounds repeat until they are stopped, the others play once. Sounds play into
channel groups that you can mute, pause, stop, pan and change in volume one at
a time, and a master group above them controls everything at once.

Playback goes through `pygame`'s mixer.

## Installing

```
pip install .
```

## Running the demo

```
padboard
```

The demo first clears the screen, then looks for an `audio/` directory, first
in the current working directory and then next to the program itself. If
neither exists it prints both paths it tried and exits with status 1; it does
the same if a sound cannot be loaded or the audio device cannot be opened.

It loads these files from that directory:

| Key | Sound                  | File                         |
|-----|------------------------|------------------------------|
| d   | Drums (loop)           | drums-loop.wav               |
| b   | Bass drums (loop)      | bass-drums-loop.wav          |
| v   | Verse strum (loop)     | verse-strum-loop.wav         |
| c   | Chorus strum (loop)    | chorus-strum-loop.wav        |
| i   | Drums intro            | drums-intro.wav              |
| g   | Guitar intro           | guitar-intro.wav             |
| 1-3 | Fills                  | fill-1.wav … fill-3.wav      |
| y   | Chorus fill syncopated | chorus-fill-syncopated.wav   |
| s   | Chorus fill straight   | chorus-fill-straight.wav     |
| o   | Guitar solo            | guitar-solo.wav              |
| f   | Full mix (stream)      | dreams-instrumental.wav      |

A file that is not found inside the audio directory is tried once more as the
path given, relative to the working directory or absolute.

The channel groups are Master, Drums, Rythm guitar and Lead guitar, with Master
selected at start. A sound plays into whichever group is selected when its key
is pressed. The screen lists each group with its mute, pause, volume and pan
state, and each sound with `~` while it is playing; loops are marked `[L]` and
stream sounds `[S]`.

### Keys

```
  a-z,0-9    Play a sound
  Space      Play/Pause Master channel
  N/Down     Select next channel
  P/Up       Select previous channel
  +          Raise current channel volume
  -          Lower current channel volume
  M          Mute current channel
  S          Stop current channel
  L/Left     Pan current channel to left
  R/Right    Pan current channel to right
  Q          Quit
  ?          Show this message
```

Volume changes in steps of 0.1 and never goes below zero; pan changes in steps
of 0.1 between -1 (left) and 1 (right). Pressing a sound's key while it is still
playing starts it over from the beginning. The program also stops when its
input ends.

## Using it as a library

```python
from padboard.launchpad import Launchpad
from padboard.sound import SoundParams

sounds = [
    ("d", SoundParams(name="Drums", file="drums-loop.wav", loop=True)),
    ("f", SoundParams(name="Full mix", file="mix.wav", stream=True)),
]

with Launchpad("audio", sounds, ["Drums", "Guitar"]) as pad:
    pad.next_group()          # select "Drums"
    pad.play_sound("d")       # plays into the selected group
    pad.group_volume_down()
    pad.group_pan_right()
    print(pad.dump())
```

`Launchpad.dump()` returns the channel and sound overview that the demo shows
on screen; `play_sound(key, group)` plays into another group than the selected
one, and `get_group(name)` finds a group by name. Leaving the `with` block, or
calling `close()`, releases every sound and group and closes the audio device.

The lower-level pieces are:

- `padboard.sound.Sound` — one named sound that plays at most one instance at a time.
- `padboard.group.Group` — mute, pause, stop, volume and pan controls around a channel group;
  `padboard.group.master_group(system)` gives the group around the master bus.
- `padboard.mixer` — `AudioSystem`, `ChannelGroup`, `Channel` and `LoadedSound`: nested mixing
  buses whose mute, pause and volume combine down the hierarchy. Failures are raised as
  `padboard.mixer.AudioError`; a missing file as `FileNotFoundError`.
- `padboard.tui` — key reading (`get_key`, `getch`), the `Key` and `KeyAction` types and the
  screen helpers used by the demo.

## What it does not do

The stream flag (`SoundParams(stream=True)`) only marks a sound as a stream on
screen: every sound, streamed or not, is decoded fully into memory when it is
loaded. The sounds and groups of the `padboard` command are fixed; it has no
options for choosing other files or keys.

## Running the tests

```
pip install .[test]
pytest
```