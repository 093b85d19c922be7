"""Small channel-group mixer on top of pygame's audio mixer."""

from __future__ import annotations

import enum
import errno
import itertools
import math
import os
from pathlib import Path
from typing import Iterator

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class AudioError(Exception):
    """Raised when the audio system refuses an operation."""


class Mode(enum.IntFlag):
    """How a sound is loaded and played."""

    DEFAULT = 0x0
    LOOP_NORMAL = 0x2
    CREATESTREAM = 0x80


class LoadedSound:
    """Decoded audio data ready to be played on a channel."""

    def __init__(self, raw: pygame.mixer.Sound, path: str, mode: Mode) -> None:
        self._raw: pygame.mixer.Sound | None = raw
        self.path = path
        self.mode = mode

    @property
    def released(self) -> bool:
        return self._raw is None

    @property
    def raw(self) -> pygame.mixer.Sound:
        if self._raw is None:
            raise AudioError(f"sound {self.path!r} has been released")
        return self._raw

    def release(self) -> None:
        """Stop every playback of this sound and free its data."""
        if self._raw is not None:
            self._raw.stop()
            self._raw = None

    def __repr__(self) -> str:
        return f"LoadedSound({self.path!r}, {self.mode!r})"


class Channel:
    """One playback of a sound inside a channel group."""

    def __init__(
        self,
        system: AudioSystem,
        index: int,
        sound: LoadedSound,
        group: ChannelGroup,
        paused: bool,
    ) -> None:
        self._system = system
        self._index = index
        self._own_paused = paused
        self._stopped = False
        self.sound = sound
        self.group = group

    @property
    def _current(self) -> bool:
        return (
            not self._stopped
            and self._system.active
            and self._system._owners.get(self._index) is self
        )

    def _raw(self) -> pygame.mixer.Channel:
        return pygame.mixer.Channel(self._index)

    def is_playing(self) -> bool:
        """True while this playback has not finished or been stopped."""
        if not self._current:
            return False
        try:
            return bool(self._raw().get_busy())
        except pygame.error:
            return False

    def stop(self) -> None:
        """Stop this playback; a no-op once it is over."""
        if self._current:
            try:
                self._raw().stop()
            except pygame.error:
                pass
            self._system._owners.pop(self._index, None)
        self._stopped = True

    @property
    def paused(self) -> bool:
        """Effective pause state, taking every enclosing group into account."""
        return self._own_paused or any(g.paused for g in self.group._chain())

    @property
    def volume(self) -> float:
        """Effective volume: product of group volumes, zero if any is muted."""
        chain = list(self.group._chain())
        if any(g.muted for g in chain):
            return 0.0
        return math.prod(g.volume for g in chain)

    @property
    def pan(self) -> float:
        return self.group.pan

    def _apply(self) -> None:
        if not self._current:
            return
        volume = self.volume
        pan = self.pan
        raw = self._raw()
        raw.set_volume(volume * min(1.0, 1.0 - pan), volume * min(1.0, 1.0 + pan))
        if self.paused:
            raw.pause()
        else:
            raw.unpause()


class ChannelGroup:
    """A named mixing bus; groups nest and their settings combine."""

    def __init__(self, system: AudioSystem, name: str) -> None:
        self._system = system
        self.name = name
        self._parent: ChannelGroup | None = None
        self._children: list[ChannelGroup] = []
        self._channels: list[Channel] = []
        self._muted = False
        self._paused = False
        self._volume = 1.0
        self._pan = 0.0
        self._is_master = False
        self._released = False

    def _check(self) -> None:
        self._system._check()
        if self._released:
            raise AudioError(f"channel group {self.name!r} has been released")

    def _chain(self) -> Iterator[ChannelGroup]:
        group: ChannelGroup | None = self
        while group is not None:
            yield group
            group = group._parent

    def _tree(self) -> Iterator[ChannelGroup]:
        yield self
        for child in self._children:
            yield from child._tree()

    def _refresh(self) -> None:
        for group in self._tree():
            group._channels = [ch for ch in group._channels if ch._current]
            for channel in group._channels:
                channel._apply()

    @property
    def released(self) -> bool:
        return self._released

    @property
    def parent(self) -> ChannelGroup | None:
        return self._parent

    @property
    def children(self) -> tuple[ChannelGroup, ...]:
        return tuple(self._children)

    @property
    def muted(self) -> bool:
        return self._muted

    @muted.setter
    def muted(self, value: bool) -> None:
        self._check()
        self._muted = bool(value)
        self._refresh()

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        self._check()
        self._paused = bool(value)
        self._refresh()

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._check()
        self._volume = float(value)
        self._refresh()

    @property
    def pan(self) -> float:
        return self._pan

    @pan.setter
    def pan(self, value: float) -> None:
        self._check()
        self._pan = max(-1.0, min(1.0, float(value)))
        self._refresh()

    def stop(self) -> None:
        """Stop every channel in this group and the groups below it."""
        self._check()
        for group in self._tree():
            for channel in group._channels:
                channel.stop()
            group._channels.clear()

    def add_group(self, sub_group: ChannelGroup) -> None:
        """Make sub_group a child of this group."""
        self._check()
        sub_group._check()
        if any(g is sub_group for g in self._chain()):
            raise AudioError("a channel group cannot contain itself")
        if sub_group._parent is not None:
            sub_group._parent._children.remove(sub_group)
        sub_group._parent = self
        self._children.append(sub_group)
        sub_group._refresh()

    def release(self) -> None:
        """Stop and detach the group; its children move to the master group."""
        if self._is_master:
            raise AudioError("the master channel group cannot be released")
        if self._released:
            return
        self.stop()
        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None
        master = self._system.master_group()
        for child in list(self._children):
            child._parent = None
            master.add_group(child)
        self._children.clear()
        self._released = True

    def __repr__(self) -> str:
        return f"ChannelGroup({self.name!r})"


class AudioSystem:
    """Owns the audio device, the master group and the playback channels."""

    def __init__(self, max_channels: int = 512) -> None:
        if max_channels < 1:
            raise ValueError("max_channels must be at least 1")
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(max_channels)
        except pygame.error as exc:
            raise AudioError(f"cannot open audio device: {exc}") from exc
        self._max_channels = max_channels
        self._owners: dict[int, Channel] = {}
        self._started: dict[int, int] = {}
        self._counter = itertools.count()
        self.active = True
        self._master = ChannelGroup(self, "Master")
        self._master._is_master = True

    def _check(self) -> None:
        if not self.active:
            raise AudioError("audio system has been released")

    def master_group(self) -> ChannelGroup:
        return self._master

    def create_group(self, name: str) -> ChannelGroup:
        """Create a free-standing channel group."""
        self._check()
        return ChannelGroup(self, name)

    def load(self, path: str | os.PathLike[str], mode: Mode = Mode.DEFAULT) -> LoadedSound:
        """Decode an audio file; FileNotFoundError if it does not exist."""
        self._check()
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(errno.ENOENT, "audio file not found", str(path))
        try:
            raw = pygame.mixer.Sound(str(file_path))
        except pygame.error as exc:
            raise AudioError(f"cannot decode {str(path)!r}: {exc}") from exc
        return LoadedSound(raw, str(path), Mode(mode))

    def _claim_channel(self) -> int:
        for index in range(self._max_channels):
            if not pygame.mixer.Channel(index).get_busy():
                self._owners.pop(index, None)
                return index
        oldest = min(range(self._max_channels), key=lambda i: self._started.get(i, -1))
        owner = self._owners.get(oldest)
        if owner is not None:
            owner.stop()
        else:
            pygame.mixer.Channel(oldest).stop()
        return oldest

    def play(
        self,
        sound: LoadedSound,
        group: ChannelGroup | None = None,
        paused: bool = False,
    ) -> Channel:
        """Start sound on a free channel inside group (master by default)."""
        self._check()
        target = group if group is not None else self._master
        target._check()
        raw = sound.raw
        index = self._claim_channel()
        loops = -1 if Mode.LOOP_NORMAL in sound.mode else 0
        pygame.mixer.Channel(index).play(raw, loops=loops)
        channel = Channel(self, index, sound, target, paused)
        self._owners[index] = channel
        self._started[index] = next(self._counter)
        target._channels.append(channel)
        channel._apply()
        return channel

    def release(self) -> None:
        """Stop everything and close the audio device."""
        if not self.active:
            return
        for channel in list(self._owners.values()):
            channel.stop()
        self._owners.clear()
        self._started.clear()
        self.active = False
        pygame.mixer.quit()