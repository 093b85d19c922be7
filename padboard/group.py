"""User-facing mixing groups with mute, pause, volume and pan controls."""

from __future__ import annotations

import weakref

from .mixer import AudioSystem, ChannelGroup

_MASTERS: weakref.WeakKeyDictionary[AudioSystem, Group] = weakref.WeakKeyDictionary()


class Group:
    """Wraps a channel group; owns it unless one is handed in."""

    def __init__(
        self,
        system: AudioSystem,
        name: str,
        channel_group: ChannelGroup | None = None,
    ) -> None:
        self._name = name
        self._system = system
        self._pan_level = 0.0
        if channel_group is None:
            self.channel_group: ChannelGroup | None = system.create_group(name)
            self._owns_group = True
        else:
            self.channel_group = channel_group
            self._owns_group = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def pan_level(self) -> float:
        return self._pan_level

    def toggle_mute(self) -> None:
        if self.channel_group is None:
            return
        self.channel_group.muted = not self.is_muted()

    def toggle_play_pause(self) -> None:
        if self.channel_group is None:
            return
        self.channel_group.paused = not self.is_paused()

    def stop(self) -> None:
        if self.channel_group is None:
            return
        self.channel_group.stop()

    def change_volume(self, volume_up: bool, step: float = 0.1) -> None:
        """Raise or lower the volume by step, never below zero."""
        if self.channel_group is None:
            return
        volume = self.volume() + (step if volume_up else -step)
        self.channel_group.volume = max(volume, 0.0)

    def pan(self, pan_right: bool, step: float = 0.1) -> None:
        """Shift the pan by step, kept within -1 and 1."""
        level = self._pan_level + (step if pan_right else -step)
        self._pan_level = max(-1.0, min(1.0, level))
        if self.channel_group is not None:
            self.channel_group.pan = self._pan_level

    def add_group(self, sub_group: Group) -> None:
        if self.channel_group is None or sub_group.channel_group is None:
            return
        self.channel_group.add_group(sub_group.channel_group)

    def internal_name(self) -> str:
        if self.channel_group is None:
            return "[null]"
        return self.channel_group.name

    def is_muted(self) -> bool:
        return self.channel_group is not None and self.channel_group.muted

    def is_paused(self) -> bool:
        return self.channel_group is not None and self.channel_group.paused

    def volume(self) -> float:
        if self.channel_group is None:
            return 0.0
        return self.channel_group.volume

    def release(self) -> None:
        """Stop and free the channel group if this object owns it."""
        if self._owns_group and self.channel_group is not None:
            self.channel_group.stop()
            self.channel_group.release()
            self.channel_group = None

    def __repr__(self) -> str:
        return f"Group({self._name!r})"


def master_group(system: AudioSystem) -> Group:
    """The shared, non-owning group around the system's master bus."""
    master = _MASTERS.get(system)
    if master is None:
        master = Group(system, "Master", system.master_group())
        _MASTERS[system] = master
    return master