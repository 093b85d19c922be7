"""A keyboard launchpad: sounds bound to keys, played into mixing groups."""

from __future__ import annotations

from typing import Iterable

from .group import Group, master_group
from .mixer import AudioSystem
from .sound import Sound, SoundParams

_MAX_CHANNELS = 512
_PAN_DEADZONE = 0.05


class Launchpad:
    """Holds the sounds, the groups and the currently selected group."""

    def __init__(
        self,
        audio_dir: str = "",
        sounds: Iterable[tuple[str, SoundParams]] = (),
        group_names: Iterable[str] = (),
    ) -> None:
        self._system = AudioSystem(_MAX_CHANNELS)
        self._sounds: dict[str, Sound] = {}
        # Keys in insertion order, as they were added.
        self._sound_keys: list[str] = []
        self._groups: list[Group] = []
        self._current_index = 0
        self._closed = False

        for key, params in sounds:
            self.add_sound(audio_dir, key, params)

        self._groups.append(master_group(self._system))

        for name in group_names:
            self.add_group(name)

    @property
    def system(self) -> AudioSystem:
        return self._system

    @property
    def groups(self) -> tuple[Group, ...]:
        return tuple(self._groups)

    @property
    def sound_keys(self) -> tuple[str, ...]:
        return tuple(self._sound_keys)

    def add_sound(self, audio_dir: str, key: str, params: SoundParams) -> None:
        """Load a sound and bind it to key; an existing binding is kept."""
        sound = Sound(self._system, audio_dir, params)
        if key in self._sounds:
            sound.release()
        else:
            self._sounds[key] = sound
        self._sound_keys.append(key)

    def add_group(self, name: str) -> None:
        """Create a group below the master group."""
        group = Group(self._system, name)
        master_group(self._system).add_group(group)
        self._groups.append(group)

    def get_group(self, name: str) -> Group | None:
        return next((group for group in self._groups if group.name == name), None)

    def current_group(self) -> Group:
        return self._groups[self._current_index]

    def next_group(self) -> Group:
        self._current_index = (self._current_index + 1) % len(self._groups)
        return self.current_group()

    def previous_group(self) -> Group:
        self._current_index = (self._current_index - 1) % len(self._groups)
        return self.current_group()

    def play_sound(self, key: str, group: Group | None = None) -> None:
        """Play the sound bound to key in group (the current one by default)."""
        sound = self._sounds.get(key)
        if sound is None:
            return
        target = group if group is not None else self.current_group()
        sound.play(target.channel_group)

    def toggle_play_pause(self) -> None:
        master_group(self._system).toggle_play_pause()

    def group_toggle_mute(self) -> None:
        self.current_group().toggle_mute()

    def group_stop(self) -> None:
        self.current_group().stop()

    def group_volume_up(self) -> None:
        self.current_group().change_volume(True)

    def group_volume_down(self) -> None:
        self.current_group().change_volume(False)

    def group_pan_left(self) -> None:
        self.current_group().pan(False)

    def group_pan_right(self) -> None:
        self.current_group().pan(True)

    def dump(self) -> str:
        """Text table of channels and sounds."""
        lines = ["================== Channels =================="]
        current = self.current_group()
        for group in self._groups:
            pan_level = group.pan_level
            if pan_level < -_PAN_DEADZONE or pan_level > _PAN_DEADZONE:
                side = "right" if pan_level > 0 else "left"
                pan_text = f"pan: {abs(pan_level * 10):1.0f} {side}"
            else:
                pan_text = ""
            marker = ">" if group is current else " "
            muted = "[M]" if group.is_muted() else "   "
            paused = "|| " if group.is_paused() else "   "
            volume = group.volume() * 100
            lines.append(
                f"{marker} {group.name:<12} {muted} {paused} vol: {volume:<3.0f}  {pan_text:<13}"
            )

        lines.append("=================== Sounds ===================")
        for key in self._sound_keys:
            sound = self._sounds[key]
            playing = "~" if sound.is_playing() else " "
            lines.append(f"{playing} {key}  {sound.display_name():<41}")

        return "\n".join(lines) + "\n"

    def close(self) -> None:
        """Release every sound and group, then the audio system."""
        if self._closed:
            return
        for sound in self._sounds.values():
            sound.release()
        self._sounds.clear()
        for group in self._groups:
            group.release()
        self._groups.clear()
        self._system.release()
        self._closed = True

    def __enter__(self) -> Launchpad:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()