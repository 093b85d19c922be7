"""Playable sounds bound to an audio system."""

from __future__ import annotations

from dataclasses import dataclass

from .mixer import AudioSystem, Channel, ChannelGroup, LoadedSound, Mode


@dataclass(frozen=True)
class SoundParams:
    """How a launchpad sound is described."""

    name: str
    file: str
    loop: bool = False
    stream: bool = False


def make_mode(params: SoundParams) -> Mode:
    """Loading mode for the given parameters."""
    mode = Mode.DEFAULT
    if params.loop:
        mode |= Mode.LOOP_NORMAL
    if params.stream:
        mode |= Mode.CREATESTREAM
    return mode


class Sound:
    """A named sound that plays at most one instance at a time."""

    def __init__(self, system: AudioSystem, audio_dir: str, params: SoundParams) -> None:
        self.name = params.name
        self._system = system
        self._channel: Channel | None = None
        mode = make_mode(params)
        try:
            self._sound: LoadedSound | None = system.load(f"{audio_dir}/{params.file}", mode)
        except FileNotFoundError:
            # Fall back to the file as given (absolute or relative to cwd).
            self._sound = system.load(params.file, mode)

    @property
    def channel(self) -> Channel | None:
        return self._channel

    def display_name(self) -> str:
        """Name with [L] for loops and [S] for streams."""
        full_name = self.name
        if self.is_loop():
            full_name += " [L]"
        if self.is_stream():
            full_name += " [S]"
        return full_name

    def is_playing(self) -> bool:
        return self._channel is not None and self._channel.is_playing()

    def is_loop(self) -> bool:
        return self._sound is not None and Mode.LOOP_NORMAL in self._sound.mode

    def is_stream(self) -> bool:
        return self._sound is not None and Mode.CREATESTREAM in self._sound.mode

    def play(self, group: ChannelGroup | None) -> None:
        """Play in group, restarting if already playing."""
        if self._sound is None:
            return
        if self.is_playing():
            self._channel.stop()
        self._channel = self._system.play(self._sound, group, False)

    def release(self) -> None:
        """Stop playback and free the audio data."""
        if self._channel is not None:
            self._channel.stop()
            self._channel = None
        if self._sound is not None:
            self._sound.release()
            self._sound = None

    def __repr__(self) -> str:
        return f"Sound({self.name!r})"