import wave

import pytest

from padboard.mixer import AudioSystem, Mode
from padboard.sound import Sound, SoundParams, make_mode


def _write_wav(path, seconds=2.0):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * int(22050 * seconds))
    return path


@pytest.fixture
def system(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    audio = AudioSystem(16)
    yield audio
    audio.release()


@pytest.fixture
def audio_dir(tmp_path):
    _write_wav(tmp_path / "loop.wav")
    return tmp_path


def test_make_mode_flags():
    assert make_mode(SoundParams("a", "a.wav")) == Mode.DEFAULT
    assert make_mode(SoundParams("a", "a.wav", loop=True)) == Mode.LOOP_NORMAL
    assert make_mode(SoundParams("a", "a.wav", stream=True)) == Mode.CREATESTREAM
    both = make_mode(SoundParams("a", "a.wav", loop=True, stream=True))
    assert both == Mode.LOOP_NORMAL | Mode.CREATESTREAM


def test_params_defaults():
    params = SoundParams(name="Drums", file="drums-loop.wav")
    assert params.loop is False
    assert params.stream is False


def test_display_name_marks(system, audio_dir):
    plain = Sound(system, str(audio_dir), SoundParams("Fill", "loop.wav"))
    looped = Sound(system, str(audio_dir), SoundParams("Drums", "loop.wav", loop=True))
    streamed = Sound(system, str(audio_dir), SoundParams("Mix", "loop.wav", stream=True))
    assert plain.display_name() == "Fill"
    assert looped.display_name() == "Drums [L]"
    assert streamed.display_name() == "Mix [S]"


def test_flags_follow_params(system, audio_dir):
    sound = Sound(system, str(audio_dir), SoundParams("x", "loop.wav", loop=True))
    assert sound.is_loop()
    assert not sound.is_stream()


def test_falls_back_to_path_as_given(system, audio_dir, tmp_path_factory):
    other_dir = tmp_path_factory.mktemp("elsewhere")
    absolute = str(audio_dir / "loop.wav")
    sound = Sound(system, str(other_dir), SoundParams("x", absolute))
    assert sound.name == "x"
    assert not sound.is_playing()


def test_missing_file_raises(system, audio_dir):
    with pytest.raises(FileNotFoundError):
        Sound(system, str(audio_dir), SoundParams("x", "nope.wav"))


def test_play_starts_playback(system, audio_dir):
    sound = Sound(system, str(audio_dir), SoundParams("x", "loop.wav", loop=True))
    assert not sound.is_playing()
    sound.play(system.master_group())
    assert sound.is_playing()
    assert sound.channel.group is system.master_group()


def test_play_again_restarts_single_instance(system, audio_dir):
    sound = Sound(system, str(audio_dir), SoundParams("x", "loop.wav", loop=True))
    sound.play(system.master_group())
    first = sound.channel
    sound.play(system.master_group())
    assert sound.channel is not first
    assert not first.is_playing()
    assert sound.is_playing()


def test_release_stops_and_disables(system, audio_dir):
    sound = Sound(system, str(audio_dir), SoundParams("x", "loop.wav", loop=True))
    sound.play(None)
    sound.release()
    assert not sound.is_playing()
    assert not sound.is_loop()
    sound.play(None)
    assert sound.channel is None