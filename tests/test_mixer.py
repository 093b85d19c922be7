import wave

import pytest

from padboard.mixer import AudioError, AudioSystem, Mode


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
def wav(tmp_path):
    return _write_wav(tmp_path / "tone.wav")


def test_master_group_is_named_and_stable(system):
    assert system.master_group().name == "Master"
    assert system.master_group() is system.master_group()


def test_create_group_keeps_name(system):
    group = system.create_group("Drums")
    assert group.name == "Drums"
    assert group.parent is None


def test_add_group_builds_hierarchy(system):
    master = system.master_group()
    child = system.create_group("Bass")
    master.add_group(child)
    assert child.parent is master
    assert master.children == (child,)


def test_add_group_rejects_cycles(system):
    parent = system.create_group("a")
    child = system.create_group("b")
    parent.add_group(child)
    with pytest.raises(AudioError):
        child.add_group(parent)


def test_load_missing_file_raises(system, tmp_path):
    with pytest.raises(FileNotFoundError):
        system.load(tmp_path / "missing.wav")


def test_load_garbage_raises_audio_error(system, tmp_path):
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"not audio at all")
    with pytest.raises(AudioError):
        system.load(bad)


def test_load_keeps_mode(system, wav):
    sound = system.load(wav, Mode.LOOP_NORMAL | Mode.CREATESTREAM)
    assert Mode.LOOP_NORMAL in sound.mode
    assert Mode.CREATESTREAM in sound.mode


def test_play_and_stop(system, wav):
    sound = system.load(wav, Mode.LOOP_NORMAL)
    channel = system.play(sound)
    assert channel.is_playing()
    assert channel.group is system.master_group()
    channel.stop()
    assert not channel.is_playing()


def test_group_stop_stops_channels(system, wav):
    group = system.create_group("g")
    system.master_group().add_group(group)
    channel = system.play(system.load(wav, Mode.LOOP_NORMAL), group)
    system.master_group().stop()
    assert not channel.is_playing()


def test_paused_group_pauses_channel(system, wav):
    group = system.create_group("g")
    system.master_group().add_group(group)
    channel = system.play(system.load(wav, Mode.LOOP_NORMAL), group)
    assert not channel.paused
    system.master_group().paused = True
    assert channel.paused
    system.master_group().paused = False
    assert not channel.paused


def test_play_paused_flag(system, wav):
    channel = system.play(system.load(wav), paused=True)
    assert channel.paused


def test_channel_volume_combines_groups(system, wav):
    master = system.master_group()
    group = system.create_group("g")
    master.add_group(group)
    channel = system.play(system.load(wav, Mode.LOOP_NORMAL), group)
    master.volume = 0.5
    group.volume = 0.4
    assert channel.volume == pytest.approx(0.5 * 0.4)
    master.muted = True
    assert channel.volume == 0
    master.muted = False
    assert channel.volume == pytest.approx(0.5 * 0.4)


def test_pan_is_clamped(system):
    group = system.create_group("g")
    group.pan = 3
    assert group.pan == 1.0
    group.pan = -3
    assert group.pan == -1.0


def test_master_cannot_be_released(system):
    with pytest.raises(AudioError):
        system.master_group().release()


def test_released_group_refuses_changes(system):
    group = system.create_group("g")
    system.master_group().add_group(group)
    group.release()
    assert group.released
    assert group not in system.master_group().children
    with pytest.raises(AudioError):
        group.muted = True


def test_release_moves_children_to_master(system):
    parent = system.create_group("p")
    child = system.create_group("c")
    system.master_group().add_group(parent)
    parent.add_group(child)
    parent.release()
    assert child.parent is system.master_group()


def test_released_sound_cannot_play(system, wav):
    sound = system.load(wav)
    sound.release()
    with pytest.raises(AudioError):
        system.play(sound)


def test_released_system_refuses_work(system):
    system.release()
    with pytest.raises(AudioError):
        system.create_group("late")


def test_invalid_channel_count():
    with pytest.raises(ValueError):
        AudioSystem(0)