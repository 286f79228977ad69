import wave

import pytest

from demofw.micromod import Micromod
from demofw.sound import (
    OVERSAMPLE,
    REVERB_BUF_LEN,
    SAMPLING_FREQ,
    Downsampler,
    Reverb,
    SoundStream,
    crossfeed,
)


def make_module(with_note=False):
    header = bytearray(1084)
    header[950] = 1
    header[1080:1084] = b"M.K."
    pattern = bytearray(64 * 4 * 4)
    samples = b""
    if with_note:
        header[42:44] = (32).to_bytes(2, "big")
        header[45] = 64
        header[46:48] = (0).to_bytes(2, "big")
        header[48:50] = (16).to_bytes(2, "big")
        pattern[0:4] = bytes([0x01, 0xAC, 0x10, 0x00])
        samples = bytes([100]) * 64
    return bytes(header + pattern + samples)


def make_player(with_note=False):
    return Micromod(make_module(with_note), SAMPLING_FREQ * OVERSAMPLE)


def test_crossfeed_keeps_mono_signal():
    assert crossfeed([100, 100, -4, -4]) == [100, 100, -4, -4]


def test_crossfeed_rejects_odd_length():
    with pytest.raises(ValueError):
        crossfeed([1, 2, 3])


def test_downsampler_halves_length_and_settles():
    out = Downsampler().process([100] * 16)
    assert len(out) == 8
    assert out[2:] == [100] * 6


def test_downsampler_keeps_state_between_calls():
    ds = Downsampler()
    ds.process([100] * 4)
    assert ds.process([100] * 4) == [100, 100]


def test_downsampler_rejects_bad_length():
    with pytest.raises(ValueError):
        Downsampler().process([1, 2, 3, 4, 5, 6])


def test_reverb_silence_stays_silent():
    assert Reverb().process([0] * 20) == [0] * 20


def test_reverb_feeds_into_opposite_channel():
    reverb = Reverb()
    frames = REVERB_BUF_LEN // 2
    first = reverb.process([400, 0] + [0, 0] * (frames - 1))
    assert first[1] == 0
    echo = reverb.process([0, 0])
    assert echo[0] == 0
    assert echo[1] > 0


def test_silent_module_gives_silent_buffer():
    stream = SoundStream(make_player(), buffer_samples=128)
    out = stream.fill()
    assert len(out) == 256
    assert all(v == 0 for v in out)


def test_note_produces_sound():
    stream = SoundStream(make_player(with_note=True), buffer_samples=256)
    out = stream.fill()
    assert len(out) == 512
    assert any(v != 0 for v in out)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        SoundStream(make_player(), buffer_samples=0)


def test_write_wav(tmp_path):
    path = tmp_path / "out.wav"
    SoundStream(make_player(with_note=True), buffer_samples=64, reverb=True).write_wav(path, 3)
    with wave.open(str(path), "rb") as wav:
        assert wav.getnchannels() == 2
        assert wav.getsampwidth() == 2
        assert wav.getframerate() == SAMPLING_FREQ
        assert wav.getnframes() == 64 * 3