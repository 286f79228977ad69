"""Post-processing and buffering of rendered module audio."""

from __future__ import annotations

import os
import struct
import wave
from pathlib import Path
from typing import Sequence, Union

from .micromod import Micromod

SAMPLING_FREQ = 48000
REVERB_BUF_LEN = 4800
OVERSAMPLE = 2
NUM_CHANNELS = 2
BUFFER_SAMPLES = 16384
NUM_BUFFERS = 4


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _check_stereo(samples: Sequence[int]) -> None:
    if len(samples) % 2:
        raise ValueError(f"interleaved stereo needs an even length, got {len(samples)}")


def crossfeed(samples: Sequence[int]) -> list[int]:
    """Return the stereo samples with their channel separation reduced."""
    _check_stereo(samples)
    out: list[int] = []
    for i in range(0, len(samples), 2):
        left, right = samples[i], samples[i + 1]
        out.append(_s16((3 * left + right) >> 2))
        out.append(_s16((3 * right + left) >> 2))
    return out


class Downsampler:
    """2:1 stereo downsampler with simple anti-aliasing; keeps filter state."""

    def __init__(self) -> None:
        self._filt_l = 0
        self._filt_r = 0

    def process(self, samples: Sequence[int]) -> list[int]:
        """Halve the rate of interleaved stereo ``samples``."""
        if len(samples) % 4:
            raise ValueError(
                f"input length must be a multiple of 4, got {len(samples)}"
            )
        out: list[int] = []
        for i in range(0, len(samples), 4):
            out_l = self._filt_l + (samples[i] >> 1)
            out_r = self._filt_r + (samples[i + 1] >> 1)
            self._filt_l = samples[i + 2] >> 2
            self._filt_r = samples[i + 3] >> 2
            out.append(_s16(out_l + self._filt_l))
            out.append(_s16(out_r + self._filt_r))
        return out


class Reverb:
    """Stereo cross delay with feedback."""

    def __init__(self) -> None:
        self._buffer = [0] * REVERB_BUF_LEN
        self._idx = 0

    def process(self, samples: Sequence[int]) -> list[int]:
        """Return ``samples`` with the delayed opposite channel mixed in."""
        _check_stereo(samples)
        out: list[int] = []
        buf = self._buffer
        for i in range(0, len(samples), 2):
            left = _s16((samples[i] * 3 + buf[self._idx + 1]) >> 2)
            right = _s16((samples[i + 1] * 3 + buf[self._idx]) >> 2)
            buf[self._idx] = left
            buf[self._idx + 1] = right
            self._idx += 2
            if self._idx >= REVERB_BUF_LEN:
                self._idx = 0
            out.append(left)
            out.append(right)
        return out


class SoundStream:
    """Pulls oversampled audio from a player and turns it into output buffers.

    The player is expected to render at ``SAMPLING_FREQ * OVERSAMPLE``.
    """

    def __init__(self, player: Micromod, buffer_samples: int = BUFFER_SAMPLES,
                 reverb: bool = False) -> None:
        if buffer_samples <= 0:
            raise ValueError("buffer_samples must be positive")
        self.player = player
        self.buffer_samples = buffer_samples
        self._downsampler = Downsampler()
        self._reverb = Reverb() if reverb else None

    def fill(self) -> list[int]:
        """Render one buffer of ``buffer_samples`` interleaved stereo samples."""
        mixed = self.player.get_audio(self.buffer_samples * OVERSAMPLE)
        out = crossfeed(self._downsampler.process(mixed))
        if self._reverb is not None:
            out = self._reverb.process(out)
        return out

    def write_wav(self, path: Union[str, os.PathLike],
                  num_buffers: int = NUM_BUFFERS) -> None:
        """Write ``num_buffers`` buffers as a 16-bit stereo WAV file."""
        if num_buffers < 0:
            raise ValueError("num_buffers must not be negative")
        with wave.open(str(Path(path)), "wb") as out:
            out.setnchannels(NUM_CHANNELS)
            out.setsampwidth(2)
            out.setframerate(SAMPLING_FREQ)
            for _ in range(num_buffers):
                samples = self.fill()
                out.writeframes(struct.pack(f"<{len(samples)}h", *samples))