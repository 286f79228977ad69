"""Protracker MOD replay: pattern sequencing, effects and stereo resampling."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

MAX_CHANNELS = 16
FP_SHIFT = 14
FP_ONE = 16384
HEADER_SIZE = 1084

_VERSION = "Micromod Protracker replay 20180625"

_FINE_TUNING = (
    4340, 4308, 4277, 4247, 4216, 4186, 4156, 4126,
    4096, 4067, 4037, 4008, 3979, 3951, 3922, 3894,
)

_ARP_TUNING = (
    4096, 3866, 3649, 3444, 3251, 3069, 2896, 2734,
    2580, 2435, 2299, 2170, 2048, 1933, 1825, 1722,
)

_SINE_TABLE = (
    0, 24, 49, 74, 97, 120, 141, 161, 180, 197, 212, 224, 235, 244, 250, 253,
    255, 253, 250, 244, 235, 224, 212, 197, 180, 161, 141, 120, 97, 74, 49, 24,
)

ModuleData = Union[bytes, bytearray, memoryview, Sequence[int]]


class ModuleError(ValueError):
    """Raised when data is not a playable module."""


def version() -> str:
    """Return a string describing the replay engine."""
    return _VERSION


def _s8(value: int) -> int:
    return value - 256 if value > 127 else value


def _wrap_s8(value: int) -> int:
    return ((value + 128) & 0xFF) - 128


def _wrap_s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _u16_be(buf: bytes, offset: int) -> int:
    return (buf[offset] << 8) | buf[offset + 1]


def _count_channels(header: bytes) -> int:
    signature = (_s8(header[1082]) << 8) | _s8(header[1083])
    if signature in (0x4B2E, 0x4B21, 0x542E, 0x5434):  # M.K. M!K! N.T. FLT4
        count = 4
    elif signature == 0x484E:  # xCHN
        count = _s8(header[1080]) - 48
    elif signature == 0x4348:  # xxCH
        count = (_s8(header[1080]) - 48) * 10 + (_s8(header[1081]) - 48)
    else:
        count = 0
    return 0 if count > MAX_CHANNELS else count


def _count_patterns(header: bytes) -> int:
    return max(entry & 0x7F for entry in header[952:1080]) + 1


def _checked_channels(header: bytes) -> int:
    if len(header) < HEADER_SIZE:
        raise ModuleError(
            f"module header needs {HEADER_SIZE} bytes, got {len(header)}"
        )
    channels = _count_channels(header)
    if channels <= 0:
        raise ModuleError("data is not recognised as a module")
    return channels


def calculate_mod_file_len(header: ModuleData) -> int:
    """Return the length in bytes of a module file given its 1084-byte header."""
    header = bytes(header)
    channels = _checked_channels(header)
    length = HEADER_SIZE + 4 * channels * 64 * _count_patterns(header)
    length += sum(_u16_be(header, idx * 30 + 12) * 2 for idx in range(1, 32))
    return length


@dataclass(slots=True)
class _Note:
    key: int = 0
    instrument: int = 0
    effect: int = 0
    param: int = 0


@dataclass(slots=True)
class _Instrument:
    volume: int = 0
    fine_tune: int = 0
    loop_start: int = 0
    loop_length: int = 0
    sample_data: array = field(default_factory=lambda: array("b"))


@dataclass(slots=True)
class _Channel:
    note: _Note = field(default_factory=_Note)
    period: int = 0
    porta_period: int = 0
    sample_offset: int = 0
    sample_idx: int = 0
    step: int = 0
    volume: int = 0
    panning: int = 0
    fine_tune: int = 0
    ampl: int = 0
    mute: bool = False
    id: int = 0
    instrument: int = 0
    assigned: int = 0
    porta_speed: int = 0
    pl_row: int = 0
    fx_count: int = 0
    vibrato_type: int = 0
    vibrato_phase: int = 0
    vibrato_speed: int = 0
    vibrato_depth: int = 0
    tremolo_type: int = 0
    tremolo_phase: int = 0
    tremolo_speed: int = 0
    tremolo_depth: int = 0
    tremolo_add: int = 0
    vibrato_add: int = 0
    arpeggio_add: int = 0


class Micromod:
    """Player for one module, rendering interleaved 16-bit stereo samples."""

    def __init__(self, data: ModuleData, sampling_rate: int) -> None:
        data = bytes(data)
        channels = _checked_channels(data)
        if sampling_rate < 8000:
            raise ModuleError(
                f"sampling rate must be at least 8000 Hz, got {sampling_rate}"
            )
        total = calculate_mod_file_len(data)
        if len(data) < total:
            data += bytes(total - len(data))

        self._data = data
        self._num_channels = channels
        self._sample_rate = sampling_rate
        self._song_length = data[950] & 0x7F
        restart = data[951] & 0x7F
        self._restart = 0 if restart >= self._song_length else restart
        num_patterns = _count_patterns(data)

        self._instruments = [_Instrument()]
        sample_offset = HEADER_SIZE + num_patterns * 64 * channels * 4
        for idx in range(1, 32):
            base = idx * 30
            sample_length = _u16_be(data, base + 12) * 2
            fine_tune = data[base + 14] & 0xF
            volume = data[base + 15] & 0x7F
            loop_start = _u16_be(data, base + 16) * 2
            loop_length = _u16_be(data, base + 18) * 2
            if loop_start + loop_length > sample_length:
                if loop_start // 2 + loop_length <= sample_length:
                    # Some old modules give the loop start in bytes.
                    loop_start //= 2
                else:
                    loop_length = sample_length - loop_start
            if loop_length < 4:
                loop_start = sample_length
                loop_length = 0
            self._instruments.append(_Instrument(
                volume=min(volume, 64),
                fine_tune=(fine_tune & 0x7) - (fine_tune & 0x8) + 8,
                loop_start=loop_start << FP_SHIFT,
                loop_length=loop_length << FP_SHIFT,
                sample_data=array("b", data[sample_offset:sample_offset + sample_length]),
            ))
            sample_offset += sample_length

        self._c2_rate = 8363 if channels > 4 else 8287
        self._gain = 32 if channels > 4 else 64
        self._channels = [_Channel() for _ in range(channels)]

        self._tick_len = 0
        self._tick_offset = 0
        self._pattern = 0
        self._break_pattern = 0
        self._row = 0
        self._next_row = 0
        self._tick = 0
        self._speed = 0
        self._pl_count = -1
        self._pl_channel = -1
        self._random_seed = 0

        self.mute_channel(-1)
        self.set_position(0)

    # Public interface.

    def num_channels(self) -> int:
        return self._num_channels

    def get_string(self, instrument: int) -> str:
        """Return the song name (instrument 0) or the name of an instrument."""
        offset, length = 0, 20
        if 0 < instrument < 32:
            offset, length = (instrument - 1) * 30 + 20, 22
        return "".join(
            chr(c) if 32 <= c <= 126 else " "
            for c in self._data[offset:offset + length]
        )

    def calculate_song_duration(self) -> int:
        """Return the song duration in samples at the current sampling rate."""
        self.set_position(0)
        duration = 0
        song_end = False
        while not song_end:
            duration += self._tick_len
            song_end = self._sequence_tick()
        self.set_position(0)
        return duration

    def set_position(self, pos: int) -> None:
        """Jump to a pattern position in the sequence."""
        if pos >= self._song_length:
            pos = 0
        self._break_pattern = pos
        self._next_row = 0
        self._tick = 1
        self._speed = 6
        self._set_tempo(125)
        self._pl_count = self._pl_channel = -1
        self._random_seed = 0xABCDEF
        for idx, chan in enumerate(self._channels):
            chan.id = idx
            chan.instrument = chan.assigned = 0
            chan.volume = 0
            chan.panning = 0 if (idx & 0x3) in (0, 3) else 127
        self._sequence_tick()
        self._tick_offset = 0

    def mute_channel(self, channel: int) -> int:
        """Mute a channel, or unmute all when ``channel`` is negative.

        Returns the number of channels.
        """
        if channel < 0:
            for chan in self._channels:
                chan.mute = False
        elif channel < self._num_channels:
            self._channels[channel].mute = True
        return self._num_channels

    def set_gain(self, value: int) -> None:
        """Set the playback gain (64 suits 4 channels, 32 or less suits 8)."""
        self._gain = value

    def get_audio(self, count: int) -> list[int]:
        """Render ``count`` stereo samples as an interleaved list of 16-bit values."""
        buffer = [0] * (2 * max(count, 0))
        self._render(buffer, count)
        return [_wrap_s16(v) for v in buffer]

    def skip(self, count: int) -> None:
        """Advance playback by ``count`` samples without producing audio."""
        self._render(None, count)

    # Sequencing.

    def _set_tempo(self, tempo: int) -> None:
        rate = self._sample_rate
        self._tick_len = ((rate << 1) + (rate >> 1)) // tempo

    def _render(self, buffer: Optional[list[int]], count: int) -> None:
        offset = 0
        while count > 0:
            remain = min(self._tick_len - self._tick_offset, count)
            for chan in self._channels:
                self._resample(chan, buffer, offset, remain)
            self._tick_offset += remain
            if self._tick_offset == self._tick_len:
                self._sequence_tick()
                self._tick_offset = 0
            offset += remain
            count -= remain

    def _sequence_tick(self) -> bool:
        self._tick -= 1
        if self._tick <= 0:
            self._tick = self._speed
            return self._sequence_row()
        for chan in self._channels:
            self._channel_tick(chan)
        return False

    def _sequence_row(self) -> bool:
        song_end = False
        if self._next_row < 0:
            self._break_pattern = self._pattern + 1
            self._next_row = 0
        if self._break_pattern >= 0:
            if self._break_pattern >= self._song_length:
                self._break_pattern = self._next_row = 0
            if self._break_pattern <= self._pattern:
                song_end = True
            self._pattern = self._break_pattern
            for chan in self._channels:
                chan.pl_row = 0
            self._break_pattern = -1
        self._row = self._next_row
        self._next_row = self._row + 1
        if self._next_row >= 64:
            self._next_row = -1

        channels = self._num_channels
        start = HEADER_SIZE + (self._data[952 + self._pattern] * 64 + self._row) * channels * 4
        cells = self._data[start:start + channels * 4]
        if len(cells) < channels * 4:
            cells += bytes(channels * 4 - len(cells))

        for idx, chan in enumerate(self._channels):
            b0, b1, b2, b3 = cells[idx * 4:idx * 4 + 4]
            note = chan.note
            note.key = ((b0 & 0xF) << 8) | b1
            note.instrument = (b2 >> 4) | (b0 & 0x10)
            effect = b2 & 0xF
            param = b3
            if effect == 0xE:
                effect = 0x10 | (param >> 4)
                param &= 0xF
            if effect == 0 and param > 0:
                effect = 0xE
            note.effect = effect
            note.param = param
            self._channel_row(chan)
        return song_end

    # Channel processing.

    def _update_frequency(self, chan: _Channel) -> None:
        period = chan.period + chan.vibrato_add
        period = (period * _ARP_TUNING[chan.arpeggio_add]) >> 11
        period = (period >> 1) + (period & 1)
        if period < 14:
            period = 6848
        freq = self._c2_rate * 428 // period
        chan.step = (freq << FP_SHIFT) // self._sample_rate
        volume = min(max(chan.volume + chan.tremolo_add, 0), 64)
        chan.ampl = ((volume * self._gain) >> 5) & 0xFF

    @staticmethod
    def _tone_portamento(chan: _Channel) -> None:
        source, dest = chan.period, chan.porta_period
        if source < dest:
            source = min(source + chan.porta_speed, dest)
        elif source > dest:
            source = max(source - chan.porta_speed, dest)
        chan.period = source

    @staticmethod
    def _volume_slide(chan: _Channel, param: int) -> None:
        volume = chan.volume + (param >> 4) - (param & 0xF)
        chan.volume = min(max(volume, 0), 64)

    def _waveform(self, phase: int, kind: int) -> int:
        kind &= 0x3
        if kind == 0:  # Sine.
            amplitude = _SINE_TABLE[phase & 0x1F]
            if phase & 0x20:
                amplitude = -amplitude
        elif kind == 1:  # Saw down.
            amplitude = 255 - (((phase + 0x20) & 0x3F) << 3)
        elif kind == 2:  # Square.
            amplitude = 255 - ((phase & 0x20) << 4)
        else:  # Random.
            amplitude = (self._random_seed >> 20) - 255
            self._random_seed = (self._random_seed * 65 + 17) & 0x1FFFFFFF
        return amplitude

    def _vibrato(self, chan: _Channel) -> None:
        wave = self._waveform(chan.vibrato_phase, chan.vibrato_type)
        chan.vibrato_add = _wrap_s8((wave * chan.vibrato_depth) >> 7)

    def _tremolo(self, chan: _Channel) -> None:
        wave = self._waveform(chan.tremolo_phase, chan.tremolo_type)
        chan.tremolo_add = _wrap_s8((wave * chan.tremolo_depth) >> 6)

    def _trigger(self, chan: _Channel) -> None:
        note = chan.note
        ins = note.instrument
        if 0 < ins < 32:
            inst = self._instruments[ins]
            chan.assigned = ins
            chan.sample_offset = 0
            chan.fine_tune = inst.fine_tune
            chan.volume = inst.volume
            if inst.loop_length > 0 and chan.instrument > 0:
                chan.instrument = ins
        if note.effect == 0x09:
            chan.sample_offset = (note.param & 0xFF) << 8
        elif note.effect == 0x15:
            chan.fine_tune = note.param
        if note.key > 0:
            period = (note.key * _FINE_TUNING[chan.fine_tune & 0xF]) >> 11
            chan.porta_period = ((period >> 1) + (period & 1)) & 0xFFFF
            if note.effect not in (0x3, 0x5):
                chan.instrument = chan.assigned
                chan.period = chan.porta_period
                chan.sample_idx = chan.sample_offset << FP_SHIFT
                if chan.vibrato_type < 4:
                    chan.vibrato_phase = 0
                if chan.tremolo_type < 4:
                    chan.tremolo_phase = 0

    def _channel_row(self, chan: _Channel) -> None:
        effect = chan.note.effect
        param = chan.note.param
        chan.vibrato_add = chan.tremolo_add = chan.arpeggio_add = chan.fx_count = 0
        if not (effect == 0x1D and param > 0):
            self._trigger(chan)

        if effect == 0x3:  # Tone portamento.
            if param > 0:
                chan.porta_speed = param
        elif effect == 0x4:  # Vibrato.
            if param & 0xF0:
                chan.vibrato_speed = param >> 4
            if param & 0x0F:
                chan.vibrato_depth = param & 0xF
            self._vibrato(chan)
        elif effect == 0x6:  # Vibrato and volume slide.
            self._vibrato(chan)
        elif effect == 0x7:  # Tremolo.
            if param & 0xF0:
                chan.tremolo_speed = param >> 4
            if param & 0x0F:
                chan.tremolo_depth = param & 0xF
            self._tremolo(chan)
        elif effect == 0x8:  # Set panning; not for 4-channel modules.
            if self._num_channels != 4:
                chan.panning = param if param < 128 else 127
        elif effect == 0xB:  # Pattern jump.
            if self._pl_count < 0:
                self._break_pattern = param
                self._next_row = 0
        elif effect == 0xC:  # Set volume.
            chan.volume = min(param, 64)
        elif effect == 0xD:  # Pattern break.
            if self._pl_count < 0:
                if self._break_pattern < 0:
                    self._break_pattern = self._pattern + 1
                self._next_row = (param >> 4) * 10 + (param & 0xF)
                if self._next_row >= 64:
                    self._next_row = 0
        elif effect == 0xF:  # Set speed or tempo.
            if param > 0:
                if param < 32:
                    self._tick = self._speed = param
                else:
                    self._set_tempo(param)
        elif effect == 0x11:  # Fine portamento up.
            chan.period = max(chan.period - param, 0)
        elif effect == 0x12:  # Fine portamento down.
            chan.period = min(chan.period + param, 65535)
        elif effect == 0x14:  # Vibrato waveform.
            if param < 8:
                chan.vibrato_type = param
        elif effect == 0x16:  # Pattern loop.
            if param == 0:
                chan.pl_row = self._row & 0xFF
            if chan.pl_row < self._row and self._break_pattern < 0:
                if self._pl_count < 0:
                    self._pl_count = param
                    self._pl_channel = chan.id
                if self._pl_channel == chan.id:
                    if self._pl_count == 0:
                        chan.pl_row = (self._row + 1) & 0xFF
                    else:
                        self._next_row = chan.pl_row
                    self._pl_count -= 1
        elif effect == 0x17:  # Tremolo waveform.
            if param < 8:
                chan.tremolo_type = param
        elif effect == 0x1A:  # Fine volume up.
            chan.volume = min(chan.volume + param, 64)
        elif effect == 0x1B:  # Fine volume down.
            chan.volume = max(chan.volume - param, 0)
        elif effect == 0x1C:  # Note cut.
            if param <= 0:
                chan.volume = 0
        elif effect == 0x1E:  # Pattern delay.
            self._tick = self._speed + self._speed * param
        self._update_frequency(chan)

    def _channel_tick(self, chan: _Channel) -> None:
        effect = chan.note.effect
        param = chan.note.param
        chan.fx_count = (chan.fx_count + 1) & 0xFF

        if effect == 0x1:  # Portamento up.
            chan.period = max(chan.period - param, 0)
        elif effect == 0x2:  # Portamento down.
            chan.period = min(chan.period + param, 65535)
        elif effect == 0x3:  # Tone portamento.
            self._tone_portamento(chan)
        elif effect == 0x4:  # Vibrato.
            chan.vibrato_phase = (chan.vibrato_phase + chan.vibrato_speed) & 0xFF
            self._vibrato(chan)
        elif effect == 0x5:  # Tone portamento and volume slide.
            self._tone_portamento(chan)
            self._volume_slide(chan, param)
        elif effect == 0x6:  # Vibrato and volume slide.
            chan.vibrato_phase = (chan.vibrato_phase + chan.vibrato_speed) & 0xFF
            self._vibrato(chan)
            self._volume_slide(chan, param)
        elif effect == 0x7:  # Tremolo.
            chan.tremolo_phase = (chan.tremolo_phase + chan.tremolo_speed) & 0xFF
            self._tremolo(chan)
        elif effect == 0xA:  # Volume slide.
            self._volume_slide(chan, param)
        elif effect == 0xE:  # Arpeggio.
            if chan.fx_count > 2:
                chan.fx_count = 0
            if chan.fx_count == 0:
                chan.arpeggio_add = 0
            elif chan.fx_count == 1:
                chan.arpeggio_add = param >> 4
            else:
                chan.arpeggio_add = param & 0xF
        elif effect == 0x19:  # Retrigger.
            if chan.fx_count >= param:
                chan.fx_count = 0
                chan.sample_idx = 0
        elif effect == 0x1C:  # Note cut.
            if param == chan.fx_count:
                chan.volume = 0
        elif effect == 0x1D:  # Note delay.
            if param == chan.fx_count:
                self._trigger(chan)
        if effect > 0:
            self._update_frequency(chan)

    # Mixing.

    def _resample(self, chan: _Channel, buf: Optional[list[int]],
                  offset: int, count: int) -> None:
        buf_idx = offset << 1
        buf_end = (offset + count) << 1
        sidx = chan.sample_idx
        step = chan.step
        inst = self._instruments[chan.instrument]
        llen = inst.loop_length
        lep1 = inst.loop_start + llen
        sdat = inst.sample_data
        ampl = chan.ampl if buf is not None and not chan.mute else 0
        lamp = (ampl * (127 - chan.panning)) >> 5
        ramp = (ampl * chan.panning) >> 5

        while buf_idx < buf_end:
            if sidx >= lep1:
                if llen <= FP_ONE:
                    # One-shot sample has finished.
                    sidx = lep1
                    break
                while sidx >= lep1:
                    sidx -= llen
            epos = sidx + ((buf_end - buf_idx) >> 1) * step
            if lamp or ramp:
                # Only mix up to the end of the current loop.
                epos = min(epos, lep1)
                if lamp and ramp:
                    while sidx < epos:
                        sample = sdat[sidx >> FP_SHIFT]
                        buf[buf_idx] += (sample * lamp) >> 2
                        buf[buf_idx + 1] += (sample * ramp) >> 2
                        buf_idx += 2
                        sidx += step
                else:
                    if ramp:
                        buf_idx += 1
                    while sidx < epos:
                        buf[buf_idx] += sdat[sidx >> FP_SHIFT] * ampl
                        buf_idx += 2
                        sidx += step
                    buf_idx &= -2
            else:
                buf_idx = buf_end
                sidx = epos
        chan.sample_idx = sidx