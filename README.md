# demofw

A small pure-Python toolkit for demo-style effects. It has no dependencies
beyond the standard library.

## What is in it

- `demofw.types`: `TimerData` (frame timing; `advance(now_millis)` updates
  `delta` and `elapsed` in seconds) and the small vectors `Vec2f`, `Vec2i`,
  `Vec3f`, `Vec3i`, `Vec4f`, `Vec4i`.
- `demofw.fastmath`: fast approximations with fixed, reproducible results:
  polynomial `sinf`, `cosf`, `tanf`, `sincosf`; bit-trick `invsqrtf`, `sqrtf`,
  `exp`, `log`, `exp2f`, `log2f`, `powf`; `floorf`, `ceilf`, `roundf`,
  `remainder`, `fmodf`, `copy_sign`, `fabsf`, `sign`; and `Rand`, a linear
  congruential generator returning values in `0..RAND_MAX` (`0x7FFF`).
- `demofw.vecmath`: `normalize`, `dot`, `scale`, `length`, `length_squared`,
  `dist` on `Vec3f`; `randf`, `rand_int`; `sign`, `clamp`, `lerp` and `damp`
  (frame-rate independent damping).
- `demofw.lut`: `SinTable`, a sine/cosine lookup table whose size must be a
  power of two (default 1024).
- `demofw.easing`: easing curves `linear_interpolation` and the
  quadratic, cubic, quartic, quintic, sine, circular, exponential, elastic,
  back and bounce families, each as `*_ease_in`, `*_ease_out` and
  `*_ease_in_out`.
- `demofw.animation`: `Keyframe`, `Animation`, `AnimationSchedule`, `Scene`,
  `SceneSchedule` and `ScheduleState` for keyframe animation and timed scenes.
- `demofw.broadcast`: a process-wide exit flag (`request_exit`,
  `exit_requested`) and the `ExitSignal` class behind it.
- `demofw.pixels`: `PixelBuffer` with `clear`, `get`, `blit`, `blit_ext`
  (scaling, alpha blending, protected destination colours) and `create_mask`.
- `demofw.draw`: `draw_pixel`, `fill_box`, `flood_fill`, `draw_circle`,
  `draw_line` and `gradient_oval` on a `PixelBuffer`.
- `demofw.image`: `Image` (an RGBA `PixelBuffer` with sprites) and
  `SpriteImage`; `init_sprite` computes pixel and texture coordinates.
- `demofw.font`: `FontFace`, `FontGlyph` and `GlyphQuad`; computes line widths
  and lays text out as glyph rectangles with texture coordinates, optionally
  revealing only part of the text (`completion`).
- `demofw.micromod`: `Micromod`, a ProTracker MOD player rendering
  interleaved 16-bit stereo samples, plus `calculate_mod_file_len` and
  `version`. Bad data or a sampling rate below 8000 Hz raises `ModuleError`.
- `demofw.sound`: `Downsampler` (2:1 with anti-aliasing), `crossfeed`,
  `Reverb` and `SoundStream`, which pulls audio from a `Micromod` player and
  can write it to a 16-bit stereo WAV file at 48000 Hz.
- `demofw.fileio`: `read_bytes(filename)`.

## Installation

```
pip install demofw
```

To run the tests:

```
pip install "demofw[test]"
pytest
```

## Examples

Animate a value with an easing curve:

```python
from demofw.animation import Animation, AnimationSchedule, Keyframe
from demofw.easing import cubic_ease_in_out
from demofw.types import TimerData, Vec4f

position = Vec4f()
schedule = AnimationSchedule([
    Animation(
        keyframes=[Keyframe(0.0, 2.0, Vec4f(0, 0, 0, 0), Vec4f(100, 50, 0, 1),
                            position, cubic_ease_in_out)],
        is_autostart=True,
    )
])

time = TimerData()
time.advance(0)
schedule.process(time)      # starts the animation at elapsed 0.0
time.advance(1000)
schedule.process(time)      # halfway through: position is eased towards the target
```

Draw into a pixel buffer:

```python
from demofw.draw import draw_circle, draw_line, flood_fill
from demofw.pixels import PixelBuffer
from demofw.types import Vec4i

canvas = PixelBuffer.create(64, 64, 4)
white = Vec4i(255, 255, 255, 255)
draw_circle(canvas, 32, 32, 20, white)
flood_fill(canvas, 32, 32, Vec4i(200, 80, 150, 255))
draw_line(canvas, 0, 0, 63, 63, white)
print(canvas.get(32, 32))
```

Render a module file to WAV:

```python
from demofw.fileio import read_bytes
from demofw.micromod import Micromod
from demofw.sound import SoundStream

player = Micromod(read_bytes("song.mod"), 96000)   # 48000 Hz x 2 oversampling
print(player.get_string(0))                        # song name
stream = SoundStream(player, 16384, False)
stream.write_wav("song.wav", 32)
```

## What it does not do

- It opens no window and draws nothing on screen: images, sprites and fonts
  produce pixel data and glyph rectangles, which you hand to whatever
  renderer you use.
- It plays no sound through an audio device: `SoundStream` produces sample
  buffers and WAV files only.
- It has no command-line program; everything is used from Python.