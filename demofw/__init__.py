"""Demo framework: fast math, easing, animation, pixel drawing, images, font layout and MOD playback to sample buffers."""

__version__ = "0.1.0"