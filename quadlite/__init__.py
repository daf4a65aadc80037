"""Game-loop building blocks: math, images, atlas, input, timing, profiling, coroutines, state machines and scenes."""

__version__ = "0.1.0"