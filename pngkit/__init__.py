"""Building blocks for PNG images: chunk types, Adam7 interlacing, pixel formats and metadata."""

__version__ = "0.1.0"
__all__ = ["adam7", "chunk", "metadata", "pixel"]