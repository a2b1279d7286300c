"""WebVis scenario backend: scenario file parsing and the move-sequence model."""

__version__ = "0.1.0"
