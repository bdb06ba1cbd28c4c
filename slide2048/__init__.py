"""
Slide2048 - Sliding-block puzzle engine

A deterministic engine for the 4x4 sliding-tile game. It provides:
- The tile grid
- Directional move/merge with change detection
- Random tile spawning after a successful move
- Change notification for a presentation layer
"""

__version__ = "0.1.0"
