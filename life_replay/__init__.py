"""
Life Replay - a local mood journal that turns your day into a story.

This package provides the entry store, the weekly insight engine and the
template-driven story generator, plus a small local HTTP API and CLI on top.
"""

__version__ = "0.1.0"
