"""Keyboard-driven sound launchpad: sounds bound to keys, mixed in channel groups."""

__version__ = "0.1.0"
__all__ = ["__version__"]