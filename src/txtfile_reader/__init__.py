"""Resolve path specifications into readable files and split them for parallel readers."""

__version__ = "0.1.0"
