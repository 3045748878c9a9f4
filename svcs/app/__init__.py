"""Command-line interface for SVCS."""

from .cli import main

__all__ = ["main"]
