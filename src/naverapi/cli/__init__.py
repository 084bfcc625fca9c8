"""Command-line interface for naverapi."""

from .cli import cli

__all__ = ["cli"]
