"""Command line interface for obake."""

from .main import cli

__all__ = ["cli"]
