"""Command-line interface for socialgraph."""

from socialgraph.cli.main import cli

__all__ = ["cli"]
