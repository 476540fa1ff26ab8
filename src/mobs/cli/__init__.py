"""MOBS command-line interface."""

from mobs.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
