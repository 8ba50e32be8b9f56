"""Inkwell command line interface."""

from inkwell.cli.main import app, run

__all__ = ["app", "run"]
