"""Galfin command-line interface."""

from galfin.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
