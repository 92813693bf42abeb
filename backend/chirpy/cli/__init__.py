"""
Chirpy CLI Module.

This module provides a command-line interface for running the API server and
inspecting the database.

Example:
    >>> from backend.chirpy.cli import cli
    >>> cli()
"""

from backend.chirpy.cli.main import cli

__all__ = ['cli']
