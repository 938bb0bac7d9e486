"""Prisoners CLI module.

Provides a thin command-line front end over the match engine.

Usage:
    prisoners 10 cheat tit-for-tat

Or directly:
    python -m prisoners.cli.app 10 cheat tit-for-tat
"""

from prisoners.cli.app import build_parser, main

__all__ = ["build_parser", "main"]
