"""gitread CLI — Typer-based command-line interface.

Provides the ``gitread`` command with ``cat-file`` and ``log`` subcommands.
All output uses Rich for formatted terminal display.
"""
