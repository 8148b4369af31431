"""pomforge CLI — Typer-based command-line interface.

Provides the ``pomforge`` command, which runs one or more repository
maintenance tasks in the order given.

All output uses Rich for formatted terminal display.
"""
