# invsync Output Module
# Rich console output

from invsync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
