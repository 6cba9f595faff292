"""
Commands package.
"""

from .members_cli import cmd_members
from .options_cli import cmd_options
from .types_cli import cmd_types

__all__ = [
    "cmd_members",
    "cmd_options",
    "cmd_types",
]
