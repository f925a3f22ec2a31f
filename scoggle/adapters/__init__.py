"""
Adapters — the only code that touches external commands.
"""

from scoggle.adapters.base import CommandReceipt, CommandRunner

__all__ = ["CommandReceipt", "CommandRunner"]
