"""
Core command model.

Provides the AT command tokenizer:
- AtCommand: Structured representation of one AT command
- parse_command: Raw string to AtCommand
"""

from .command import AtCommand, parse_command

__all__ = [
    "AtCommand",
    "parse_command",
]
