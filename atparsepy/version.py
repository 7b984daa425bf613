"""Version information for atparsepy."""

__version__ = "0.1.0"
