"""
Exceptions for atparsepy library.

Parser trees report failures through ``ErrorCode`` values; these exceptions
are raised by the strict helpers built on top of them.
"""

from typing import Optional


class ATError(Exception):
    """
    Base exception for AT command handling errors.

    All atparsepy exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        response: Optional[str] = None
    ) -> None:
        """
        Initialize exception with context.

        Args:
            message: Error description
            command: AT command identifier involved (if applicable)
            response: Raw response text (if applicable)
        """
        self.command = command
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with context."""
        parts = [super().__str__()]

        if self.command:
            parts.append(f"Command: {self.command}")

        if self.response:
            parts.append(f"Response: {self.response!r}")

        return " | ".join(parts)


class ATParseError(ATError):
    """
    Raised when an AT command response cannot be parsed.

    This indicates:
    - Command echo not found in the response
    - Missing delimiter or field
    - Malformed numeric value
    """
    pass


class ParserNotSupportedError(ATError):
    """
    Raised when a parser kind that performs no extraction is asked to parse.
    """
    pass
