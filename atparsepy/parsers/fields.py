"""
Field parsers.

Concrete parser tree nodes: command echo, comma-split, parentheses and
name-value.
"""

import logging
from typing import Optional, Union

from .base import Parser
from ..core.command import AtCommand, parse_command
from ..types import ErrorCode, ParserKind

logger = logging.getLogger(__name__)


class CommandParser(Parser):
    """
    Parser for responses that echo the command identifier up front.

    E.g. "+CSQ: 24,99" for AT+CSQ. The identifier and the one character
    after it are skipped; the rest goes to the output or children.
    """

    kind = ParserKind.COMMAND

    def __init__(self, command: Union[AtCommand, str]) -> None:
        """
        Initialize parser.

        Args:
            command: Command sent originally, as AtCommand or raw string

        Raises:
            ValueError: If a raw string does not tokenize to a command identifier
        """
        super().__init__()
        if isinstance(command, str):
            raw = command
            command = parse_command(raw)
            if not command.command_id:
                raise ValueError(f"Not an AT command: {raw!r}")
        self.command = command

    def parse(self, response: str) -> ErrorCode:
        """Locate the command identifier and parse what follows."""
        command_id = self.command.command_id
        start = response.find(command_id)
        if start == -1:
            logger.debug(f"Command {command_id!r} not found in {response!r}")
            return ErrorCode.ERROR

        return self.cast_output(response[start + len(command_id) + 1:])

    @property
    def context_command(self) -> Optional[str]:
        return self.command.command_id

    def __repr__(self) -> str:
        return f"CommandParser(command={self.command.command_id!r})"


class CommaSplitParser(Parser):
    """
    Parser for payloads split by commas.

    E.g. <a>,<b>. The selected field ends at the next comma, or at a
    carriage return if no comma follows.
    """

    kind = ParserKind.COMMA_SPLIT

    def parse(self, response: str) -> ErrorCode:
        """Select the field at self.position and parse it."""
        remaining = response
        for _ in range(self.position):
            comma = remaining.find(",")
            if comma == -1:
                logger.debug(
                    f"Field {self.position} missing in {response!r}"
                )
                return ErrorCode.ERROR
            remaining = remaining[comma + 1:]

        end = remaining.find(",")
        if end == -1:
            end = remaining.find("\r")

        if end == -1:
            return self.cast_output(remaining)
        return self.cast_output(remaining[:end])


class ParenthesesParser(Parser):
    """
    Parser for payloads split by parentheses.

    E.g. (a)(b). Only the first group is extracted; position is kept
    for callers but does not select a group.
    """

    kind = ParserKind.PARENTHESES

    def parse(self, response: str) -> ErrorCode:
        """Parse the text inside the first pair of parentheses."""
        start = response.find("(")
        if start == -1:
            logger.debug(f"No '(' in {response!r}")
            return ErrorCode.ERROR

        end = response.find(")", start + 1)
        if end == -1:
            logger.debug(f"No ')' after '(' in {response!r}")
            return ErrorCode.ERROR

        return self.cast_output(response[start + 1:end])


class NameValueParser(Parser):
    """
    Parser for payloads split as name value pairs.

    E.g. <a>:<b> <c>:<d>. Not implemented: parse always reports
    ErrorCode.NOT_SUPPORTED.
    """

    kind = ParserKind.NAME_VALUE

    def parse(self, response: str) -> ErrorCode:
        return ErrorCode.NOT_SUPPORTED
