"""
AT command model.

Decomposes raw AT command strings into start marker, command identifier,
end marker and payload, and serializes them back to wire form.
"""

import logging
from dataclasses import dataclass

from ..types import START_MARKERS, END_MARKERS, CommandType

logger = logging.getLogger(__name__)

AT_PREFIX = "AT"


@dataclass
class AtCommand:
    """
    A single AT command.

    Either build one from a raw string with :meth:`from_raw`, or
    default-construct it and fill the fields by hand.

    Attributes:
        start_marker_index: Index into START_MARKERS (0 = no marker)
        end_marker_index: Index into END_MARKERS (0 = no marker)
        command_id: Start marker followed by the command name (e.g. "+CSQ")
        command_payload: Text following the end marker
    """
    start_marker_index: int = 0
    end_marker_index: int = 0
    command_id: str = ""
    command_payload: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.start_marker_index < len(START_MARKERS):
            raise ValueError(
                f"start_marker_index out of range: {self.start_marker_index}"
            )
        if not 0 <= self.end_marker_index < len(END_MARKERS):
            raise ValueError(
                f"end_marker_index out of range: {self.end_marker_index}"
            )

    @classmethod
    def from_raw(cls, raw: str) -> "AtCommand":
        """
        Tokenize a raw AT command.

        Args:
            raw: Raw command text (e.g. "AT+CSQ?")

        Returns:
            Parsed AtCommand. Input not starting with "AT" yields an
            all-default command.

        Example:

        .. code-block:: python

            cmd = AtCommand.from_raw('AT+ABC=1,"abc"')
            assert cmd.command_id == "+ABC"
            assert cmd.command_payload == '1,"abc"'
        """
        return parse_command(raw)

    @property
    def start_marker(self) -> str:
        """Literal start marker text."""
        return START_MARKERS[self.start_marker_index]

    @property
    def end_marker(self) -> str:
        """Literal end marker text."""
        return END_MARKERS[self.end_marker_index]

    @property
    def command_type(self) -> CommandType:
        """Command form derived from the end marker."""
        return CommandType(self.end_marker_index)

    @property
    def name(self) -> str:
        """Command identifier without its start marker (e.g. "CSQ")."""
        if self.start_marker and self.command_id.startswith(self.start_marker):
            return self.command_id[len(self.start_marker):]
        return self.command_id

    def get_raw_command(self) -> str:
        """
        Generate the raw AT command.

        Returns:
            "AT" + command_id + end marker + payload
        """
        return AT_PREFIX + self.command_id + self.end_marker + self.command_payload

    def __str__(self) -> str:
        return self.get_raw_command()


def parse_command(raw: str) -> AtCommand:
    """
    Tokenize a raw AT command string.

    End markers are searched in table order, not by leftmost occurrence:
    "AT#Z=?" is a Test command even though "=" would also match.

    Args:
        raw: Raw command text

    Returns:
        Parsed AtCommand
    """
    command = AtCommand()

    if not raw.startswith(AT_PREFIX) or len(raw) == len(AT_PREFIX):
        logger.debug(f"Not an AT command, leaving defaults: {raw!r}")
        return command

    pos = len(AT_PREFIX)

    # Check start marker
    for index in range(1, len(START_MARKERS)):
        if raw[pos] == START_MARKERS[index]:
            command.start_marker_index = index
            pos += 1
            break

    remainder = raw[pos:]
    start_marker = command.start_marker

    # First end marker found in table order wins
    for index in range(1, len(END_MARKERS)):
        marker = END_MARKERS[index]
        found = remainder.find(marker)
        if found != -1:
            command.end_marker_index = index
            command.command_id = start_marker + remainder[:found]
            command.command_payload = remainder[found + len(marker):]
            break
    else:
        command.command_id = start_marker + remainder

    logger.debug(
        f"Tokenized {raw!r}: ms={command.start_marker_index}, "
        f"me={command.end_marker_index}, id={command.command_id!r}, "
        f"payload={command.command_payload!r}"
    )
    return command
