"""
Network-specific response parsers.

Typed parsers for signal, registration and operator responses, built as
parser trees over the raw response text.
"""

import logging
from typing import Optional

from .base import Parser, ResponseParser, strip_quotes
from .fields import CommandParser, CommaSplitParser
from ..types import (
    ErrorCode,
    IntegerSlot,
    StringSlot,
    SignalQuality,
    RegistrationStatus,
    CurrentOperator
)
from ..exceptions import ATParseError

logger = logging.getLogger(__name__)


def _run(tree: Parser, response: str, command: str, what: str) -> None:
    """Parse response with tree, raising ATParseError on failure."""
    if tree.parse(response) != ErrorCode.SUCCESS:
        raise ATParseError(
            f"Failed to parse {what}",
            command=command,
            response=response
        )


def _has_field(command: str, response: str, position: int) -> bool:
    """Check whether the response carries a comma field at position."""
    tree = CommandParser("AT" + command)
    tree.add_child_parser(
        CommaSplitParser(position).bind_string_output(StringSlot())
    )
    return tree.parse(response) == ErrorCode.SUCCESS


class SignalQualityParser(ResponseParser[SignalQuality]):
    """Parser for +CSQ (signal quality) response."""

    command = "+CSQ"

    def parse(self, response: str) -> SignalQuality:
        """
        Parse +CSQ response.

        Expected format: "+CSQ: 24,99"
        """
        rssi = IntegerSlot()
        ber = IntegerSlot()

        tree = CommandParser("AT" + self.command)
        tree.add_child_parser(
            CommaSplitParser(0).bind_integer_output(rssi)
        ).add_child_parser(
            CommaSplitParser(1).bind_integer_output(ber)
        )

        _run(tree, response, self.command, "signal quality")
        return SignalQuality(rssi=rssi.value, ber=ber.value)


class RegistrationStatusParser(ResponseParser[RegistrationStatus]):
    """Parser for +CREG/+CGREG/+CEREG (registration status) response."""

    def __init__(self, command: str = "+CREG") -> None:
        """
        Initialize parser.

        Args:
            command: Echoed command identifier ("+CREG", "+CGREG", "+CEREG")
        """
        self.command = command

    def parse(self, response: str) -> RegistrationStatus:
        """
        Parse registration status response.

        Expected formats:
            "+CREG: 0,1"                        (minimal)
            "+CREG: 2,1,\"1A2B\",\"5678\""      (with location)
            "+CREG: 2,1,\"1A2B\",\"5678\",7"    (with location and act)
        """
        n = IntegerSlot()
        stat = IntegerSlot()

        tree = CommandParser("AT" + self.command)
        tree.add_child_parser(
            CommaSplitParser(0).bind_integer_output(n)
        ).add_child_parser(
            CommaSplitParser(1).bind_integer_output(stat)
        )
        _run(tree, response, self.command, "registration status")

        lac = self._optional_string(response, 2)
        ci = self._optional_string(response, 3)
        act = self._optional_int(response, 4)

        return RegistrationStatus(
            n=n.value,
            stat=stat.value,
            lac=lac,
            ci=ci,
            act=act
        )

    def _optional_string(self, response: str, position: int) -> Optional[str]:
        slot = StringSlot()
        tree = CommandParser("AT" + self.command)
        tree.add_child_parser(CommaSplitParser(position).bind_string_output(slot))
        if tree.parse(response) != ErrorCode.SUCCESS:
            return None
        return slot.value

    def _optional_int(self, response: str, position: int) -> Optional[int]:
        if not _has_field(self.command, response, position):
            return None

        slot = IntegerSlot()
        tree = CommandParser("AT" + self.command)
        tree.add_child_parser(CommaSplitParser(position).bind_integer_output(slot))
        _run(tree, response, self.command, "access technology")
        return slot.value


class CurrentOperatorParser(ResponseParser[Optional[CurrentOperator]]):
    """Parser for +COPS (current operator) response."""

    command = "+COPS"

    def parse(self, response: str) -> Optional[CurrentOperator]:
        """
        Parse +COPS response.

        Expected format: "+COPS: 0,0,\"AT&T\",7"
        Returns None if only the mode is present ("+COPS: 0")
        """
        mode = IntegerSlot()
        mode_tree = CommandParser("AT" + self.command)
        mode_tree.add_child_parser(CommaSplitParser(0).bind_integer_output(mode))
        _run(mode_tree, response, self.command, "operator mode")

        if not _has_field(self.command, response, 1):
            logger.debug("No operator selected")
            return None

        # The operator name may itself contain commas: <act> is the last
        # field and the name is everything between <format> and <act>
        start = response.find(self.command) + len(self.command) + 1
        line = response[start:].split("\r")[0]
        last = line.count(",")
        if last < 3:
            raise ATParseError(
                "Failed to parse operator info",
                command=self.command,
                response=response
            )

        fmt = IntegerSlot()
        act = IntegerSlot()

        tree = CommandParser("AT" + self.command)
        tree.add_child_parser(
            CommaSplitParser(1).bind_integer_output(fmt)
        ).add_child_parser(
            CommaSplitParser(last).bind_integer_output(act)
        )
        _run(tree, response, self.command, "operator info")

        oper = strip_quotes(line.split(",", 2)[2].rpartition(",")[0])

        return CurrentOperator(
            mode=mode.value,
            format=fmt.value,
            oper=oper,
            act=act.value
        )
