"""
Base parser classes and utilities.

A response is parsed by a tree of Parser nodes. Each node isolates one
field of the text it receives, then either writes the field into a bound
output slot or hands it to its child parsers.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic

from ..types import ErrorCode, ParserKind, IntegerSlot, FloatSlot, StringSlot
from ..exceptions import ATParseError, ParserNotSupportedError

logger = logging.getLogger(__name__)

T = TypeVar('T')

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE
)


def parse_int_prefix(text: str) -> Optional[int]:
    """
    Parse the leading base-10 integer of text.

    Leading whitespace and a sign are accepted, trailing characters are
    ignored. Values outside the signed 64-bit range are rejected.

    Returns:
        Parsed value, or None if text does not start with an integer
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_float_prefix(text: str) -> Optional[float]:
    """
    Parse the leading floating-point number of text.

    Same tolerance as parse_int_prefix; also accepts inf and nan.

    Returns:
        Parsed value, or None if text does not start with a number
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def strip_quotes(text: str) -> str:
    """Remove at most one leading and one trailing double quote."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


class Parser(ABC):
    """
    Abstract base class for parser tree nodes.

    Output slots are borrowed: the caller owns them and must keep them
    alive as long as the parser. When more than one slot is bound, the
    integer slot wins, then the float slot, then the string slot. Child
    parsers only run when no slot is bound.

    Example:

    .. code-block:: python

        rssi, ber = IntegerSlot(), IntegerSlot()
        parser = CommandParser("AT+CSQ")
        parser.add_child_parser(
            CommaSplitParser(0).bind_integer_output(rssi)
        ).add_child_parser(
            CommaSplitParser(1).bind_integer_output(ber)
        )
        parser.parse("+CSQ: 24,99")
    """

    kind: ParserKind

    def __init__(self, position: int = 0) -> None:
        """
        Initialize parser.

        Args:
            position: Zero-based field index for split parsers
        """
        if position < 0:
            raise ValueError(f"Field position must be non-negative, got {position}")

        self.position = position
        self._int_out: Optional[IntegerSlot] = None
        self._float_out: Optional[FloatSlot] = None
        self._string_out: Optional[StringSlot] = None
        self._children: list["Parser"] = []

    @abstractmethod
    def parse(self, response: str) -> ErrorCode:
        """
        Parse response text.

        Args:
            response: Response text handed down by the caller or parent parser

        Returns:
            ErrorCode.SUCCESS, ErrorCode.ERROR or ErrorCode.NOT_SUPPORTED
        """
        pass

    @property
    def children(self) -> tuple["Parser", ...]:
        """Child parsers in execution order."""
        return tuple(self._children)

    def add_child_parser(self, parser: "Parser") -> "Parser":
        """
        Add a child parser.

        Children run in order on this parser's field when no output is bound.

        Returns:
            This parser, for chaining
        """
        if not isinstance(parser, Parser):
            raise TypeError(f"Child must be a Parser, got {type(parser).__name__}")
        self._children.append(parser)
        return self

    def bind_integer_output(self, slot: IntegerSlot) -> "Parser":
        """Write this parser's field into slot as an integer."""
        if not isinstance(slot, IntegerSlot):
            raise TypeError(f"Expected IntegerSlot, got {type(slot).__name__}")
        self._int_out = slot
        return self

    def bind_float_output(self, slot: FloatSlot) -> "Parser":
        """Write this parser's field into slot as a float."""
        if not isinstance(slot, FloatSlot):
            raise TypeError(f"Expected FloatSlot, got {type(slot).__name__}")
        self._float_out = slot
        return self

    def bind_string_output(self, slot: StringSlot) -> "Parser":
        """Write this parser's field into slot with surrounding quotes removed."""
        if not isinstance(slot, StringSlot):
            raise TypeError(f"Expected StringSlot, got {type(slot).__name__}")
        self._string_out = slot
        return self

    def cast_output(self, text: str) -> ErrorCode:
        """
        Store an isolated field, or pass it on to the child parsers.

        Slots are only written with a valid value; on failure they keep
        their previous contents.

        Args:
            text: Field text isolated by the concrete parser

        Returns:
            ErrorCode of the cast, or the first failing child result
        """
        if self._int_out is not None:
            value = parse_int_prefix(text)
            if value is None:
                logger.debug(f"Invalid integer field: {text!r}")
                return ErrorCode.ERROR
            self._int_out.value = value
            return ErrorCode.SUCCESS

        if self._float_out is not None:
            value = parse_float_prefix(text)
            if value is None:
                logger.debug(f"Invalid float field: {text!r}")
                return ErrorCode.ERROR
            self._float_out.value = value
            return ErrorCode.SUCCESS

        if self._string_out is not None:
            self._string_out.value = strip_quotes(text)
            return ErrorCode.SUCCESS

        if not self._children:
            logger.warning(f"{self!r} has no output and no children")
            return ErrorCode.SUCCESS

        for child in self._children:
            result = child.parse(text)
            if result != ErrorCode.SUCCESS:
                return result

        return ErrorCode.SUCCESS

    def parse_or_raise(self, response: str) -> None:
        """
        Parse response, raising on failure.

        Raises:
            ATParseError: If parsing returns ErrorCode.ERROR
            ParserNotSupportedError: If parsing returns ErrorCode.NOT_SUPPORTED
        """
        result = self.parse(response)

        if result == ErrorCode.ERROR:
            raise ATParseError(
                f"{self!r} failed to parse response",
                command=self.context_command,
                response=response
            )
        if result == ErrorCode.NOT_SUPPORTED:
            raise ParserNotSupportedError(
                f"{type(self).__name__} does not support parsing",
                command=self.context_command,
                response=response
            )

    @property
    def context_command(self) -> Optional[str]:
        """Command identifier reported in raised errors."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position})"


class ResponseParser(ABC, Generic[T]):
    """
    Abstract base class for typed response parsers.

    Typed parsers convert a raw response into a data structure, raising
    instead of returning error codes.
    """

    @abstractmethod
    def parse(self, response: str) -> T:
        """
        Parse AT command response.

        Args:
            response: Raw response text from the modem

        Returns:
            Parsed data structure

        Raises:
            ATParseError: If response cannot be parsed
        """
        pass
