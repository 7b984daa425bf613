"""
atparsepy - Python library for tokenizing AT commands and parsing their responses.
"""

from .version import __version__
from .core import AtCommand, parse_command

from .parsers import (
    Parser,
    ResponseParser,
    CommandParser,
    CommaSplitParser,
    ParenthesesParser,
    NameValueParser,
    SignalQualityParser,
    RegistrationStatusParser,
    CurrentOperatorParser,
)

from .types import (
    START_MARKERS,
    END_MARKERS,
    ErrorCode,
    CommandType,
    ParserKind,
    IntegerSlot,
    FloatSlot,
    StringSlot,
    SignalQuality,
    RegistrationState,
    RegistrationStatus,
    CurrentOperator,
)

from .exceptions import (
    ATError,
    ATParseError,
    ParserNotSupportedError,
)

__all__ = [
    "__version__",
    "AtCommand",
    "parse_command",
    "Parser",
    "ResponseParser",
    "CommandParser",
    "CommaSplitParser",
    "ParenthesesParser",
    "NameValueParser",
    "SignalQualityParser",
    "RegistrationStatusParser",
    "CurrentOperatorParser",
    "START_MARKERS",
    "END_MARKERS",
    "ErrorCode",
    "CommandType",
    "ParserKind",
    "IntegerSlot",
    "FloatSlot",
    "StringSlot",
    "SignalQuality",
    "RegistrationState",
    "RegistrationStatus",
    "CurrentOperator",
    "ATError",
    "ATParseError",
    "ParserNotSupportedError",
]
