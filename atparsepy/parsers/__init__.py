"""
Response parsers for AT command responses.

Provides composable parser trees and typed parsers built on them.
"""

from .base import Parser, ResponseParser, parse_int_prefix, parse_float_prefix
from .fields import CommandParser, CommaSplitParser, ParenthesesParser, NameValueParser
from .network import (
    SignalQualityParser,
    RegistrationStatusParser,
    CurrentOperatorParser
)

__all__ = [
    "Parser",
    "ResponseParser",
    "parse_int_prefix",
    "parse_float_prefix",
    "CommandParser",
    "CommaSplitParser",
    "ParenthesesParser",
    "NameValueParser",
    "SignalQualityParser",
    "RegistrationStatusParser",
    "CurrentOperatorParser",
]
