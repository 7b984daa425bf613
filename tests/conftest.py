"""
Pytest configuration and fixtures.

Provides shared test fixtures for atparsepy tests.
"""

import pytest
import logging

from atparsepy import AtCommand, CommandParser, IntegerSlot


# Enable logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def csq_command():
    """Tokenized AT+CSQ? command."""
    return AtCommand.from_raw("AT+CSQ?")


@pytest.fixture
def pdp_command():
    """Tokenized AT+PDP? command."""
    return AtCommand.from_raw("AT+PDP?")


@pytest.fixture
def csq_parser(csq_command):
    """
    Create a CommandParser for +CSQ with no children.

    Example:
        def test_something(csq_parser):
            slot = IntegerSlot()
            csq_parser.add_child_parser(CommaSplitParser(0).bind_integer_output(slot))
    """
    return CommandParser(csq_command)


@pytest.fixture
def int_slot():
    """Integer slot holding a sentinel value."""
    return IntegerSlot(-1)


@pytest.fixture
def mock_signal_response():
    """Mock response for AT+CSQ command."""
    return "+CSQ: 24,99\r\n\r\nOK"


@pytest.fixture
def mock_registration_response():
    """Mock response for AT+CREG? command."""
    return '+CREG: 2,1,"1A2B","00012345",7\r\n\r\nOK'


@pytest.fixture
def mock_operator_response():
    """Mock response for AT+COPS? command."""
    return '+COPS: 0,0,"AT&T",7\r\n\r\nOK'
