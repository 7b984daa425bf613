"""
Tests for typed network response parsers.
"""

import pytest
from atparsepy import (
    SignalQualityParser,
    RegistrationStatusParser,
    CurrentOperatorParser,
    SignalQuality,
    RegistrationStatus,
    RegistrationState,
    CurrentOperator,
    ATParseError,
)


def test_signal_quality(mock_signal_response):
    """Test parsing signal quality."""
    signal = SignalQualityParser().parse(mock_signal_response)

    # Verify
    assert isinstance(signal, SignalQuality)
    assert signal.rssi == 24
    assert signal.ber == 99
    assert signal.is_valid is True
    assert signal.rssi_dbm == -65  # -113 + (24 * 2)


def test_signal_quality_no_signal():
    """Test parsing signal quality when no signal."""
    signal = SignalQualityParser().parse("+CSQ: 99,99")

    assert signal.rssi == 99
    assert signal.is_valid is False
    assert signal.rssi_dbm is None


def test_signal_quality_limits():
    """Test RSSI boundary conversions."""
    assert SignalQualityParser().parse("+CSQ: 0,0").rssi_dbm == -113
    assert SignalQualityParser().parse("+CSQ: 31,0").rssi_dbm == -51


@pytest.mark.parametrize("response", [
    "+CSQ: 24",
    "+CSQ: abc,99",
    "+CREG: 0,1",
    "ERROR",
])
def test_signal_quality_invalid(response):
    """Test malformed signal quality responses raise."""
    with pytest.raises(ATParseError) as exc_info:
        SignalQualityParser().parse(response)

    assert exc_info.value.command == "+CSQ"
    assert exc_info.value.response == response


def test_registration_status(mock_registration_response):
    """Test parsing full registration status."""
    reg_status = RegistrationStatusParser().parse(mock_registration_response)

    # Verify
    assert isinstance(reg_status, RegistrationStatus)
    assert reg_status.n == 2
    assert reg_status.stat == 1
    assert reg_status.lac == "1A2B"
    assert reg_status.ci == "00012345"
    assert reg_status.act == 7
    assert reg_status.is_registered is True
    assert reg_status.state == RegistrationState.REGISTERED_HOME


def test_registration_status_minimal():
    """Test parsing registration status without location."""
    reg_status = RegistrationStatusParser().parse("+CREG: 0,0\r\n\r\nOK")

    assert reg_status.n == 0
    assert reg_status.stat == 0
    assert reg_status.lac is None
    assert reg_status.ci is None
    assert reg_status.act is None
    assert reg_status.is_registered is False


def test_registration_status_without_act():
    """Test parsing registration status with location but no act."""
    reg_status = RegistrationStatusParser().parse('+CREG: 2,5,"1A2B","5678"')

    assert reg_status.lac == "1A2B"
    assert reg_status.ci == "5678"
    assert reg_status.act is None
    assert reg_status.state == RegistrationState.REGISTERED_ROAMING


def test_gprs_registration_status():
    """Test parsing +CGREG with custom command."""
    reg_status = RegistrationStatusParser("+CGREG").parse("+CGREG: 0,1")

    assert reg_status.stat == 1
    assert reg_status.is_registered is True


def test_registration_status_invalid_act():
    """Test malformed access technology raises."""
    with pytest.raises(ATParseError):
        RegistrationStatusParser().parse('+CREG: 2,1,"1A2B","5678",x')


def test_registration_status_wrong_command():
    """Test response for another command raises."""
    with pytest.raises(ATParseError):
        RegistrationStatusParser().parse("+CGREG: 0,1")


def test_current_operator(mock_operator_response):
    """Test parsing current operator."""
    operator = CurrentOperatorParser().parse(mock_operator_response)

    # Verify
    assert isinstance(operator, CurrentOperator)
    assert operator.mode == 0
    assert operator.format == 0
    assert operator.oper == "AT&T"
    assert operator.act == 7


def test_current_operator_not_registered():
    """Test parsing operator when only the mode is reported."""
    operator = CurrentOperatorParser().parse("+COPS: 0\r\n\r\nOK")

    assert operator is None


def test_current_operator_truncated():
    """Test operator response missing fields raises."""
    with pytest.raises(ATParseError):
        CurrentOperatorParser().parse('+COPS: 0,0,"AT&T"')


def test_current_operator_name_with_comma():
    """Test operator name containing a comma."""
    operator = CurrentOperatorParser().parse('+COPS: 0,0,"Foo, Inc",7\r\n\r\nOK')

    assert operator.mode == 0
    assert operator.format == 0
    assert operator.oper == "Foo, Inc"
    assert operator.act == 7


def test_current_operator_invalid_act():
    """Test malformed access technology raises."""
    with pytest.raises(ATParseError):
        CurrentOperatorParser().parse('+COPS: 0,0,"AT&T",x')


def test_eps_registration_extended_state():
    """Test +CEREG extended registration values."""
    reg_status = RegistrationStatusParser("+CEREG").parse("+CEREG: 0,8")

    assert reg_status.state == RegistrationState.EMERGENCY_ONLY
    assert reg_status.is_registered is False

    reg_status = RegistrationStatusParser("+CEREG").parse("+CEREG: 0,6")
    assert reg_status.state == RegistrationState.REGISTERED_HOME_SMS_ONLY
    assert reg_status.is_registered is True


def test_registration_unknown_state():
    """Test stat outside the known values yields no state."""
    reg_status = RegistrationStatusParser("+CEREG").parse("+CEREG: 0,42")

    assert reg_status.stat == 42
    assert reg_status.state is None
    assert reg_status.is_registered is False
