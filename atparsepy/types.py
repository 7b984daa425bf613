"""
Data types and structures for atparsepy.

Holds the command grammar tables, result codes, output slots and the
dataclasses returned by the typed response parsers.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# Start markers, indexed by AtCommand.start_marker_index (0 = none)
START_MARKERS: tuple[str, ...] = (
    "",     # Default - skipped by search
    "+",    # AT+...
    "#",    # AT#...
    "$",    # AT$...
    "%",    # AT%...
    "\\",   # AT\...
    "&",    # AT&...
)

# End markers, indexed by AtCommand.end_marker_index (0 = none)
END_MARKERS: tuple[str, ...] = (
    "",     # Default - skipped by search
    "=?",   # Test
    "?",    # Get
    "=",    # Set
    ":",    # URC
    "\r",   # Exec
)


class ErrorCode(IntEnum):
    """Result of a parser tree invocation."""
    SUCCESS = 0
    ERROR = 1
    NOT_SUPPORTED = 2


class CommandType(IntEnum):
    """Command form, named after the end marker index."""
    NONE = 0
    TEST = 1
    GET = 2
    SET = 3
    URC = 4
    EXEC = 5


class ParserKind(IntEnum):
    """Closed set of parser node kinds."""
    COMMAND = 0
    COMMA_SPLIT = 1
    PARENTHESES = 2
    NAME_VALUE = 3


@dataclass
class IntegerSlot:
    """Caller-owned storage for an integer parser output."""
    value: int = 0


@dataclass
class FloatSlot:
    """Caller-owned storage for a floating-point parser output."""
    value: float = 0.0


@dataclass
class StringSlot:
    """Caller-owned storage for a string parser output."""
    value: str = ""


class RegistrationState(IntEnum):
    """Network registration status values."""
    NOT_REGISTERED = 0
    REGISTERED_HOME = 1
    SEARCHING = 2
    DENIED = 3
    UNKNOWN = 4
    REGISTERED_ROAMING = 5
    REGISTERED_HOME_SMS_ONLY = 6
    REGISTERED_ROAMING_SMS_ONLY = 7
    EMERGENCY_ONLY = 8
    REGISTERED_HOME_CSFB_NOT_PREFERRED = 9
    REGISTERED_ROAMING_CSFB_NOT_PREFERRED = 10


@dataclass
class SignalQuality:
    """
    Signal quality from a +CSQ response.

    RSSI (Received Signal Strength Indicator):
        0: -113 dBm or less
        1: -111 dBm
        2...30: -109 to -53 dBm
        31: -51 dBm or greater
        99: Not known or not detectable

    BER (Bit Error Rate):
        0...7: As specified in 3GPP TS 45.008
        99: Not known or not detectable
    """
    rssi: int
    ber: int

    @property
    def rssi_dbm(self) -> Optional[int]:
        """Convert RSSI to dBm value."""
        if self.rssi == 99:
            return None
        if self.rssi == 0:
            return -113
        if self.rssi == 31:
            return -51
        return -113 + (self.rssi * 2)

    @property
    def is_valid(self) -> bool:
        """Check if signal quality reading is valid."""
        return self.rssi != 99


@dataclass
class RegistrationStatus:
    """
    Network registration status from a +CREG or +CGREG response.

    Attributes:
        n: Reporting mode (0=disable, 1=enable, 2=enable with location)
        stat: Registration status (see RegistrationState enum)
        lac: Location Area Code (hex string, if available)
        ci: Cell ID (hex string, if available)
        act: Access technology (if available)
    """
    n: int
    stat: int
    lac: Optional[str] = None
    ci: Optional[str] = None
    act: Optional[int] = None

    @property
    def is_registered(self) -> bool:
        """Check if registered to network (home or roaming)."""
        return self.stat in (
            RegistrationState.REGISTERED_HOME,
            RegistrationState.REGISTERED_ROAMING,
            RegistrationState.REGISTERED_HOME_SMS_ONLY,
            RegistrationState.REGISTERED_ROAMING_SMS_ONLY,
            RegistrationState.REGISTERED_HOME_CSFB_NOT_PREFERRED,
            RegistrationState.REGISTERED_ROAMING_CSFB_NOT_PREFERRED
        )

    @property
    def state(self) -> Optional[RegistrationState]:
        """Get registration state as enum, or None for unknown values."""
        try:
            return RegistrationState(self.stat)
        except ValueError:
            return None


@dataclass
class CurrentOperator:
    """Current operator from a +COPS response."""
    mode: int      # Network selection mode
    format: int    # Operator name format
    oper: str      # Operator name/code
    act: int       # Access technology
