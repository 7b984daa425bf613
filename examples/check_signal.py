"""
Signal quality parsing example.

Demonstrates building a parser tree for a +CSQ response by hand and with
the typed parser.
"""

from atparsepy import (
    AtCommand,
    CommandParser,
    CommaSplitParser,
    IntegerSlot,
    ErrorCode,
    SignalQualityParser,
)

# Response as received from the transport
RESPONSE = "+CSQ: 24,99\r\n\r\nOK\r\n"


def main():
    """Main function."""
    print("atparsepy - Signal Quality\n")

    cmd = AtCommand.from_raw("AT+CSQ")
    print(f"Command: {cmd.get_raw_command()} (id={cmd.command_id})")

    # Hand-built tree
    rssi = IntegerSlot()
    ber = IntegerSlot()
    parser = CommandParser(cmd)
    parser.add_child_parser(
        CommaSplitParser(0).bind_integer_output(rssi)
    ).add_child_parser(
        CommaSplitParser(1).bind_integer_output(ber)
    )

    if parser.parse(RESPONSE) == ErrorCode.SUCCESS:
        print(f"Tree:  RSSI={rssi.value}, BER={ber.value}")
    else:
        print("Tree:  failed to parse response")

    # Typed parser
    signal = SignalQualityParser().parse(RESPONSE)
    if signal.is_valid:
        print(f"Typed: RSSI={signal.rssi} ({signal.rssi_dbm} dBm), BER={signal.ber}")
    else:
        print("Typed: no signal detected")


if __name__ == "__main__":
    main()
