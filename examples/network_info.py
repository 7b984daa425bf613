"""
Network information parsing example.

Demonstrates the typed registration and operator parsers, and a nested
tree over a test-command response.
"""

from atparsepy import (
    CommandParser,
    CommaSplitParser,
    ParenthesesParser,
    StringSlot,
    RegistrationStatusParser,
    CurrentOperatorParser,
    ATParseError,
)

CREG_RESPONSE = '+CREG: 2,1,"1A2B","00012345",7\r\n\r\nOK'
COPS_RESPONSE = '+COPS: 0,0,"AT&T",7\r\n\r\nOK'
CNMI_TEST_RESPONSE = "+CNMI: (0-2),(0-3),(0,2)\r\n\r\nOK"


def main():
    """Main function."""
    print("atparsepy - Network Information\n")

    reg = RegistrationStatusParser().parse(CREG_RESPONSE)
    print(f"Registration: {reg.state.name}")
    if reg.is_registered and reg.lac and reg.ci:
        print(f"Location: LAC={reg.lac}, CI={reg.ci}")

    operator = CurrentOperatorParser().parse(COPS_RESPONSE)
    if operator:
        print(f"Operator: {operator.oper} (AcT {operator.act})")
    else:
        print("Operator: none selected")

    # Supported <mt> range is the second parenthesized field
    mt_range = StringSlot()
    tree = CommandParser("AT+CNMI=?")
    field = CommaSplitParser(1)
    field.add_child_parser(ParenthesesParser(0).bind_string_output(mt_range))
    tree.add_child_parser(field)

    try:
        tree.parse_or_raise(CNMI_TEST_RESPONSE)
        print(f"CNMI <mt> range: {mt_range.value}")
    except ATParseError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
