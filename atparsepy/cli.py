"""
CLI REPL (Read-Eval-Print Loop) for atparsepy.

Provides an offline AT command inspector: tokenizes commands and splits
pasted responses into fields. No modem is involved.
"""

import sys
import logging
from typing import Optional

from .core import AtCommand, parse_command
from .parsers import CommandParser, CommaSplitParser
from .types import ErrorCode, StringSlot
from .version import __version__

logger = logging.getLogger(__name__)


def describe_command(command: AtCommand) -> list[str]:
    """Render the structure of a command as display lines."""
    return [
        f"Command:  {command.command_id}",
        f"Type:     {command.command_type.name}",
        f"Start:    {command.start_marker!r} ({command.start_marker_index})",
        f"End:      {command.end_marker!r} ({command.end_marker_index})",
        f"Payload:  {command.command_payload!r}",
        f"Raw:      {command.get_raw_command()!r}",
    ]


def split_fields(command: AtCommand, response: str) -> Optional[list[str]]:
    """
    Split the comma fields following a command echo.

    Args:
        command: Command whose identifier is echoed in the response
        response: Raw response text

    Returns:
        Field values with quotes removed, or None if the echo is missing
    """
    if not command.command_id:
        logger.debug("Command has no identifier to match")
        return None

    payload = StringSlot()
    echo = CommandParser(command).bind_string_output(payload)
    if echo.parse(response) != ErrorCode.SUCCESS:
        logger.debug(f"Command {command.command_id!r} not echoed in {response!r}")
        return None

    # Drop the separator space after the echo before splitting
    start = response.find(command.command_id) + len(command.command_id) + 1
    remainder = response[start:].lstrip()

    fields: list[str] = []
    position = 0

    while True:
        slot = StringSlot()
        field = CommaSplitParser(position).bind_string_output(slot)
        if field.parse(remainder) != ErrorCode.SUCCESS:
            break

        fields.append(slot.value)
        position += 1

    return fields


class ATParseCLI:
    """Interactive AT command inspector."""

    def __init__(self, command: Optional[str] = None):
        """
        Initialize CLI.

        Args:
            command: Optional raw AT command to start with
        """
        self.command: Optional[AtCommand] = None
        if command:
            self.command = parse_command(command)

    def run(self):
        """Run the REPL."""
        print(f"atparsepy CLI v{__version__}")
        print("Type an AT command to tokenize it, or paste a response to split it.")
        print("Type 'help' for commands, 'quit' to exit\n")

        while True:
            try:
                line = input("> ").strip()

                if not line:
                    continue

                # Handle special commands
                if line.lower() in ("quit", "exit", "q"):
                    break
                elif line.lower() == "help":
                    self._print_help()
                    continue
                elif line.lower() == "show":
                    self._show_command()
                    continue
                elif line.lower() == "clear":
                    print("\033[2J\033[H", end="")  # Clear screen
                    continue

                if line.startswith("AT"):
                    self._set_command(line)
                else:
                    self._split_response(line)

            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
                continue
            except EOFError:
                break

        return 0

    def _set_command(self, raw: str):
        """Tokenize a command and make it current."""
        self.command = parse_command(raw)
        for line in describe_command(self.command):
            print(line)

    def _split_response(self, response: str):
        """Split a response to the current command into fields."""
        if self.command is None:
            print("No command set. Type an AT command first (e.g., AT+CSQ).")
            return

        fields = split_fields(self.command, response)
        if fields is None:
            print(f"Response does not echo {self.command.command_id}")
            return

        for index, value in enumerate(fields):
            print(f"[{index}] {value}")

    def _show_command(self):
        """Show the current command."""
        if self.command is None:
            print("No command set")
            return
        for line in describe_command(self.command):
            print(line)

    def _print_help(self):
        """Print help message."""
        print("""
Available commands:
  <AT command>  - Tokenize command and make it current (e.g., AT+CSQ)
  <response>    - Split response to current command into fields
  show          - Show current command
  help          - Show this help message
  clear         - Clear screen
  quit/exit/q   - Exit CLI

Examples:
  > AT+CSQ
  > +CSQ: 24,99
        """)


def main(argv: Optional[list[str]] = None):
    """Main entry point for CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="atparsepy CLI - Offline AT command inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  atparse-cli
  atparse-cli AT+CSQ
  atparse-cli AT+CSQ --response "+CSQ: 24,99"
        """
    )

    parser.add_argument(
        "command",
        nargs="?",
        help="AT command to tokenize (starts REPL if omitted)"
    )
    parser.add_argument(
        "-r", "--response",
        help="Response to split into fields (requires command)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    # Setup logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    if args.response is not None and not args.command:
        parser.error("--response requires a command")

    if not args.command:
        return ATParseCLI().run()

    command = parse_command(args.command)
    for line in describe_command(command):
        print(line)

    if args.response is None:
        return 0

    fields = split_fields(command, args.response)
    if fields is None:
        print(f"Error: response does not echo {command.command_id}")
        return 1

    print()
    print("Fields:")
    for index, value in enumerate(fields):
        print(f"  [{index}] {value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
