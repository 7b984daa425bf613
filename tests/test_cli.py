"""
Tests for the offline CLI.
"""

import pytest
from atparsepy import parse_command
from atparsepy.cli import ATParseCLI, describe_command, split_fields, main


def test_describe_command():
    """Test command description lines."""
    lines = describe_command(parse_command("AT+CSQ?"))

    assert "Command:  +CSQ" in lines
    assert "Type:     GET" in lines
    assert "Start:    '+' (1)" in lines
    assert "End:      '?' (2)" in lines
    assert "Raw:      'AT+CSQ?'" in lines


def test_split_fields():
    """Test response fields are split and unquoted."""
    fields = split_fields(
        parse_command("AT+QNWINFO"),
        '+QNWINFO: "LTE","310410","LTE BAND 4",5110\r\n\r\nOK'
    )

    assert fields == ["LTE", "310410", "LTE BAND 4", "5110"]


def test_split_fields_missing_echo():
    """Test response without echo yields None."""
    assert split_fields(parse_command("AT+CSQ"), "+CREG: 0,1") is None


def test_main_tokenize_only(capsys):
    """Test one-shot tokenizing."""
    assert main(["AT+CMGF=1"]) == 0

    out = capsys.readouterr().out
    assert "Command:  +CMGF" in out
    assert "Type:     SET" in out
    assert "Payload:  '1'" in out


def test_main_with_response(capsys):
    """Test one-shot response splitting."""
    assert main(["AT+CSQ", "--response", "+CSQ: 24,99"]) == 0

    out = capsys.readouterr().out
    assert "Fields:" in out
    assert "[0] 24" in out
    assert "[1] 99" in out


def test_main_response_mismatch(capsys):
    """Test one-shot with a response for another command."""
    assert main(["AT+CSQ", "-r", "+CREG: 0,1"]) == 1

    out = capsys.readouterr().out
    assert "does not echo +CSQ" in out


def test_main_response_without_command():
    """Test --response alone is rejected."""
    with pytest.raises(SystemExit):
        main(["--response", "+CSQ: 24,99"])


def test_repl_session(monkeypatch, capsys):
    """Test REPL tokenizes a command then splits a response."""
    inputs = iter(["", "+CSQ: 1,2", "AT+CSQ", "+CSQ: 24,99", "show", "help", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    assert ATParseCLI().run() == 0

    out = capsys.readouterr().out
    assert "No command set" in out
    assert "Command:  +CSQ" in out
    assert "[0] 24" in out
    assert "[1] 99" in out
    assert "Available commands:" in out


def test_repl_initial_command_and_eof(monkeypatch, capsys):
    """Test REPL starts with a command and exits on EOF."""
    def raise_eof(prompt=""):
        raise EOFError

    cli = ATParseCLI(command="AT+CREG?")
    assert cli.command.command_id == "+CREG"

    monkeypatch.setattr("builtins.input", raise_eof)
    assert cli.run() == 0


def test_repl_response_mismatch(monkeypatch, capsys):
    """Test REPL reports a response for another command."""
    inputs = iter(["+CREG: 0,1", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    ATParseCLI(command="AT+CSQ").run()

    out = capsys.readouterr().out
    assert "Response does not echo +CSQ" in out


def test_split_fields_removes_one_quote_pair():
    """Test each field loses only its outer quotes."""
    fields = split_fields(parse_command("AT+TEST?"), '+TEST: ""x"",1')

    assert fields == ['"x"', "1"]


def test_split_fields_without_command_id():
    """Test a command with no identifier never matches."""
    assert split_fields(parse_command("AT"), "+CSQ: 24,99") is None
