import pytest

from sroperator.cli import CommandLine, CommandLineError, main, parse_command_line


def test_default_values():
    cl = parse_command_line("test", None)
    assert cl.enable_leader_election is False
    assert cl.metrics_addr == ":8080"


def test_flags_set():
    metrics_addr = "1.2.3.4:5678"
    expected = CommandLine(enable_leader_election=True, metrics_addr=metrics_addr)
    args = ["--enable-leader-election", "--metrics-addr", metrics_addr]
    assert parse_command_line("test", args) == expected


def test_single_dash_and_equals_forms():
    cl = parse_command_line("test", ["-metrics-addr=:9090", "-enable-leader-election=false"])
    assert cl == CommandLine(enable_leader_election=False, metrics_addr=":9090")


def test_parsing_stops_at_first_positional():
    cl = parse_command_line("test", ["positional", "--enable-leader-election"])
    assert cl.enable_leader_election is False


def test_double_dash_terminates_flags():
    cl = parse_command_line("test", ["--", "--enable-leader-election"])
    assert cl.enable_leader_election is False


def test_unknown_flag_raises():
    with pytest.raises(CommandLineError, match="flag provided but not defined: -nope"):
        parse_command_line("test", ["--nope"])


def test_missing_argument_raises():
    with pytest.raises(CommandLineError, match="flag needs an argument: -metrics-addr"):
        parse_command_line("test", ["--metrics-addr"])


def test_invalid_boolean_raises():
    with pytest.raises(CommandLineError, match="invalid boolean value"):
        parse_command_line("test", ["--enable-leader-election=maybe"])


def test_bad_syntax_raises():
    with pytest.raises(CommandLineError, match="bad flag syntax"):
        parse_command_line("test", ["---x"])


def test_help_raises():
    with pytest.raises(CommandLineError, match="help requested"):
        parse_command_line("test", ["-h"])


def test_main_exit_codes():
    assert main(["--enable-leader-election"]) == 0
    assert main(["--unknown"]) == 1