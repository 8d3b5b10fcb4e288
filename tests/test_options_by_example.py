import io

import pytest
from rich.console import Console

from options_by_example import (
    OptionsByExample,
    ParseError,
    ShowUsage,
    UsageError,
    __version__,
)

USAGE = """
    Establishes network connection to designated host and port, enabling
    users to assess network connectivity and diagnose potential issues.

    Usage: $0 [options] [mode] host port

    Options:
      -s, --secure        Establish a secure connection (SSL/TSL)
      -v, --verbose       Enable verbose output for detailed information
      -r, --retries NUM   Number of connection retries (default 3)
      -t, --timeout NUM   Set connection timeout in seconds


"""


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def this(output):
    console = Console(file=output, color_system=None, width=60)
    return OptionsByExample(USAGE, program="connect", console=console)


def test_version():
    assert __version__


def test_read_from_stream(monkeypatch):
    monkeypatch.setattr("sys.argv", ["connect", "--secure", "example.com", "443"])

    options = OptionsByExample.read(io.StringIO(USAGE)).parse()

    assert options.include("secure") is True
    assert options.argument("host") == "example.com"
    assert options.argument("port") == "443"


def test_parse_remembers_result(this):
    assert this.options == {}
    assert this.arguments == {}

    this.parse_without_exit(["--secure", "-v", "--retries", "5", "active", "example.com", "80"])

    assert set(this.options) == {"secure", "verbose", "retries"}
    assert set(this.arguments) == {"retries", "mode", "host", "port"}


def test_usage_message(this):
    message = this.usage_message

    assert message.startswith("Establishes network connection")
    assert "Usage: connect [options] [mode] host port" in message
    assert "      -s, --secure" not in message
    assert "  -s, --secure" in message
    assert message.endswith("in seconds\n")


def test_help_prints_usage_and_exits(this, output):
    with pytest.raises(SystemExit) as info:
        this.parse(["--help"])

    assert info.value.code == 0
    assert "Usage: connect [options] [mode] host port" in output.getvalue()


def test_error_prints_message_and_exits(this, output):
    with pytest.raises(SystemExit) as info:
        this.parse(["--foo", "example.com", "80"])

    assert info.value.code == 1
    assert output.getvalue() == "ERROR: Found unknown option '--foo'\n"


def test_long_error_is_not_wrapped(this, output):
    with pytest.raises(SystemExit):
        this.parse(["--secure", "gibberish", "-v", "example.com", "80"])

    assert output.getvalue().count("\n") == 1


def test_without_exit_errors_propagate(this, output):
    with pytest.raises(ParseError, match="Expected 2 required arguments"):
        this.parse([], exit_on_error=False)
    with pytest.raises(ShowUsage):
        this.parse(["-h"], exit_on_error=False)

    assert output.getvalue() == ""


def test_parse_without_exit_raises(this):
    with pytest.raises(ParseError, match="Found unknown option -a inside '-svat'"):
        this.parse_without_exit(["-svat", "example.com", "443"])


def test_invalid_usage_text_fails_at_construction():
    with pytest.raises(UsageError, match="Found invalid usage token '\\^\\^\\^'"):
        OptionsByExample("Usage: command arg ^^^ arg")


def test_default_console_prints_to_stdout(capsys):
    this = OptionsByExample("Usage: $0 source dest", program="copy")

    with pytest.raises(SystemExit):
        this.parse(["80"])

    captured = capsys.readouterr()
    assert "ERROR: Expected 2 required arguments, but received only one" in captured.out


def test_str(this):
    assert str(this) == (
        "OptionsByExample(program='connect', Specification(arguments=3, "
        "flags=8, options=4, defaults=1))"
    )
