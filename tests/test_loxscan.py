"""
Tests for loxscan - Lox Scanner CLI
===================================

These tests drive the ``loxscan`` command through Click's test runner,
in both file mode and interactive mode.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from pylox import __version__
from pylox.cli.errors import ConsoleReporter, ExitCode
from pylox.cli.loxscan import format_token, main
from pylox.scanner import Token, TokenType

CLEAN_ENV = {
    "PYLOX_TOKEN_FORMAT": None,
    "PYLOX_KEEP_GOING": None,
    "PYLOX_VERBOSE": None,
    "PYLOX_PROMPT": None,
}


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args, **kwargs):
    env = dict(CLEAN_ENV)
    env.update(kwargs.pop("env", {}))
    return runner.invoke(main, args, env=env, **kwargs)


# =============================================================================
# File Mode
# =============================================================================

class TestFileMode:
    """Tests for scanning a script file."""

    def test_scan_file(self, runner, tmp_path):
        """Tokens are printed one per line."""
        script = tmp_path / "hello.lox"
        script.write_text("var x = 10;\nprint x;")

        result = invoke(runner, [str(script)])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "VAR var",
            "IDENTIFIER x x",
            "EQUAL =",
            "NUMBER 10 10.0",
            "SEMICOLON ;",
            "PRINT print",
            "IDENTIFIER x x",
            "SEMICOLON ;",
            "EOF",
        ]

    def test_scan_errors_exit_code(self, runner, tmp_path):
        """Lexical errors are printed and the exit status is SCAN_ERROR."""
        script = tmp_path / "bad.lox"
        script.write_text('var a = @;\nprint "oops')

        result = invoke(runner, [str(script)])

        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "[line 1] Error: Unexpected character '@'." in result.output
        assert "[line 2] Error: Unterminated string." in result.output
        assert "PRINT print" in result.output

    def test_keep_going(self, runner, tmp_path):
        """--keep-going reports errors but exits 0."""
        script = tmp_path / "bad.lox"
        script.write_text("@")

        result = invoke(runner, ["--keep-going", str(script)])

        assert result.exit_code == 0
        assert "[line 1] Error" in result.output

    def test_keep_going_from_env(self, runner, tmp_path):
        """PYLOX_KEEP_GOING has the same effect as the flag."""
        script = tmp_path / "bad.lox"
        script.write_text("@")

        result = invoke(runner, [str(script)], env={"PYLOX_KEEP_GOING": "1"})

        assert result.exit_code == 0

    def test_repr_format(self, runner, tmp_path):
        """--format repr prints the debugging representation."""
        script = tmp_path / "one.lox"
        script.write_text("1")

        result = invoke(runner, ["--format", "repr", str(script)])

        assert result.exit_code == 0
        assert "Token(NUMBER, '1', 1.0, 1)" in result.output
        assert "Token(EOF, '', 1)" in result.output

    def test_format_from_env(self, runner, tmp_path):
        """PYLOX_TOKEN_FORMAT selects the format when no flag is given."""
        script = tmp_path / "one.lox"
        script.write_text(";")

        result = invoke(runner, [str(script)], env={"PYLOX_TOKEN_FORMAT": "repr"})

        assert "Token(SEMICOLON, ';', 1)" in result.output

    def test_utf8_string_literal(self, runner, tmp_path):
        """UTF-8 text inside a string literal is printed unchanged."""
        script = tmp_path / "utf8.lox"
        script.write_bytes('print "h\u00e9llo";'.encode("utf-8"))

        result = invoke(runner, [str(script)])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "PRINT print",
            'STRING "h\u00e9llo" h\u00e9llo',
            "SEMICOLON ;",
            "EOF",
        ]

    def test_non_ascii_character_outside_string(self, runner, tmp_path):
        """A non-ASCII character in code is one unexpected character."""
        script = tmp_path / "utf8.lox"
        script.write_bytes("\u00e9".encode("utf-8"))

        result = invoke(runner, [str(script)])

        assert result.exit_code == ExitCode.SCAN_ERROR
        assert result.output.count("Unexpected character") == 1

    def test_invalid_utf8_file(self, runner, tmp_path):
        """A file that is not UTF-8 is rejected as bad input."""
        script = tmp_path / "latin1.lox"
        script.write_bytes(b"print \xe9;")

        result = invoke(runner, [str(script)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "not valid UTF-8" in result.output

    def test_verbose_summary(self, runner, tmp_path):
        """-v adds a summary line."""
        script = tmp_path / "hello.lox"
        script.write_text("print 1;\n")

        result = invoke(runner, ["-v", str(script)])

        assert result.exit_code == 0
        assert "Scanned 4 tokens, 0 errors, 2 lines" in result.output

    def test_missing_file(self, runner, tmp_path):
        """A missing script is a usage error."""
        result = invoke(runner, [str(tmp_path / "nope.lox")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_too_many_arguments(self, runner, tmp_path):
        """Only one script may be given."""
        first = tmp_path / "a.lox"
        second = tmp_path / "b.lox"
        first.write_text("")
        second.write_text("")

        result = invoke(runner, [str(first), str(second)])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_version(self, runner):
        """--version prints the package version."""
        result = invoke(runner, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Interactive Mode
# =============================================================================

class TestPromptMode:
    """Tests for the read-scan-print loop."""

    def test_scans_each_line(self, runner):
        """Each entered line is scanned and printed."""
        result = invoke(runner, [], input="print 1;\nvar x;\n\n")

        assert result.exit_code == 0
        assert result.output.count("> ") == 3
        assert "PRINT print" in result.output
        assert "VAR var" in result.output
        assert result.output.count("EOF") == 2

    def test_errors_do_not_end_session(self, runner):
        """A bad line is reported and the prompt continues."""
        result = invoke(runner, [], input="@\nnil\n\n")

        assert result.exit_code == 0
        assert "[line 1] Error: Unexpected character '@'." in result.output
        assert "NIL nil" in result.output

    def test_end_of_input_ends_session(self, runner):
        """Running out of input ends the loop cleanly."""
        result = invoke(runner, [], input="true")

        assert result.exit_code == 0
        assert "TRUE true" in result.output

    def test_whitespace_line_does_not_end_session(self, runner):
        """Only a truly empty line ends the loop."""
        result = invoke(runner, [], input="  \nnil\n\n")

        assert result.exit_code == 0
        assert "NIL nil" in result.output
        assert result.output.count("EOF") == 2

    def test_custom_prompt(self, runner):
        """PYLOX_PROMPT changes the prompt."""
        result = invoke(runner, [], input="\n", env={"PYLOX_PROMPT": "lox> "})
        assert result.output.startswith("lox> ")


# =============================================================================
# Internal Errors
# =============================================================================

class ExplodingScanner:
    """Stands in for Scanner and fails as soon as it is built."""

    def __init__(self, *args, **kwargs):
        raise RuntimeError("scanner exploded")


class TestInternalErrors:
    """Unexpected exceptions map to INTERNAL_ERROR."""

    def test_internal_error_exit_code(self, runner, tmp_path, monkeypatch):
        """An unexpected exception prints a message and exits 3."""
        monkeypatch.setattr("pylox.cli.loxscan.Scanner", ExplodingScanner)
        script = tmp_path / "one.lox"
        script.write_text("1")

        result = invoke(runner, [str(script)])

        assert result.exit_code == ExitCode.INTERNAL_ERROR
        assert "Internal error: scanner exploded" in result.output
        assert "Traceback" not in result.output

    def test_internal_error_traceback_when_verbose(self, runner, tmp_path, monkeypatch):
        """-v adds the traceback."""
        monkeypatch.setattr("pylox.cli.loxscan.Scanner", ExplodingScanner)
        script = tmp_path / "one.lox"
        script.write_text("1")

        result = invoke(runner, ["-v", str(script)])

        assert result.exit_code == ExitCode.INTERNAL_ERROR
        assert "Internal error: scanner exploded" in result.output
        assert "Traceback" in result.output
        assert "RuntimeError" in result.output


# =============================================================================
# Helpers
# =============================================================================

class TestHelpers:
    """Tests for output helpers."""

    def test_format_token(self):
        """Display and repr formats."""
        token = Token(TokenType.IDENTIFIER, "x", 1, "x")
        assert format_token(token, "display") == "IDENTIFIER x x"
        assert format_token(token, "repr") == "Token(IDENTIFIER, 'x', 'x', 1)"

    def test_console_reporter_counts(self, capsys):
        """ConsoleReporter prints to stderr and counts errors."""
        reporter = ConsoleReporter()
        reporter.report(3, "Unterminated string.")

        assert reporter.had_error
        assert reporter.error_count == 1
        assert "[line 3] Error: Unterminated string." in capsys.readouterr().err

        reporter.reset()
        assert not reporter.had_error


# =============================================================================
# Bundled Examples
# =============================================================================

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class TestExamples:
    """The bundled example programs scan cleanly."""

    def test_hello_example(self, runner):
        """examples/hello.lox has no lexical errors."""
        result = invoke(runner, [str(EXAMPLES_DIR / "hello.lox")])

        assert result.exit_code == 0, result.output
        assert "Error" not in result.output
        assert "CLASS class" in result.output
        assert "NUMBER 3.5 3.5" in result.output
        assert result.output.splitlines()[-1] == "EOF"
