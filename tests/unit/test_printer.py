"""
Unit tests for the parse result printer.
"""

import io
from unittest.mock import patch

from ascii_parse_tree.errors import FormatError, ParseError
from ascii_parse_tree.formatting.printer import print_as_ascii_tree
from ascii_parse_tree.models import ParseNode


def test_prints_tree_to_stdout(capsys):
    """A successful parse prints the tree followed by a newline."""
    print_as_ascii_tree([ParseNode(rule="val", start=0, end=1, text="m")])

    captured = capsys.readouterr()
    assert captured.out == ' val "m"\n\n'
    assert captured.err == ""


def test_parse_error_goes_to_stderr(capsys):
    """A parse error prints its description to stderr only."""
    print_as_ascii_tree(ParseError("unexpected character 'x' at line 1"))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "unexpected character 'x' at line 1\n"


def test_any_exception_is_forwarded(capsys):
    """Errors from other engines are forwarded by their description."""
    print_as_ascii_tree(RuntimeError("engine exploded"))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "engine exploded" in captured.err


def test_format_error_goes_to_stderr(capsys):
    """A formatting failure is reported on stderr, nothing on stdout."""
    with patch(
        "ascii_parse_tree.formatting.printer.as_ascii_tree",
        side_effect=FormatError("Failed to write tree output: closed"),
    ):
        print_as_ascii_tree([ParseNode(rule="val", text="m", end=1)])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to write tree output" in captured.err


def test_empty_forest_prints_blank_line(capsys):
    """An empty forest prints just the trailing newline."""
    print_as_ascii_tree([])

    captured = capsys.readouterr()
    assert captured.out == "\n"


def test_explicit_streams():
    """Output and diagnostics can be sent to given streams."""
    out = io.StringIO()
    err = io.StringIO()

    print_as_ascii_tree([ParseNode(rule="op", text="+", end=1)], out=out, err=err)
    print_as_ascii_tree(ParseError("bad input"), out=out, err=err)

    assert out.getvalue() == ' op "+"\n\n'
    assert err.getvalue() == "bad input\n"


def test_closed_output_reported_on_err():
    """A tree that cannot be written is reported on the diagnostic stream."""
    out = io.StringIO()
    out.close()
    err = io.StringIO()

    print_as_ascii_tree([ParseNode(rule="val", text="m", end=1)], out=out, err=err)

    assert "Failed to write tree output" in err.getvalue()


def test_closed_err_does_not_raise(caplog):
    """An error that cannot be written to a closed stream is only logged."""
    err = io.StringIO()
    err.close()

    with caplog.at_level("WARNING", logger="ascii_parse_tree.formatting.printer"):
        print_as_ascii_tree(ParseError("bad"), out=io.StringIO(), err=err)

    assert "Failed to write" in caplog.text


def test_closed_output_and_err_do_not_raise(caplog):
    """With both streams closed the failure is logged."""
    out = io.StringIO()
    out.close()
    err = io.StringIO()
    err.close()

    with caplog.at_level("WARNING", logger="ascii_parse_tree.formatting.printer"):
        print_as_ascii_tree([ParseNode(rule="val", text="m", end=1)], out=out, err=err)

    assert "Failed to write" in caplog.text


def test_broken_pipe_on_output():
    """An OSError from the output stream is reported, not raised."""
    class BrokenPipe(io.StringIO):
        def write(self, text):
            raise BrokenPipeError("Broken pipe")

    err = io.StringIO()

    print_as_ascii_tree([ParseNode(rule="val", text="m", end=1)], out=BrokenPipe(), err=err)

    assert "Broken pipe" in err.getvalue()
