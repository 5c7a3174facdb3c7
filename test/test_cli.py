"""Tests for the command line interface."""

import pytest

from treeload.bin.cli import cli, main
from treeload.formats import InfoAdapter

DELIM = "=" * 80


def test_main(write_file, capsys):
    """Test that the report and the tree are printed."""
    a = write_file("a.info", "IncludeFile b.info\nX { y 1 }\n")
    write_file("b.info", "z 2\n")

    assert main(a) == 0

    out = capsys.readouterr().out
    assert out.count(DELIM) == 4
    assert "Loading: " in out
    assert "IncludeFile b.info\nz 2\nX\n{\n    y 1\n}\n" in out


def test_main_without_outputs(write_file, capsys):
    """Test that the report and the dump can be turned off."""
    a = write_file("a.json", '{"k": "v"}')

    assert main(a, report=False, dump=False, verbosity="warning") == 0
    assert DELIM not in capsys.readouterr().out


def test_main_serialization_error(write_file, monkeypatch):
    """Test that a tree which cannot be dumped gives a non-zero status."""
    a = write_file("a.info", "k v\n")

    def fail(self, tree, stream):
        raise ValueError("cannot write")

    monkeypatch.setattr(InfoAdapter, "write", fail)

    assert main(a, verbosity="warning") == 1


def test_cli(write_file, capsys):
    """Test the parsing of the command line arguments."""
    a = write_file("a.conf", "IncludeFile b.conf\nk v\n")
    write_file("b.conf", "z 2\n")

    assert cli([a, "--format", "info", "--no-report"]) == 0

    out = capsys.readouterr().out
    assert "IncludeFile b.conf\nz 2\nk v\n" in out
    assert "Loading: " not in out


def test_cli_include_key(write_file, capsys):
    """Test that the include key and depth limit can be set."""
    a = write_file("a.info", "Include a.info\n")

    assert cli([a, "--include-key", "Include", "--depth-limit", "3"]) == 0

    out = capsys.readouterr().out
    assert out.count("Loading: ") == 3
    assert "Recursive include loop detected. Exiting..." in out


@pytest.mark.parametrize(
    "argv",
    [["a.ini"], ["a.info", "--format", "ini"], ["a.info", "--depth-limit", "0"]],
)
def test_cli_errors(argv):
    """Test that invalid arguments exit with a usage error."""
    with pytest.raises(SystemExit) as exc:
        cli(argv)

    assert exc.value.code == 2
