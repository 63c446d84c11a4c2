import io
import logging

import pytest

from schemelet.__main__ import main, repl, PROMPT


def test_single_expression(capsys):
    assert main(["(+ 2 3)"]) == 0
    assert capsys.readouterr().out == "5\n"


def test_error_is_printed_with_success_status(capsys):
    assert main(["(foo 1)"]) == 0
    assert capsys.readouterr().out == 'Unrecognized primitive function args: "foo"\n'


def test_parse_error_is_printed(capsys):
    assert main(["(1 2"]) == 0
    assert capsys.readouterr().out.startswith('Parse error at "lisp"')


def test_repl_evaluates_each_line_independently():
    stdin = io.StringIO("(+ 1 2)\n\n  (car '(a b))  \n(cdr 1)\n")
    stdout = io.StringIO()
    repl(stdin, stdout)
    assert stdout.getvalue() == "3\na\nInvalid type: expected pair, found 1\n"
    assert PROMPT not in stdout.getvalue()


def test_main_without_expression_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(cons 1 2)\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "(1 . 2)\n"


def test_verbose_logs_to_stderr_only(capsys, monkeypatch):
    # basicConfig is a no-op once the root logger has handlers (pytest adds some)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    assert main(["-v", "(+ 2 3)"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "5\n"
    assert "Applying +" in captured.err


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag, capsys):
    with pytest.raises(SystemExit) as info:
        main([flag])
    assert info.value.code == 0
    assert "expression" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,out",
    [
        (["-x"], "Unrecognized special form: -x\n"),
        (["--foo"], "Unrecognized special form: --foo\n"),
        (["--", "-v"], "Unrecognized special form: -v\n"),
        (["-v", "-x"], "Unrecognized special form: -x\n"),
    ]
)
def test_dash_prefixed_atoms_are_expressions(argv, out, capsys, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    assert main(argv) == 0
    assert capsys.readouterr().out == out


@pytest.mark.parametrize("argv", [["-x", "-y"], ["(+ 1 2)", "-x"]])
def test_more_than_one_expression_is_rejected(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
    assert "unrecognized arguments" in capsys.readouterr().err
