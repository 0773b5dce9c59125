import io
import sys

import pytest

from saphire.cli import main, read_source, run_source
from saphire.objects import Number
from saphire.parser import parse
from saphire.repl import print_parser_errors


def test_read_source_rejects_wrong_extension(tmp_path):
    path = tmp_path / "program.txt"
    path.write_text("1", encoding="utf-8")
    with pytest.raises(ValueError, match=r"invalid file extension \.txt"):
        read_source(str(path))


def test_read_source_rejects_missing_extension(tmp_path):
    path = tmp_path / "program"
    path.write_text("1", encoding="utf-8")
    with pytest.raises(ValueError, match="expected .sp"):
        read_source(str(path))


def test_read_source_returns_file_text(tmp_path):
    path = tmp_path / "program.sp"
    text = 'let a = "héllo";\nprint(a);\n'
    path.write_text(text, encoding="utf-8")
    assert read_source(str(path)) == text


def test_read_source_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_source(str(tmp_path / "absent.sp"))


def test_run_source_returns_program_value():
    result = run_source("let add = fn(x, y) { x + y; }; add(5, 5);", io.StringIO())
    assert isinstance(result, Number)
    assert result.value == 10


def test_run_source_print_writes_to_stdout(capsys):
    run_source('print("Hello", 1 + 1)', io.StringIO())
    assert capsys.readouterr().out == "Hello\n" + Number(2.0).inspect() + "\n"


def test_run_source_reports_parser_errors_and_does_not_run(capsys):
    source = 'let = 5; print("never")'
    output = io.StringIO()
    assert run_source(source, output) is None
    expected = io.StringIO()
    print_parser_errors(expected, parse(source)[1])
    assert output.getvalue() == expected.getvalue()
    assert capsys.readouterr().out == ""


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "hello.sp"
    path.write_text('print("Hello World!")\n', encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Hello World!\n"


def test_main_bad_extension_reports_error(tmp_path, capsys):
    path = tmp_path / "hello.txt"
    path.write_text("1", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "invalid file extension .txt" in captured.err
    assert captured.out == ""


def test_main_without_arguments_starts_repl(monkeypatch, capsys):
    monkeypatch.setattr("getpass.getuser", lambda: "tester")
    monkeypatch.setattr(sys, "stdin", io.StringIO('"Hello" + " " + "World!"\n'))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        "Hello tester! This is the Saphire programming language!\n"
        "Feel free to type in commands\n"
    )
    assert "Hello World!\n" in out