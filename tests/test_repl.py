import io

from saphire.parser import parse
from saphire.repl import PROMPT, print_parser_errors, start


def _run(text: str) -> str:
    output = io.StringIO()
    start(io.StringIO(text), output)
    return output.getvalue()


def test_empty_input_prints_only_the_prompt():
    assert _run("") == PROMPT


def test_prompt_is_written_once_per_line_and_once_at_end():
    out = _run("1\n2\n3\n")
    assert out.count(PROMPT) == 4
    assert out.endswith(PROMPT)


def test_result_is_inspected_and_newline_terminated():
    out = _run("5 + 5\n")
    assert out == PROMPT + "10.00\n" + PROMPT


def test_bindings_persist_between_lines():
    out = _run("let a = 5;\na * 2\n")
    # The let statement yields no value, so only one result line appears.
    assert out == PROMPT + PROMPT + "10.00\n" + PROMPT


def test_runtime_error_is_printed():
    out = _run("foobar\n")
    assert "ERROR: identifier not found: foobar\n" in out


def test_crlf_line_endings_are_accepted():
    assert _run('"Hello"\r\n') == _run('"Hello"\n')


def test_parser_errors_are_reported_and_loop_continues():
    out = _run("let = 5\n1 + 1\n")
    _, errors = parse("let = 5")
    reported = io.StringIO()
    print_parser_errors(reported, errors)
    assert reported.getvalue() in out
    assert out.endswith("2.00\n" + PROMPT)


def test_print_parser_errors_format():
    output = io.StringIO()
    print_parser_errors(output, ["first", "second"])
    assert output.getvalue() == (
        " parser errors:\n\tfirst\n parser errors:\n\tsecond\n"
    )


def test_print_parser_errors_with_no_errors_writes_nothing():
    output = io.StringIO()
    print_parser_errors(output, [])
    assert output.getvalue() == ""


def test_heading_count_matches_error_count():
    _, errors = parse("let = 5")
    output = io.StringIO()
    print_parser_errors(output, errors)
    assert output.getvalue().count(" parser errors:\n") == len(errors)
    assert len(errors) > 0