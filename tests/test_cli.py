import io

import pytest

from bfgen.cli import (
    PURPLE,
    Options,
    UsageError,
    error_text,
    help_text,
    main,
    parse_arguments,
    run,
    wants_help,
)
from bfgen.codegen import generate


def test_help_when_no_arguments():
    assert wants_help(["prog"]) is True


def test_help_flag_anywhere():
    assert wants_help(["prog", "-c", "+", "--help"]) is True
    assert wants_help(["prog", "-h"]) is True


def test_no_help_for_normal_arguments():
    assert wants_help(["prog", "-e", "-c", "+"]) is False


def test_help_text_names_program():
    text = help_text("mybf")
    assert text.startswith("Usage: " + PURPLE + "mybf")
    assert "-s | --source [source file]" in text


def test_error_text_has_message_then_help():
    text = error_text("mybf", "Invalid parameter")
    assert "Invalid parameter" in text
    assert text.endswith(help_text("mybf"))


def test_parse_code_and_execute():
    assert parse_arguments(["-c", "+", "-e"]) == Options(
        source="+", source_is_file=False, output=None, execute=True
    )


def test_parse_source_file_and_output():
    assert parse_arguments(["--source", "prog.bf", "--output", "out.c"]) == Options(
        source="prog.bf", source_is_file=True, output="out.c", execute=False
    )


@pytest.mark.parametrize(
    "args, message",
    [
        (["-c", "+", "-s", "x.bf", "-e"], "Multiple inputs provided"),
        (["-c", "+", "-c", "-", "-e"], "Multiple inputs provided"),
        (["-c", "+", "-e", "-o", "a.c"], "Multiple outputs provided"),
        (["-c", "+", "-o", "a.c", "-e"], "Multiple outputs provided"),
        (["-c", "+", "-x"], "Invalid parameter"),
        (["-e"], "Missing input parameter"),
        (["-e", "-s", "-x"], "Missing input parameter"),
        (["-e", "-c"], "Missing input parameter"),
        (["-c", "+"], "Missing output parameter"),
        (["-c", "+", "-o", "-x"], "Missing output parameter"),
        (["-c", "+", "-o"], "Missing output parameter"),
    ],
)
def test_parse_errors(args, message):
    with pytest.raises(UsageError) as info:
        parse_arguments(args)
    assert info.value.message == message


def test_code_may_start_with_dash():
    assert parse_arguments(["-c", "-", "-e"]).source == "-"


def test_run_executes_code():
    out = io.BytesIO()
    run(Options(source=",.", execute=True), io.BytesIO(b"Q"), out)
    assert out.getvalue() == b"Q"


def test_run_executes_source_file(tmp_path):
    source = tmp_path / "prog.bf"
    source.write_text(",+.", encoding="ascii")
    direct = io.BytesIO()
    run(Options(source=",+.", execute=True), io.BytesIO(b"a"), direct)
    from_file = io.BytesIO()
    run(Options(source=str(source), source_is_file=True, execute=True), io.BytesIO(b"a"), from_file)
    assert from_file.getvalue() == direct.getvalue()


def test_run_writes_generated_c(tmp_path):
    target = tmp_path / "out.c"
    run(Options(source="+[-].", output=str(target)))
    assert target.read_text(encoding="utf-8") == generate("+[-].")


def test_run_truncates_existing_output(tmp_path):
    target = tmp_path / "out.c"
    target.write_text("x" * 5000, encoding="utf-8")
    run(Options(source="+", output=str(target)))
    assert target.read_text(encoding="utf-8") == generate("+")


def test_main_shows_help(capsys):
    assert main(["prog"]) == 0
    assert capsys.readouterr().out == help_text("prog")


def test_main_reports_usage_error(capsys):
    assert main(["prog", "-c", "+"]) == 1
    assert capsys.readouterr().out == error_text("prog", "Missing output parameter")


def test_main_generates_file(tmp_path):
    target = tmp_path / "hello.c"
    assert main(["prog", "-o", str(target), "-c", "++."]) == 0
    assert target.read_text(encoding="utf-8") == generate("++.")


def test_main_reports_missing_source_file(tmp_path, capsys):
    missing = tmp_path / "absent.bf"
    assert main(["prog", "-s", str(missing), "-e"]) == 1
    assert "absent.bf" in capsys.readouterr().out