"""Test the nl-calc command-line entry point."""
import io
from pathlib import Path

import pytest

from nl_calculator.common.logger import logger
from nl_calculator.common.settings import CalculatorSettings, LOG_LEVEL_ENV, PRECISION_ENV
from nl_calculator.main import CliArgs, answer, interactive, main, parse_args


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test with default settings and drop the sink main() installs."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(PRECISION_ENV, raising=False)
    yield
    # The sink holds the stream captured during the test
    logger.remove()


def test_parse_args_query() -> None:
    """A positional argument is taken as the query."""
    assert parse_args(["add 5 and 10"]) == CliArgs(query="add 5 and 10")


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A --file that does not exist is rejected."""
    with pytest.raises(SystemExit):
        parse_args(["--file", str(tmp_path / "missing.txt")])


def test_parse_args_query_and_file(tmp_path: Path) -> None:
    """A query and --file are mutually exclusive."""
    input_file = tmp_path / "queries.txt"
    input_file.write_text("add 1 and 2\n")
    with pytest.raises(SystemExit):
        parse_args(["add 1 and 2", "--file", str(input_file)])


def test_answer_success() -> None:
    """Answers are formatted and written to the output stream."""
    out, err = io.StringIO(), io.StringIO()
    assert answer("square root of 144", CalculatorSettings(), out=out, err=err) is True
    assert out.getvalue().strip().endswith("12")
    assert err.getvalue() == ""


def test_answer_failure_is_verbatim() -> None:
    """Failure messages are written verbatim to the error stream."""
    out, err = io.StringIO(), io.StringIO()
    assert answer("divide 10 by 0", CalculatorSettings(), out=out, err=err) is False
    assert out.getvalue() == ""
    assert err.getvalue().strip().endswith("Division by zero is not allowed")


def test_main_one_shot(capsys) -> None:
    """A single query prints its answer and exits with 0."""
    assert main(["add 15 and 27"]) == 0
    assert capsys.readouterr().out.strip().endswith("42")


def test_main_one_shot_failure(capsys) -> None:
    """An unanswerable query prints the failure and exits with 1."""
    assert main(["hello world"]) == 1
    assert "couldn't understand" in capsys.readouterr().err


def test_main_batch(tmp_path: Path, capsys) -> None:
    """--file answers every line into a result file next to the input."""
    input_file = tmp_path / "queries.txt"
    input_file.write_text("subtract 8 from 20\n5 to the power of 3\n")

    assert main(["--file", str(input_file)]) == 0

    output_file = tmp_path / "queries_txt_results.txt"
    assert output_file.read_text().splitlines() == ["subtract 8 from 20 = 12", "5 to the power of 3 = 125"]
    assert str(output_file) in capsys.readouterr().out


def test_main_batch_unsupported_file(tmp_path: Path) -> None:
    """Unsupported batch files exit with 2."""
    input_file = tmp_path / "queries.rar"
    input_file.write_text("add 1 and 1")
    assert main(["--file", str(input_file)]) == 2


def test_main_invalid_log_level() -> None:
    """An unknown log level exits with 2."""
    assert main(["--log-level", "loud", "add 1 and 2"]) == 2


def test_main_precision_from_env(monkeypatch, capsys) -> None:
    """The display precision comes from the environment."""
    monkeypatch.setenv(PRECISION_ENV, "2")
    assert main(["divide 2 by 3"]) == 0
    assert capsys.readouterr().out.strip().endswith("0.67")


def test_interactive_keeps_going_after_errors(capsys) -> None:
    """Every stdin line is answered, failures do not stop the loop."""
    stdin = io.StringIO("add 1 and 2\n\ndivide 1 by 0\naverage of 2, 4\n")

    assert interactive(CalculatorSettings(), stdin=stdin) == 1

    captured = capsys.readouterr()
    assert [line.split()[-1] for line in captured.out.splitlines()] == ["3", "3"]
    assert "Division by zero is not allowed" in captured.err


@pytest.mark.parametrize("name", ["queries.zip", "queries.tar.xz", "queries.7z"])
def test_main_batch_corrupt_archive(tmp_path: Path, capsys, name: str) -> None:
    """Corrupt batch archives exit with 2 and report the problem."""
    input_file = tmp_path / name
    input_file.write_bytes(b"not an archive at all")

    assert main(["--file", str(input_file)]) == 2
    assert "Corrupt archive" in capsys.readouterr().err
