"""
Command-line entry point of the natural-language calculator.

Modes:
- one-shot: ``nl-calc "add 5 and 10"`` prints the answer
- batch: ``nl-calc --file queries.7z`` answers every line of a text file or archive
- interactive: without arguments, answers queries read from stdin line by line

Answers go to stdout; failure messages go to stderr with a distinct marker,
and the query itself is never altered so it can be corrected and retried.
"""
import argparse
import sys
from typing import List, Optional, TextIO

from pydantic import BaseModel, FilePath, ValidationError

from nl_calculator.batch.reader import QueryFileReader
from nl_calculator.batch.runner import BatchRunner, build_output_path
from nl_calculator.common.formatting import format_result
from nl_calculator.common.logger import configure_logger, logger
from nl_calculator.common.models import EvalFailed, ParseFailed
from nl_calculator.common.settings import CalculatorSettings
from nl_calculator.engine.calculator import solve

SUCCESS_MARK: str = "✅"
ERROR_MARK: str = "❌"


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    query : Optional[str]
        Query to answer once.
    file_path : Optional[FilePath]
        Path to a file or archive of queries, one per line.
    log_level : Optional[str]
        Overrides the configured log level.
    """

    query: Optional[str] = None
    file_path: Optional[FilePath] = None
    log_level: Optional[str] = None


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="nl-calc",
        description="Answer arithmetic questions written in plain English",
    )
    parser.add_argument("query", nargs="?", help="Query to answer, e.g. 'square root of 144'")
    parser.add_argument("-f", "--file", dest="file_path", help="Text file or archive with one query per line")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args(argv)
    if args.query is not None and args.file_path is not None:
        parser.error("a query and --file cannot be used together")

    try:
        return CliArgs(query=args.query, file_path=args.file_path, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def answer(
    query: str, settings: CalculatorSettings, out: Optional[TextIO] = None, err: Optional[TextIO] = None
) -> bool:
    """
    Answer a single query and print the outcome.

    :param str query: Raw query
    :param CalculatorSettings settings: Display settings
    :param TextIO out: Stream for answers, defaults to stdout
    :param TextIO err: Stream for failure messages, defaults to stderr

    :return: True if the query was answered
    :rtype: bool
    """
    outcome = solve(query)
    if isinstance(outcome, (ParseFailed, EvalFailed)):
        logger.debug(f"{ERROR_MARK} {outcome.kind.value}: {query!r}")
        print(f"{ERROR_MARK} {outcome.message}", file=err or sys.stderr)
        return False

    print(f"{SUCCESS_MARK} {format_result(outcome.value, settings.display_precision)}", file=out or sys.stdout)
    return True


def interactive(settings: CalculatorSettings, stdin: Optional[TextIO] = None) -> int:
    """
    Answer queries read from stdin until end of input.

    Blank lines are skipped; a failing query does not stop the loop.

    :param CalculatorSettings settings: Display settings
    :param TextIO stdin: Input stream, defaults to stdin

    :return: Exit code, 1 if any query failed
    :rtype: int
    """
    failed = False
    for line in stdin or sys.stdin:
        if not line.strip():
            continue
        if not answer(line, settings):
            failed = True
    return 1 if failed else 0


def run_batch(cli_args: CliArgs, settings: CalculatorSettings) -> int:
    """
    Answer every query of a file and write the results next to it.

    :param CliArgs cli_args: Validated arguments holding the input path
    :param CalculatorSettings settings: Output settings

    :return: Exit code, 1 if any query failed
    :rtype: int
    """
    queries = QueryFileReader().read(cli_args.file_path)
    output_path = build_output_path(cli_args.file_path, settings.output_suffix)
    runner = BatchRunner(output_file=output_path, precision=settings.display_precision)
    lines = runner.run(queries)
    print(output_path)
    return 1 if any(batch_line.error is not None for batch_line in lines) else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``nl-calc`` command.

    :param list argv: Arguments, defaults to sys.argv[1:]

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)
    try:
        settings = CalculatorSettings.from_env()
        if cli_args.log_level is not None:
            settings = CalculatorSettings(**{**settings.model_dump(), "log_level": cli_args.log_level})
    except ValidationError as exc:
        print(f"{ERROR_MARK} Invalid configuration: {exc}", file=sys.stderr)
        return 2
    configure_logger(settings.log_level)

    if cli_args.file_path is not None:
        try:
            return run_batch(cli_args, settings)
        except (ValueError, OSError) as exc:
            logger.error(f"📄❌ Could not read {cli_args.file_path}: {exc}")
            print(f"{ERROR_MARK} {exc}", file=sys.stderr)
            return 2

    if cli_args.query is not None:
        return 0 if answer(cli_args.query, settings) else 1

    return interactive(settings)


if __name__ == "__main__":
    sys.exit(main())
