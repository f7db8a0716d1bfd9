"""Answer a batch of queries and write one result line per query."""
from pathlib import Path
from typing import List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from nl_calculator.common.errors import CalculationError
from nl_calculator.common.formatting import DEFAULT_PRECISION, format_result
from nl_calculator.common.logger import logger
from nl_calculator.engine.calculator import calculate


class BatchLine(BaseModel):
    """Outcome of a single query of a batch."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line number of the query in the batch")
    query: str = Field(..., description="Query as read from the input")
    result: Optional[float] = Field(default=None, description="Computed value, if any")
    error: Optional[str] = Field(default=None, description="Failure message, if any")

    def render(self, precision: int = DEFAULT_PRECISION) -> str:
        """
        Render the line as written to the output file.

        :param int precision: Maximum decimals of the displayed result

        :return: "<query> = <result>" or "<query> -> ERROR: <message>"
        :rtype: str
        """
        if self.error is not None:
            return f"{self.query} -> ERROR: {self.error}"
        return f"{self.query} = {format_result(self.result, precision)}"


class BatchRunner(BaseModel):
    """
    Evaluate queries one by one and stream their results to an output file.

    Every line is written and flushed as soon as it is computed, so partial
    results survive an interruption.
    """

    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write computation results")
    precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=15, description="Maximum decimals shown")

    def _answer(self, query: str, line_number: int) -> BatchLine:
        """
        Compute a single query, turning failures into an error line.

        :param str query: Query text
        :param int line_number: Line number of the query in the batch

        :return: Outcome of the query
        :rtype: BatchLine
        """
        logger.debug(f"🧮🏁 Line {line_number}: {query}")
        try:
            result = calculate(query)
        except CalculationError as exc:
            logger.warning(f"🧮❌ Line {line_number} failed: {exc.message} ({query!r})")
            return BatchLine(line=line_number, query=query, error=exc.message)

        logger.debug(f"🧮✅ Line {line_number}: {result}")
        return BatchLine(line=line_number, query=query, result=result)

    def _write(self, f_out: TextIO, batch_line: BatchLine) -> None:
        f_out.write(batch_line.render(self.precision) + "\n")
        f_out.flush()

    def run(self, queries: List[str]) -> List[BatchLine]:
        """
        Answer every query and write the results.

        :param List[str] queries: Queries in input order

        :return: Outcome of each query, in input order
        :rtype: List[BatchLine]
        """
        logger.info(f"🧮 Answering {len(queries)} queries into {self.output_file}")
        lines: List[BatchLine] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, query in enumerate(queries, start=1):
                batch_line = self._answer(query, line_number)
                self._write(f_out, batch_line)
                lines.append(batch_line)

        failures = sum(1 for batch_line in lines if batch_line.error is not None)
        logger.info(f"🧮 Done: {len(lines) - failures} answered, {failures} failed")
        return lines


def build_output_path(input_path: Path, suffix: str = "_results.txt") -> Path:
    """
    Construct the result file path for an input file.

    - Keeps the input's folder
    - Replaces dots in extensions with underscores
    - Appends `suffix`

    Examples
    --------
    input: resources/queries.7z
    output: resources/queries_7z_results.txt

    :param Path input_path: Path to the input file
    :param str suffix: Suffix of the result file

    :return: Path to the output file
    :rtype: Path
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: -len("".join(input_path.suffixes))] if input_path.suffixes else input_path.name
    return input_path.with_name(f"{stem}{suffix_safe}{suffix}")
