"""
Loader for forward-pass case files.

Each non-comment line holds one case with three fields separated by " | ":

    input_csv | param_csv | expected_output_csv

e.g.

    # linear regression, 3 inputs
    1.0,2.0,-0.5 | 0.5,0.3,0.2,0.1 | 1.1

Blank lines and lines starting with '#' are skipped. Malformed lines are
reported with a DataFormatWarning and skipped so that one bad line does not
hide the rest of the file.
"""

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np

from ..constants import (
    CASE_COMMENT_PREFIX,
    CASE_FIELD_DELIMITER,
    CASE_NUM_FIELDS,
    CASE_VALUE_DELIMITER,
)
from .warnings import DataFormatWarning


@dataclass
class ForwardCase:
    """One parsed case: input vector, flat parameters and expected output."""

    input: np.ndarray
    parameters: np.ndarray
    expected_output: np.ndarray
    description: str = ""
    line_number: int = 0


def parse_float_list(text: str) -> np.ndarray:
    """
    Parse a comma-separated list of floats. Empty tokens are ignored.

    Raises:
        ValueError: If a token is not a valid float
    """
    values = []
    for token in text.split(CASE_VALUE_DELIMITER):
        token = token.strip()
        if token:
            values.append(float(token))
    return np.asarray(values, dtype=np.float32)


def parse_case_line(line: str, line_number: int = 0) -> ForwardCase:
    """
    Parse a single case line.

    Args:
        line: Line text (without comment or blank-line handling)
        line_number: 1-based line number, used for the description

    Returns:
        ForwardCase

    Raises:
        ValueError: If the line does not have exactly three fields or a value is not a float
    """
    parts = line.strip().split(CASE_FIELD_DELIMITER)
    if len(parts) != CASE_NUM_FIELDS:
        raise ValueError(
            f"expected {CASE_NUM_FIELDS} fields separated by '{CASE_FIELD_DELIMITER}', "
            f"got {len(parts)}"
        )

    inputs, parameters, expected = (parse_float_list(part) for part in parts)
    return ForwardCase(
        input=inputs,
        parameters=parameters,
        expected_output=expected,
        description=f"Line {line_number}",
        line_number=line_number,
    )


def load_cases(path: Union[str, Path]) -> List[ForwardCase]:
    """
    Load all cases from a case file.

    Args:
        path: Path to the case file

    Returns:
        List of ForwardCase in file order

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Case file not found: {path}")

    cases = []
    with open(path, "r") as f:
        for line_number, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(CASE_COMMENT_PREFIX):
                continue

            try:
                cases.append(parse_case_line(stripped, line_number))
            except ValueError as e:
                warnings.warn(
                    f"Skipping line {line_number} in {path}: {e}",
                    DataFormatWarning,
                    stacklevel=2,
                )

    return cases
