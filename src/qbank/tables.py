"""
Table readers for question banks kept as files.

The compiler only needs rows as mappings from column header to raw cell
value. These helpers produce such rows from:

    - a directory holding Meta.csv, RespondentDetails.csv, Questions.csv
    - a single YAML document with Meta / RespondentDetails / Questions keys

Values are passed through untouched; all coercion happens in the
normalizer.
"""

import csv
import logging
import os
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Dict, List, Optional, Sequence

import yaml

from qbank.config import (
    META_COLUMNS,
    META_TABLE,
    QUESTION_TABLE,
    REQUIRED_QUESTION_HEADERS,
    REQUIRED_RESPONDENT_HEADERS,
    RESPONDENT_TABLE,
)
from qbank.errors import TableReadError

logger = logging.getLogger(__name__)

RawRow = Dict[str, Any]


@dataclass
class QuestionBank:
    """The three raw tables of a question bank."""

    meta_rows: List[RawRow] = field(default_factory=list)
    respondent_rows: List[RawRow] = field(default_factory=list)
    question_rows: List[RawRow] = field(default_factory=list)


def read_table_string(csv_content: str, required_columns: Sequence[str] = ()) -> List[RawRow]:
    """
    Parse CSV content into raw rows.

    Args:
        csv_content: CSV as string, first line is the header
        required_columns: Headers that must be present

    Returns:
        List of rows (header → cell text)

    Raises:
        TableReadError: If a required column is missing
    """
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        if required_columns:
            raise TableReadError("CSV is empty")
        return []

    headers = [name.strip() for name in reader.fieldnames]
    missing = [col for col in required_columns if col not in headers]
    if missing:
        raise TableReadError(f"Missing required columns: {missing}")

    rows = []
    for row in reader:
        rows.append({
            (key.strip() if key else key): value
            for key, value in row.items()
            if key is not None
        })
    return rows


def read_table_file(filepath: str, required_columns: Sequence[str] = ()) -> List[RawRow]:
    """
    Read a CSV file into raw rows.

    Raises:
        TableReadError: If the file doesn't exist or a required column is missing
    """
    try:
        with open(filepath, 'r', encoding='utf-8-sig', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        raise TableReadError(f"CSV file not found: {filepath}")

    logger.debug("Read table %s", filepath)
    return read_table_string(content, required_columns=required_columns)


def load_question_bank_dir(directory: str) -> QuestionBank:
    """
    Load a question bank from a directory of CSV files.

    Questions.csv is required; Meta.csv and RespondentDetails.csv are
    optional and default to empty tables.
    """
    def _optional(table: str, required_columns: Sequence[str]) -> List[RawRow]:
        path = os.path.join(directory, f"{table}.csv")
        if not os.path.exists(path):
            logger.info("No %s table in %s", table, directory)
            return []
        return read_table_file(path, required_columns=required_columns)

    bank = QuestionBank(
        meta_rows=_optional(META_TABLE, META_COLUMNS),
        respondent_rows=_optional(RESPONDENT_TABLE, REQUIRED_RESPONDENT_HEADERS),
        question_rows=read_table_file(
            os.path.join(directory, f"{QUESTION_TABLE}.csv"),
            required_columns=REQUIRED_QUESTION_HEADERS,
        ),
    )
    logger.info(
        "Loaded question bank from %s: %d meta, %d respondent, %d question rows",
        directory, len(bank.meta_rows), len(bank.respondent_rows), len(bank.question_rows),
    )
    return bank


def _yaml_table(document: Dict[str, Any], table: str) -> List[RawRow]:
    rows = document.get(table) or []
    if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
        raise TableReadError(f"Table {table} must be a list of rows")
    return rows


def load_question_bank_yaml(source: str, is_path: Optional[bool] = None) -> QuestionBank:
    """
    Load a question bank from YAML.

    Args:
        source: Path to a YAML file, or the YAML text itself
        is_path: Force interpretation of `source`; by default a string naming
            an existing file is read as a path

    Raises:
        TableReadError: If the document is not a mapping of tables
    """
    if is_path is None:
        is_path = os.path.isfile(source)

    if is_path:
        try:
            with open(source, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            raise TableReadError(f"YAML file not found: {source}")
    else:
        text = source

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise TableReadError(f"Invalid question bank YAML: {e}")

    if not isinstance(document, dict):
        raise TableReadError("Question bank YAML must be a mapping of table names to rows")

    return QuestionBank(
        meta_rows=_yaml_table(document, META_TABLE),
        respondent_rows=_yaml_table(document, RESPONDENT_TABLE),
        question_rows=_yaml_table(document, QUESTION_TABLE),
    )
