"""
Row Normalizer (Layer 1: Raw Rows → Typed Records).

Converts one raw row (column header → cell value) into a typed record.

Cell values arrive as whatever the storage layer produced: None for
missing cells, numbers, booleans or strings. Coercion rules:
    - Required: True iff the cell reads "TRUE" (case-insensitive)
    - Order:    float, 0 when blank or non-numeric
    - Type:     upper-cased; blank means TEXT for respondent fields and
                "" (rejected later) for questions
    - Options:  Option1..Option5 in column order, blanks dropped

A row without its identifying text (FieldName / QuestionText) normalizes
to None and is skipped silently by the caller.
"""

import logging
import math
from typing import Any, Iterable, Mapping, Optional, Tuple

from qbank.config import (
    DEFAULT_RESPONDENT_TYPE,
    META_FORM_DESCRIPTION,
    META_FORM_TITLE,
    META_KEY_COLUMN,
    META_VALUE_COLUMN,
    META_VERSION,
    OPTION_COLUMNS,
    QUESTION_COLUMNS,
    RESPONDENT_COLUMNS,
)
from qbank.model import FieldType, FormMeta, MetaEntry, Question, RespondentField

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


def cell_text(value: Any) -> str:
    """Render a raw cell as trimmed text ("" for missing cells)."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # Spreadsheets hand numbers back as floats: 3.0 is typed as 3
        return str(int(value))
    return str(value).strip()


def coerce_required(value: Any) -> bool:
    return cell_text(value).upper() == "TRUE"


def coerce_order(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        order = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(order):
        return 0.0
    return order


def coerce_type(value: Any, default: str = "") -> str:
    text = cell_text(value).upper()
    return text or default


def collect_options(row: Row) -> Tuple[str, ...]:
    """Collect Option1..Option5, keeping column order and dropping blanks."""
    options = []
    for column in OPTION_COLUMNS:
        text = cell_text(row.get(column))
        if text:
            options.append(text)
    return tuple(options)


def normalize_respondent_row(row: Row) -> Optional[RespondentField]:
    """
    Normalize one RespondentDetails row.

    Returns:
        RespondentField, or None when FieldName is blank
    """
    field_name = cell_text(row.get(RESPONDENT_COLUMNS["field_name"]))
    if not field_name:
        return None

    field_type = coerce_type(row.get(RESPONDENT_COLUMNS["type"]), default=DEFAULT_RESPONDENT_TYPE)
    options = collect_options(row) if field_type == FieldType.DROPDOWN.value else ()

    return RespondentField(
        field_name=field_name,
        type=field_type,
        required=coerce_required(row.get(RESPONDENT_COLUMNS["required"])),
        order=coerce_order(row.get(RESPONDENT_COLUMNS["order"])),
        options=options,
    )


def normalize_question_row(row: Row) -> Optional[Question]:
    """
    Normalize one Questions row.

    Returns:
        Question, or None when QuestionText is blank
    """
    question_text = cell_text(row.get(QUESTION_COLUMNS["question_text"]))
    if not question_text:
        return None

    return Question(
        question_id=cell_text(row.get(QUESTION_COLUMNS["question_id"])),
        section=cell_text(row.get(QUESTION_COLUMNS["section"])),
        order=coerce_order(row.get(QUESTION_COLUMNS["order"])),
        type=coerce_type(row.get(QUESTION_COLUMNS["type"])),
        question_text=question_text,
        required=coerce_required(row.get(QUESTION_COLUMNS["required"])),
        options=collect_options(row),
        go_to_section_on_option=cell_text(row.get(QUESTION_COLUMNS["go_to_section_on_option"])),
    )


def normalize_meta_row(row: Row) -> Optional[MetaEntry]:
    key = cell_text(row.get(META_KEY_COLUMN))
    if not key:
        return None
    return MetaEntry(key=key, value=cell_text(row.get(META_VALUE_COLUMN)))


def resolve_form_meta(entries: Iterable[MetaEntry]) -> FormMeta:
    """
    Fold meta entries into a FormMeta.

    Unrecognized keys are ignored. When a key repeats, the last row wins.
    """
    values = {}
    for entry in entries:
        if entry.key in (META_FORM_TITLE, META_FORM_DESCRIPTION, META_VERSION):
            values[entry.key] = entry.value
        else:
            logger.debug("Ignoring meta key %r", entry.key)

    defaults = FormMeta()
    return FormMeta(
        title=values.get(META_FORM_TITLE) or defaults.title,
        description=values.get(META_FORM_DESCRIPTION) or defaults.description,
        version=values.get(META_VERSION, ""),
    )
