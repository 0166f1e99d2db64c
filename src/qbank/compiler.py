"""
Question Bank Compiler (Layer 3: Rows → Form Instruction Stream).

Runs the full pipeline over the three question bank tables:

    raw rows → normalize → validate → sort → compile

and returns the ordered instruction stream together with the validation
statistics. The order of the stream IS the order of the form: a form
builder must replay it verbatim.

Stream layout:
    [PageBreak "Respondent Information"]   only when respondent fields exist
    Item per respondent field
    [PageBreak "Survey Questions"]
    PageBreak per section change, Item per question

Malformed rows never raise. The only failure is a Questions table with no
rows at all, reported as EmptyQuestionBankError.
"""

import logging
import warnings
from typing import Iterable, List, Optional, Sequence, Tuple

from qbank.config import CompileOptions
from qbank.errors import EmptyQuestionBankError
from qbank.model import (
    CHOICE_QUESTION_TYPES,
    FieldType,
    FormInstruction,
    FormMeta,
    Item,
    PageBreak,
    Question,
    RespondentField,
    ValidationStats,
)
from qbank.normalizer import (
    Row,
    normalize_meta_row,
    normalize_question_row,
    normalize_respondent_row,
    resolve_form_meta,
)
from qbank.sorter import sort_questions, sort_respondent_fields
from qbank.stats import StatsAccumulator
from qbank.validator import Accepted, validate_question, validate_respondent_field

logger = logging.getLogger(__name__)


def read_form_meta(meta_rows: Optional[Iterable[Row]]) -> FormMeta:
    """Resolve FormTitle / FormDescription / Version from the Meta table."""
    entries = []
    for row in meta_rows or ():
        entry = normalize_meta_row(row)
        if entry is not None:
            entries.append(entry)
    return resolve_form_meta(entries)


def scan_respondent_rows(respondent_rows: Optional[Iterable[Row]]) -> List[RespondentField]:
    """
    Normalize and validate RespondentDetails rows, in row order.

    Rejected fields are reported as warnings only; they are not counted
    in ValidationStats.
    """
    accepted = []
    for row_num, row in enumerate(respondent_rows or (), start=2):
        field = normalize_respondent_row(row)
        if field is None:
            logger.debug("Respondent row %d is blank, skipping", row_num)
            continue

        result = validate_respondent_field(field)
        if isinstance(result, Accepted):
            accepted.append(field)
        else:
            logger.warning("Respondent row %d skipped: %s", row_num, result.reason)
            warnings.warn(result.reason, UserWarning)
    return accepted


def scan_question_rows(question_rows: Optional[Iterable[Row]]) -> Tuple[List[Question], StatsAccumulator]:
    """
    Normalize and validate Questions rows, in row order.

    Returns:
        (accepted questions in row order, final stats accumulator)
    """
    accepted = []
    stats = StatsAccumulator()
    for row_num, row in enumerate(question_rows or (), start=2):
        question = normalize_question_row(row)
        if question is None:
            logger.debug("Question row %d is blank, skipping", row_num)
            stats = stats.skip()
            continue

        result = validate_question(question)
        if isinstance(result, Accepted):
            accepted.append(question)
            stats = stats.accept(question)
        else:
            logger.debug("Question row %d skipped: %s", row_num, result.reason)
            stats = stats.skip(result.reason)
    return accepted, stats


def _require_questions(stats: StatsAccumulator) -> None:
    if stats.is_empty:
        raise EmptyQuestionBankError("No questions found in the Questions table")


def build_instructions(
    respondent_fields: Sequence[RespondentField],
    questions: Sequence[Question],
    options: Optional[CompileOptions] = None,
) -> List[FormInstruction]:
    """
    Emit the instruction stream for already sorted fields and questions.

    A section page break is emitted whenever a question's non-blank
    section differs from the current one. Blank sections neither emit a
    break nor reset the current section.
    """
    options = options or CompileOptions()
    instructions: List[FormInstruction] = []

    if respondent_fields:
        instructions.append(PageBreak(options.respondent_title, options.respondent_help))
        for field in respondent_fields:
            kind = field.field_type
            instructions.append(Item(
                kind=kind,
                title=field.field_name,
                required=field.required,
                options=field.options if kind == FieldType.DROPDOWN else (),
            ))
        instructions.append(PageBreak(options.survey_title, options.survey_help))

    current_section = None
    for question in questions:
        if question.section and question.section != current_section:
            instructions.append(PageBreak(
                question.section,
                options.section_help_prefix + question.section,
            ))
            current_section = question.section

        kind = question.question_type
        instructions.append(Item(
            kind=kind,
            title=question.question_text,
            required=question.required,
            options=question.options if kind in CHOICE_QUESTION_TYPES else (),
        ))

    return instructions


def validate_question_bank(
    meta_rows: Optional[Iterable[Row]],
    respondent_rows: Optional[Iterable[Row]],
    question_rows: Optional[Iterable[Row]],
) -> ValidationStats:
    """
    Dry run: validate every table and report statistics.

    Args:
        meta_rows: Meta table rows (Key / Value)
        respondent_rows: RespondentDetails table rows
        question_rows: Questions table rows

    Returns:
        ValidationStats over the Questions table

    Raises:
        EmptyQuestionBankError: If the Questions table has no rows
    """
    meta = read_form_meta(meta_rows)
    fields = scan_respondent_rows(respondent_rows)
    _, stats = scan_question_rows(question_rows)
    _require_questions(stats)

    snapshot = stats.snapshot()
    logger.info(
        "Validated %r: %d respondent fields, %d questions in %d sections, %d skipped",
        meta.title, len(fields), snapshot.questions_count,
        snapshot.sections_count, snapshot.skipped_count,
    )
    return snapshot


def compile_question_bank(
    meta_rows: Optional[Iterable[Row]],
    respondent_rows: Optional[Iterable[Row]],
    question_rows: Optional[Iterable[Row]],
    options: Optional[CompileOptions] = None,
) -> Tuple[List[FormInstruction], ValidationStats]:
    """
    Full pipeline: validate, sort and compile the question bank.

    The meta table is not part of the stream and is not read here; use
    read_form_meta() to get the title and description for the form builder.

    Returns:
        (instruction stream, ValidationStats)

    Raises:
        EmptyQuestionBankError: If the Questions table has no rows
    """
    fields = sort_respondent_fields(scan_respondent_rows(respondent_rows))
    questions, stats = scan_question_rows(question_rows)
    _require_questions(stats)

    instructions = build_instructions(fields, sort_questions(questions), options)

    snapshot = stats.snapshot()
    logger.info(
        "Compiled %d instructions: %d questions in %d sections, %d skipped",
        len(instructions), snapshot.questions_count,
        snapshot.sections_count, snapshot.skipped_count,
    )
    return instructions, snapshot


__all__ = [
    "compile_question_bank",
    "validate_question_bank",
    "read_form_meta",
    "build_instructions",
    "scan_question_rows",
    "scan_respondent_rows",
]
