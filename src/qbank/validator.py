"""
Validator (Layer 2: Typed Records → Accepted / Rejected).

Checks each normalized record against the structural rules of its kind:
    - the type must be one of the known type names
    - choice-bearing types must carry at least one option

Validation never raises. Every record comes back wrapped in either
Accepted or Rejected; the caller decides what a rejection costs.
"""

from dataclasses import dataclass
from typing import Union

from qbank.model import (
    CHOICE_QUESTION_TYPE_NAMES,
    FIELD_TYPE_NAMES,
    QUESTION_TYPE_NAMES,
    FieldType,
    Question,
    RespondentField,
)


@dataclass(frozen=True)
class Accepted:
    """A record that passed validation."""
    record: Union[Question, RespondentField]


@dataclass(frozen=True)
class Rejected:
    """A record that failed validation, with a human-readable reason."""
    record: Union[Question, RespondentField]
    reason: str


ValidationResult = Union[Accepted, Rejected]


def validate_respondent_field(field: RespondentField) -> ValidationResult:
    if field.type not in FIELD_TYPE_NAMES:
        return Rejected(
            field,
            f"Unknown respondent detail type: {field.type} for field: {field.field_name}",
        )

    if field.type == FieldType.DROPDOWN.value and not field.options:
        return Rejected(
            field,
            f'Respondent field "{field.field_name}" has type {field.type} but no options',
        )

    return Accepted(field)


def validate_question(question: Question) -> ValidationResult:
    if question.type not in QUESTION_TYPE_NAMES:
        return Rejected(
            question,
            f'Question "{question.question_text}" has invalid type: {question.type}',
        )

    if question.type in CHOICE_QUESTION_TYPE_NAMES and not question.options:
        return Rejected(
            question,
            f'Question "{question.question_text}" has type {question.type} but no options',
        )

    return Accepted(question)
