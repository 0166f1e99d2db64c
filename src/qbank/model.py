"""
Core Question Bank Model Objects

Defines the data structures shared by every stage of the compiler.

These are pure data classes representing:
    - Meta entries and the resolved form meta
    - Respondent fields (details asked before the survey)
    - Questions (survey items)
    - Validation statistics
    - Form instructions (the compiler output)
    - Build results returned to callers

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about spreadsheets or forms APIs
        - Are immutable (frozen dataclasses, tuples for sequences)
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from qbank.config import (
    DEFAULT_FORM_DESCRIPTION,
    DEFAULT_FORM_TITLE,
    META_CREATED_AT,
    META_FORM_EDIT_URL,
    META_FORM_ID,
    META_FORM_PUBLISHED_URL,
    META_RESPONSE_SHEET_NAME,
    META_RESPONSE_SPREADSHEET_ID,
)


class FieldType(Enum):
    """Input types allowed for respondent detail fields."""
    TEXT = "TEXT"
    PARAGRAPH = "PARAGRAPH"
    DROPDOWN = "DROPDOWN"


class QuestionType(Enum):
    """Input types allowed for survey questions."""
    MCQ = "MCQ"
    CHECKBOX = "CHECKBOX"
    DROPDOWN = "DROPDOWN"
    TEXT = "TEXT"
    PARAGRAPH = "PARAGRAPH"


# Question types that carry a choice list
CHOICE_QUESTION_TYPES = frozenset({QuestionType.MCQ, QuestionType.CHECKBOX, QuestionType.DROPDOWN})

FIELD_TYPE_NAMES = frozenset(t.value for t in FieldType)
QUESTION_TYPE_NAMES = frozenset(t.value for t in QuestionType)
CHOICE_QUESTION_TYPE_NAMES = frozenset(t.value for t in CHOICE_QUESTION_TYPES)


@dataclass(frozen=True)
class MetaEntry:
    """One key/value row of the Meta table."""

    key: str
    value: str


@dataclass(frozen=True)
class FormMeta:
    """
    Form-level settings read from the Meta table.

    Only a fixed set of keys is recognized; everything else in the Meta
    table is ignored. Title and description are never empty: blank values
    fall back to the defaults.

    Properties:
        title: Form title shown to respondents
        description: Form description shown under the title
        version: Free-form version label of the question bank
    """

    title: str = DEFAULT_FORM_TITLE
    description: str = DEFAULT_FORM_DESCRIPTION
    version: str = ""


@dataclass(frozen=True)
class RespondentField:
    """
    A detail asked of the respondent before the survey questions.

    Properties:
        field_name:
            Label of the field (non-blank for any normalized row)

        type:
            Upper-cased type name as read from the row. Only accepted
            fields are guaranteed to hold a FieldType value.

        required:
            Whether the field must be answered

        order:
            Numeric sort key (0 when missing)

        options:
            Choice list; only populated for DROPDOWN fields
    """

    field_name: str
    type: str
    required: bool = False
    order: float = 0.0
    options: Tuple[str, ...] = ()

    @property
    def field_type(self) -> FieldType:
        return FieldType(self.type)


@dataclass(frozen=True)
class Question:
    """
    A single survey question.

    Properties:
        question_id:
            Opaque identifier, may be blank

        section:
            Section name; blank means "no grouping"

        order:
            Numeric sort key inside the section (0 when missing)

        type:
            Upper-cased type name as read from the row. Only accepted
            questions are guaranteed to hold a QuestionType value.

        question_text:
            The question shown to respondents (non-blank for any
            normalized row)

        required:
            Whether the question must be answered

        options:
            Choice list in column order, blanks dropped

        go_to_section_on_option:
            Branching hint carried through untouched
    """

    question_text: str
    type: str
    question_id: str = ""
    section: str = ""
    order: float = 0.0
    required: bool = False
    options: Tuple[str, ...] = ()
    go_to_section_on_option: str = ""

    @property
    def question_type(self) -> QuestionType:
        return QuestionType(self.type)


@dataclass(frozen=True)
class ValidationStats:
    """
    Summary of a validation pass over the Questions table.

    Properties:
        sections_count: Distinct non-blank sections among accepted questions
        questions_count: Accepted questions
        skipped_count: Blank plus rejected question rows
        errors: One message per rejected non-blank row, in row order
    """

    sections_count: int = 0
    questions_count: int = 0
    skipped_count: int = 0
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PageBreak:
    """Starts a new page/section in the generated form."""

    title: str
    help_text: str = ""


@dataclass(frozen=True)
class Item:
    """
    One input widget in the generated form.

    `kind` is a FieldType for respondent fields and a QuestionType for
    survey questions. `options` is empty for free-text kinds.
    """

    kind: Union[FieldType, QuestionType]
    title: str
    required: bool = False
    options: Tuple[str, ...] = ()


FormInstruction = Union[PageBreak, Item]


@dataclass(frozen=True)
class BuiltForm:
    """
    Identifiers of a form artifact created by a form builder.

    Properties:
        form_id: Identifier of the created form
        edit_url: Editor URL of the form
        published_url: Respondent-facing URL of the form
        response_spreadsheet_id: Spreadsheet collecting responses (optional)
        response_sheet_name: Sheet inside that spreadsheet (optional)
        spreadsheet_url: URL of the response spreadsheet (optional)
    """

    form_id: str
    edit_url: str = ""
    published_url: str = ""
    response_spreadsheet_id: str = ""
    response_sheet_name: str = ""
    spreadsheet_url: str = ""


@dataclass(frozen=True)
class FormBuildResult:
    """
    Outcome of a dry run or generate request.

    A dry run carries stats only. A successful generate also carries the
    built form and the version and creation time recorded with it.
    A failed request has ok=False and an explanatory message.
    """

    ok: bool
    message: str
    dry_run: bool = False
    stats: Optional[ValidationStats] = None
    form: Optional[BuiltForm] = None
    version: str = ""
    created_at: str = ""

    def to_meta_entries(self) -> List[MetaEntry]:
        """Meta rows to write back to the question bank after a build."""
        if self.form is None:
            return []
        return [
            MetaEntry(META_FORM_ID, self.form.form_id),
            MetaEntry(META_FORM_EDIT_URL, self.form.edit_url),
            MetaEntry(META_FORM_PUBLISHED_URL, self.form.published_url),
            MetaEntry(META_CREATED_AT, self.created_at),
            MetaEntry(META_RESPONSE_SPREADSHEET_ID, self.form.response_spreadsheet_id),
            MetaEntry(META_RESPONSE_SHEET_NAME, self.form.response_sheet_name),
        ]
