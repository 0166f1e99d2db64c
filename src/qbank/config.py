"""
Configuration and constants for the question bank compiler.

Column names are the headers used by the question bank sheets. The mapping
from header to record field is explicit: normalizers only ever read the
columns listed here.
"""

from dataclasses import dataclass

# Table (sheet) names
META_TABLE = "Meta"
RESPONDENT_TABLE = "RespondentDetails"
QUESTION_TABLE = "Questions"

# Option columns, read in this order
OPTION_COLUMNS = ("Option1", "Option2", "Option3", "Option4", "Option5")

# Meta table
META_KEY_COLUMN = "Key"
META_VALUE_COLUMN = "Value"
META_COLUMNS = (META_KEY_COLUMN, META_VALUE_COLUMN)

# Respondent details table: record field -> column header
RESPONDENT_COLUMNS = {
    "field_name": "FieldName",
    "type": "Type",
    "required": "Required",
    "order": "Order",
}

# Questions table: record field -> column header
QUESTION_COLUMNS = {
    "question_id": "QuestionID",
    "section": "Section",
    "order": "Order",
    "type": "Type",
    "question_text": "QuestionText",
    "required": "Required",
    "go_to_section_on_option": "GoToSectionOnOption",
}

# Columns a questions file must at least declare in its header
REQUIRED_QUESTION_HEADERS = ("QuestionText", "Type")
REQUIRED_RESPONDENT_HEADERS = ("FieldName",)

# Meta keys read by the compiler
META_FORM_TITLE = "FormTitle"
META_FORM_DESCRIPTION = "FormDescription"
META_VERSION = "Version"

# Meta keys written back after a form is built
META_FORM_ID = "FormId"
META_FORM_EDIT_URL = "FormEditUrl"
META_FORM_PUBLISHED_URL = "FormPublishedUrl"
META_CREATED_AT = "CreatedAt"
META_RESPONSE_SPREADSHEET_ID = "ResponseSpreadsheetId"
META_RESPONSE_SHEET_NAME = "ResponseSheetName"

DEFAULT_FORM_TITLE = "HBMP Survey Form"
DEFAULT_FORM_DESCRIPTION = "Survey form generated from Question Bank"

# Default type when a respondent row leaves Type blank
DEFAULT_RESPONDENT_TYPE = "TEXT"

# Page break labels
RESPONDENT_SECTION_TITLE = "Respondent Information"
RESPONDENT_SECTION_HELP = "Please provide your details before starting the survey."
SURVEY_SECTION_TITLE = "Survey Questions"
SURVEY_SECTION_HELP = "Please answer the following questions."
SECTION_HELP_PREFIX = "Section: "


@dataclass(frozen=True)
class CompileOptions:
    """
    Labels used by the compiler for the page breaks it inserts itself.

    Section page breaks take their title from the question rows; only
    the prefix of their help text is configurable.
    """

    respondent_title: str = RESPONDENT_SECTION_TITLE
    respondent_help: str = RESPONDENT_SECTION_HELP
    survey_title: str = SURVEY_SECTION_TITLE
    survey_help: str = SURVEY_SECTION_HELP
    section_help_prefix: str = SECTION_HELP_PREFIX
