"""
Example question bank for demos and end-to-end tests.

Builds a small household survey bank with two named sections, a few
sectionless questions, two respondent fields and some deliberately broken
rows, plus an in-memory form builder that records what it was asked to
build.
"""
from typing import List, Sequence

from qbank.model import BuiltForm, FormInstruction, FormMeta
from qbank.service import FormBuilder
from qbank.tables import QuestionBank


def build_example_bank() -> QuestionBank:
    bank = QuestionBank()

    bank.meta_rows = [
        {"Key": "FormTitle", "Value": "Household Survey"},
        {"Key": "FormDescription", "Value": "Annual household questionnaire"},
        {"Key": "Version", "Value": "2024.1"},
        {"Key": "FormId", "Value": "old-form-id"},
    ]

    bank.respondent_rows = [
        {"FieldName": "District", "Type": "dropdown", "Required": "TRUE", "Order": 2,
         "Option1": "North", "Option2": "South"},
        {"FieldName": "Full name", "Type": "", "Required": "true", "Order": 1},
        {"FieldName": "Signature", "Type": "SIGNATURE", "Order": 3},
        {"FieldName": "", "Type": "TEXT"},
    ]

    bank.question_rows = [
        {"QuestionID": "Q1", "Section": "Income", "Order": 2, "Type": "MCQ",
         "QuestionText": "Main source of income?", "Required": "TRUE",
         "Option1": "Farming", "Option2": "Trade", "Option3": "Wages"},
        {"QuestionID": "Q2", "Section": "Housing", "Order": 1, "Type": "TEXT",
         "QuestionText": "How many rooms?", "Required": "TRUE"},
        {"QuestionID": "Q3", "Section": "", "Order": 1, "Type": "PARAGRAPH",
         "QuestionText": "Any other comments?"},
        {"QuestionID": "Q4", "Section": "Income", "Order": 1, "Type": "CHECKBOX",
         "QuestionText": "Which assets do you own?",
         "Option1": "Land", "Option2": "", "Option3": "Livestock"},
        {"QuestionID": "Q5", "Section": "Housing", "Order": 2, "Type": "RATING",
         "QuestionText": "Rate your house"},
        {"QuestionID": "Q6", "Section": "Housing", "Order": 3, "Type": "DROPDOWN",
         "QuestionText": "Roof material?"},
        {"QuestionID": "", "Section": "", "Order": "", "Type": "", "QuestionText": ""},
    ]

    return bank


class RecordingFormBuilder(FormBuilder):
    """Form builder that keeps every build request in memory."""

    def __init__(self, form_id: str = "form-1"):
        self.form_id = form_id
        self.builds: List[tuple] = []

    def build(self, meta: FormMeta, instructions: Sequence[FormInstruction]) -> BuiltForm:
        self.builds.append((meta, list(instructions)))
        return BuiltForm(
            form_id=self.form_id,
            edit_url=f"https://forms.example.com/{self.form_id}/edit",
            published_url=f"https://forms.example.com/{self.form_id}/viewform",
            response_spreadsheet_id=f"{self.form_id}-responses",
            response_sheet_name="Form Responses 1",
            spreadsheet_url=f"https://sheets.example.com/{self.form_id}-responses",
        )
