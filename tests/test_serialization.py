"""
Tests for serialization of compiler output.

Instruction streams must survive JSON/YAML round-trips unchanged, and the
result envelope must use the field names the web UI reads.
"""

import json

from qbank.model import (
    BuiltForm,
    FieldType,
    FormBuildResult,
    Item,
    PageBreak,
    QuestionType,
    ValidationStats,
)
from qbank.serialization import (
    instruction_to_dict,
    instructions_from_json,
    instructions_from_yaml,
    instructions_to_dicts,
    instructions_to_json,
    instructions_to_yaml,
    result_from_json,
    result_to_dict,
    result_to_json,
    stats_to_dict,
)


def build_sample_stream():
    return [
        PageBreak("Respondent Information", "Please provide your details"),
        Item(FieldType.DROPDOWN, "District", True, ("North", "South")),
        PageBreak("Survey Questions", ""),
        PageBreak("Income", "Section: Income"),
        Item(QuestionType.CHECKBOX, "Assets?", False, ("Land", "Livestock")),
        Item(QuestionType.TEXT, "Age?", True, ()),
    ]


def test_json_roundtrip():
    stream = build_sample_stream()
    assert instructions_from_json(instructions_to_json(stream)) == stream


def test_yaml_roundtrip():
    stream = build_sample_stream()
    assert instructions_from_yaml(instructions_to_yaml(stream)) == stream


def test_respondent_and_question_kinds_stay_distinct():
    restored = instructions_from_json(instructions_to_json([
        Item(FieldType.TEXT, "Name"),
        Item(QuestionType.TEXT, "Name"),
    ]))
    assert isinstance(restored[0].kind, FieldType)
    assert isinstance(restored[1].kind, QuestionType)


def test_item_dict_shape():
    d = instruction_to_dict(Item(QuestionType.MCQ, "Pick", True, ("A", "B")))
    assert d == {
        "type": "item",
        "kind": "MCQ",
        "respondentField": False,
        "title": "Pick",
        "required": True,
        "options": ["A", "B"],
    }


def test_page_break_dict_shape():
    assert instructions_to_dicts([PageBreak("Income", "Section: Income")]) == [
        {"type": "pageBreak", "title": "Income", "helpText": "Section: Income"},
    ]


def test_stats_dict_uses_camel_case():
    d = stats_to_dict(ValidationStats(2, 5, 1, ("bad row",)))
    assert d == {"sectionsCount": 2, "questionsCount": 5, "skippedCount": 1, "errors": ["bad row"]}


def test_dry_run_result_envelope():
    result = FormBuildResult(ok=True, message="done", dry_run=True, stats=ValidationStats(1, 1, 0, ()))
    d = result_to_dict(result)
    assert d["ok"] is True
    assert d["dryRun"] is True
    assert d["stats"]["questionsCount"] == 1
    assert "formId" not in d


def test_generate_result_roundtrip():
    result = FormBuildResult(
        ok=True,
        message="Form generated",
        stats=ValidationStats(1, 3, 0, ()),
        form=BuiltForm(
            form_id="abc",
            edit_url="https://forms.example.com/abc/edit",
            published_url="https://forms.example.com/abc/viewform",
            response_spreadsheet_id="sheet-9",
            response_sheet_name="Form Responses 1",
            spreadsheet_url="https://sheets.example.com/abc",
        ),
        version="2024.1",
        created_at="2024-05-01T10:00:00+00:00",
    )
    text = result_to_json(result)
    envelope = json.loads(text)
    assert envelope["formId"] == "abc"
    assert envelope["responseSpreadsheetId"] == "sheet-9"
    assert envelope["responseSheetName"] == "Form Responses 1"
    assert result_from_json(text) == result
