"""
Tests for the core model objects.
"""

import dataclasses

import pytest

from qbank.model import (
    CHOICE_QUESTION_TYPES,
    FieldType,
    FormBuildResult,
    FormMeta,
    Question,
    QuestionType,
    RespondentField,
)


class TestTypes:

    def test_field_types(self):
        assert {t.value for t in FieldType} == {"TEXT", "PARAGRAPH", "DROPDOWN"}

    def test_question_types(self):
        assert {t.value for t in QuestionType} == {"MCQ", "CHECKBOX", "DROPDOWN", "TEXT", "PARAGRAPH"}

    def test_choice_types(self):
        assert CHOICE_QUESTION_TYPES == {QuestionType.MCQ, QuestionType.CHECKBOX, QuestionType.DROPDOWN}

    def test_type_properties(self):
        assert RespondentField(field_name="A", type="PARAGRAPH").field_type is FieldType.PARAGRAPH
        assert Question(question_text="Q", type="MCQ").question_type is QuestionType.MCQ

    def test_unknown_type_property_raises(self):
        with pytest.raises(ValueError):
            Question(question_text="Q", type="RATING").question_type


class TestRecords:

    def test_form_meta_defaults(self):
        meta = FormMeta()
        assert meta.title == "HBMP Survey Form"
        assert meta.description == "Survey form generated from Question Bank"
        assert meta.version == ""

    def test_records_are_frozen(self):
        question = Question(question_text="Q", type="TEXT")
        with pytest.raises(dataclasses.FrozenInstanceError):
            question.section = "Other"

    def test_question_defaults(self):
        question = Question(question_text="Q", type="TEXT")
        assert question.question_id == ""
        assert question.section == ""
        assert question.order == 0.0
        assert question.required is False
        assert question.options == ()

    def test_result_without_form_has_no_meta_entries(self):
        assert FormBuildResult(ok=True, message="dry run", dry_run=True).to_meta_entries() == []
