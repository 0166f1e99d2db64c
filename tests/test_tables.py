"""
Tests for the CSV and YAML table readers.
"""

import pytest

from qbank.compiler import compile_question_bank
from qbank.errors import TableReadError
from qbank.tables import (
    load_question_bank_dir,
    load_question_bank_yaml,
    read_table_file,
    read_table_string,
)

QUESTIONS_CSV = '''QuestionID,Section,Order,Type,QuestionText,Required,Option1,Option2,Option3,Option4,Option5,GoToSectionOnOption
Q1,Income,1,MCQ,"Main source
of income?",TRUE,Farming,Trade,,,,
Q2,,2,TEXT,Age?,false,,,,,,
'''


class TestReadTableString:

    def test_rows_keep_raw_values(self):
        rows = read_table_string(QUESTIONS_CSV)
        assert len(rows) == 2
        assert rows[0]["QuestionText"] == "Main source\nof income?"
        assert rows[0]["Order"] == "1"
        assert rows[1]["Section"] == ""

    def test_header_whitespace_trimmed(self):
        rows = read_table_string(" FieldName , Type \nName,TEXT\n")
        assert rows == [{"FieldName": "Name", "Type": "TEXT"}]

    def test_missing_required_columns(self):
        with pytest.raises(TableReadError, match="Missing required columns"):
            read_table_string("QuestionID,Order\nQ1,1\n", required_columns=["QuestionText", "Type"])

    def test_empty_content(self):
        assert read_table_string("") == []
        with pytest.raises(TableReadError):
            read_table_string("", required_columns=["QuestionText"])


class TestFiles:

    def test_missing_file(self, tmp_path):
        with pytest.raises(TableReadError, match="not found"):
            read_table_file(str(tmp_path / "nope.csv"))

    def test_utf8_bom_header(self, tmp_path):
        path = tmp_path / "Questions.csv"
        path.write_bytes("\ufeffQuestionText,Type\nAge?,TEXT\n".encode("utf-8"))
        assert read_table_file(str(path)) == [{"QuestionText": "Age?", "Type": "TEXT"}]

    def test_load_directory(self, tmp_path):
        (tmp_path / "Questions.csv").write_text(QUESTIONS_CSV, encoding="utf-8")
        (tmp_path / "Meta.csv").write_text("Key,Value\nFormTitle,Census\n", encoding="utf-8")

        bank = load_question_bank_dir(str(tmp_path))
        assert bank.respondent_rows == []
        assert bank.meta_rows == [{"Key": "FormTitle", "Value": "Census"}]

        instructions, stats = compile_question_bank(bank.meta_rows, bank.respondent_rows, bank.question_rows)
        assert stats.questions_count == 2
        assert [i.title for i in instructions] == ["Income", "Main source\nof income?", "Age?"]

    def test_directory_without_questions(self, tmp_path):
        with pytest.raises(TableReadError):
            load_question_bank_dir(str(tmp_path))


class TestYaml:

    def test_load_yaml_text(self):
        bank = load_question_bank_yaml(
            "Meta:\n"
            "  - {Key: FormTitle, Value: Census}\n"
            "Questions:\n"
            "  - {QuestionText: Age?, Type: TEXT, Required: true, Order: 1}\n",
            is_path=False,
        )
        assert bank.respondent_rows == []
        assert bank.question_rows[0]["Required"] is True

        instructions, _ = compile_question_bank(bank.meta_rows, bank.respondent_rows, bank.question_rows)
        assert instructions[0].required is True

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text("Questions:\n  - {QuestionText: Age?, Type: TEXT}\n", encoding="utf-8")
        bank = load_question_bank_yaml(str(path))
        assert len(bank.question_rows) == 1

    def test_yaml_must_be_mapping(self):
        with pytest.raises(TableReadError):
            load_question_bank_yaml("- just\n- a list\n", is_path=False)

    def test_table_must_be_list_of_rows(self):
        with pytest.raises(TableReadError, match="Questions"):
            load_question_bank_yaml("Questions: hello\n", is_path=False)

    def test_invalid_yaml(self):
        with pytest.raises(TableReadError):
            load_question_bank_yaml("Questions: [unclosed\n", is_path=False)
