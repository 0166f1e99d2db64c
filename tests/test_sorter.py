"""
Tests for sorting accepted respondent fields and questions.
"""

from qbank.model import Question, RespondentField
from qbank.sorter import sort_questions, sort_respondent_fields


def q(text, section="", order=0.0):
    return Question(question_text=text, type="TEXT", section=section, order=order)


class TestRespondentFieldSort:

    def test_ascending_by_order(self):
        fields = [
            RespondentField(field_name="C", type="TEXT", order=3),
            RespondentField(field_name="A", type="TEXT", order=1),
            RespondentField(field_name="B", type="TEXT", order=2),
        ]
        assert [f.field_name for f in sort_respondent_fields(fields)] == ["A", "B", "C"]

    def test_ties_keep_row_order(self):
        fields = [
            RespondentField(field_name="first", type="TEXT", order=1),
            RespondentField(field_name="second", type="TEXT", order=1),
            RespondentField(field_name="zero", type="TEXT", order=0),
        ]
        assert [f.field_name for f in sort_respondent_fields(fields)] == ["zero", "first", "second"]

    def test_fractional_orders(self):
        fields = [
            RespondentField(field_name="B", type="TEXT", order=1.5),
            RespondentField(field_name="A", type="TEXT", order=1.25),
        ]
        assert [f.field_name for f in sort_respondent_fields(fields)] == ["A", "B"]


class TestQuestionSort:

    def test_blank_section_sorts_last(self):
        questions = [q("blank", "", 1), q("b", "B", 5), q("a", "A", 2)]
        assert [x.question_text for x in sort_questions(questions)] == ["a", "b", "blank"]

    def test_order_within_section(self):
        questions = [q("a3", "A", 3), q("a1", "A", 1), q("a2", "A", 2)]
        assert [x.question_text for x in sort_questions(questions)] == ["a1", "a2", "a3"]

    def test_numeric_not_string_order(self):
        questions = [q("ten", "A", 10), q("two", "A", 2)]
        assert [x.question_text for x in sort_questions(questions)] == ["two", "ten"]

    def test_exact_ties_are_stable(self):
        questions = [q("first", "A", 1), q("second", "A", 1), q("third", "A", 1)]
        assert [x.question_text for x in sort_questions(questions)] == ["first", "second", "third"]

    def test_blank_sections_sorted_by_order(self):
        questions = [q("late", "", 9), q("early", "", 1), q("named", "Z", 100)]
        assert [x.question_text for x in sort_questions(questions)] == ["named", "early", "late"]

    def test_sort_is_idempotent(self):
        questions = [q("x", "", 1), q("y", "B", 2), q("z", "A", 3), q("w", "A", 1)]
        once = sort_questions(questions)
        assert sort_questions(once) == once

    def test_sections_grouped(self):
        questions = [q("a1", "A", 1), q("b1", "B", 1), q("a2", "A", 2)]
        assert [x.section for x in sort_questions(questions)] == ["A", "A", "B"]

    def test_input_not_mutated(self):
        questions = [q("b", "B", 1), q("a", "A", 1)]
        sort_questions(questions)
        assert [x.question_text for x in questions] == ["b", "a"]

    def test_sections_compare_ignoring_case(self):
        questions = [q("b", "Banana", 1), q("a", "apple", 1), q("c", "cherry", 1)]
        assert [x.section for x in sort_questions(questions)] == ["apple", "Banana", "cherry"]

    def test_case_variants_stay_contiguous(self):
        questions = [q("upper1", "Income", 1), q("other", "income", 1), q("upper2", "Income", 2)]
        assert [x.question_text for x in sort_questions(questions)] == ["upper1", "upper2", "other"]

    def test_control_characters_in_section(self):
        questions = [q("c", "C", 1), q("x", "A\x00B", 1)]
        assert [x.question_text for x in sort_questions(questions)] == ["x", "c"]
