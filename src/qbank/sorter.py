"""
Sorter for accepted records.

Respondent fields are ordered by their numeric Order.

Questions are grouped by section, then ordered by Order inside the
section:
    - blank sections always sort after every named section
    - named sections compare alphabetically, ignoring case
    - ties keep the original row order (Python's sort is stable)
"""

from typing import Iterable, List, Tuple

from qbank.model import Question, RespondentField


def sort_respondent_fields(fields: Iterable[RespondentField]) -> List[RespondentField]:
    return sorted(fields, key=lambda f: f.order)


def _question_sort_key(question: Question) -> Tuple[bool, str, str, float]:
    section = question.section
    # Raw name breaks case-fold ties so "Income" and "income" stay contiguous
    return (section == "", section.casefold(), section, question.order)


def sort_questions(questions: Iterable[Question]) -> List[Question]:
    """
    Sort questions by (section, order), blank sections last.

    Sorting an already sorted list returns it unchanged.
    """
    return sorted(questions, key=_question_sort_key)
