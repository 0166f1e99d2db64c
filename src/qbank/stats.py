"""
Stats Aggregator for the question row pass.

The accumulator is an immutable value threaded through the scan of the
Questions table: every step returns a new accumulator. Only question rows
feed it; respondent fields never touch the stats.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from qbank.model import Question, ValidationStats


@dataclass(frozen=True)
class StatsAccumulator:
    """
    Running totals of one validation pass.

    Properties:
        sections: Distinct non-blank sections of accepted questions, first-seen order
        questions_count: Accepted questions so far
        skipped_count: Blank and rejected rows so far
        errors: Rejection messages in row order
    """

    sections: Tuple[str, ...] = ()
    questions_count: int = 0
    skipped_count: int = 0
    errors: Tuple[str, ...] = ()

    def accept(self, question: Question) -> "StatsAccumulator":
        sections = self.sections
        if question.section and question.section not in sections:
            sections = sections + (question.section,)
        return replace(self, sections=sections, questions_count=self.questions_count + 1)

    def skip(self, reason: Optional[str] = None) -> "StatsAccumulator":
        """Count a skipped row; blank rows pass no reason and add no message."""
        errors = self.errors if reason is None else self.errors + (reason,)
        return replace(self, skipped_count=self.skipped_count + 1, errors=errors)

    @property
    def is_empty(self) -> bool:
        """True when no row was accepted or skipped."""
        return self.questions_count == 0 and self.skipped_count == 0

    def snapshot(self) -> ValidationStats:
        return ValidationStats(
            sections_count=len(self.sections),
            questions_count=self.questions_count,
            skipped_count=self.skipped_count,
            errors=self.errors,
        )
