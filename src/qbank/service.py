"""
Form generation service (Layer 4: Question Bank → Form Artifact).

Connects the compiler to an external form builder:

    dry run:  validate the bank, report stats, build nothing
    generate: compile the bank and hand the instruction stream to a
              FormBuilder, recording what it created

Every request returns a FormBuildResult. Bank-level problems
(ConfigurationError) and builder failures (FormBuilderError) become
failed results instead of exceptions.

Authentication and HTTP transport are the caller's concern.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Sequence

from qbank.compiler import compile_question_bank, read_form_meta, validate_question_bank
from qbank.errors import ConfigurationError, FormBuilderError
from qbank.model import BuiltForm, FormBuildResult, FormInstruction, FormMeta, ValidationStats
from qbank.tables import QuestionBank

logger = logging.getLogger(__name__)

GENERATE_FORM_ACTION = "generateForm"


class FormBuilder(ABC):
    """
    Creates a form artifact from an instruction stream.

    Implementations map PageBreak to a section/page break and Item to the
    input widget of the same kind, in stream order, and raise
    FormBuilderError when the artifact cannot be created.
    """

    @abstractmethod
    def build(self, meta: FormMeta, instructions: Sequence[FormInstruction]) -> BuiltForm:
        raise NotImplementedError


def _summary(stats: ValidationStats) -> str:
    return (
        f"{stats.questions_count} questions in {stats.sections_count} sections, "
        f"{stats.skipped_count} skipped"
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_form(
    bank: QuestionBank,
    builder: Optional[FormBuilder] = None,
    dry_run: bool = False,
    now: Optional[Callable[[], datetime]] = None,
) -> FormBuildResult:
    """
    Validate (dry run) or generate a form from a question bank.

    Args:
        bank: Raw question bank tables
        builder: Form builder used when not a dry run
        dry_run: Only validate and report stats
        now: Clock used for the CreatedAt stamp (UTC now by default)

    Returns:
        FormBuildResult (ok=False on bank or builder failure)
    """
    if dry_run:
        try:
            stats = validate_question_bank(bank.meta_rows, bank.respondent_rows, bank.question_rows)
        except ConfigurationError as e:
            logger.error("Dry run failed: %s", e)
            return FormBuildResult(ok=False, message=str(e), dry_run=True)
        return FormBuildResult(
            ok=True,
            message=f"Validation complete: {_summary(stats)}",
            dry_run=True,
            stats=stats,
        )

    if builder is None:
        return FormBuildResult(ok=False, message="No form builder configured")

    meta = read_form_meta(bank.meta_rows)
    try:
        instructions, stats = compile_question_bank(
            bank.meta_rows, bank.respondent_rows, bank.question_rows,
        )
    except ConfigurationError as e:
        logger.error("Compilation failed: %s", e)
        return FormBuildResult(ok=False, message=str(e))

    try:
        form = builder.build(meta, instructions)
    except FormBuilderError as e:
        logger.error("Form builder failed: %s", e)
        return FormBuildResult(ok=False, message=f"Form creation failed: {e}", stats=stats)

    created_at = (now or _utc_now)().isoformat()
    logger.info("Created form %s (%s)", form.form_id, meta.title)
    return FormBuildResult(
        ok=True,
        message=f"Form generated successfully: {_summary(stats)}",
        stats=stats,
        form=form,
        version=meta.version,
        created_at=created_at,
    )


def handle_request(
    payload: Mapping[str, Any],
    bank: QuestionBank,
    builder: Optional[FormBuilder] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> FormBuildResult:
    """
    Dispatch a request payload such as {"action": "generateForm", "dryRun": true}.

    Unknown actions return a failed result.
    """
    action = payload.get("action")
    if action != GENERATE_FORM_ACTION:
        return FormBuildResult(ok=False, message=f"Unknown action: {action}")

    dry_run = payload.get("dryRun", False) is True
    return generate_form(bank, builder=builder, dry_run=dry_run, now=now)


__all__ = [
    "FormBuilder",
    "generate_form",
    "handle_request",
    "GENERATE_FORM_ACTION",
]
