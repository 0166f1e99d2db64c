"""
Serialization helpers for compiler output (instructions, stats, results).

Provides JSON/YAML output via an intermediate dict representation whose
field names match the response envelope consumed by the web UI
(camelCase). Instruction streams and generation results round-trip
losslessly.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

import yaml

from qbank.model import (
    BuiltForm,
    FieldType,
    FormBuildResult,
    FormInstruction,
    Item,
    PageBreak,
    QuestionType,
    ValidationStats,
)


def instruction_to_dict(instruction: FormInstruction) -> Dict[str, Any]:
    if isinstance(instruction, PageBreak):
        return {"type": "pageBreak", "title": instruction.title, "helpText": instruction.help_text}
    if isinstance(instruction, Item):
        return {
            "type": "item",
            "kind": instruction.kind.value,
            "respondentField": isinstance(instruction.kind, FieldType),
            "title": instruction.title,
            "required": instruction.required,
            "options": list(instruction.options),
        }
    raise TypeError(f"Unsupported instruction type: {type(instruction)}")


def instruction_from_dict(d: Dict[str, Any]) -> FormInstruction:
    t = d.get("type")
    if t == "pageBreak":
        return PageBreak(title=d["title"], help_text=d.get("helpText", ""))
    if t == "item":
        kind_enum = FieldType if d.get("respondentField") else QuestionType
        return Item(
            kind=kind_enum(d["kind"]),
            title=d["title"],
            required=bool(d.get("required", False)),
            options=tuple(d.get("options", [])),
        )
    raise TypeError(f"Unsupported instruction dict type: {t}")


def instructions_to_dicts(instructions: Sequence[FormInstruction]) -> List[Dict[str, Any]]:
    return [instruction_to_dict(i) for i in instructions]


def instructions_from_dicts(items: Sequence[Dict[str, Any]]) -> List[FormInstruction]:
    return [instruction_from_dict(d) for d in items]


def stats_to_dict(s: ValidationStats) -> Dict[str, Any]:
    return {
        "sectionsCount": s.sections_count,
        "questionsCount": s.questions_count,
        "skippedCount": s.skipped_count,
        "errors": list(s.errors),
    }


def stats_from_dict(d: Dict[str, Any]) -> ValidationStats:
    return ValidationStats(
        sections_count=d.get("sectionsCount", 0),
        questions_count=d.get("questionsCount", 0),
        skipped_count=d.get("skippedCount", 0),
        errors=tuple(d.get("errors", [])),
    )


def result_to_dict(r: FormBuildResult) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "ok": r.ok,
        "message": r.message,
        "dryRun": r.dry_run,
        "stats": stats_to_dict(r.stats) if r.stats is not None else None,
    }
    if r.form is not None:
        d.update({
            "formId": r.form.form_id,
            "version": r.version,
            "createdAt": r.created_at,
            "editUrl": r.form.edit_url,
            "publishedUrl": r.form.published_url,
            "spreadsheetUrl": r.form.spreadsheet_url,
            "responseSpreadsheetId": r.form.response_spreadsheet_id,
            "responseSheetName": r.form.response_sheet_name,
        })
    return d


def result_from_dict(d: Dict[str, Any]) -> FormBuildResult:
    form = None
    if d.get("formId"):
        form = BuiltForm(
            form_id=d["formId"],
            edit_url=d.get("editUrl", ""),
            published_url=d.get("publishedUrl", ""),
            response_spreadsheet_id=d.get("responseSpreadsheetId", ""),
            response_sheet_name=d.get("responseSheetName", ""),
            spreadsheet_url=d.get("spreadsheetUrl", ""),
        )
    stats = d.get("stats")
    return FormBuildResult(
        ok=bool(d.get("ok", False)),
        message=d.get("message", ""),
        dry_run=bool(d.get("dryRun", False)),
        stats=stats_from_dict(stats) if stats is not None else None,
        form=form,
        version=d.get("version", ""),
        created_at=d.get("createdAt", ""),
    )


def instructions_to_json(instructions: Sequence[FormInstruction]) -> str:
    return json.dumps(instructions_to_dicts(instructions))


def instructions_from_json(s: str) -> List[FormInstruction]:
    return instructions_from_dicts(json.loads(s))


def instructions_to_yaml(instructions: Sequence[FormInstruction]) -> str:
    return yaml.safe_dump(instructions_to_dicts(instructions), sort_keys=False)


def instructions_from_yaml(s: str) -> List[FormInstruction]:
    return instructions_from_dicts(yaml.safe_load(s) or [])


def result_to_json(r: FormBuildResult) -> str:
    return json.dumps(result_to_dict(r), sort_keys=True)


def result_from_json(s: str) -> FormBuildResult:
    return result_from_dict(json.loads(s))
