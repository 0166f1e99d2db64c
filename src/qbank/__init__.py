"""
Question Bank Form Compiler (qbank) Package

Turns a tabular question bank into an ordered, typed form definition.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Any forms API (Google Forms, Microsoft Forms, ...)
    - Spreadsheet or database access
    - Authentication and HTTP transport

This package defines FORM STRUCTURE only.

Form creation happens in external collaborators (see qbank.service).
Every collaborator consumes the instruction stream unchanged.
"""

from qbank.compiler import (
    compile_question_bank,
    validate_question_bank,
    read_form_meta,
)

__version__ = "0.1.0"

__all__ = [
    "compile_question_bank",
    "validate_question_bank",
    "read_form_meta",
]
