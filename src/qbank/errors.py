"""
Exceptions raised by the question bank compiler.

Malformed rows never raise: they are skipped and reported through
ValidationStats. Exceptions are reserved for problems above row level.
"""


class QuestionBankError(Exception):
    """Base class for all question bank errors."""
    pass


class ConfigurationError(QuestionBankError):
    """Raised when the inputs needed for compilation are structurally absent."""
    pass


class EmptyQuestionBankError(ConfigurationError):
    """Raised when the questions table holds no rows at all."""
    pass


class TableReadError(QuestionBankError):
    """Raised when a question bank table cannot be read."""
    pass


class FormBuilderError(QuestionBankError):
    """Raised by form builders when the form artifact cannot be created."""
    pass
