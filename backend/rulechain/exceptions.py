"""Exceptions raised for caller programming errors.

Rule violations are never raised; they are returned as data in a ValidationResult.
"""


class RuleChainError(Exception):
    """Base class for rulechain errors."""


class RecordDescriptionError(RuleChainError, ValueError):
    """Raised when an object cannot be described as a record of fields."""
