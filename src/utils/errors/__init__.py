"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContractViolationError,
    RulePathError,
    ValidationSetupError,
)

__all__ = [
    "ContractViolationError",
    "RulePathError",
    "ValidationSetupError",
]
