"""envkeeper Core - Rule contracts and error types."""

from envkeeper.core.errors import ArgumentError, EnvKeeperError, ValidationError
from envkeeper.core.models import CheckResult, InvalidVariable, Rule, VariableType

__all__ = [
    "ArgumentError",
    "CheckResult",
    "EnvKeeperError",
    "InvalidVariable",
    "Rule",
    "ValidationError",
    "VariableType",
]
