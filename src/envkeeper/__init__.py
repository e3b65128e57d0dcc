"""envkeeper - Fail-fast validation of environment configuration."""

__version__ = "0.1.0"

from envkeeper.config import Settings, get_settings
from envkeeper.core import (
    ArgumentError,
    CheckResult,
    EnvKeeperError,
    InvalidVariable,
    Rule,
    ValidationError,
    VariableType,
)
from envkeeper.core.validator import Validator
from envkeeper.sources import EnvironmentSource, MappingSource, OsEnvironSource

__all__ = [
    "ArgumentError",
    "CheckResult",
    "EnvKeeperError",
    "EnvironmentSource",
    "InvalidVariable",
    "MappingSource",
    "OsEnvironSource",
    "Rule",
    "Settings",
    "ValidationError",
    "Validator",
    "VariableType",
    "get_settings",
]
