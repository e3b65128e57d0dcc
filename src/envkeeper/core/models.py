"""Core contracts for envkeeper.

These models define what a schema may say about a variable and what the
validator reports back:
- Rule: type tag plus optional length / pattern / enum constraints
- InvalidVariable: one failed check
- CheckResult: non-raising presence report
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VariableType(str, Enum):
    """Type tags with a dedicated check. Unknown tags pass unconditionally."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    URL = "url"
    EMAIL = "email"
    JSON = "json"
    PORT = "port"


class Rule(BaseModel):
    """Validation rule for a single variable."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    type: str | None = None
    min_length: int | None = Field(default=None, ge=0, alias="minLength")
    max_length: int | None = Field(default=None, ge=0, alias="maxLength")
    pattern: str | None = None
    enum: list[Any] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: object) -> object:
        """Accept VariableType members as well as plain tags."""
        if isinstance(v, VariableType):
            return v.value
        return v

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str | None) -> str | None:
        """Ensure the pattern compiles."""
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v


@dataclass
class InvalidVariable:
    """A present variable that failed a type or constraint check."""

    name: str
    value: str  # truncated for length/pattern failures
    expected: str
    reason: str


@dataclass
class CheckResult:
    """Result of a non-raising presence check."""

    valid: bool
    missing: list[str] = field(default_factory=list)
    set: list[str] = field(default_factory=list)
