"""
Validator - Fail-fast checks over environment configuration.

The validator confirms that an application's configuration is usable
before any runtime logic reads it:
1. Presence - absent and empty variables are both missing
2. Type - the raw string converts to the declared type
3. Constraints - length, pattern and enum rules

Problems are aggregated: one raised ValidationError lists every missing
and invalid variable, never just the first.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from envkeeper.config import Settings, get_settings
from envkeeper.core.errors import ArgumentError, ValidationError
from envkeeper.core.models import CheckResult, InvalidVariable, Rule
from envkeeper.core.validator.types import check_type
from envkeeper.sources import EnvironmentSource, OsEnvironSource

logger = logging.getLogger(__name__)

RuleInput = str | Mapping[str, Any] | Rule


def _is_missing(value: str | None) -> bool:
    return value is None or value == ""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)


def normalize_rule(entry: RuleInput) -> Rule:
    """
    Turn a schema entry into a Rule.

    A bare string is a type tag; a mapping may use camelCase or
    snake_case keys.

    Raises:
        ArgumentError: If the entry is not a valid rule
    """
    if isinstance(entry, Rule):
        return entry
    if isinstance(entry, str):
        return Rule(type=entry)
    if isinstance(entry, Mapping):
        try:
            return Rule.model_validate(dict(entry))
        except PydanticValidationError as e:
            raise ArgumentError(f"Invalid validation rule: {e}") from e
    raise ArgumentError(
        f"Validation rule must be a string, mapping or Rule, got: {type(entry).__name__}"
    )


class Validator:
    """
    Validate environment variables against presence and schema rules.

    Reads from an injected EnvironmentSource; defaults to the live
    process environment.
    """

    def __init__(
        self,
        source: EnvironmentSource | None = None,
        settings: Settings | None = None,
    ):
        self.source = source if source is not None else OsEnvironSource()
        self.settings = settings if settings is not None else get_settings()

    def require(self, names: Sequence[str]) -> bool:
        """
        Require variables to be set.

        Args:
            names: Variable names that must be present and non-empty

        Returns:
            True if every variable is set

        Raises:
            ArgumentError: If names is not a sequence of names
            ValidationError: Listing every missing variable
        """
        if isinstance(names, (str, bytes)) or not isinstance(names, Sequence):
            raise ArgumentError("Variables must be provided as a list of names")

        missing = self._find_missing(names)
        if missing:
            logger.warning(f"Missing required environment variables: {missing}")
            raise ValidationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing=missing,
            )
        return True

    def validate(self, schema: Mapping[str, RuleInput]) -> bool:
        """
        Validate variables against a schema.

        Args:
            schema: Mapping of variable name to type tag or rule

        Returns:
            True if every variable is present and valid

        Raises:
            ArgumentError: If the schema or one of its rules is malformed
            ValidationError: With every missing and invalid variable
        """
        if not isinstance(schema, Mapping):
            raise ArgumentError(
                f"Schema must be a mapping, got: {type(schema).__name__}"
            )

        rules = {name: normalize_rule(entry) for name, entry in schema.items()}

        missing: list[str] = []
        invalid: list[InvalidVariable] = []

        for name, rule in rules.items():
            self._check_value(name, self.source.get(name), rule, missing, invalid)

        self._raise_if_failed(missing, invalid)
        return True

    def get(
        self,
        name: str,
        default: Any = None,
        validation: RuleInput | None = None,
    ) -> str:
        """
        Get a variable, falling back to a default.

        The default is validated exactly like a real value. Nothing is
        written back to the source.

        Args:
            name: Variable name
            default: Value used when the variable is missing (None = required)
            validation: Optional type tag or rule for the resolved value

        Returns:
            The variable's value, or the stringified default

        Raises:
            ValidationError: If the variable is missing without a default,
                or the resolved value fails validation
        """
        value = self.source.get(name)

        if _is_missing(value):
            if default is None:
                raise ValidationError(
                    f"Environment variable {name} is required", missing=[name]
                )
            value = _stringify(default)
            logger.debug(f"Using default value for {name}")

        if validation is not None:
            rule = normalize_rule(validation)
            missing: list[str] = []
            invalid: list[InvalidVariable] = []
            self._check_value(name, value, rule, missing, invalid)
            self._raise_if_failed(missing, invalid)

        return value

    def check(self, names: Sequence[str]) -> CheckResult:
        """Report which variables are set without raising."""
        # A bare string is one name, not a sequence of one-letter names
        if isinstance(names, str):
            names = [names]
        missing = self._find_missing(names)
        return CheckResult(
            valid=not missing,
            missing=missing,
            set=[name for name in names if name not in missing],
        )

    def _find_missing(self, names: Sequence[str]) -> list[str]:
        return [name for name in names if _is_missing(self.source.get(name))]

    def _check_value(
        self,
        name: str,
        value: str | None,
        rule: Rule,
        missing: list[str],
        invalid: list[InvalidVariable],
    ) -> None:
        """Check one resolved value, appending any problems found."""
        if _is_missing(value):
            missing.append(name)
            return

        # Type failure skips the constraint checks for this variable
        if rule.type and not check_type(value, rule.type):
            invalid.append(
                InvalidVariable(
                    name=name,
                    value=value,
                    expected=rule.type,
                    reason=f'Expected {rule.type}, got "{value}"',
                )
            )
            return

        self._check_constraints(name, value, rule, invalid)

    def _check_constraints(
        self, name: str, value: str, rule: Rule, invalid: list[InvalidVariable]
    ) -> None:
        """Evaluate every length / pattern / enum constraint present."""
        length = len(value)

        if rule.min_length and length < rule.min_length:
            invalid.append(
                InvalidVariable(
                    name=name,
                    value=self.settings.preview(value),
                    expected=f"minimum length {rule.min_length}",
                    reason=f"Length {length} is less than required {rule.min_length}",
                )
            )

        if rule.max_length and length > rule.max_length:
            invalid.append(
                InvalidVariable(
                    name=name,
                    value=self.settings.preview(value),
                    expected=f"maximum length {rule.max_length}",
                    reason=f"Length {length} exceeds maximum {rule.max_length}",
                )
            )

        if rule.pattern and not re.search(rule.pattern, value):
            invalid.append(
                InvalidVariable(
                    name=name,
                    value=self.settings.preview(value),
                    expected=f"pattern {rule.pattern}",
                    reason="Value does not match required pattern",
                )
            )

        if rule.enum is not None and value not in rule.enum:
            allowed = ", ".join(_stringify(item) for item in rule.enum)
            invalid.append(
                InvalidVariable(
                    name=name,
                    value=value,
                    expected=f"one of: {allowed}",
                    reason=f"Value must be one of: {allowed}",
                )
            )

    def _raise_if_failed(
        self, missing: list[str], invalid: list[InvalidVariable]
    ) -> None:
        if not missing and not invalid:
            return

        logger.warning(
            f"Environment validation failed: missing={missing}, "
            f"invalid={[item.name for item in invalid]}"
        )
        raise ValidationError.from_report(missing, invalid)

    # Kept last: inside the class body this name shadows the builtin list
    def list(self, hide_values: bool = True) -> dict[str, str]:
        """
        Snapshot every variable in the source.

        Args:
            hide_values: Replace values with the hidden marker

        Returns:
            Mapping of name to value (or marker), in source order
        """
        marker = self.settings.hidden_marker
        return {
            name: marker if hide_values else value
            for name, value in self.source.entries()
        }
