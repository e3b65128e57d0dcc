"""Exception types raised by envkeeper."""

from envkeeper.core.models import InvalidVariable


class EnvKeeperError(Exception):
    """Base exception for envkeeper errors."""


class ArgumentError(EnvKeeperError, TypeError):
    """Malformed input at the call site (bad names list, schema or rule)."""


class ValidationError(EnvKeeperError):
    """
    Aggregate configuration failure.

    Carries every missing and invalid variable found in one pass so an
    operator can fix them all at once.
    """

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        invalid: list[InvalidVariable] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.missing = list(missing or [])
        self.invalid = list(invalid or [])

    @classmethod
    def from_report(
        cls, missing: list[str], invalid: list[InvalidVariable]
    ) -> "ValidationError":
        """Compose the multi-line message for a failed schema validation."""
        message = ""

        if missing:
            message += f"Missing environment variables: {', '.join(missing)}"

        if invalid:
            if message:
                message += "\n"
            message += "Invalid environment variables:\n"
            for item in invalid:
                message += f"  - {item.name}: {item.reason}\n"

        return cls(message.rstrip(), missing=missing, invalid=invalid)
