"""Validator - Presence, type and constraint checks over an environment."""

from envkeeper.core.validator.types import check_type
from envkeeper.core.validator.validator import Validator

__all__ = ["Validator", "check_type"]
