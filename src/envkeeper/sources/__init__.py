"""Environment sources the validator reads from."""

from envkeeper.sources.environment import (
    EnvironmentSource,
    MappingSource,
    OsEnvironSource,
)

__all__ = ["EnvironmentSource", "MappingSource", "OsEnvironSource"]
