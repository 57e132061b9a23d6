"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def from_row(cls, row: tuple):
        """Build an entity from a DB row whose columns follow field order."""
        return cls(*row[: len(fields(cls))])
