"""Data models for handing timestamps to external storage.

These models are storage-agnostic: `to_dict()` yields plain strings so the
result can go to JSON, a document store, or separate database columns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(slots=True)
class TimestampRecord:
    """Everything needed to rehydrate a `Timestamps` registry.

    Attributes:
        fields: Timestamp name -> instant of its last significant write.
        created_at: When the entity was created.
        updated_at: When any tracked field last had a significant write.

    Example:
        record = entity.timestamps.snapshot()
        row = record.to_dict()
        ...
        timestamps = Timestamps.from_record(TimestampRecord.from_dict(row))
    """

    created_at: datetime
    updated_at: datetime
    fields: dict[str, datetime] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary (ISO-8601 instants)."""
        return {
            "fields": {name: at.isoformat() for name, at in self.fields.items()},
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimestampRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            fields={
                name: datetime.fromisoformat(at) for name, at in data.get("fields", {}).items()
            },
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
