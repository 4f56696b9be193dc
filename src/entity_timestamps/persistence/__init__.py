"""Persistence records for timestamp registries.

Storing and loading is left to the caller; this module only defines the
shape of the data.

Usage:
    from entity_timestamps.persistence import TimestampRecord

    row = entity.timestamps.snapshot().to_dict()
    timestamps = Timestamps.from_record(TimestampRecord.from_dict(row))
"""

from entity_timestamps.persistence.models import TimestampRecord

__all__ = [
    "TimestampRecord",
]
