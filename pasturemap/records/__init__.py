"""Mini README: Record source package.

Exposes the ``PastureRecord`` model plus the record sources consumed by the
map session. ``source`` contains the public API.
"""

from .source import JsonFileRecordSource, PastureRecord, RecordSource, StaticRecordSource

__all__ = [
    "JsonFileRecordSource",
    "PastureRecord",
    "RecordSource",
    "StaticRecordSource",
]
