"""Persisted recorder settings."""

from a11yscan.settings.recorder import (
    RecordEntitySetting,
    RecordEntityType,
    RecorderSetting,
    TreeScope,
    default_recording_config,
    load_configuration,
    merge_known_events,
)

__all__ = [
    "RecordEntitySetting",
    "RecordEntityType",
    "RecorderSetting",
    "TreeScope",
    "default_recording_config",
    "load_configuration",
    "merge_known_events",
]
