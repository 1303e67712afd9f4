"""RecorderSetting — which events and properties the event recorder listens to.

The settings document is persisted as JSON next to the application.  On
load, event ids that the catalog knows about but the document does not
are merged in as unselected entries; entries for ids the catalog no
longer knows are kept.
"""

from __future__ import annotations

import json
import logging
from enum import Enum, IntEnum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from a11yscan.config import DEFAULT_RECORDER_CONFIG
from a11yscan.types import EventId, PropertyId, catalog_pairs

logger = logging.getLogger(__name__)


class RecordEntityType(str, Enum):
    EVENT = "event"
    PROPERTY = "property"


class TreeScope(IntEnum):
    """Scope of elements an event subscription covers."""

    ELEMENT = 1
    CHILDREN = 2
    DESCENDANTS = 4
    SUBTREE = 7
    PARENT = 8
    ANCESTORS = 16


class RecordEntitySetting(BaseModel):
    """One event or property the user may choose to record."""

    type: RecordEntityType
    id: int
    name: str | None = None
    is_recorded: bool = False
    is_custom: bool = False
    """Added by the user rather than taken from the catalog."""

    checked_count: int = 0
    """How many selections currently ask for this entry."""


class RecorderSetting(BaseModel):
    """Persisted recorder configuration."""

    events: list[RecordEntitySetting] = Field(default_factory=list)
    properties: list[RecordEntitySetting] = Field(default_factory=list)
    is_listening_focus_changed_event: bool = False
    is_listening_all_events: bool = False
    """Ignore individual settings and record everything."""

    listen_scope: TreeScope = TreeScope.SUBTREE

    def get_events_configs(self, is_recorded: bool) -> list[RecordEntitySetting]:
        """Events whose recorded flag equals *is_recorded*."""
        return [e for e in self.events if e.is_recorded == is_recorded]

    def set_checked(
        self,
        entity_id: int,
        entity_type: RecordEntityType,
        value: bool,
        name: str | None = None,
    ) -> None:
        """Add (*value* true) or remove one selection of an entry.

        The focus-changed event maps onto
        :attr:`is_listening_focus_changed_event` instead of a count.  A
        property id with no entry becomes a custom entry with a count of
        one.  An unknown event id raises :class:`KeyError`.
        """
        change = 1 if value else -1
        if entity_type == RecordEntityType.EVENT:
            if entity_id == EventId.AUTOMATION_FOCUS_CHANGED:
                self.is_listening_focus_changed_event = value
                return
            entry = _find(self.events, entity_id)
            if entry is None:
                raise KeyError(f"Unknown event id: {entity_id}")
            entry.checked_count += change
            return

        entry = _find(self.properties, entity_id)
        if entry is not None:
            entry.checked_count += change
            return

        self.properties.append(
            RecordEntitySetting(
                type=RecordEntityType.PROPERTY,
                id=entity_id,
                name=name,
                is_custom=True,
                is_recorded=False,
                checked_count=1,
            )
        )
        logger.debug("Added custom property entry %d (%s)", entity_id, name)

    # -- serialization --

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json"), indent=2)

    @classmethod
    def from_json(cls, text: str) -> RecorderSetting:
        return cls.model_validate(json.loads(text))

    def save(self, path: str | Path) -> Path:
        """Write the settings to *path*, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_json(), encoding="utf-8")
        logger.info("Saved recorder settings to %s", target)
        return target


def _find(entries: list[RecordEntitySetting], entity_id: int) -> RecordEntitySetting | None:
    for entry in entries:
        if entry.id == entity_id:
            return entry
    return None


def default_recording_config(
    events: list[tuple[int, str]] | None = None,
    properties: list[tuple[int, str]] | None = None,
) -> RecorderSetting:
    """Settings with one unselected entry per known event and property.

    Focus-change listening is on and the scope is the whole subtree.
    """
    if events is None:
        events = catalog_pairs(EventId)
    if properties is None:
        properties = catalog_pairs(PropertyId)

    return RecorderSetting(
        events=[
            RecordEntitySetting(type=RecordEntityType.EVENT, id=i, name=n)
            for i, n in events
        ],
        properties=[
            RecordEntitySetting(type=RecordEntityType.PROPERTY, id=i, name=n)
            for i, n in properties
        ],
        is_listening_focus_changed_event=True,
        listen_scope=TreeScope.SUBTREE,
    )


def merge_known_events(
    events: list[RecordEntitySetting],
    catalog: list[tuple[int, str]],
) -> list[RecordEntitySetting]:
    """Return *events* followed by an unselected entry for every catalog id
    it lacks, in catalog order.

    Existing entries are copied unchanged, including ones whose id is no
    longer in the catalog.
    """
    present = {e.id for e in events}
    merged = [e.model_copy() for e in events]
    for event_id, name in catalog:
        if event_id in present:
            continue
        merged.append(
            RecordEntitySetting(
                type=RecordEntityType.EVENT,
                id=event_id,
                name=name,
                is_recorded=False,
            )
        )
        present.add(event_id)
    return merged


def load_configuration(
    path: str | Path = DEFAULT_RECORDER_CONFIG,
    *,
    events: list[tuple[int, str]] | None = None,
    properties: list[tuple[int, str]] | None = None,
) -> RecorderSetting:
    """Load recorder settings from *path*.

    A missing or unreadable file is replaced by the defaults, which are
    written back.  Otherwise newly known event ids are merged in (and the
    file rewritten if any were added).  ``is_listening_all_events`` is
    always reset to *False*.
    """
    target = Path(path)
    if events is None:
        events = catalog_pairs(EventId)

    config = _read(target)
    if config is None:
        config = default_recording_config(events, properties)
        config.save(target)
        return config

    merged = merge_known_events(config.events, events)
    if len(merged) != len(config.events):
        logger.info(
            "Added %d new event(s) to recorder settings", len(merged) - len(config.events)
        )
        config.events = merged
        config.save(target)

    config.is_listening_all_events = False
    return config


def _read(path: Path) -> RecorderSetting | None:
    if not path.is_file():
        return None
    try:
        return RecorderSetting.from_json(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValidationError):
        logger.warning("Could not read recorder settings from %s", path, exc_info=True)
        return None
