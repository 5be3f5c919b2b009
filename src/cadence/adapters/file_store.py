"""File-based event storage adapter."""

import json
import logging
from pathlib import Path

from cadence.core.errors import StorageError
from cadence.core.events import Event

from .memory_store import MemoryEventStore

logger = logging.getLogger(__name__)


class FileEventStore(MemoryEventStore):
    """
    JSON file event storage.

    Implements EventRepository protocol. The file holds
    ``{"events": [...]}`` and is re-read on every query so writes from
    other store instances are visible.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        super().__init__()

    def _load(self) -> list[Event]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
            return [Event.from_dict(item) for item in data.get("events", [])]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to read event store {self.path}: {e}")
            raise StorageError(f"Unreadable event store {self.path}: {e}") from e

    def _save(self, events: list[Event]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"events": [e.to_dict() for e in events]}
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2))
        tmp_path.replace(self.path)
        logger.debug(f"Saved {len(events)} events to {self.path}")
