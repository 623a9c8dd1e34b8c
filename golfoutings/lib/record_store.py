"""JSON document store for events and signups."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from typing import Iterator

from golfoutings.constants import get_data_directory
from golfoutings.lib.models import Event, Signup


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only view of both collections, valid for the duration of one request."""

    events: tuple[Event, ...] = ()
    signups: tuple[Signup, ...] = ()

    def find_event(self, event_id: str) -> Event | None:
        return next((e for e in self.events if e.id == event_id), None)

    def signups_for_event(self, event_id: str) -> list[Signup]:
        return [s for s in self.signups if s.event_id == event_id]


class RecordStore:
    """Single source of truth for the events and signups collections.

    The whole document lives in one JSON file and is read and written in full:
    there is no index, lookups are linear scans over the snapshot. Mutations go
    through :meth:`update`, which holds the document lock across reload, change
    and persist so overlapping requests cannot drop each other's writes.
    """

    def __init__(self, db_path: str = "db.json") -> None:
        """Initialize with the document path.

        Args:
            db_path: Path to the JSON file (relative paths go in the data directory)
        """
        if not os.path.isabs(db_path):
            self.db_path = os.path.join(get_data_directory(), db_path)
        else:
            self.db_path = db_path

        self._events: list[Event] = []
        self._signups: list[Signup] = []
        # Reentrant so add_* can be called inside an update() block
        self._lock = threading.RLock()

        logging.debug(f"Using record store: {self.db_path}")

    def initialize(self) -> None:
        """Load the document, creating it with empty collections if missing."""
        with self._lock:
            self.load()
            self.persist()

    def load(self) -> None:
        """Replace in-memory state with the file's contents.

        A missing file means no prior state: both collections start empty.
        Read and decode errors propagate to the caller.
        """
        with self._lock:
            if not os.path.exists(self.db_path):
                self._events, self._signups = [], []
                return

            with open(self.db_path, encoding="utf-8") as f:
                data = json.load(f) or {}

            self._events = [Event.from_dict(e) for e in data.get("events") or []]
            self._signups = [Signup.from_dict(s) for s in data.get("signups") or []]

    def snapshot(self) -> StoreSnapshot:
        """Return the current in-memory collections."""
        with self._lock:
            return StoreSnapshot(events=tuple(self._events), signups=tuple(self._signups))

    def reload(self) -> StoreSnapshot:
        """Load from disk and return a fresh snapshot."""
        with self._lock:
            self.load()
            return self.snapshot()

    def persist(self) -> None:
        """Write the full in-memory state to disk, replacing the previous file atomically."""
        with self._lock:
            document = {
                "events": [e.to_dict() for e in self._events],
                "signups": [s.to_dict() for s in self._signups],
            }
            directory = os.path.dirname(self.db_path) or "."
            os.makedirs(directory, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".db-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                os.replace(tmp_path, self.db_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise

    @contextlib.contextmanager
    def update(self) -> Iterator[RecordStore]:
        """Reload, yield for mutation, then persist, all under the document lock.

        If the block raises, nothing is written and the in-memory state is
        reloaded from disk.
        """
        with self._lock:
            self.load()
            try:
                yield self
            except BaseException:
                self.load()
                raise
            self.persist()

    def add_event(self, event: Event) -> Event:
        with self.update():
            self._events.append(event)
        logging.info(f"Stored event {event.id}: {event.title}")
        return event

    def add_signup(self, signup: Signup) -> Signup:
        with self.update():
            self._signups.append(signup)
        logging.info(f"Stored signup {signup.id} for event {signup.event_id}")
        return signup
