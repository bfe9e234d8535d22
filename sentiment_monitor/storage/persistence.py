"""
Seed loading and best-effort JSON snapshots of the in-memory store.

The in-memory collections are authoritative. Writes happen off the
request path in a worker thread; failures are logged and counted, never
raised.
"""

import asyncio
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from sentiment_monitor.observability.metrics import get_metrics
from sentiment_monitor.storage.schemas import Author, Comment

logger = logging.getLogger(__name__)

STORAGE_FILENAME = "storage.json"


def load_seed(path: str | Path) -> tuple[list[Author], list[Comment]]:
    """
    Read authors and comments from a seed JSON file.

    A missing or unreadable file yields empty lists. Individual invalid
    records are skipped with a warning.

    Args:
        path: Seed file location

    Returns:
        Tuple of (authors, comments)
    """
    seed_path = Path(path)
    if not seed_path.exists():
        logger.info("No seed data found at %s", seed_path)
        return [], []

    try:
        data = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Error loading seed data from %s: %s", seed_path, e)
        return [], []

    if not isinstance(data, dict):
        logger.warning(
            "Ignoring seed data at %s: expected an object, got %s",
            seed_path,
            type(data).__name__,
        )
        return [], []

    authors = _parse_records(data.get("authors"), Author.from_dict, "author")
    comments = _parse_records(data.get("comments"), Comment.from_dict, "comment")
    logger.info(
        "Loaded seed data: %d authors, %d comments", len(authors), len(comments)
    )
    return authors, comments


def _parse_records(raw: Any, factory, kind: str) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring seed %ss: expected a list, got %s", kind, type(raw).__name__)
        return []

    records = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping invalid seed %s: %r is not an object", kind, item)
            continue
        try:
            records.append(factory(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping invalid seed %s %r: %s", kind, item.get("id"), e)
    return records


class SnapshotWriter:
    """
    Fire-and-forget JSON dump of the store to ``<data_dir>/storage.json``.

    Each call to schedule() captures an immutable payload and starts a
    background task. Writes are versioned so a slow, older write never
    overwrites a newer one.

    Usage:
        writer = SnapshotWriter("data")
        writer.schedule({"comments": [...], "authors": [...]})
        ...
        await writer.drain()  # on shutdown
    """

    def __init__(self, data_dir: str | Path):
        self._path = Path(data_dir) / STORAGE_FILENAME
        self._file_lock = threading.Lock()
        self._version = 0
        self._written_version = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def path(self) -> Path:
        return self._path

    def schedule(self, payload: dict[str, Any]) -> None:
        """Start a background write of ``payload``. Must be called from a running loop."""
        self._version += 1
        task = asyncio.create_task(
            asyncio.to_thread(self._write, payload, self._version)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for all pending writes."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _write(self, payload: dict[str, Any], version: int) -> None:
        with self._file_lock:
            if version < self._written_version:
                return
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp_path = self._path.with_suffix(".json.tmp")
                tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
                os.replace(tmp_path, self._path)
                self._written_version = version
            except (OSError, TypeError, ValueError) as e:
                logger.error("Error saving data to %s: %s", self._path, e, exc_info=True)
                get_metrics().record_persistence_error()
