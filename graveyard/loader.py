"""
Dataset loader — reads the graveyard JSON once and tracks its state.

States:
    loading  — created, load() not yet resolved
    ready    — collection available
    failed   — read or parse failed; only a fixed message is exposed

Usage::

    loader = DatasetLoader("data/graveyard.json")
    loader.load()
    if loader.state == LoadState.READY:
        projects = loader.projects
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any

from graveyard.models import Project
from utils.http import fetch_json, is_url

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = (
    "Error loading data. Make sure graveyard.json is in the data folder."
)


class LoadState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DatasetLoadError(Exception):
    """The dataset could not be read or is not a list of project records."""


def parse_records(document: Any) -> tuple[Project, ...]:
    """Turn a decoded JSON document into Project records.

    Entries that are not JSON objects, or that cannot be turned into a
    Project, are skipped with a warning rather than failing the whole load.

    Raises:
        DatasetLoadError: The top-level value is not a list.
    """
    if not isinstance(document, list):
        raise DatasetLoadError(
            f"expected a JSON array of projects, got {type(document).__name__}"
        )
    projects: list[Project] = []
    for idx, entry in enumerate(document):
        if not isinstance(entry, dict):
            logger.warning("Skipping dataset entry %d: not an object (%r)", idx, entry)
            continue
        try:
            projects.append(Project.from_dict(entry))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping dataset entry %d: %s", idx, exc)
    return tuple(projects)


class DatasetLoader:
    """One-shot loader for the project collection.

    ``source`` is a filesystem path or an http(s) URL.  ``load()`` reads it
    at most once; later calls return the stored outcome.
    """

    def __init__(self, source: str | Path, timeout: float = 10.0) -> None:
        self.source = source
        self.timeout = timeout
        self.state = LoadState.LOADING
        self.error: str | None = None
        self.generation = 0
        self._projects: tuple[Project, ...] = ()
        self._lock = threading.Lock()

    @classmethod
    def from_records(cls, records: Iterable[Project | dict[str, Any]],
                     source: str = "<memory>") -> "DatasetLoader":
        """Build a loader that is already ready with *records*."""
        loader = cls(source)
        projects = tuple(
            r if isinstance(r, Project) else Project.from_dict(r) for r in records
        )
        loader._resolve(projects)
        return loader

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    def _read(self) -> Any:
        if is_url(str(self.source)):
            return fetch_json(str(self.source), timeout=self.timeout)
        with open(self.source, encoding="utf-8") as fh:
            return json.load(fh)

    def _resolve(self, projects: tuple[Project, ...]) -> None:
        self._projects = projects
        self.state = LoadState.READY
        self.error = None
        self.generation += 1

    def load(self) -> tuple[Project, ...]:
        """Read the dataset if it hasn't been read yet.

        Never raises for read/parse failures: they move the loader to
        ``failed`` with LOAD_ERROR_MESSAGE and return an empty collection.
        """
        with self._lock:
            if self.state != LoadState.LOADING:
                return self._projects
            try:
                projects = parse_records(self._read())
            except Exception:
                logger.exception("Failed to load dataset from %s", self.source)
                self.state = LoadState.FAILED
                self.error = LOAD_ERROR_MESSAGE
                return ()
            self._resolve(projects)
            logger.info("Loaded %d projects from %s", len(projects), self.source)
            return projects
