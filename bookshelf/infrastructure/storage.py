# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON file storage adapter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from threading import RLock
from typing import Any, Protocol, TypeVar

from bookshelf.shared.logging import logger
from bookshelf.utils.jsonio import read_json_list_of_dicts, write_json_list

T = TypeVar("T")

Records = list[dict[str, Any]]


class CollectionPort(Protocol):
    """Protocol for a persisted list of JSON records."""

    def read(self) -> Records: ...

    def mutate(self, fn: Callable[[Records], T]) -> T: ...


class JsonCollection(CollectionPort):
    """Array of JSON objects stored in one file.

    Every mutation is a read-modify-write of the whole file performed under a
    lock owned by this collection, so a process that routes all writes for a
    path through a single instance never loses an update. The file is replaced
    atomically, so readers never observe a half-written array.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = RLock()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Records:
        with self._lock:
            return read_json_list_of_dicts(self._path)

    def mutate(self, fn: Callable[[Records], T]) -> T:
        """Apply ``fn`` to the records and persist them unless ``fn`` raises."""
        with self._lock:
            records = read_json_list_of_dicts(self._path)
            result = fn(records)
            write_json_list(self._path, records)
            logger.debug(f"storage: rewrite path={self._path} records={len(records)}")
            return result

    def is_readable(self) -> bool:
        try:
            self.read()
        except (OSError, ValueError):
            return False
        return True


__all__ = ["CollectionPort", "JsonCollection", "Records"]
