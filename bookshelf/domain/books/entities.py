# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bookshelf.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Book:

    id: int
    title: str
    author: str

    def __post_init__(self) -> None:
        if self.id < 1:
            raise InvariantViolation("book id must be positive", field="id")
        if not self.title.strip():
            raise InvariantViolation("title must not be empty", field="title")
        if not self.author.strip():
            raise InvariantViolation("author must not be empty", field="author")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "author": self.author}
