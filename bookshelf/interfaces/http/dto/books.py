from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from bookshelf.domain.books.entities import Book

NonEmpty = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=256)]


class AddBookRequestDTO(BaseModel):
    title: NonEmpty
    author: NonEmpty


class AddFavoriteRequestDTO(BaseModel):
    book_id: int = Field(alias="bookId", gt=0)

    model_config = ConfigDict(validate_by_name=True)


class BookDTO(BaseModel):
    id: int
    title: str
    author: str

    @classmethod
    def from_entity(cls, book: Book) -> "BookDTO":
        return cls(id=book.id, title=book.title, author=book.author)
