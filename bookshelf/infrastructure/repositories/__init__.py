from .books.json_book_repository import JsonBookRepository, JsonFavoritesRepository
from .users.json_user_repository import JsonUserRepository

__all__ = ["JsonBookRepository", "JsonFavoritesRepository", "JsonUserRepository"]
