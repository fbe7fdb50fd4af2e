"""Repository for user persistence and retrieval."""
from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Mapping

from tortoise import connections
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import BaseORMException, IntegrityError

from dafurn.core.db import DEFAULT_CONNECTION
from dafurn.core.errors import (
    DuplicateEmailError,
    InvalidIdentifierError,
    StorageUnavailableError,
)
from dafurn.models.user import User
from dafurn.schemas.user import RatingUpdateIn, UserCreate


def parse_user_id(value: Any) -> uuid.UUID:
    """Parse a path/body identifier, raising InvalidIdentifierError if it is not a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError) as e:
        raise InvalidIdentifierError(value) from e


@contextmanager
def _storage_errors(inserting: bool = False, email: str | None = None) -> Iterator[None]:
    # Only inserts can collide with the unique email index
    try:
        yield
    except IntegrityError as e:
        if inserting:
            raise DuplicateEmailError(email) from e
        raise StorageUnavailableError(str(e)) from e
    except (BaseORMException, OSError) as e:
        raise StorageUnavailableError(str(e)) from e


class UserRepository:
    """
    Storage access for User records.

    The repository only remembers the alias of the Tortoise connection it
    uses and resolves it on every call, so an instance can be built before
    the database is initialised and requests fail cleanly until it is.
    """

    def __init__(self, connection_name: str = DEFAULT_CONNECTION) -> None:
        self.connection_name = connection_name

    def _db(self) -> BaseDBAsyncClient:
        # Newer Tortoise releases raise RuntimeError when no ORM context is active
        try:
            return connections.get(self.connection_name)
        except (BaseORMException, KeyError, RuntimeError) as e:
            raise StorageUnavailableError(
                f"Connection {self.connection_name!r} is not available: {e}"
            ) from e

    async def list_all(self) -> list[User]:
        db = self._db()
        with _storage_errors():
            return await User.all().using_db(db)

    async def find_by_id(self, user_id: Any) -> User | None:
        uid = parse_user_id(user_id)
        db = self._db()
        with _storage_errors():
            return await User.get_or_none(id=uid, using_db=db)

    async def update_rating(self, user_id: Any, rating: float) -> User | None:
        value = RatingUpdateIn(rating=rating).rating
        user = await self.find_by_id(user_id)
        if user is None:
            return None
        user.rating = value
        db = self._db()
        with _storage_errors():
            await user.save(using_db=db)
        return user

    async def delete_by_id(self, user_id: Any) -> None:
        uid = parse_user_id(user_id)
        db = self._db()
        with _storage_errors():
            await User.filter(id=uid).using_db(db).delete()

    async def create(self, record: UserCreate | Mapping[str, Any]) -> User:
        data = _validate(record)
        db = self._db()
        with _storage_errors(inserting=True, email=data.email):
            return await User.create(using_db=db, **data.model_dump())

    async def insert_many(self, records: Iterable[UserCreate | Mapping[str, Any]]) -> list[User]:
        validated = [_validate(r) for r in records]
        users = [User(**r.model_dump()) for r in validated]
        if not users:
            return []
        db = self._db()
        with _storage_errors(inserting=True):
            await User.bulk_create(users, using_db=db)
        return users

    async def delete_all(self) -> int:
        db = self._db()
        with _storage_errors():
            return await User.all().using_db(db).delete()


def _validate(record: UserCreate | Mapping[str, Any]) -> UserCreate:
    if isinstance(record, UserCreate):
        return record
    return UserCreate.model_validate(record)
