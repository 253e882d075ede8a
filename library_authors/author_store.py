"""Query capability over the `authors` table.

`get_author_list` only depends on the `AuthorStore` / `AuthorQuery`
protocols, so any object with a `find()` returning something sortable and
awaitable can stand in for the database (tests use small fakes).
"""
from typing import Awaitable, Protocol, Sequence

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import text
from sqlalchemy.engine import Engine

from .schemas.author import AuthorRecord


SortSpec = Sequence[tuple[str, str | int]]

AUTHOR_COLUMNS = ("first_name", "family_name", "date_of_birth", "date_of_death")

_DIRECTIONS = {
    "ascending": "ASC",
    "asc": "ASC",
    1: "ASC",
    "descending": "DESC",
    "desc": "DESC",
    -1: "DESC",
}


class AuthorQuery(Protocol):
    def sort(self, spec: SortSpec) -> Awaitable[Sequence[AuthorRecord]]: ...


class AuthorStore(Protocol):
    def find(self) -> AuthorQuery: ...


def create_authors_table(engine: Engine):
    query = text(
        """
        CREATE TABLE IF NOT EXISTS authors (
            author_id INTEGER PRIMARY KEY,
            first_name VARCHAR(100) NOT NULL,
            family_name VARCHAR(100) NOT NULL,
            date_of_birth DATE,
            date_of_death DATE
        )
        """
    )
    with engine.begin() as conn:
        conn.execute(query)


def build_order_by(spec: SortSpec) -> str:
    """Translate `[(field, direction), ...]` into an ORDER BY clause.

    Fields and directions are checked against fixed sets, so the result is
    safe to interpolate into SQL.
    """
    clauses = []
    for field, direction in spec:
        if field not in AUTHOR_COLUMNS:
            raise ValueError(f"Cannot sort authors by unknown field '{field}'.")
        key = direction.lower() if isinstance(direction, str) else direction
        if key not in _DIRECTIONS:
            raise ValueError(f"Invalid sort direction '{direction}'. Allowed: ascending, descending")
        clauses.append(f"{field} {_DIRECTIONS[key]}")
    if not clauses:
        return ""
    return " ORDER BY " + ", ".join(clauses)


class SqlAuthorQuery:
    def __init__(self, engine: Engine):
        self._engine = engine

    def _fetch(self, order_by: str) -> list[AuthorRecord]:
        columns = ", ".join(AUTHOR_COLUMNS)
        query = text(f"SELECT {columns} FROM authors{order_by}")
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [AuthorRecord.model_validate(dict(row)) for row in rows]

    async def sort(self, spec: SortSpec) -> list[AuthorRecord]:
        order_by = build_order_by(spec)
        return await run_in_threadpool(self._fetch, order_by)


class SqlAuthorStore:
    """`AuthorStore` backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def find(self) -> SqlAuthorQuery:
        return SqlAuthorQuery(self._engine)
