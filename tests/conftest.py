"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from library_authors.author_store import SqlAuthorStore, create_authors_table
from library_authors.schemas.author import AuthorRecord


class FakeQuery:
    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.sort_calls = []

    async def sort(self, spec):
        self.sort_calls.append(spec)
        if self.error:
            raise self.error
        return self.records


class FakeStore:
    """In-memory stand-in for the author store."""

    def __init__(self, records=None, error=None):
        self.query = FakeQuery(records, error)
        self.find_calls = 0

    def find(self):
        self.find_calls += 1
        return self.query


class SentResponse:
    def __init__(self):
        self.calls = []

    def send(self, body):
        self.calls.append(body)


@pytest.fixture
def sorted_authors():
    return [
        AuthorRecord(
            first_name="Jane",
            family_name="Austen",
            date_of_birth=date(1775, 12, 16),
            date_of_death=date(1817, 7, 18),
        ),
        AuthorRecord(
            first_name="Amitav",
            family_name="Ghosh",
            date_of_birth=date(1835, 11, 30),
            date_of_death=date(1910, 4, 21),
        ),
        AuthorRecord(
            first_name="Rabindranath",
            family_name="Tagore",
            date_of_birth=date(1812, 2, 7),
            date_of_death=date(1870, 6, 9),
        ),
    ]


@pytest.fixture
def response():
    return SentResponse()


@pytest.fixture
def engine():
    """In-memory SQLite engine with an empty `authors` table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_authors_table(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def seeded_engine(engine):
    rows = [
        {"first_name": "Rabindranath", "family_name": "Tagore", "dob": "1812-02-07", "dod": "1870-06-09"},
        {"first_name": "Jane", "family_name": "Austen", "dob": "1775-12-16", "dod": "1817-07-18"},
        {"first_name": "Amitav", "family_name": "Ghosh", "dob": "1835-11-30", "dod": None},
    ]
    query = text(
        """
        INSERT INTO authors (first_name, family_name, date_of_birth, date_of_death)
        VALUES (:first_name, :family_name, :dob, :dod)
        """
    )
    with engine.begin() as conn:
        conn.execute(query, rows)
    return engine


@pytest.fixture
def sql_store(seeded_engine):
    return SqlAuthorStore(seeded_engine)


@pytest.fixture
def make_store():
    return FakeStore
