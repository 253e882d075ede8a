"""Author listing: fetch-and-format plus the request handler around it."""
import logging
from datetime import date

from .api.response import ResponseChannel
from .author_store import AuthorStore


logger = logging.getLogger(__name__)

NO_AUTHORS_FOUND = "No authors found"


def _year(value: date | None) -> str:
    return str(value.year) if value else ""


def format_author(author) -> str:
    """Render one record as `"Family, Given : birth - death"`."""
    name = ""
    if author.first_name and author.family_name:
        name = f"{author.family_name}, {author.first_name}"
    lifespan = f"{_year(author.date_of_birth)} - {_year(author.date_of_death)}"
    return f"{name} : {lifespan}"


async def get_author_list(store: AuthorStore) -> list[str]:
    """Return every author as a display string, ordered by family name.

    Any failure while querying the store yields an empty list.
    """
    try:
        authors = await store.find().sort([("family_name", "ascending")])
        return [format_author(author) for author in authors]
    except Exception:
        return []


async def show_all_authors(res: ResponseChannel, store: AuthorStore) -> None:
    try:
        authors = await get_author_list(store)
    except Exception as exc:
        logger.error("Error processing request: %s", exc)
        res.send(NO_AUTHORS_FOUND)
        return

    if not authors:
        res.send(NO_AUTHORS_FOUND)
        return
    res.send(authors)
