from fastapi import APIRouter, Depends

from ...author_list import show_all_authors
from ...author_store import AuthorStore, SqlAuthorStore
from ...db_connection import get_engine
from ..response import BufferedResponse

router = APIRouter()


def get_author_store() -> AuthorStore:
    return SqlAuthorStore(get_engine())


@router.get("/")
async def list_authors(store: AuthorStore = Depends(get_author_store)):
    res = BufferedResponse()
    await show_all_authors(res, store)
    return res.to_response()
