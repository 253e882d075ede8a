import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.routers import authors
from .author_store import create_authors_table
from .core.config import get_settings
from .db_connection import get_engine

settings = get_settings()
logging.basicConfig(
    level=settings["log_level"],
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_engine().dialect.name == "sqlite":
        create_authors_table(get_engine())
    yield


app = FastAPI(
    title="Liane's Library Authors API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


app.include_router(authors.router, prefix="/authors", tags=["authors"])
