import os
import urllib.parse
import warnings
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy import create_engine


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _ensure_env_loaded():
    """Load `.env` from project root into environment if present.

    Variables already set in the environment win over the file.
    """
    dotenv_path = os.path.join(PROJECT_ROOT, ".env")
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=False)


def _mysql_url_from_env():
    user = os.environ.get("DB_USER")
    password = os.environ.get("DB_PASSWORD")
    host = os.environ.get("DB_HOST")
    port = os.environ.get("DB_PORT")
    dbname = os.environ.get("DB_NAME")

    if not (user and dbname and host):
        return None
    pwd = urllib.parse.quote_plus(password) if password else ""
    port_part = f":{port}" if port else ""
    return f"mysql+pymysql://{user}:{pwd}@{host}{port_part}/{dbname}"


def resolve_database_url():
    """Return the database URL the service should connect to.

    Resolution order:
      1. `DATABASE_URL` environment variable (recommended for production)
      2. Individual env vars: `DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT`, `DB_NAME`
      3. Fallback to local SQLite file `data/lianes.db` (development convenience)
    """
    _ensure_env_loaded()

    database_url = os.environ.get("DATABASE_URL")
    if database_url:
        return database_url

    mysql_url = _mysql_url_from_env()
    if mysql_url:
        return mysql_url

    db_dir = os.path.join(PROJECT_ROOT, "data")
    os.makedirs(db_dir, exist_ok=True)
    db_path = os.path.join(db_dir, "lianes.db")
    warnings.warn(
        "DATABASE_URL not set and DB env vars not found, falling back to local sqlite at: %s" % db_path
    )
    return f"sqlite:///{db_path}"


@lru_cache(maxsize=1)
def get_engine():
    """Return the process-wide SQLAlchemy Engine."""
    return create_engine(resolve_database_url())
