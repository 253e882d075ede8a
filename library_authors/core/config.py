import os


def get_settings():
    return {
        "environment": os.getenv("ENVIRONMENT", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
