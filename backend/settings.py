"""
Centralized runtime configuration for the backend.

This module uses `python-dotenv` to read a local `.env` file during
development and exposes a Pydantic `Settings` model named `settings`.

Environment variables used:
- `REDIS_URL` — Redis connection URL used by `db.get_client()`.
- `REDIS_TIMEOUT` — connect/socket timeout in seconds for the store.
- `OWNER_ID` — default demo owner for the `/seed` route.
- `LOG_LEVEL` — level passed to `logging.basicConfig` by entry points.

Example `.env`:
REDIS_URL=redis://localhost:6379/0
OWNER_ID=demo

"""

from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    """Redis connection and demo defaults.

    `redis_url` and `redis_timeout` feed `db.get_client()`; `default_owner`
    is the owner `/seed` writes to when none is given; `log_level` is read
    by `main.py` and `scripts/demo.py`. Import the `settings` instance
    rather than calling os.getenv elsewhere.
    """

    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    redis_timeout: float = float(os.getenv("REDIS_TIMEOUT", "5"))
    default_owner: str = os.getenv("OWNER_ID", "demo")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
