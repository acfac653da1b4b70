"""Top-level package for the form ingest FastAPI application."""

__all__ = [
    "APP_ENV",
]

from dotenv import load_dotenv
import os
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "production")
