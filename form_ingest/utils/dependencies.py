"""FastAPI dependency providers for process-wide state."""

from __future__ import annotations

from fastapi import Request

from form_ingest.settings import Settings
from form_ingest.utils.database import SubmissionStore


def get_settings(request: Request) -> Settings:
    """Return the settings object the app was built with."""
    return request.app.state.settings


def get_submission_store(request: Request) -> SubmissionStore:
    """Return the shared :class:`SubmissionStore` opened in the app lifespan."""
    return request.app.state.store
