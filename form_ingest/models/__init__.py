from __future__ import annotations

"""Request/response and document models.

Call-sites import everything from here::

    from form_ingest.models import SubmissionIn, SubmissionRecord, SubmitResponse
"""

from pydantic import BaseModel, Field

from form_ingest.models.submissions import SubmissionIn, SubmissionRecord

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SubmissionIn",
    "SubmissionRecord",
    "SubmitResponse",
]


class SubmitResponse(BaseModel):
    success: bool
    message: str = Field(..., examples=["Dados salvos com sucesso!"])


class ErrorResponse(BaseModel):
    """401 body returned by the API key gate."""

    error: str = Field(..., examples=["Acesso não autorizado."])


class HealthResponse(BaseModel):
    status: str = "ok"
