"""Exception taxonomy and the JSON bodies they map to."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

UNAUTHORIZED_MESSAGE = "Acesso não autorizado."
SAVE_OK_MESSAGE = "Dados salvos com sucesso!"
SAVE_FAILED_MESSAGE = "Erro interno ao salvar os dados."
INVALID_BODY_MESSAGE = "Corpo da requisição inválido."


class AuthenticationError(Exception):
    """``x-api-key`` missing or not equal to the configured secret."""

    def __init__(self, reason: str = "mismatch"):
        super().__init__(reason)
        self.reason = reason


class SubmissionStoreError(Exception):
    """Base class for document store failures."""


class StoreConnectionError(SubmissionStoreError):
    """Could not reach the document store."""


class StoreWriteError(SubmissionStoreError):
    """The store was reachable but the insert failed."""


async def authentication_error_handler(_request: Request, _exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": UNAUTHORIZED_MESSAGE},
    )


def save_failed_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": SAVE_FAILED_MESSAGE},
    )


def invalid_body_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": INVALID_BODY_MESSAGE},
    )
