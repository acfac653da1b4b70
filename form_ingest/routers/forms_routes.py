"""Form submission ingest – one POST, one MongoDB document."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from form_ingest.models import ErrorResponse, SubmissionIn, SubmissionRecord, SubmitResponse
from form_ingest.utils.auth import require_api_key
from form_ingest.utils.database import SubmissionStore
from form_ingest.utils.dependencies import get_submission_store
from form_ingest.utils.errors import SAVE_OK_MESSAGE, invalid_body_response, save_failed_response
from form_ingest.utils.logger import logger

router = APIRouter(tags=["forms"])


@router.post(
    "/submit-form",
    response_model=SubmitResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": SubmitResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SubmitResponse},
    },
)
async def submit_form(
    request: Request,
    store: SubmissionStore = Depends(get_submission_store),
):
    # Body is read here rather than declared as a parameter so the API key
    # gate always runs first, even for malformed JSON.
    raw = await request.body()
    if raw.strip():
        try:
            body = await request.json()
        except (ValueError, RecursionError):
            return invalid_body_response()
    else:
        body = {}

    submission = SubmissionIn.from_body(body)

    try:
        async with store.connection() as collection:
            record = SubmissionRecord.build(submission)
            await store.insert(collection, record)
    except Exception as exc:
        logger.exception(
            "submission.failed",
            extra={"error_type": type(exc).__name__, "form_name": str(submission.formName)},
        )
        return save_failed_response()

    return SubmitResponse(success=True, message=SAVE_OK_MESSAGE)
