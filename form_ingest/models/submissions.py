from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubmissionIn(BaseModel):
    """Body posted by the game server.

    Every key is optional: missing keys are persisted as ``null`` rather than
    rejected.  Unknown keys (including a client-side ``submittedAt``) are
    dropped.
    """

    model_config = ConfigDict(extra="ignore")

    playerId: Any = None
    formName: Any = None
    data: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "SubmissionIn":
        if not isinstance(body, dict):
            body = {}
        return cls.model_validate(body)


class SubmissionRecord(BaseModel):
    """Document stored in the ``formularios`` collection."""

    model_config = ConfigDict(populate_by_name=True)

    player_identifier: Any = Field(None, alias="playerIdentifier")
    form_name: Any = Field(None, alias="formName")
    payload: Any = None
    submitted_at: datetime = Field(..., alias="submittedAt")

    @classmethod
    def build(cls, submission: SubmissionIn, now: datetime | None = None) -> "SubmissionRecord":
        return cls(
            player_identifier=submission.playerId,
            form_name=submission.formName,
            payload=submission.data,
            submitted_at=now or datetime.now(timezone.utc),
        )

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
