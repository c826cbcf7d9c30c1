# schemas/validation.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

# matches Attempt.token
TOKEN_MAX_LEN = 64


class ValidateRequest(BaseModel):
    token: str = Field(max_length=TOKEN_MAX_LEN)
    answer: str


class ValidateResponse(BaseModel):
    ok: bool
    reason: Optional[Literal["NotFound", "Malformed", "Incorrect"]] = None
    feedback: str = ""
