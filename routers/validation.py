# routers/validation.py
from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from deps.captcha import get_store
from schemas.validation import ValidateRequest, ValidateResponse
from store import ChallengeStore
from validation import ValidationResult, validate

logger = logging.getLogger("arith-captcha.validation")

router = APIRouter(tags=["validation"])


def _record_attempt(token: str, result: ValidationResult) -> Optional[int]:
    age_ms: Optional[int] = None
    if result.challenge is not None:
        age = datetime.now(UTC) - result.challenge.created_at
        age_ms = max(0, int(round(age.total_seconds() * 1000)))

    try:
        from db import SessionLocal
        from models import Attempt

        with SessionLocal() as db:
            attempt = Attempt(token=token, outcome=result.reason or "Success", age_ms=age_ms)
            db.add(attempt)
            db.commit()
            db.refresh(attempt)
            return attempt.id
    except Exception:
        # the ledger is bookkeeping only; the verdict stands without it
        logger.exception("could not record validation attempt")
        return None


@router.post(
    "/validate",
    response_model=ValidateResponse,
    responses={400: {"model": ValidateResponse}},
)
def validate_answer(req: ValidateRequest, store: ChallengeStore = Depends(get_store)):
    result = validate(store, req.token, req.answer)
    _record_attempt(req.token, result)

    body = ValidateResponse(ok=result.ok, reason=result.reason, feedback=result.feedback)
    if not result.ok:
        logger.info("validation failed: %s", result.reason)
        return JSONResponse(status_code=400, content=body.model_dump())
    return body
