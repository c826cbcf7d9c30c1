# routers/attempts.py

from fastapi import APIRouter, Depends, HTTPException

from db import SessionLocal
from deps.auth import require_client
from models import Attempt
from schemas.attempts import AttemptOut

router = APIRouter(prefix="/attempts", tags=["attempts"], dependencies=[Depends(require_client)])


@router.get("/recent-list")
def attempts_recent(limit: int = 20):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        items = (
            db.query(Attempt)
            .order_by(Attempt.created_at.desc(), Attempt.id.desc())
            .limit(limit)
            .all()
        )

    rows = [AttemptOut.model_validate(a).model_dump() for a in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{attempt_id}", response_model=AttemptOut)
def get_attempt(attempt_id: int):
    with SessionLocal() as db:
        a = db.get(Attempt, attempt_id)
        if not a:
            raise HTTPException(status_code=404, detail="Attempt not found")
        return AttemptOut.model_validate(a)
