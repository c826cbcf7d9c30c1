# routers/health.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text

from db import engine
from deps.captcha import get_store
from store import ChallengeStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"db_error: {type(e).__name__}: {e}")


@router.get("/store")
def health_store(store: ChallengeStore = Depends(get_store)):
    ttl = store.ttl
    return {
        "ok": True,
        "active": len(store),
        "ttl_seconds": int(ttl.total_seconds()) if ttl is not None else None,
    }
