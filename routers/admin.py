from __future__ import annotations

import os

from fastapi import APIRouter, Depends, Request

from deps.captcha import get_store
from store import ChallengeStore

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/purge")
def purge_expired(request: Request, store: ChallengeStore = Depends(get_store)):
    expected = os.getenv("ADMIN_TOKEN") or ""
    provided = request.headers.get("x-admin-token")

    if not expected:
        return {"ok": False, "error": "ADMIN_TOKEN not configured on server."}
    if provided != expected:
        return {"ok": False, "error": "unauthorized"}

    n = store.purge_expired()
    return {"ok": True, "count": n, "active": len(store)}
