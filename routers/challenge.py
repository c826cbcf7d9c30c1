# routers/challenge.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from deps.captcha import get_generator, get_renderer, get_store
from errors import NotFoundError
from generator import ChallengeGenerator
from renderer import ImageRenderer
from schemas.challenge import ChallengeOut
from store import ChallengeStore

router = APIRouter(prefix="/challenge", tags=["challenge"])


@router.get("", response_model=ChallengeOut)
def new_challenge(
    generator: ChallengeGenerator = Depends(get_generator),
    store: ChallengeStore = Depends(get_store),
):
    token = store.create(generator.generate())
    return {"token": token, "image_url": f"/challenge/{token}/image"}


@router.get("/{token}/image")
def challenge_image(
    token: str,
    store: ChallengeStore = Depends(get_store),
    renderer: ImageRenderer = Depends(get_renderer),
):
    try:
        challenge = store.peek(token)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # fresh noise on every fetch; never let a proxy or browser reuse one
    return Response(
        content=renderer.render(challenge.equation),
        media_type="image/png",
        headers={"Cache-Control": "no-store"},
    )
