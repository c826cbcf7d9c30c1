import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from db import init_db
from routers.admin import router as admin_router

# Routers
from routers.attempts import router as attempts_router
from routers.challenge import router as challenge_router
from routers.health import router as health_router
from routers.validation import router as validation_router

logger = logging.getLogger("arith-captcha")
logging.basicConfig(level=logging.INFO)

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

# Validation outcomes ledger; challenges themselves are never persisted
init_db()

app = FastAPI(title="Arithmetic CAPTCHA API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(challenge_router)  # /challenge, /challenge/{token}/image
app.include_router(validation_router)  # /validate
app.include_router(attempts_router)  # /attempts/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
