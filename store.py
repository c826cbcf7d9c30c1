# store.py
from __future__ import annotations

import logging
import secrets
import threading
from datetime import UTC, datetime, timedelta
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict

from errors import NotFoundError
from generator import Puzzle

logger = logging.getLogger("arith-captcha.store")

TOKEN_BITS = 128


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    equation: str
    answer: int
    created_at: datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ChallengeStore:
    """
    In-memory token -> Challenge mapping, safe for concurrent use.

    Every operation runs under a single lock, which makes `consume` linearizable
    per token: of any number of racing callers exactly one receives the challenge.

    With a `ttl`, entries older than the ttl are treated as absent and dropped;
    `create` also sweeps expired entries at most once per `sweep_interval`.
    """

    def __init__(
        self,
        rng=None,
        clock: Optional[Callable[[], datetime]] = None,
        ttl: Optional[timedelta] = None,
        sweep_interval: timedelta = timedelta(seconds=60),
    ):
        self._rng = rng if rng is not None else secrets.SystemRandom()
        self._clock = clock or _utcnow
        self._ttl = ttl
        self._sweep_interval = sweep_interval
        self._lock = threading.Lock()
        self._data: Dict[str, Challenge] = {}
        self._last_sweep = self._clock()

    @property
    def ttl(self) -> Optional[timedelta]:
        return self._ttl

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _mint_token(self) -> str:
        while True:
            token = f"{self._rng.getrandbits(TOKEN_BITS):032x}"
            if token not in self._data:
                return token

    def _is_expired(self, challenge: Challenge, now: datetime) -> bool:
        return self._ttl is not None and now - challenge.created_at >= self._ttl

    def _purge_locked(self, now: datetime) -> int:
        expired = [t for t, c in self._data.items() if self._is_expired(c, now)]
        for t in expired:
            del self._data[t]
        self._last_sweep = now
        return len(expired)

    def create(self, puzzle: Puzzle) -> str:
        now = self._clock()
        with self._lock:
            if self._ttl is not None and now - self._last_sweep >= self._sweep_interval:
                n = self._purge_locked(now)
                if n:
                    logger.info("swept %d expired challenges", n)
            token = self._mint_token()
            self._data[token] = Challenge(
                token=token,
                equation=puzzle.equation,
                answer=puzzle.answer,
                created_at=now,
            )
        return token

    def peek(self, token: str) -> Challenge:
        now = self._clock()
        with self._lock:
            challenge = self._data.get(token)
            if challenge is None:
                raise NotFoundError()
            if self._is_expired(challenge, now):
                del self._data[token]
                raise NotFoundError()
            return challenge

    def consume(self, token: str) -> Challenge:
        now = self._clock()
        with self._lock:
            challenge = self._data.pop(token, None)
        if challenge is None or self._is_expired(challenge, now):
            raise NotFoundError()
        return challenge

    def purge_expired(self) -> int:
        """Remove expired entries; returns how many were dropped."""
        if self._ttl is None:
            return 0
        now = self._clock()
        with self._lock:
            return self._purge_locked(now)
