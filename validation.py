# validation.py
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from errors import CaptchaError, MismatchError, ParseError
from store import Challenge, ChallengeStore

LEN_LIMIT = 100
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    reason: Optional[str] = None
    feedback: str = ""
    # the consumed challenge, for server-side bookkeeping only
    challenge: Optional[Challenge] = None


def parse_answer(text: Optional[str]) -> int:
    if text is None or not isinstance(text, str) or not text.strip():
        raise ParseError("Answer required.")
    if len(text) > LEN_LIMIT:
        raise ParseError(f"Answer too long (> {LEN_LIMIT}).")
    s = text.strip()
    if _INT_RE.fullmatch(s) is None:
        raise ParseError()
    return int(s)


def check_answer(challenge: Challenge, text: Optional[str]) -> None:
    if parse_answer(text) != challenge.answer:
        raise MismatchError()


def validate(store: ChallengeStore, token: str, answer_text: Optional[str]) -> ValidationResult:
    """
    Consume `token` and check `answer_text` against it.

    The token is consumed exactly once whatever the outcome, so a failed attempt
    cannot be retried. Failure reasons in order: NotFound, Malformed, Incorrect.
    """
    challenge: Optional[Challenge] = None
    try:
        challenge = store.consume(token)
        check_answer(challenge, answer_text)
    except CaptchaError as e:
        return ValidationResult(ok=False, reason=e.reason, feedback=str(e), challenge=challenge)
    return ValidationResult(ok=True, challenge=challenge)
