# errors.py
from __future__ import annotations


class CaptchaError(Exception):
    """Base error. `reason` is the classified outcome reported to clients."""

    reason = "Error"
    message = "CAPTCHA error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NotFoundError(CaptchaError):
    reason = "NotFound"
    message = "CAPTCHA expired or invalid."


class ParseError(CaptchaError):
    reason = "Malformed"
    message = "Answer must be a whole number."


class MismatchError(CaptchaError):
    reason = "Incorrect"
    message = "Incorrect answer, please try again."


class RenderError(CaptchaError):
    # Raised at startup when the font cannot be loaded; not a per-request error.
    reason = "RenderError"
    message = "CAPTCHA font could not be loaded."
