# deps/captcha.py
"""
Process-wide CAPTCHA services, built once at import from the environment.

The font is loaded here, so a missing or broken font stops the app from
starting (RenderError). Routers receive the services through Depends, which
lets tests swap them with app.dependency_overrides.
"""

from __future__ import annotations

import os
from datetime import timedelta

from generator import ChallengeGenerator
from renderer import (
    DEFAULT_BASELINE,
    DEFAULT_FONT_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_NOISE_LINES,
    DEFAULT_WIDTH,
    ImageRenderer,
    load_font,
)
from store import ChallengeStore

CAPTCHA_WIDTH = int(os.getenv("CAPTCHA_WIDTH", str(DEFAULT_WIDTH)))
CAPTCHA_HEIGHT = int(os.getenv("CAPTCHA_HEIGHT", str(DEFAULT_HEIGHT)))
CAPTCHA_BASELINE = int(os.getenv("CAPTCHA_BASELINE", str(DEFAULT_BASELINE)))
CAPTCHA_FONT_PATH = os.getenv("CAPTCHA_FONT_PATH") or None
CAPTCHA_FONT_SIZE = int(os.getenv("CAPTCHA_FONT_SIZE", str(DEFAULT_FONT_SIZE)))
CAPTCHA_NOISE_LINES = int(os.getenv("CAPTCHA_NOISE_LINES", str(DEFAULT_NOISE_LINES)))
# 0 disables expiry
CAPTCHA_TTL_SECONDS = int(os.getenv("CAPTCHA_TTL_SECONDS", "300"))

FONT = load_font(CAPTCHA_FONT_PATH, CAPTCHA_FONT_SIZE)

_generator = ChallengeGenerator()
_store = ChallengeStore(
    ttl=timedelta(seconds=CAPTCHA_TTL_SECONDS) if CAPTCHA_TTL_SECONDS > 0 else None
)
_renderer = ImageRenderer(
    FONT,
    width=CAPTCHA_WIDTH,
    height=CAPTCHA_HEIGHT,
    baseline=CAPTCHA_BASELINE,
    noise_lines=CAPTCHA_NOISE_LINES,
)


def get_generator() -> ChallengeGenerator:
    return _generator


def get_store() -> ChallengeStore:
    return _store


def get_renderer() -> ImageRenderer:
    return _renderer
