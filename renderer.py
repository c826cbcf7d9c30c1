# renderer.py
from __future__ import annotations

import io
import logging
import math
import random
from typing import Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from errors import RenderError

logger = logging.getLogger("arith-captcha.renderer")

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 80
DEFAULT_FONT_SIZE = 32
DEFAULT_BASELINE = 50
DEFAULT_NOISE_LINES = 10


def load_font(path: Optional[str] = None, size: int = DEFAULT_FONT_SIZE) -> ImageFont.FreeTypeFont:
    """
    Load the TrueType face used for every render.

    Without a path, Pillow's bundled default face is used. The returned font is
    shared by all renders and never mutated. Any failure raises RenderError.
    """
    try:
        if path:
            font = ImageFont.truetype(path, size)
        else:
            font = ImageFont.load_default(size=size)
    except (OSError, ImportError, ValueError) as e:
        raise RenderError(f"could not load font {path or '<default>'}: {e}") from e

    # bitmap fallback fonts cannot be sized or baseline-anchored
    if not isinstance(font, ImageFont.FreeTypeFont):
        raise RenderError("FreeType support is required to render CAPTCHA text")

    logger.info("loaded CAPTCHA font %s at size %d", path or "<default>", size)
    return font


def draw_line(
    pixels,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: Tuple[int, int, int],
    size: Tuple[int, int],
) -> int:
    """
    Bresenham line from (x0, y0) to (x1, y1), both ends inclusive.

    Walks one pixel per step along the major axis and corrects the minor axis
    whenever the integer error term crosses zero. Pixels outside `size` are
    skipped. Returns the number of pixels stepped (max(|dx|, |dy|) + 1).
    """
    width, height = size
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    steps = 0

    while True:
        if 0 <= x0 < width and 0 <= y0 < height:
            pixels[x0, y0] = color
        steps += 1
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy
    return steps


class ImageRenderer:
    def __init__(
        self,
        font: ImageFont.FreeTypeFont,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        baseline: int = DEFAULT_BASELINE,
        noise_lines: int = DEFAULT_NOISE_LINES,
        rng=None,
        background: str = "white",
        foreground: str = "black",
    ):
        self.font = font
        self.width = width
        self.height = height
        self.baseline = baseline
        self.noise_lines = noise_lines
        # noise does not need a secure source, only a uniform one
        self._rng = rng if rng is not None else random.Random()
        self.background = ImageColor.getrgb(background)
        self.foreground = ImageColor.getrgb(foreground)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def text_origin(self, text: str) -> Tuple[int, int]:
        text_width = self.font.getlength(text)
        return math.ceil((self.width - text_width) / 2), self.baseline

    def draw_text(self, text: str) -> Image.Image:
        """Canvas with the centered text only; a pure function of `text`."""
        img = Image.new("RGB", self.size, self.background)
        draw = ImageDraw.Draw(img)
        draw.text(self.text_origin(text), text, font=self.font, fill=self.foreground, anchor="ls")
        return img

    def add_noise(self, img: Image.Image) -> None:
        pixels = img.load()
        for _ in range(self.noise_lines):
            x0 = self._rng.randrange(self.width)
            y0 = self._rng.randrange(self.height)
            x1 = self._rng.randrange(self.width)
            y1 = self._rng.randrange(self.height)
            draw_line(pixels, x0, y0, x1, y1, self.foreground, self.size)

    def render(self, text: str) -> bytes:
        img = self.draw_text(text)
        self.add_noise(img)
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()
