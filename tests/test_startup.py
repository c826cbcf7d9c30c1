import importlib
import sys

import pytest

from errors import RenderError


def test_bad_font_path_stops_startup(monkeypatch):
    monkeypatch.setenv("CAPTCHA_FONT_PATH", "/nonexistent/font.ttf")
    # restored on teardown, so the app's wiring module is untouched for other tests
    monkeypatch.delitem(sys.modules, "deps.captcha", raising=False)

    with pytest.raises(RenderError):
        importlib.import_module("deps.captcha")
    assert "deps.captcha" not in sys.modules
