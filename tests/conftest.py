import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from the caller's WEEKLYTV_* environment."""
    from weeklytv.config import get_settings

    for name in (
        "WEEKLYTV_LIBRARY_DB",
        "WEEKLYTV_TIMEZONE",
        "WEEKLYTV_CLIP_WINDOW",
        "WEEKLYTV_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
