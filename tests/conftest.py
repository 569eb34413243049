"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat override boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

import api.deps as deps
from api.deps import ServiceSettings, get_settings
from api.main import app
from core.config import FormatConfig

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SONG_SNIPPET: str = (
    "t?0:z1=[],callCount=0,"
    "lpf=(a,c)=>(call=callCount++,z1[call]??=0,z1[call]+=(a-z1[call])*c),"
    "hpf=(a,c)=>a-lpf(a,c),"
    "hpf(t*(t>>8|t>>9)&255,.1)"
)
"""Comma-dense bytebeat body with arrays, nested calls and no strings."""


@pytest.fixture()
def song_snippet() -> str:
    """Return SONG_SNIPPET."""
    return SONG_SNIPPET


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_service_singletons():
    """Drop cached settings/formatter so env changes in one test don't leak."""
    deps._settings = None
    deps._formatter = None
    yield
    deps._settings = None
    deps._formatter = None


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove service env vars and stop ``.env`` files from being read."""
    for name in ("FORMAT_CONSIDER_PARENS", "FORMAT_MAX_PAREN_DEPTH", "CODE_MAX_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(deps, "load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


def make_settings(**overrides: object) -> ServiceSettings:
    """Build ServiceSettings with defaults overridden by keyword."""
    defaults: dict[str, object] = {
        "format_config": FormatConfig(),
        "max_code_length": 10_000,
    }
    defaults.update(overrides)
    return ServiceSettings(**defaults)  # type: ignore[arg-type]


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` with fixed service settings.

    Settings are overridden with ``make_settings()`` so the environment
    does not affect route tests.
    """
    app.dependency_overrides[get_settings] = lambda: make_settings()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
