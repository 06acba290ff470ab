# tests/conftest.py
from __future__ import annotations

import os
from dataclasses import dataclass

# Settings는 import 시점에 읽히므로 app import 전에 설정
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

try:
    import httpx
except Exception:  # pragma: no cover
    httpx = None  # type: ignore


DEFAULT_E2E_BASE_URL = os.getenv("UNITCONV_E2E_BASE_URL", "http://127.0.0.1:3000")
DEFAULT_E2E_TIMEOUT = float(os.getenv("UNITCONV_E2E_TIMEOUT", "10"))


@dataclass(frozen=True)
class E2EConfig:
    enabled: bool
    base_url: str
    timeout_s: float
    strict: bool


def pytest_addoption(parser: pytest.Parser) -> None:
    g = parser.getgroup("unitconv-e2e")

    g.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run E2E tests (marked with @pytest.mark.e2e).",
    )
    g.addoption(
        "--e2e-base-url",
        action="store",
        default=DEFAULT_E2E_BASE_URL,
        help=f"Base URL for the running API server (default: {DEFAULT_E2E_BASE_URL}).",
    )
    g.addoption(
        "--e2e-timeout",
        action="store",
        type=float,
        default=DEFAULT_E2E_TIMEOUT,
        help=f"HTTP timeout seconds for E2E calls (default: {DEFAULT_E2E_TIMEOUT}).",
    )
    g.addoption(
        "--e2e-strict",
        action="store_true",
        default=False,
        help="Strict E2E mode: fail (instead of skip) if the server is not reachable.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "e2e: end-to-end tests (require running API server)"
    )


def _get_e2e_config(config: pytest.Config) -> E2EConfig:
    return E2EConfig(
        enabled=bool(config.getoption("--e2e")),
        base_url=str(config.getoption("--e2e-base-url")).rstrip("/"),
        timeout_s=float(config.getoption("--e2e-timeout")),
        strict=bool(config.getoption("--e2e-strict")),
    )


def pytest_collection_modifyitems(config: pytest.Config, items) -> None:
    """Default: skip all @pytest.mark.e2e unless --e2e is passed."""
    if _get_e2e_config(config).enabled:
        return

    skip_e2e = pytest.mark.skip(reason="E2E tests are disabled. Re-run with --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def e2e_cfg(pytestconfig: pytest.Config) -> E2EConfig:
    return _get_e2e_config(pytestconfig)


@pytest.fixture(scope="session")
def e2e_client(e2e_cfg: E2EConfig):
    """HTTP client for calling a running unitconv API server."""
    if httpx is None:
        pytest.skip("httpx is not installed")

    client = httpx.Client(
        base_url=e2e_cfg.base_url,
        timeout=httpx.Timeout(e2e_cfg.timeout_s),
        follow_redirects=True,
    )
    try:
        client.get("/health")
    except Exception as exc:
        client.close()
        if e2e_cfg.strict:
            raise
        pytest.skip(f"E2E server not reachable: {exc}")

    yield client
    client.close()


# -----------------------------------------------------------------------------
# In-process app
# -----------------------------------------------------------------------------
@pytest.fixture(scope="session")
def app():
    from unitconv.main import app as fastapi_app

    return fastapi_app


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def api_prefix() -> str:
    from unitconv.core.config import settings

    return settings.API_V1_STR
