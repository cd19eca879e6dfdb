from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from openai_rest import OpenAI, Settings
from tests.mocks.mock_api_server import VALID_API_KEY, app as mock_app

MOCK_API_URL = "http://testserver"

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_ORGANIZATION_KEY",
    "OPENAI_API_URL",
    "OPENAI_HTTP_OPTIONS",
    "OPENAI_GCP_PROJECT_ID",
    "OPENAI_SECRET_API_KEY_NAME",
    "USE_SECRET_MANAGER",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment and any local .env out of the tests."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=VALID_API_KEY, api_url=MOCK_API_URL, http_options={"timeout": 5}, _env_file=None)


@pytest.fixture
def mock_server() -> TestClient:
    mock_app.state.requests.clear()
    client = TestClient(mock_app)
    yield client
    client.close()


@pytest.fixture
def api(settings: Settings, mock_server: TestClient) -> OpenAI:
    return OpenAI(settings=settings, http_client=mock_server)


@pytest.fixture
def last_request() -> Callable[[], Dict[str, Any]]:
    return lambda: mock_app.state.requests[-1]
