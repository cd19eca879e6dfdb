import sys
import types
from types import SimpleNamespace

import pytest

from openai_rest import secrets


def install_fake_secretmanager(monkeypatch, handler):
    class FakeSecretManagerServiceClient:
        def access_secret_version(self, request):
            return handler(request)

    secretmanager = types.ModuleType("google.cloud.secretmanager")
    secretmanager.SecretManagerServiceClient = FakeSecretManagerServiceClient
    cloud = types.ModuleType("google.cloud")
    cloud.secretmanager = secretmanager
    google = types.ModuleType("google")
    google.cloud = cloud

    monkeypatch.setitem(sys.modules, "google", google)
    monkeypatch.setitem(sys.modules, "google.cloud", cloud)
    monkeypatch.setitem(sys.modules, "google.cloud.secretmanager", secretmanager)


@pytest.mark.parametrize("value,expected", [("true", True), ("YES", True), ("1", True), ("false", False), ("", False)])
def test_should_use_secret_manager(monkeypatch, value, expected):
    monkeypatch.setenv("USE_SECRET_MANAGER", value)
    assert secrets.should_use_secret_manager() is expected


def test_get_secret_reads_latest_version(monkeypatch):
    requests = []

    def handler(request):
        requests.append(request)
        return SimpleNamespace(payload=SimpleNamespace(data=b"sk-secret\n"))

    install_fake_secretmanager(monkeypatch, handler)

    assert secrets.get_secret_from_manager("openai-api-key", "proj") == "sk-secret"
    assert requests == [{"name": "projects/proj/secrets/openai-api-key/versions/latest"}]


def test_get_secret_falls_back_to_environment_project(monkeypatch):
    install_fake_secretmanager(monkeypatch, lambda request: SimpleNamespace(payload=SimpleNamespace(data=request["name"].encode())))
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-proj")

    assert secrets.get_secret_from_manager("key") == "projects/env-proj/secrets/key/versions/latest"


def test_get_secret_requires_project(monkeypatch):
    install_fake_secretmanager(monkeypatch, lambda request: None)
    monkeypatch.delenv("GCP_PROJECT", raising=False)
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)

    with pytest.raises(ValueError, match="Project ID not specified"):
        secrets.get_secret_from_manager("key")


def test_get_secret_client_errors_propagate(monkeypatch):
    def handler(request):
        raise PermissionError("denied")

    install_fake_secretmanager(monkeypatch, handler)

    with pytest.raises(PermissionError):
        secrets.get_secret_from_manager("key", "proj")
