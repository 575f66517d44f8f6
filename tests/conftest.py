"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def isolated_routing_env(monkeypatch):
    """Tests never read ROUTING_* from the developer's shell or .env."""
    for name in (
        "ROUTING_API_BASE_URL",
        "ROUTING_TIMEOUT_SECONDS",
        "ROUTING_MAX_REDIRECTS",
        "ROUTING_API_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("tripclient.cli.load_dotenv", lambda *a, **kw: False)

    from tripclient.config.settings import reset_routing_settings

    reset_routing_settings()
    yield
    reset_routing_settings()
