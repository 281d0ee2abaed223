import socket

import pytest

from keycloak_probe import config as probe_config
from keycloak_probe.logger import probe_logger


@pytest.fixture(autouse=True)
def static_config(monkeypatch):
    """
    Pins the probe configuration so tests are not affected by the
    HEALTHCHECK_* variables of the environment running them.
    """
    monkeypatch.setattr(probe_config, "HEALTHCHECK_HOST", "localhost")
    monkeypatch.setattr(probe_config, "HEALTHCHECK_PORT", "8080")
    monkeypatch.setattr(probe_config, "HEALTHCHECK_PATH", "/health/live")
    monkeypatch.setattr(probe_config, "HEALTHCHECK_URL", "http://localhost:8080/health/live")
    level = probe_logger.level
    yield
    probe_logger.setLevel(level)


@pytest.fixture
def closed_port():
    """A local port with no listener, so connecting to it is refused."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return port
