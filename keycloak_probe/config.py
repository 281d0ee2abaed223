import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def build_url(host: str, port, path: str) -> str:
    """Composes the liveness URL from its parts."""
    if not path.startswith("/"):
        path = "/" + path
    return f"http://{host}:{port}{path}"


# Target endpoint parts. Keycloak serves /health/live on 8080, or on the
# management port 9000 in newer deployments.
# The port stays a string; a bad value yields an invalid URL and an unhealthy probe.
HEALTHCHECK_HOST = os.getenv("HEALTHCHECK_HOST", "localhost")
HEALTHCHECK_PORT = os.getenv("HEALTHCHECK_PORT", "8080")
HEALTHCHECK_PATH = os.getenv("HEALTHCHECK_PATH", "/health/live")

# A full URL overrides the parts above.
HEALTHCHECK_URL = os.getenv("HEALTHCHECK_URL") or build_url(
    HEALTHCHECK_HOST, HEALTHCHECK_PORT, HEALTHCHECK_PATH
)

# Fixed, not read from the environment.
HEALTHCHECK_TIMEOUT = 5.0

# Unknown level names fall back to INFO.
HEALTHCHECK_LOG_LEVEL = os.getenv("HEALTHCHECK_LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(HEALTHCHECK_LOG_LEVEL), int):
    HEALTHCHECK_LOG_LEVEL = "INFO"
