"""
Healthcheck script for the Keycloak container.

This script makes a GET request to the /health/live endpoint and exits with a
status code of 0 if the response is 200 OK, and 1 otherwise.
Usage in a Dockerfile: HEALTHCHECK CMD ["python", "healthcheck.py"]
"""
import sys

from keycloak_probe.main import main

if __name__ == "__main__":
    sys.exit(main())
