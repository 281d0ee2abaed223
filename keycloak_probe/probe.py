import httpx
from typing import Optional

from . import config
from .logger import probe_logger
from .models import ProbeResult


def check_health(
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> ProbeResult:
    """
    Issues one GET against the liveness endpoint and reports the outcome.

    Args:
        url: Target URL. Defaults to config.HEALTHCHECK_URL.
        timeout: Request timeout in seconds. Defaults to config.HEALTHCHECK_TIMEOUT.
        client: Optional httpx.Client to send the request with.

    Any error building or completing the request is returned as an unhealthy
    result rather than raised. Nothing is retried; the container runtime owns
    the polling interval and retry count.
    """
    if url is None:
        url = config.HEALTHCHECK_URL
    if timeout is None:
        timeout = config.HEALTHCHECK_TIMEOUT

    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout)
    # Hosts that fail IDNA encoding surface as UnicodeError
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        probe_logger.warning({
            "message": "Healthcheck failed with error.",
            "url": url,
            "error": repr(e),
        })
        return ProbeResult(url=url, error=repr(e))

    result = ProbeResult(url=url, status_code=response.status_code)
    if result.healthy:
        probe_logger.info({
            "message": "Healthcheck passed.",
            "url": url,
            "status_code": response.status_code,
        })
    else:
        probe_logger.warning({
            "message": "Healthcheck failed with unexpected status code.",
            "url": url,
            "status_code": response.status_code,
        })
    return result
