import argparse
import logging
from typing import List, Optional

from . import config
from .logger import probe_logger
from .probe import check_health


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="keycloak-healthcheck",
        description="Probe the Keycloak liveness endpoint. Exits 0 on HTTP 200, 1 otherwise.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help=f"Endpoint to probe (default: {config.HEALTHCHECK_URL}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Probe HEALTHCHECK_HOST/HEALTHCHECK_PATH on this port instead, e.g. 9000 for the management interface.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.quiet:
        probe_logger.setLevel(logging.ERROR)

    url = args.url
    if url is None and args.port is not None:
        url = config.build_url(config.HEALTHCHECK_HOST, args.port, config.HEALTHCHECK_PATH)

    return check_health(url).exit_code
