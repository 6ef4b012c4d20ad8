"""Storefront load testing: Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:3000

    # Mixed workload only:
    locust -f loadtests/locustfile.py MixedWorkloadUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py MixedWorkloadUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.auth import AccountUser  # noqa: F401
from loadtests.scenarios.catalogue import CatalogueUser  # noqa: F401
from loadtests.scenarios.mixed import MixedWorkloadUser  # noqa: F401
from loadtests.scenarios.ordering import OrderingUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so you see "Insufficient stock for product ..."
    instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print a one-line summary of the run."""
    total = environment.stats.total
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    print(
        f"[LOADTEST] {total.num_requests} requests, {total.num_failures} failures, "
        f"median {total.median_response_time} ms"
    )
    print()
