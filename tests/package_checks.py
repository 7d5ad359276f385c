from __future__ import annotations

import io
import logging
import sys

import avoca
from avoca.policy import retry_on_server_errors
from avoca.retrier import MaxAttemptsRetrier

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def check_get() -> None:
    logger.info("Checking get...")
    response = avoca.get(avoca.Context(timeout=30.0), f"{HTTPBIN_URL}/get")
    assert response.status_code == 200


def check_post() -> None:
    logger.info("Checking post...")
    config = avoca.ClientConfig(
        retrier=MaxAttemptsRetrier(max_attempts=3), retry_policy=retry_on_server_errors
    )
    with avoca.Client(config=config) as client:
        response = client.post(
            avoca.Context(timeout=30.0),
            f"{HTTPBIN_URL}/post",
            body=io.BytesIO(b'{"id": "me"}'),
            headers={"content-type": "application/json"},
        )
    assert response.status_code == 200
    assert response.json()["json"] == {"id": "me"}


def check_retryable_status_is_returned() -> None:
    logger.info("Checking retryable status...")
    config = avoca.ClientConfig(
        retrier=MaxAttemptsRetrier(max_attempts=2), retry_policy=retry_on_server_errors
    )
    response = avoca.get(avoca.Context(timeout=30.0), f"{HTTPBIN_URL}/status/503", config=config)
    assert response.status_code == 503


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_get()
        check_post()
        check_retryable_status_is_returned()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
