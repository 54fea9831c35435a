import logging

from tenacity import before_sleep_log, retry, retry_if_exception, stop_after_attempt, wait_exponential
import requests

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def is_transient(exc: BaseException) -> bool:
    #4xx other than throttling will fail the same way again
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        return response is None or response.status_code == 429 or response.status_code >= 500
    return isinstance(exc, requests.RequestException)


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
