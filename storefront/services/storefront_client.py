# storefront/services/storefront_client.py
import asyncio
import re

import requests

from storefront.utils.retry import http_retry
from storefront.utils.settings import (
    PUBLIC_STORE_DOMAIN,
    PUBLIC_STOREFRONT_API_TOKEN,
    STOREFRONT_API_VERSION,
    STOREFRONT_COUNTRY,
    STOREFRONT_LANGUAGE,
    STOREFRONT_TIMEOUT_SECONDS,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name(document: str) -> str:
    match = _OPERATION_RE.search(document)
    return match.group(2) if match else "anonymous"


class StorefrontError(Exception):
    """GraphQL-level errors returned by the Storefront API."""

    def __init__(self, errors: list[dict]):
        self.errors = errors
        messages = "; ".join(str(e.get("message", "unknown error")) for e in errors)
        super().__init__(f"Storefront API error: {messages}")


class StorefrontClient:
    """
    Request-scoped client for the Storefront GraphQL API.

    query() is retried on transport errors, mutate() is sent once.
    aquery()/amutate() run the blocking call in a worker thread so the
    page loader can await or defer it.
    """

    def __init__(
        self,
        store_domain: str | None = None,
        access_token: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        country: str | None = None,
        language: str | None = None,
    ):
        domain = (store_domain or PUBLIC_STORE_DOMAIN).rstrip("/")
        self.endpoint = f"https://{domain}/api/{api_version or STOREFRONT_API_VERSION}/graphql.json"
        self.access_token = access_token if access_token is not None else PUBLIC_STOREFRONT_API_TOKEN
        self.timeout = timeout or STOREFRONT_TIMEOUT_SECONDS
        self.country = country or STOREFRONT_COUNTRY
        self.language = language or STOREFRONT_LANGUAGE

    def with_context(self, document: str, variables: dict | None = None) -> dict:
        """Fill in $country/$language for @inContext documents unless given."""
        variables = dict(variables or {})
        if "$country" in document:
            variables.setdefault("country", self.country)
        if "$language" in document:
            variables.setdefault("language", self.language)
        return variables

    def _headers(self) -> dict:
        return {
            "Accept": "application/json",
            "X-Shopify-Storefront-Access-Token": self.access_token,
        }

    def _post(self, document: str, variables: dict | None) -> dict:
        payload = {
            "query": document,
            "variables": self.with_context(document, variables),
        }
        logger.info(f"StorefrontClient POST {self.endpoint} ({operation_name(document)})")

        resp = requests.post(
            self.endpoint,
            json=payload,
            headers=self._headers(),
            timeout=self.timeout,
        )
        resp.raise_for_status()
        body = resp.json()

        if body.get("errors"):
            raise StorefrontError(body["errors"])
        return body.get("data") or {}

    @http_retry()
    def query(self, document: str, variables: dict | None = None) -> dict:
        return self._post(document, variables)

    def mutate(self, document: str, variables: dict | None = None) -> dict:
        return self._post(document, variables)

    async def aquery(self, document: str, variables: dict | None = None) -> dict:
        return await asyncio.to_thread(self.query, document, variables)

    async def amutate(self, document: str, variables: dict | None = None) -> dict:
        return await asyncio.to_thread(self.mutate, document, variables)
