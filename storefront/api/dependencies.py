# storefront/api/dependencies.py
from storefront.services.storefront_client import StorefrontClient


def get_storefront_client() -> StorefrontClient:
    # one client per request, nothing is shared between requests
    return StorefrontClient()
