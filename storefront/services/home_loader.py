# storefront/services/home_loader.py
from dataclasses import dataclass, field

from storefront.domain.schemas import Blog, Product, connection_nodes
from storefront.services.blogs import BALANCED_DIET, PODCASTS, fetch_filtered_blogs
from storefront.services.deferred import Deferred
from storefront.services.queries import BUNDLES_COLLECTION_QUERY, RECOMMENDED_PRODUCTS_QUERY
from storefront.services.storefront_client import StorefrontClient
from storefront.utils.settings import BUNDLES_COLLECTION_HANDLE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class HomeData:
    """Everything the home page renders, eager values and one deferred handle."""

    bundles: list[Product]
    recommended_products: Deferred[list[Product]]
    balanced_diet_blogs: list[Blog] = field(default_factory=list)
    podcast_blogs: list[Blog] = field(default_factory=list)


class HomeLoader:
    """
    Data loading for the home page.

    - recommended products: issued first, never awaited here (deferred)
    - bundles: awaited, errors propagate (above the fold, required)
    - blogs: awaited one after the other, errors become []
    """

    def __init__(self, client: StorefrontClient, bundles_handle: str | None = None):
        self.client = client
        self.bundles_handle = bundles_handle or BUNDLES_COLLECTION_HANDLE

    async def load(self) -> HomeData:
        recommended = self.load_deferred()
        try:
            bundles = await self.load_bundles()

            balanced_diet_blogs = await fetch_filtered_blogs(self.client, BALANCED_DIET)
            podcast_blogs = await fetch_filtered_blogs(self.client, PODCASTS)
        except BaseException:
            #no page will await the handle
            recommended.cancel()
            raise

        return HomeData(
            bundles=bundles,
            recommended_products=recommended,
            balanced_diet_blogs=balanced_diet_blogs,
            podcast_blogs=podcast_blogs,
        )

    async def load_bundles(self) -> list[Product]:
        data = await self.client.aquery(
            BUNDLES_COLLECTION_QUERY,
            {"handle": self.bundles_handle},
        )
        collection = data.get("collection") or {}
        products = [
            Product.model_validate(node)
            for node in connection_nodes(collection.get("products"))
        ]
        logger.info(f"Bundles collection '{self.bundles_handle}': {len(products)} products")
        return products

    def load_deferred(self) -> Deferred[list[Product]]:
        return Deferred(self._recommended_products(), label="recommended-products")

    async def _recommended_products(self) -> list[Product]:
        data = await self.client.aquery(RECOMMENDED_PRODUCTS_QUERY)
        return [
            Product.model_validate(node)
            for node in connection_nodes(data.get("products"))
        ]
