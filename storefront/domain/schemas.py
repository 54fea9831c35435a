# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def connection_nodes(value: Any) -> list:
    """Flatten a GraphQL connection into a plain list of nodes.

    Accepts both shapes the Storefront API returns, ``{"nodes": [...]}`` and
    ``{"edges": [{"node": ...}]}``. Lists pass through untouched, ``None``
    becomes an empty list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if "nodes" in value:
        return value["nodes"] or []
    return [edge["node"] for edge in value.get("edges") or []]


def _metafield_value(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("value")
    return value


class StorefrontModel(BaseModel):
    """Base for records parsed from Storefront API payloads (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Image(StorefrontModel):
    id: str | None = None
    url: str
    alt_text: str | None = None
    width: int | None = None
    height: int | None = None


class Money(StorefrontModel):
    amount: Decimal
    currency_code: str


class PriceRange(StorefrontModel):
    min_variant_price: Money


class ProductVariant(StorefrontModel):
    id: str
    available_for_sale: bool = False


class Product(StorefrontModel):
    """Product card data used by the bundles and recommended sections."""

    id: str
    title: str
    handle: str
    price_range: PriceRange
    images: List[Image] = []
    variants: List[ProductVariant] = []
    star_rating_snippet: str | None = Field(default=None, alias="okendoStarRatingSnippet")

    @field_validator("images", "variants", mode="before")
    @classmethod
    def _flatten(cls, value):
        return connection_nodes(value)

    @field_validator("star_rating_snippet", mode="before")
    @classmethod
    def _snippet(cls, value):
        return _metafield_value(value)

    @property
    def first_image(self) -> Image | None:
        return self.images[0] if self.images else None

    @property
    def first_variant(self) -> ProductVariant | None:
        return self.variants[0] if self.variants else None


class Article(StorefrontModel):
    id: str
    title: str
    content_html: str = ""
    excerpt: str | None = None
    published_at: datetime
    author_name: str | None = Field(default=None, alias="authorV2")
    image: Image | None = None

    @field_validator("author_name", mode="before")
    @classmethod
    def _author(cls, value):
        if isinstance(value, dict):
            return value.get("name")
        return value


class Blog(StorefrontModel):
    id: str
    title: str
    handle: str
    articles: List[Article] = []

    @field_validator("articles", mode="before")
    @classmethod
    def _flatten(cls, value):
        return connection_nodes(value)


# cart


class Confirmed(BaseModel):
    """Line whose last mutation the platform has acknowledged."""

    kind: Literal["confirmed"] = "confirmed"


class Pending(BaseModel):
    """Line with a submitted mutation the platform has not confirmed yet."""

    kind: Literal["pending"] = "pending"
    mutation_id: str


LineState = Annotated[Union[Confirmed, Pending], Field(discriminator="kind")]


class SelectedOption(StorefrontModel):
    name: str
    value: str


class MerchandiseProduct(StorefrontModel):
    id: str
    title: str
    handle: str


class Merchandise(StorefrontModel):
    id: str
    title: str
    image: Image | None = None
    product: MerchandiseProduct
    selected_options: List[SelectedOption] = []


class CartLineCost(StorefrontModel):
    total_amount: Money | None = None
    compare_at_amount_per_quantity: Money | None = None


class CartLine(StorefrontModel):
    id: str
    quantity: int
    state: LineState = Field(default_factory=Confirmed)
    merchandise: Merchandise
    cost: CartLineCost | None = None

    @field_validator("quantity")
    @classmethod
    def _clamp_quantity(cls, value: int) -> int:
        return max(0, value)

    @property
    def is_optimistic(self) -> bool:
        return isinstance(self.state, Pending)


class CartCost(StorefrontModel):
    subtotal_amount: Money | None = None
    total_amount: Money | None = None


class Cart(StorefrontModel):
    id: str
    checkout_url: str | None = None
    total_quantity: int = 0
    cost: CartCost | None = None
    lines: List[CartLine] = []

    @field_validator("lines", mode="before")
    @classmethod
    def _flatten(cls, value):
        return connection_nodes(value)


class CartUserError(StorefrontModel):
    code: str | None = None
    field: List[str] | None = None
    message: str
