# storefront/services/blogs.py
from typing import Sequence

from storefront.domain.results import capture
from storefront.domain.schemas import Blog, connection_nodes
from storefront.services.queries import BLOGS_QUERY
from storefront.services.storefront_client import StorefrontClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

BALANCED_DIET = "Balanced Diet"
PODCASTS = "Podcasts"

BLOGS_FIRST = 3


def articles_limit(title: str) -> int:
    # the blog feed shows three articles, the podcast carousel takes everything
    return 3 if title == BALANCED_DIET else 100


def filter_blogs(blogs: Sequence[Blog], title: str) -> list[Blog]:
    """Blogs whose title is exactly ``title``, in platform order."""
    return [blog for blog in blogs if blog.title == title]


async def _fetch_blogs(client: StorefrontClient, title: str) -> list[Blog]:
    data = await client.aquery(
        BLOGS_QUERY,
        {"first": BLOGS_FIRST, "articlesFirst": articles_limit(title)},
    )
    blogs = [Blog.model_validate(node) for node in connection_nodes(data.get("blogs"))]
    matched = filter_blogs(blogs, title)
    logger.info(f"Blogs '{title}': {len(matched)} of {len(blogs)} matched")
    return matched


async def fetch_filtered_blogs(client: StorefrontClient, title: str) -> list[Blog]:
    """
    Fetch blogs and keep the ones titled ``title``.

    Never raises: transport errors, GraphQL errors and malformed payloads
    all come back as an empty list.
    """
    outcome = await capture(_fetch_blogs(client, title), f"blogs:{title}")
    return outcome.unwrap_or([])
